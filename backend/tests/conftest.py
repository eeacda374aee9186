import sys
from pathlib import Path
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

import pytest
from fastapi.testclient import TestClient

from main import create_app
from utils.data_store import DataStore
from utils.settings import Settings


@pytest.fixture
def store():
    return DataStore()


@pytest.fixture
def settings():
    return Settings(max_upload_bytes=1024)


@pytest.fixture
def client(store, settings):
    app = create_app(settings=settings, store=store)
    with TestClient(app) as c:
        yield c
