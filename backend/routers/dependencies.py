# backend/routers/dependencies.py

from fastapi import Request

from utils.data_store import DataStore
from utils.settings import Settings


def get_store(request: Request) -> DataStore:
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
