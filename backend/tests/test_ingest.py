import pytest

from services.csv_parser import NoRecordsError
from services.ingest import FileTooLargeError, ingest_csv
from utils.data_store import DataStore


def test_ingest_replaces_store():
    store = DataStore()
    parsed = ingest_csv(store, b"name,age\nAna,30\n", max_bytes=1024)
    assert parsed.header == ["name", "age"]
    assert store.snapshot() == [{"name": "Ana", "age": "30"}]


def test_file_over_limit_is_rejected_and_store_kept():
    store = DataStore()
    store.replace([{"name": "Ana"}])
    with pytest.raises(FileTooLargeError):
        ingest_csv(store, b"name\n" + b"x\n" * 100, max_bytes=50)
    assert store.snapshot() == [{"name": "Ana"}]


def test_file_at_limit_is_accepted():
    store = DataStore()
    content = b"name\nLuis\n"
    ingest_csv(store, content, max_bytes=len(content))
    assert store.snapshot() == [{"name": "Luis"}]


def test_parse_failure_keeps_store():
    store = DataStore()
    store.replace([{"name": "Ana"}])
    with pytest.raises(NoRecordsError):
        ingest_csv(store, b"name\n", max_bytes=1024)
    assert store.snapshot() == [{"name": "Ana"}]
