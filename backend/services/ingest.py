# backend/services/ingest.py

import logging

from services.csv_parser import CSVUploadError, ParsedCSV, parse_csv
from utils.data_store import DataStore

logger = logging.getLogger(__name__)


class FileTooLargeError(CSVUploadError):
    pass


def ingest_csv(store: DataStore, content: bytes, max_bytes: int) -> ParsedCSV:
    """
    Parse an uploaded CSV and make it the current dataset.

    Nothing touches the store until the whole file has parsed, so a bad
    upload leaves the previous dataset in place. Blocks on the store lock,
    so call it from a worker thread, not the event loop.
    """
    if len(content) > max_bytes:
        raise FileTooLargeError(f"{len(content)} bytes exceeds limit of {max_bytes}")

    parsed = parse_csv(content)
    had_data = not store.is_empty()
    store.replace(parsed.records)

    logger.info(
        "dataset %s rows=%d columns=%s",
        "replaced" if had_data else "loaded",
        len(parsed.records),
        ",".join(parsed.header),
    )
    return parsed
