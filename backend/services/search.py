# backend/services/search.py

from typing import List, Optional

from utils.data_store import DataStore, Record


class NoDataError(Exception):
    pass


def record_matches(record: Record, needle: str) -> bool:
    """
    True if any value, lower-cased, contains `needle`. The needle must already
    be lower-cased.
    """
    return any(needle in value.lower() for value in record.values())


def search_records(store: DataStore, q: Optional[str] = None) -> List[Record]:
    """
    Return every row when `q` is empty, otherwise the rows with at least one
    value containing `q`, ignoring case. Upload order is kept.

    Raises NoDataError if nothing has been uploaded yet.
    """
    with store.locked() as records:
        if not records:
            raise NoDataError("There is not data, upload a CSV file first")

        if not q:
            return list(records)

        needle = q.lower()
        return [record for record in records if record_matches(record, needle)]
