# backend/utils/data_store.py

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List

Record = Dict[str, str]


class DataStore:
    """
    Holds the rows of the most recently uploaded CSV in memory.

    A single lock guards the dataset. Every read and write goes through it,
    so a reader sees the dataset either before or after an upload, never a
    mix of both.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: List[Record] = []

    def replace(self, records: List[Record]) -> None:
        """
        Swap in a fully built dataset. The old rows are dropped, never merged.
        """
        with self._lock:
            self._records = records

    def snapshot(self) -> List[Record]:
        with self._lock:
            return list(self._records)

    def is_empty(self) -> bool:
        with self._lock:
            return not self._records

    @contextmanager
    def locked(self) -> Iterator[List[Record]]:
        """
        Hold the lock for a whole scan over the current rows.
        Callers must not mutate what they are given.
        """
        with self._lock:
            yield self._records
