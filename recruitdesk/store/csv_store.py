"""
CSV directory store.

Each table lives in `<directory>/<name>.csv`.  Files are read and
written as UTF‑8 with `newline=""` so that cells containing embedded
newlines (a CandidateIDs cell pasted from a spreadsheet, for example)
survive a round trip.
"""

from __future__ import annotations

import csv
import logging
import os
from typing import List, Sequence

from ..errors import TableNotFound
from .base import TableStore

logger = logging.getLogger(__name__)


class CsvTableStore(TableStore):
    """Store backed by one CSV file per table."""

    def __init__(self, directory: str) -> None:
        self.directory = directory

    def _path(self, name: str) -> str:
        return os.path.join(self.directory, f"{name}.csv")

    def exists(self, name: str) -> bool:
        return os.path.isfile(self._path(name))

    def read_all(self, name: str) -> List[List[object]]:
        path = self._path(name)
        if not os.path.isfile(path):
            raise TableNotFound(name)
        with open(path, "r", newline="", encoding="utf-8") as f:
            rows: List[List[object]] = list(csv.reader(f))
        logger.debug("Read %d rows from %s", len(rows), path)
        return rows

    def append(self, name: str, values: Sequence[object]) -> None:
        path = self._path(name)
        if not os.path.isfile(path):
            raise TableNotFound(name)
        with open(path, "a", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["" if v is None else v for v in values])
        logger.debug("Appended row to %s", path)

    def create(self, name: str, header: Sequence[str]) -> None:
        """Create a table file holding only `header`, overwriting any existing file."""
        os.makedirs(self.directory, exist_ok=True)
        with open(self._path(name), "w", newline="", encoding="utf-8") as f:
            csv.writer(f).writerow(header)
