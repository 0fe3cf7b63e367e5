"""In‑memory table store, used as a test fake and for scripted fixtures."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from ..errors import TableNotFound
from .base import TableStore


class MemoryTableStore(TableStore):
    """Store holding each table as a list of rows, header first."""

    def __init__(self, tables: Optional[Dict[str, List[Sequence[object]]]] = None) -> None:
        self.tables: Dict[str, List[List[object]]] = {
            name: [list(row) for row in rows] for name, rows in (tables or {}).items()
        }

    def exists(self, name: str) -> bool:
        return name in self.tables

    def read_all(self, name: str) -> List[List[object]]:
        if name not in self.tables:
            raise TableNotFound(name)
        # Copies, so callers cannot mutate stored rows.
        return [list(row) for row in self.tables[name]]

    def append(self, name: str, values: Sequence[object]) -> None:
        if name not in self.tables:
            raise TableNotFound(name)
        self.tables[name].append(list(values))
