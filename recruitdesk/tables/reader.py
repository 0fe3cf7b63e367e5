"""
Table reader and header index.

`read_table` loads a named table from a store into a `TableSnapshot`:
the first stored row is consumed as the header, turned into a
column‑name → position index, and excluded from `rows`.  Optional
tables (CallLists, CallListsItems, Hires) read as empty when they do
not exist; required tables raise `TableNotFound`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Type

from ..errors import TableNotFound
from ..store.base import TableStore
from .project import project
from .schema import R

logger = logging.getLogger(__name__)


def build_index(header: Sequence[object]) -> Dict[str, int]:
    """Map each column name to its position.

    Names are used verbatim (case‑sensitive, no trimming).  When a name
    appears twice the first column wins.  Looking up an unknown name
    with `.get` yields `None`; callers treat that as an empty field.
    """
    index: Dict[str, int] = {}
    for position, name in enumerate(header):
        key = "" if name is None else str(name)
        if key and key not in index:
            index[key] = position
    return index


@dataclass
class TableSnapshot:
    """One read of a table: header, header index and data rows."""

    name: str
    header: List[str] = field(default_factory=list)
    rows: List[List[object]] = field(default_factory=list)
    index: Dict[str, int] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.rows)

    def records(self, fields: Optional[Sequence[str]] = None) -> Iterator[Dict[str, str]]:
        """Yield each row projected into a column‑keyed dict."""
        for row in self.rows:
            yield project(row, self.index, fields)

    def as_records(self, cls: Type[R]) -> List[R]:
        """Build one `cls` record per row, in table order."""
        return [cls.from_row(row, self.index) for row in self.rows]


def read_table(store: TableStore, name: str, *, optional: bool = False) -> TableSnapshot:
    """Read a table into a header‑indexed snapshot.

    Args:
        store: Backing table store.
        name: Table name.
        optional: When True a missing table reads as an empty snapshot
            instead of raising.

    Returns:
        A `TableSnapshot`.  Its `rows` exclude the header.

    Raises:
        TableNotFound: if the table is missing and not optional.
    """
    try:
        raw = store.read_all(name)
    except TableNotFound:
        if not optional:
            raise
        logger.warning("Optional table %s is missing; treating as empty", name)
        return TableSnapshot(name=name)
    if not raw:
        return TableSnapshot(name=name)
    header = ["" if h is None else str(h) for h in raw[0]]
    rows = [list(r) for r in raw[1:]]
    logger.debug("Loaded %s: %d columns, %d rows", name, len(header), len(rows))
    return TableSnapshot(name=name, header=header, rows=rows, index=build_index(header))
