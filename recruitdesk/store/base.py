"""
Table store abstraction.

Defines the interface every backing store implements.  The resolver
and the writer only ever talk to a `TableStore`, which is passed in
explicitly by the caller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence


class TableStore(ABC):
    """Abstract base class for tabular stores."""

    @abstractmethod
    def exists(self, name: str) -> bool:
        """Return True when a table called `name` exists."""
        raise NotImplementedError

    @abstractmethod
    def read_all(self, name: str) -> List[List[object]]:
        """Read every row of a table.

        Args:
            name: Table name.

        Returns:
            The stored rows in order, header row first.  An existing
            but empty table returns an empty list.

        Raises:
            TableNotFound: if the table does not exist.
        """
        raise NotImplementedError

    @abstractmethod
    def append(self, name: str, values: Sequence[object]) -> None:
        """Append one row to the end of a table.

        Raises:
            TableNotFound: if the table does not exist.
        """
        raise NotImplementedError
