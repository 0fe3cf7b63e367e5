"""
Exceptions raised by recruitdesk.

Only structural problems are errors: a required table is missing or a
dispatcher tag is not recognised.  An identifier that does not resolve
to a row is a normal outcome and is reported with `None`, an empty
list or a placeholder record instead.
"""

from __future__ import annotations


class RecruitDeskError(Exception):
    """Base class for all recruitdesk errors."""


class TableNotFound(RecruitDeskError):
    """A table does not exist in the backing store."""

    def __init__(self, table: str) -> None:
        super().__init__(f"Table not found: {table}")
        self.table = table


class UnknownEntity(RecruitDeskError):
    """`get_data` was called with an entity tag it does not serve."""

    def __init__(self, entity: str) -> None:
        super().__init__(f"Unknown entity: {entity}")
        self.entity = entity


class ConfigError(RecruitDeskError):
    """The configuration file could not be read or has the wrong shape."""
