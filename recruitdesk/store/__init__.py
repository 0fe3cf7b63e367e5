"""
Table stores.

A table store is the only component that touches storage.  It knows
how to read every row of a named table (header first), append one row
and report whether a table exists.  `CsvTableStore` keeps one CSV file
per table in a directory; `MemoryTableStore` keeps rows in lists and is
what the tests inject.
"""

from .base import TableStore  # noqa: F401
from .csv_store import CsvTableStore  # noqa: F401
from .memory_store import MemoryTableStore  # noqa: F401
