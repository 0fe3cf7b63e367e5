"""
Table access for recruitdesk.

Reads named tables into header‑indexed snapshots and projects their
raw rows into column‑keyed dicts or per‑table record dataclasses.
"""

from .project import NOT_FOUND, placeholder, project  # noqa: F401
from .reader import TableSnapshot, build_index, read_table  # noqa: F401
from .schema import (  # noqa: F401
    ACTIVITY_COLUMNS,
    CANDIDATE_SUMMARY_FIELDS,
    Activity,
    CallList,
    CallListItem,
    Candidate,
    Company,
    Hire,
    Job,
)
