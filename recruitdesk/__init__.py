"""
Recruitdesk package: a join layer over column‑headered recruiting tables.

The backing store is a set of named tables (Jobs, Companies,
Candidates, CallLists, CallListsItems, Hires and Activities) whose
first row is a header.  There is no schema enforcement, headers may
appear in any order and identifiers are formatted inconsistently
across tables.  This package resolves the relationships between those
tables and returns denormalized bundles for a presentation layer.

The submodules map onto the steps of a request:

1. **store** – the table store contract plus a CSV directory store
   and an in‑memory store.
2. **tables** – reads a table into a header‑indexed snapshot and
   projects raw rows into per‑table record dataclasses.
3. **normalize** – canonicalizes Job IDs and CallList IDs and parses
   the denormalized CandidateIDs cell.
4. **resolve** – the join resolver (job/company, call list,
   activities) and the generic `get_data` dispatcher.
5. **write** – the append‑only Activity writer.
6. **cli** – command line entry point wiring the above together.

Every operation takes the store handle as its first argument, so
callers can substitute an in‑memory store for testing.
"""

from .errors import ConfigError, RecruitDeskError, TableNotFound, UnknownEntity  # noqa: F401
from .resolve.dispatch import get_data  # noqa: F401
from .write.activity_writer import append_record, save_activity  # noqa: F401
