"""
Activity context lookup.

Returns the activity log for a candidate, a job, or both.  The filter
is an inclusive OR: an activity is included when its CandidateID
matches the candidate *or* its JobID matches the job.  Results are
newest first by `CreatedAt`; rows with equal timestamps keep their
table order and rows whose timestamp cannot be parsed sort last.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from ..normalize.ids import id_text, job_ids_match, same_id
from ..store.base import TableStore
from ..tables.reader import read_table
from ..tables.schema import Activity

logger = logging.getLogger(__name__)

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)
_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y",
)


def parse_timestamp(value: str) -> Optional[datetime]:
    """Parse an activity timestamp into an aware datetime.

    ISO‑8601 (with or without offset, `Z` allowed) is tried first,
    then a few spreadsheet‑style formats.  Naive values are taken as
    UTC.  Returns None when nothing matches.
    """
    text = (value or "").strip()
    if not text:
        return None
    parsed: Optional[datetime] = None
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        for fmt in _FORMATS:
            try:
                parsed = datetime.strptime(text, fmt)
                break
            except ValueError:
                continue
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def activities_for_context(
    store: TableStore,
    candidate_id: Optional[str] = None,
    job_id: Optional[str] = None,
) -> List[Activity]:
    """Activities for a candidate and/or a job, newest first.

    Args:
        store: Backing table store.
        candidate_id: Match activities with this CandidateID.
        job_id: Match activities with this JobID (compared in
            canonical `JOB####` form).

    Returns:
        The union of both matches.  Empty when neither ID is given.

    Raises:
        TableNotFound: if the Activities table is missing.
    """
    wanted_candidate = id_text(candidate_id)
    wanted_job = id_text(job_id)
    if not wanted_candidate and not wanted_job:
        return []
    matches: List[Activity] = []
    for activity in read_table(store, Activity.TABLE).as_records(Activity):
        if wanted_candidate and same_id(activity.candidate_id, wanted_candidate):
            matches.append(activity)
        elif wanted_job and job_ids_match(activity.job_id, wanted_job):
            matches.append(activity)
    # sorted() is stable with reverse=True, so ties keep table order.
    matches = sorted(
        matches,
        key=lambda a: parse_timestamp(a.created_at) or _EPOCH,
        reverse=True,
    )
    logger.debug(
        "Found %d activities for candidate=%r job=%r", len(matches), candidate_id, job_id
    )
    return matches
