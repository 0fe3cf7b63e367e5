"""
Activity writer.

The only mutating path in recruitdesk.  `save_activity` fills the
fixed Activity columns from the caller's fields (with defaults),
stamps a fresh ID and timestamp, and appends one row to Activities in
the order of that table's existing header.  `append_record` is the
generic variant for callers that already hold a record shaped like
the target table.

Rows are only ever appended.  Calling either function twice with the
same payload writes two rows.
"""

from __future__ import annotations

import logging
import secrets
from datetime import datetime
from typing import Dict, List, Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..config import Settings
from ..errors import ConfigError
from ..normalize.ids import normalize_job_id
from ..store.base import TableStore
from ..tables.reader import read_table
from ..tables.schema import ACTIVITY_COLUMNS, Activity

logger = logging.getLogger(__name__)

DEFAULT_TYPE = "Note"


def new_activity_id() -> str:
    return "ACT-" + secrets.token_hex(6).upper()


def _now(tz_name: str) -> datetime:
    try:
        return datetime.now(ZoneInfo(tz_name))
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigError(f"Unknown timezone: {tz_name}") from exc


def _header(store: TableStore, table: str, default: List[str]) -> List[str]:
    """Existing header of `table`; writes `default` first if it has none."""
    header = read_table(store, table).header
    if not any(header):
        logger.warning("Table %s has no header; writing %s", table, default)
        store.append(table, default)
        header = list(default)
    return header


def build_activity(
    fields: Optional[Mapping[str, object]] = None,
    settings: Optional[Settings] = None,
    *,
    now: Optional[datetime] = None,
) -> Activity:
    """Build the Activity record `save_activity` would write.

    Accepts canonical column names (`Type`, `CandidateID`, `Notes`,
    ...) as well as the legacy aliases (`ActivityType`, `Comments`,
    `Result`).
    """
    settings = settings or Settings()
    values = {k: str(v) for k, v in (fields or {}).items() if v is not None}
    activity = Activity.from_mapping(values)
    stamp = (now or _now(settings.timezone)).isoformat()
    activity.activity_id = new_activity_id()
    activity.created_at = stamp
    activity.updated_at = stamp
    activity.type = activity.type or DEFAULT_TYPE
    activity.recruiter_id = activity.recruiter_id or settings.default_recruiter_id
    activity.recruiter_name = activity.recruiter_name or settings.default_recruiter_name
    activity.job_id = normalize_job_id(activity.job_id)
    return activity


def save_activity(
    store: TableStore,
    fields: Optional[Mapping[str, object]] = None,
    settings: Optional[Settings] = None,
    *,
    now: Optional[datetime] = None,
) -> Dict[str, object]:
    """Append one activity to the Activities table.

    Args:
        store: Backing table store.
        fields: Activity values keyed by column name.  Omitted fields
            take their defaults: `Type` is `Note`, the recruiter comes
            from `settings`, relational IDs are empty.
        settings: Recruiter defaults and timezone.
        now: Timestamp to use instead of the current time.

    Returns:
        `{"success": True, "id": <new ActivityID>}`.

    Raises:
        TableNotFound: if the Activities table is missing.
        ConfigError: if the configured timezone is unknown.  Nothing is
            written in that case.
    """
    activity = build_activity(fields, settings, now=now)
    header = _header(store, Activity.TABLE, ACTIVITY_COLUMNS)
    store.append(Activity.TABLE, [activity.get(column) for column in header])
    logger.info(
        "Saved activity %s (%s) candidate=%r job=%r",
        activity.activity_id,
        activity.type,
        activity.candidate_id,
        activity.job_id,
    )
    return {"success": True, "id": activity.activity_id}


def append_record(store: TableStore, table: str, record: Mapping[str, object]) -> List[object]:
    """Append `record` to `table`, one cell per existing header column.

    Header columns missing from `record` are written as `""`.  Keys of
    `record` with no matching column are dropped.  A table without a
    header gets the record's keys as its header first.

    Returns:
        The values written.

    Raises:
        TableNotFound: if the table is missing.
    """
    header = _header(store, table, list(record))
    values: List[object] = []
    for column in header:
        value = record.get(column)
        values.append("" if value is None else value)
    store.append(table, values)
    logger.info("Appended record to %s", table)
    return values
