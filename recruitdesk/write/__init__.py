"""Append‑only write path: the Activity writer and a generic row appender."""

from .activity_writer import append_record, build_activity, save_activity  # noqa: F401
