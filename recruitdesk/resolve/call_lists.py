"""
Call list resolution.

A call list names one job and carries its candidates as a delimited
string in the CandidateIDs cell.  Call lists are looked up by fuzzy ID
(`CL1` ≡ `CL001`), then the job and company are reached by two more
scans.  Each hop short‑circuits to `None` when its row is missing.

CallLists and CallListsItems are optional tables and read as empty
when absent.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ..normalize.ids import (
    call_list_ids_match,
    id_text,
    normalize_job_id,
    parse_candidate_ids,
    same_id,
)
from ..store.base import TableStore
from ..tables.project import cell, placeholder, project
from ..tables.reader import read_table
from ..tables.schema import CANDIDATE_SUMMARY_FIELDS, CallList, CallListItem, Candidate
from .jobs import company_by_id, job_by_id

logger = logging.getLogger(__name__)


def _normalized(call_list: CallList) -> CallList:
    call_list.job_id = normalize_job_id(call_list.job_id)
    return call_list


def list_call_lists(store: TableStore) -> List[CallList]:
    """Every call list in table order, JobIDs normalized."""
    snapshot = read_table(store, CallList.TABLE, optional=True)
    return [_normalized(c) for c in snapshot.as_records(CallList)]


def call_list_by_id(store: TableStore, call_list_id: str) -> Optional[CallList]:
    """Find a call list by fuzzy ID.

    The stored `CallListID` is returned untouched; `JobID` is rewritten
    to its canonical `JOB####` form.
    """
    snapshot = read_table(store, CallList.TABLE, optional=True)
    for row in snapshot.rows:
        call_list = CallList.from_row(row, snapshot.index)
        if call_list_ids_match(call_list.call_list_id, call_list_id):
            return _normalized(call_list)
    logger.debug("Call list %s not found", call_list_id)
    return None


def job_and_company_for_call_list(store: TableStore, call_list_id: str) -> Dict[str, object]:
    """Resolve CallList → Job → Company.

    The Job hop compares canonical Job IDs, so a call list and a job
    row that both store `J7` (or `JOB007`) still join.

    Returns:
        `{"job": ..., "company": ...}` with column‑keyed dicts, either
        of which is `None` when its hop does not resolve.
    """
    result: Dict[str, object] = {"job": None, "company": None}
    call_list = call_list_by_id(store, call_list_id)
    if call_list is None or not call_list.job_id:
        return result
    job = job_by_id(store, call_list.job_id)
    if job is None:
        return result
    result["job"] = job.to_dict()
    company = company_by_id(store, job.company_id)
    if company is not None:
        result["company"] = company.to_dict()
    return result


def candidates_for_call_list(store: TableStore, call_list_id: str) -> List[Dict[str, str]]:
    """Summaries of the candidates named by a call list.

    The Candidates table is scanned once into an ID → row map.  One
    entry is returned per ID in the CandidateIDs cell, in order and
    with duplicates kept; IDs with no matching row yield a
    `(not found)` placeholder.
    """
    call_list = call_list_by_id(store, call_list_id)
    if call_list is None:
        return []
    ids = parse_candidate_ids(call_list.candidate_ids)
    if not ids:
        return []
    snapshot = read_table(store, Candidate.TABLE)
    by_id: Dict[str, List[object]] = {}
    for row in snapshot.rows:
        candidate_id = id_text(cell(row, snapshot.index, "CandidateID"))
        if candidate_id:
            by_id.setdefault(candidate_id, row)
    summaries: List[Dict[str, str]] = []
    for candidate_id in ids:
        row = by_id.get(candidate_id)
        if row is None:
            summaries.append(placeholder("CandidateID", candidate_id))
        else:
            summaries.append(project(row, snapshot.index, CANDIDATE_SUMMARY_FIELDS))
    missing = sum(1 for candidate_id in ids if candidate_id not in by_id)
    if missing:
        logger.info("Call list %s: %d of %d candidates not found", call_list_id, missing, len(ids))
    return summaries


def candidate_by_id(store: TableStore, candidate_id: str) -> Optional[Candidate]:
    """Deep load of one candidate, or None."""
    if not id_text(candidate_id):
        return None
    for candidate in read_table(store, Candidate.TABLE).as_records(Candidate):
        if same_id(candidate.candidate_id, candidate_id):
            return candidate
    return None


def call_list_items(store: TableStore, call_list_id: str) -> List[CallListItem]:
    """Rows of CallListsItems belonging to a call list, in table order."""
    snapshot = read_table(store, CallListItem.TABLE, optional=True)
    return [
        item for item in snapshot.as_records(CallListItem)
        if call_list_ids_match(item.call_list_id, call_list_id)
    ]


def call_list_bundle(store: TableStore, call_list_id: str) -> Optional[Dict[str, object]]:
    """Call list plus its job, company and candidate summaries.

    Returns:
        `None` when the call list does not exist, otherwise a dict with
        keys `callList`, `job`, `company` and `candidates`.
    """
    call_list = call_list_by_id(store, call_list_id)
    if call_list is None:
        return None
    bundle: Dict[str, object] = {"callList": call_list.to_dict()}
    bundle.update(job_and_company_for_call_list(store, call_list_id))
    bundle["candidates"] = candidates_for_call_list(store, call_list_id)
    return bundle
