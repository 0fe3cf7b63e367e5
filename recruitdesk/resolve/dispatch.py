"""
Generic data dispatcher.

`get_data` is the single entry point used by a presentation layer: it
takes an entity tag plus keyword options, calls the matching resolver
and returns a JSON‑ready payload (records are converted with
`to_dict`).  An unrecognised tag raises `UnknownEntity`.

Tags and the options they read:

    job                 id
    jobs                companyId (all jobs when omitted)
    company             id
    companyBundle       id
    candidate           id
    callList            id
    callLists           -
    callListBundle      id
    callListCandidates  id
    callListItems       id
    jobAndCompany       id
    activities          candidateId, jobId
"""

from __future__ import annotations

import logging
from typing import Callable, Dict

from ..errors import UnknownEntity
from ..store.base import TableStore
from ..tables.reader import read_table
from ..tables.schema import Job
from . import activities, call_lists, jobs

logger = logging.getLogger(__name__)


def _as_dict(record):
    return None if record is None else record.to_dict()


def _jobs(store: TableStore, options: Dict[str, object]):
    company_id = options.get("companyId")
    if company_id:
        found = jobs.jobs_by_company(store, str(company_id))
    else:
        found = read_table(store, Job.TABLE).as_records(Job)
    return [job.to_dict() for job in found]


_HANDLERS: Dict[str, Callable[[TableStore, Dict[str, object]], object]] = {
    "job": lambda s, o: _as_dict(jobs.job_by_id(s, o.get("id"))),
    "jobs": _jobs,
    "company": lambda s, o: _as_dict(jobs.company_by_id(s, o.get("id"))),
    "companyBundle": lambda s, o: jobs.company_bundle(s, o.get("id")),
    "candidate": lambda s, o: _as_dict(call_lists.candidate_by_id(s, o.get("id"))),
    "callList": lambda s, o: _as_dict(call_lists.call_list_by_id(s, o.get("id"))),
    "callLists": lambda s, o: [c.to_dict() for c in call_lists.list_call_lists(s)],
    "callListBundle": lambda s, o: call_lists.call_list_bundle(s, o.get("id")),
    "callListCandidates": lambda s, o: call_lists.candidates_for_call_list(s, o.get("id")),
    "callListItems": lambda s, o: [i.to_dict() for i in call_lists.call_list_items(s, o.get("id"))],
    "jobAndCompany": lambda s, o: call_lists.job_and_company_for_call_list(s, o.get("id")),
    "activities": lambda s, o: [
        a.to_dict()
        for a in activities.activities_for_context(s, o.get("candidateId"), o.get("jobId"))
    ],
}

ENTITIES = tuple(_HANDLERS)


def get_data(store: TableStore, entity: str, **options: object) -> object:
    """Serve one entity payload.

    Args:
        store: Backing table store.
        entity: One of `ENTITIES`.
        **options: Entity options, see the module docstring.

    Returns:
        A dict, a list of dicts, or None for a lookup that missed.

    Raises:
        UnknownEntity: if `entity` is not a known tag.
        TableNotFound: if a required table is missing.
    """
    handler = _HANDLERS.get(entity)
    if handler is None:
        raise UnknownEntity(entity)
    logger.debug("get_data(%s, %s)", entity, options)
    return handler(store, options)
