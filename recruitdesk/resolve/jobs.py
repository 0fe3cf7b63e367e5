"""
Job and company lookups.

Every lookup is a linear scan of a fresh read of the table.  Job IDs
are compared in canonical `JOB####` form on both sides, so `J7`,
`JOB007` and `JOB0007` find the same row; other IDs are compared as
stripped strings.  A miss is a normal result (`None` or an
empty list), never an error.

`company_bundle` composes a company, its jobs and a handful of KPIs
computed from the Hires table.  Hires is optional; without it the hire
KPIs are zero and the talent map is empty.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ..normalize.ids import id_text, job_ids_match, same_id
from ..store.base import TableStore
from ..tables.reader import read_table
from ..tables.schema import Company, Hire, Job

logger = logging.getLogger(__name__)

OPEN_STATUS = "Open"
UNKNOWN_ROLE = "Unknown"
RECENT_HIRES = 5


def job_by_id(store: TableStore, job_id: str) -> Optional[Job]:
    """Return the first Job whose canonical `JobID` equals that of `job_id`.

    The row is returned as stored; only the comparison is canonical.
    """
    if not id_text(job_id):
        return None
    for job in read_table(store, Job.TABLE).as_records(Job):
        if job_ids_match(job.job_id, job_id):
            return job
    logger.debug("Job %s not found", job_id)
    return None


def company_by_id(store: TableStore, company_id: str) -> Optional[Company]:
    """Return the first Company whose `CompanyID` equals `company_id`, or None."""
    if not id_text(company_id):
        return None
    for company in read_table(store, Company.TABLE).as_records(Company):
        if same_id(company.company_id, company_id):
            return company
    logger.debug("Company %s not found", company_id)
    return None


def jobs_by_company(store: TableStore, company_id: str) -> List[Job]:
    """Return every Job of a company, in table order."""
    if not id_text(company_id):
        return []
    return [
        job for job in read_table(store, Job.TABLE).as_records(Job)
        if same_id(job.company_id, company_id)
    ]


def _hire_role(hire: Hire) -> str:
    return hire.role.strip() or hire.job_id.strip() or UNKNOWN_ROLE


def role_distribution(hires: List[Hire]) -> Dict[str, int]:
    """Count hires per role, falling back to JobID and then `Unknown`."""
    counts: Dict[str, int] = {}
    for hire in hires:
        role = _hire_role(hire)
        counts[role] = counts.get(role, 0) + 1
    return counts


def company_bundle(store: TableStore, company_id: str) -> Optional[Dict[str, object]]:
    """Compose a company with its jobs, KPIs and talent map.

    Args:
        store: Backing table store.
        company_id: Company to load.

    Returns:
        `None` when the company does not exist, otherwise a dict with
        keys `company`, `jobs`, `kpis` and `talent`.  `kpis` holds
        `openRoles`, `hires`, `recentHires` (the last five hire rows,
        newest first) and `roleDistribution`.  `talent` lists
        `{"role", "count"}` pairs in first‑seen order.
    """
    company = company_by_id(store, company_id)
    if company is None:
        return None
    jobs = jobs_by_company(store, company_id)
    hires = [
        hire for hire in read_table(store, Hire.TABLE, optional=True).as_records(Hire)
        if same_id(hire.company_id, company_id)
    ]
    distribution = role_distribution(hires)
    recent = list(reversed(hires[-RECENT_HIRES:]))
    kpis = {
        "openRoles": sum(1 for job in jobs if job.status.strip() == OPEN_STATUS),
        "hires": len(hires),
        "recentHires": [hire.to_dict() for hire in recent],
        "roleDistribution": distribution,
    }
    talent = [{"role": role, "count": count} for role, count in distribution.items()]
    logger.debug(
        "Bundle for company %s: %d jobs, %d hires", company_id, len(jobs), len(hires)
    )
    return {
        "company": company.to_dict(),
        "jobs": [job.to_dict() for job in jobs],
        "kpis": kpis,
        "talent": talent,
    }
