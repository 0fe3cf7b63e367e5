"""
Join resolver for recruitdesk.

Answers the cross‑table questions (job ↔ company, call list ↔ job ↔
company, call list ↔ candidates, candidate/job ↔ activities) with
fixed chains of linear scans over fresh table reads.  `get_data`
dispatches entity tags onto these resolvers.
"""

from .activities import activities_for_context  # noqa: F401
from .call_lists import (  # noqa: F401
    call_list_bundle,
    call_list_by_id,
    call_list_items,
    candidate_by_id,
    candidates_for_call_list,
    job_and_company_for_call_list,
    list_call_lists,
)
from .dispatch import ENTITIES, get_data  # noqa: F401
from .jobs import company_bundle, company_by_id, job_by_id, jobs_by_company  # noqa: F401
