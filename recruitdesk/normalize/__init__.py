"""
Identifier normalization for recruitdesk.

Canonicalizes Job IDs and CallList IDs so they compare equal across
tables.  Other IDs compare as stripped text.  The delimited
CandidateIDs cell of a call list is parsed here too.
"""

from .ids import (  # noqa: F401
    call_list_ids_match,
    call_list_key,
    id_text,
    job_ids_match,
    normalize_job_id,
    parse_candidate_ids,
    same_id,
)
