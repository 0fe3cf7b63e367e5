"""
Identifier normalization.

Job IDs and CallList IDs are typed by hand into the backing tables and
so drift between formats (`J7`, `JOB007` and `JOB0007` all name the
same job; `CL1`, `CL01` and `CL0001` the same call list).  The two ID
families follow different conventions and are normalized by separate
rules:

* CallList IDs are only *compared* in canonical form.  The stored
  value is never rewritten.
* Job IDs are *rewritten* to `JOB` plus four zero‑padded digits and
  the corrected value is handed back to the caller.

The CandidateIDs cell of a call list is a denormalized, delimited list
and is parsed here as well.
"""

from __future__ import annotations

import re
from typing import List, Optional

_CALL_LIST_PREFIX = re.compile(r"^CL0*")
_SHORT_JOB_ID = re.compile(r"^J(\d+)$")
_LONG_JOB_ID = re.compile(r"^JOB(\d{3})$")
_QUOTES = "\"'“”‘’"


def id_text(value: object) -> str:
    """An ID cell as stripped text; `None` reads as `""`."""
    return "" if value is None else str(value).strip()


def call_list_key(value: object) -> str:
    """Return the comparison key of a CallList ID.

    Strips a literal `CL` prefix followed by any run of zeros, so
    `CL001`, `CL01` and `CL1` all yield `"1"`.  A value without the
    prefix is returned stripped of whitespace only.
    """
    return _CALL_LIST_PREFIX.sub("", id_text(value))


def call_list_ids_match(a: object, b: object) -> bool:
    """True when two CallList IDs name the same call list.

    An empty key never matches, so a blank cell does not match a blank
    request (or `CL`/`CL000`, which reduce to nothing).
    """
    key_a = call_list_key(a)
    return bool(key_a) and key_a == call_list_key(b)


def normalize_job_id(value: object) -> str:
    """Rewrite a Job ID into its canonical `JOB####` form.

    `J<digits>` and `JOB<3 digits>` are rewritten to `JOB` followed by
    the digits zero‑padded to four characters.  Anything else,
    including an already canonical ID, is returned unchanged apart from
    surrounding whitespace.

    >>> normalize_job_id("J7")
    'JOB0007'
    >>> normalize_job_id("JOB007")
    'JOB0007'
    >>> normalize_job_id("JOB0007")
    'JOB0007'
    """
    text = id_text(value)
    match = _SHORT_JOB_ID.match(text) or _LONG_JOB_ID.match(text)
    if match:
        return "JOB" + match.group(1).zfill(4)
    return text


def same_id(a: object, b: object) -> bool:
    """Compare two plain IDs (CompanyID, CandidateID) as stripped text."""
    return id_text(a) == id_text(b)


def job_ids_match(a: object, b: object) -> bool:
    """True when two Job IDs name the same job once both are canonical.

    An empty ID never matches.
    """
    key_a = normalize_job_id(a)
    return bool(key_a) and key_a == normalize_job_id(b)


def parse_candidate_ids(raw: Optional[object]) -> List[str]:
    """Split a denormalized CandidateIDs cell into individual IDs.

    The cell may be wrapped in quotes and its IDs separated by `;`,
    `,`, spaces or newlines in any mix.  Order is kept and
    duplicates are not removed.

    >>> parse_candidate_ids('"C1; C2,C3\\nC4"')
    ['C1', 'C2', 'C3', 'C4']
    """
    if raw is None or isinstance(raw, (list, tuple, dict, set)):
        return []
    text = str(raw).strip().strip(_QUOTES)
    # Any run of whitespace, `,` or `;` is one separator.
    text = re.sub(r"[\s,;]+", ";", text).strip(";")
    return [part.strip().strip(_QUOTES) for part in text.split(";") if part.strip().strip(_QUOTES)]
