"""
Per‑table record types.

The backing tables carry no schema, so each table gets a dataclass
listing the columns this package knows about as optional string
fields.  Every other column of the row lands in `extra`, keyed by its
header name, so nothing the users added to a table is lost.

`COLUMNS` maps each attribute to the header names it is read from.
The first name is canonical and is used by `to_dict`; the others are
legacy aliases seen in older tables (e.g. `ActivityType` for `Type`).
`TABLE` names the table each record type is read from.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Dict, Mapping, Sequence, Tuple, Type, TypeVar

from .project import project

R = TypeVar("R", bound="Record")


@dataclass
class Record:
    """Base class for table records."""

    TABLE: ClassVar[str] = ""
    COLUMNS: ClassVar[Dict[str, Tuple[str, ...]]] = {}

    extra: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls: Type[R], values: Mapping[str, str]) -> R:
        """Build a record from a column‑keyed mapping."""
        kwargs: Dict[str, object] = {}
        consumed = set()
        for attr, columns in cls.COLUMNS.items():
            value = ""
            for column in columns:
                if column in values:
                    consumed.add(column)
                    if not value and values[column]:
                        value = values[column]
            kwargs[attr] = value
        kwargs["extra"] = {k: v for k, v in values.items() if k not in consumed}
        return cls(**kwargs)  # type: ignore[arg-type]

    @classmethod
    def from_row(cls: Type[R], row: Sequence[object], index: Mapping[str, int]) -> R:
        """Build a record from a raw row and its table's header index."""
        return cls.from_mapping(project(row, index))

    def to_dict(self) -> Dict[str, str]:
        """Column‑keyed view: known columns first, then `extra`."""
        data = {columns[0]: getattr(self, attr) for attr, columns in self.COLUMNS.items()}
        for key, value in self.extra.items():
            data.setdefault(key, value)
        return data

    def get(self, column: str, default: str = "") -> str:
        """Look a value up by header name, aliases included."""
        for attr, columns in self.COLUMNS.items():
            if column in columns:
                return getattr(self, attr)
        return self.extra.get(column, default)


@dataclass
class Job(Record):
    TABLE: ClassVar[str] = "Jobs"
    COLUMNS: ClassVar[Dict[str, Tuple[str, ...]]] = {
        "job_id": ("JobID",),
        "company_id": ("CompanyID",),
        "title": ("Title", "JobTitle"),
        "status": ("Status",),
        "location": ("Location",),
        "description": ("Description",),
    }

    job_id: str = ""
    company_id: str = ""
    title: str = ""
    status: str = ""
    location: str = ""
    description: str = ""


@dataclass
class Company(Record):
    TABLE: ClassVar[str] = "Companies"
    COLUMNS: ClassVar[Dict[str, Tuple[str, ...]]] = {
        "company_id": ("CompanyID",),
        "name": ("Name", "CompanyName"),
        "industry": ("Industry",),
        "website": ("Website",),
        "location": ("Location",),
        "notes": ("Notes",),
    }

    company_id: str = ""
    name: str = ""
    industry: str = ""
    website: str = ""
    location: str = ""
    notes: str = ""


@dataclass
class Candidate(Record):
    TABLE: ClassVar[str] = "Candidates"
    COLUMNS: ClassVar[Dict[str, Tuple[str, ...]]] = {
        "candidate_id": ("CandidateID",),
        "full_name": ("FullName", "Name"),
        "email": ("Email",),
        "phone": ("Phone",),
        "status": ("Status",),
        "current_title": ("CurrentTitle",),
        "location": ("Location",),
    }

    candidate_id: str = ""
    full_name: str = ""
    email: str = ""
    phone: str = ""
    status: str = ""
    current_title: str = ""
    location: str = ""


# Contact‑list safe subset of a candidate row.
CANDIDATE_SUMMARY_FIELDS = ["CandidateID", "FullName", "Email", "Phone", "Status", "CurrentTitle"]


@dataclass
class CallList(Record):
    TABLE: ClassVar[str] = "CallLists"
    COLUMNS: ClassVar[Dict[str, Tuple[str, ...]]] = {
        "call_list_id": ("CallListID",),
        "name": ("Name", "CallListName"),
        "job_id": ("JobID",),
        "candidate_ids": ("CandidateIDs",),
        "owner": ("Owner",),
        "status": ("Status",),
        "created_at": ("CreatedAt",),
    }

    call_list_id: str = ""
    name: str = ""
    job_id: str = ""
    candidate_ids: str = ""
    owner: str = ""
    status: str = ""
    created_at: str = ""


@dataclass
class CallListItem(Record):
    TABLE: ClassVar[str] = "CallListsItems"
    COLUMNS: ClassVar[Dict[str, Tuple[str, ...]]] = {
        "call_list_id": ("CallListID",),
        "candidate_id": ("CandidateID",),
        "position": ("Position",),
        "status": ("Status",),
    }

    call_list_id: str = ""
    candidate_id: str = ""
    position: str = ""
    status: str = ""


@dataclass
class Hire(Record):
    TABLE: ClassVar[str] = "Hires"
    COLUMNS: ClassVar[Dict[str, Tuple[str, ...]]] = {
        "hire_id": ("HireID",),
        "company_id": ("CompanyID",),
        "candidate_id": ("CandidateID",),
        "job_id": ("JobID",),
        "role": ("Role",),
        "hire_date": ("HireDate",),
    }

    hire_id: str = ""
    company_id: str = ""
    candidate_id: str = ""
    job_id: str = ""
    role: str = ""
    hire_date: str = ""


@dataclass
class Activity(Record):
    TABLE: ClassVar[str] = "Activities"
    COLUMNS: ClassVar[Dict[str, Tuple[str, ...]]] = {
        "activity_id": ("ActivityID", "ID"),
        "created_at": ("CreatedAt", "Timestamp"),
        "updated_at": ("UpdatedAt",),
        "type": ("Type", "ActivityType"),
        "candidate_id": ("CandidateID",),
        "job_id": ("JobID",),
        "call_list_id": ("CallListID",),
        "company_id": ("CompanyID",),
        "recruiter_id": ("RecruiterID",),
        "recruiter_name": ("RecruiterName",),
        "outcome": ("Outcome", "Result"),
        "notes": ("Notes", "Comments"),
    }

    activity_id: str = ""
    created_at: str = ""
    updated_at: str = ""
    type: str = ""
    candidate_id: str = ""
    job_id: str = ""
    call_list_id: str = ""
    company_id: str = ""
    recruiter_id: str = ""
    recruiter_name: str = ""
    outcome: str = ""
    notes: str = ""


# Column order the Activity writer fills, and the header it writes
# into an Activities table that has none yet.
ACTIVITY_COLUMNS = [columns[0] for columns in Activity.COLUMNS.values()]

