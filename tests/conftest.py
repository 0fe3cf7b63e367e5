"""Shared fixtures: a small recruiting data set held in a memory store.

Headers are deliberately in a different order in each table and the
identifiers use mixed formats, the way hand‑edited tables do.
"""

from __future__ import annotations

from typing import Dict, List

import pytest

from recruitdesk.store.memory_store import MemoryTableStore


def sample_tables() -> Dict[str, List[List[object]]]:
    return {
        "Jobs": [
            ["JobID", "Title", "CompanyID", "Status", "Location"],
            ["JOB0001", "Backend Engineer", "CO1", "Open", "Berlin"],
            ["JOB0007", "Data Analyst", "CO1", "Open", "Remote"],
            ["JOB0003", "Designer", "CO2", "Closed", "Paris"],
            ["JOB0004", "Orphan Role", "CO9", "Open", "Leeds"],
            ["JOB005", "Store Manager", "CO2", "Paused", "Lyon"],
        ],
        "Companies": [
            ["Name", "CompanyID", "Industry"],
            ["Acme", "CO1", "Software"],
            ["Globex", "CO2", "Retail"],
        ],
        "Candidates": [
            ["CandidateID", "FullName", "Email", "Phone", "Status", "CurrentTitle", "Location", "Source"],
            ["C1", "Ada Lovelace", "ada@example.com", "111", "Active", "Engineer", "London", "Referral"],
            ["C2", "Bob Stone", "bob@example.com", "222", "Active", "Analyst", "Leeds", "LinkedIn"],
            ["C3", "Cy Young", "cy@example.com", "333", "Passive", "Designer", "Paris", "Event"],
            ["C4", "Dee Ray", "dee@example.com", "444", "Active", "Manager", "Rome", "Referral"],
        ],
        "CallLists": [
            ["CallListID", "Name", "JobID", "CandidateIDs"],
            ["CL001", "Analysts", "J7", "C1; C2,C3\nC4"],
            ["CL0002", "Orphans", "JOB004", "C9, C1"],
            ["CL3", "Ghost job", "JOB0099", '"C2;"'],
            ["CL4", "Empty", "JOB0001", ""],
            ["CL0006", "Retail", "JOB005", "C3 C4"],
        ],
        "CallListsItems": [
            ["CallListID", "CandidateID", "Position", "Status"],
            ["CL1", "C1", "1", "Called"],
            ["CL2", "C9", "1", "Pending"],
            ["CL01", "C2", "2", "Pending"],
        ],
        "Hires": [
            ["HireID", "CompanyID", "CandidateID", "JobID", "Role", "HireDate"],
            ["H1", "CO1", "C1", "JOB0001", "Engineer", "2023-01-01"],
            ["H2", "CO1", "C2", "JOB0001", "Engineer", "2023-02-01"],
            ["H3", "CO1", "C3", "JOB0007", "", "2023-03-01"],
            ["H4", "CO1", "C4", "", "", "2023-04-01"],
            ["H5", "CO1", "C1", "JOB0007", "Analyst", "2023-05-01"],
            ["H6", "CO1", "C2", "JOB0001", "Engineer", "2023-06-01"],
            ["H7", "CO1", "C3", "JOB0007", "Analyst", "2023-07-01"],
            ["H8", "CO2", "C4", "JOB0003", "Designer", "2023-08-01"],
        ],
        "Activities": [
            ["ActivityID", "CreatedAt", "ActivityType", "CandidateID", "JobID", "Notes"],
            ["A1", "2024-01-01T09:00:00", "Call", "C1", "JOB0001", "Intro call"],
            ["A2", "2024-01-03T09:00:00", "Email", "C2", "JOB0007", "Sent JD"],
            ["A3", "2024-01-02T09:00:00", "Note", "C1", "", "Prefers remote"],
            ["A4", "2024-01-03T09:00:00", "Call", "C3", "JOB0001", "Screen"],
            ["A5", "not a date", "Note", "C1", "", "Legacy import"],
            ["A6", "2024-01-05 10:00", "Call", "C2", "JOB0003", "Follow up"],
        ],
    }


@pytest.fixture
def store() -> MemoryTableStore:
    """Memory store loaded with `sample_tables`."""
    return MemoryTableStore(sample_tables())
