"""Tests for job/company lookups and the company bundle."""

from __future__ import annotations

from recruitdesk.resolve.jobs import company_bundle, company_by_id, job_by_id, jobs_by_company
from recruitdesk.store.memory_store import MemoryTableStore


def test_job_by_id(store: MemoryTableStore) -> None:
    job = job_by_id(store, "JOB0007")
    assert job is not None
    assert job.title == "Data Analyst"
    assert job.company_id == "CO1"


def test_job_by_id_matches_canonical_form(store: MemoryTableStore) -> None:
    # The fixture stores this job as JOB005.
    for raw in ("JOB005", "JOB0005", "J5"):
        job = job_by_id(store, raw)
        assert job is not None
        assert job.job_id == "JOB005"


def test_job_by_id_not_found_is_none(store: MemoryTableStore) -> None:
    assert job_by_id(store, "JOB9999") is None
    assert job_by_id(store, "") is None


def test_job_by_id_compares_stringified(store: MemoryTableStore) -> None:
    store.tables["Jobs"].append([42, "Numeric", "CO2", "Open", ""])
    job = job_by_id(store, "42")
    assert job is not None and job.title == "Numeric"


def test_company_by_id(store: MemoryTableStore) -> None:
    company = company_by_id(store, " CO2 ")
    assert company is not None
    assert company.name == "Globex"
    assert company_by_id(store, "CO9") is None


def test_jobs_by_company_in_table_order(store: MemoryTableStore) -> None:
    jobs = jobs_by_company(store, "CO1")
    assert [job.job_id for job in jobs] == ["JOB0001", "JOB0007"]
    assert jobs_by_company(store, "CO404") == []


def test_company_bundle_kpis(store: MemoryTableStore) -> None:
    bundle = company_bundle(store, "CO1")
    assert bundle is not None
    assert bundle["company"]["Name"] == "Acme"
    assert [job["JobID"] for job in bundle["jobs"]] == ["JOB0001", "JOB0007"]
    kpis = bundle["kpis"]
    assert kpis["openRoles"] == 2
    assert kpis["hires"] == 7
    # Last five hire rows, newest first.
    assert [h["HireID"] for h in kpis["recentHires"]] == ["H7", "H6", "H5", "H4", "H3"]
    assert kpis["roleDistribution"] == {
        "Engineer": 3,
        "JOB0007": 1,
        "Unknown": 1,
        "Analyst": 2,
    }
    assert bundle["talent"] == [
        {"role": "Engineer", "count": 3},
        {"role": "JOB0007", "count": 1},
        {"role": "Unknown", "count": 1},
        {"role": "Analyst", "count": 2},
    ]


def test_company_bundle_few_hires(store: MemoryTableStore) -> None:
    bundle = company_bundle(store, "CO2")
    assert bundle is not None
    assert bundle["kpis"]["openRoles"] == 0
    assert bundle["kpis"]["hires"] == 1
    assert [h["HireID"] for h in bundle["kpis"]["recentHires"]] == ["H8"]


def test_company_bundle_without_hires_table(store: MemoryTableStore) -> None:
    del store.tables["Hires"]
    bundle = company_bundle(store, "CO1")
    assert bundle is not None
    assert bundle["kpis"]["hires"] == 0
    assert bundle["kpis"]["recentHires"] == []
    assert bundle["talent"] == []
    assert bundle["kpis"]["openRoles"] == 2


def test_company_bundle_missing_company(store: MemoryTableStore) -> None:
    assert company_bundle(store, "CO9") is None
