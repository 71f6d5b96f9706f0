"""Tests de los repositorios contra un cliente Supabase falso."""
from types import SimpleNamespace

import httpx
import pytest
from postgrest.exceptions import APIError
from tenacity import wait_none

from gigmatch.database import StoreUnavailableError, SupabaseClient
from gigmatch.database.repositories import FreelancerRepository, JobRepository


class FakeQuery:
    """Imita el query builder encadenable de postgrest."""

    def __init__(self, table, rows=None, error=None):
        self.table = table
        self.rows = rows or []
        self.error = error
        self.ops = []

    def __getattr__(self, name):
        def _op(*args, **kwargs):
            self.ops.append((name, args))
            return self
        return _op

    @property
    def not_(self):
        self.ops.append(("not_", ()))
        return self

    def execute(self):
        if self.error:
            raise self.error
        return SimpleNamespace(data=self.rows)


class FakeSupabase:
    """Cliente supabase crudo: solo table()."""

    def __init__(self, rows=None, errors=None):
        self.rows = rows or []
        self.errors = list(errors or [])
        self.queries = []

    def table(self, name):
        error = self.errors.pop(0) if self.errors else None
        query = FakeQuery(name, self.rows, error)
        self.queries.append(query)
        return query


@pytest.fixture(autouse=True)
def _no_backoff(monkeypatch):
    """Sin esperas entre reintentos."""
    monkeypatch.setattr(JobRepository._fetch_job_rows.retry, "wait", wait_none())
    monkeypatch.setattr(
        FreelancerRepository._fetch_rows_with_skills.retry, "wait", wait_none()
    )


def grace_row(**overrides):
    row = {
        "id": "u1",
        "fullName": "Grace",
        "skills": [{"skillName": "React", "level": "EXPERT", "yearsOfExperience": 4}],
        "portfolio": [{"description": "shop", "imageUrls": ["a.png", "b.png"]}],
        "reviews": [{"rating": 4.5}],
    }
    row.update(overrides)
    return row


def test_find_job_maps_camel_case_row():
    raw = FakeSupabase(
        rows=[{"id": "j1", "title": "API", "requiredSkills": ["Python", "FastAPI"]}]
    )

    job = JobRepository(SupabaseClient(raw)).find_job("j1")

    assert job.id == "j1"
    assert job.normalized_skills == {"python", "fastapi"}
    assert raw.queries[0].table == "job_postings"
    assert ("eq", ("id", "j1")) in raw.queries[0].ops


def test_find_job_absent_returns_none():
    assert JobRepository(SupabaseClient(FakeSupabase(rows=[]))).find_job("nope") is None


def test_find_freelancers_drops_empty_skill_lists():
    raw = FakeSupabase(rows=[grace_row(), {"id": "u2", "skills": [], "portfolio": []}])

    freelancers = FreelancerRepository(SupabaseClient(raw)).find_freelancers_with_any_skill()

    assert [f.id for f in freelancers] == ["u1"]
    grace = freelancers[0]
    assert grace.full_name == "Grace"
    assert grace.skills[0].years_of_experience == 4
    assert grace.portfolio[0].image_count == 2
    assert grace.reviews[0].rating == 4.5
    assert len(raw.queries) == 1
    assert raw.queries[0].table == "users"


def test_lenient_rows_are_kept():
    rows = [
        grace_row(id="u1", skills=[{"skillName": "React", "level": 3}]),
        grace_row(id="u2", skills=[{"level": "EXPERT"}]),
        grace_row(id="u3", skills=[{"skillName": "React", "yearsOfExperience": "n/a"}]),
        grace_row(id="u4", reviews=[{"rating": "five"}]),
    ]
    raw = FakeSupabase(rows=rows)

    freelancers = FreelancerRepository(SupabaseClient(raw)).find_freelancers_with_any_skill()

    assert [f.id for f in freelancers] == ["u1", "u2", "u3", "u4"]


def test_unparseable_row_is_skipped_without_failing_the_read():
    rows = [grace_row(id=None), grace_row(id="ok", portfolio="not-a-list"), grace_row(id="u9")]
    raw = FakeSupabase(rows=rows)

    freelancers = FreelancerRepository(SupabaseClient(raw)).find_freelancers_with_any_skill()

    assert [f.id for f in freelancers] == ["u9"]
    assert len(raw.queries) == 1


def test_table_names_come_from_settings(monkeypatch):
    monkeypatch.setenv("USERS_TABLE", "freelancers")
    raw = FakeSupabase(rows=[])

    FreelancerRepository(SupabaseClient(raw)).find_freelancers_with_any_skill()

    assert raw.queries[0].table == "freelancers"


def test_transient_store_error_is_retried():
    raw = FakeSupabase(
        rows=[{"id": "j1", "requiredSkills": []}],
        errors=[httpx.ConnectError("blip")],
    )

    job = JobRepository(SupabaseClient(raw)).find_job("j1")

    assert job.id == "j1"
    assert len(raw.queries) == 2


def test_persistent_store_error_propagates():
    api_error = APIError({"message": "boom", "code": "500", "hint": None, "details": None})
    raw = FakeSupabase(errors=[api_error] * 3)
    repo = FreelancerRepository(SupabaseClient(raw))

    with pytest.raises(StoreUnavailableError):
        repo.find_freelancers_with_any_skill()
    assert len(raw.queries) == 3


def test_programming_errors_are_not_retried():
    raw = FakeSupabase(errors=[KeyError("data")])
    repo = JobRepository(SupabaseClient(raw))

    with pytest.raises(KeyError):
        repo.find_job("j1")
    assert len(raw.queries) == 1
