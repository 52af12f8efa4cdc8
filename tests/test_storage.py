"""
Tests for app.storage - both backends share one suite.
"""

import pytest

from app.schemas import ClinicianProblemCreate, MatchCreate, ResearcherCreate
from app.seed import SEED_RESEARCHERS
from app.settings import Settings
from app.storage import MemStorage, SqlStorage, build_storage


@pytest.fixture(params=["memory", "sql"])
def storage(request, tmp_path):
    if request.param == "memory":
        return MemStorage()
    return SqlStorage(f"sqlite:///{tmp_path / 'nested' / 'test.db'}")


@pytest.fixture
def researcher_data():
    return ResearcherCreate(
        name="Dr. Ada Example",
        email="ada@example.org",
        institution=None,
        keywords=["cardiology", "heart failure"],
        description="Heart failure outcomes research",
    )


class TestResearchers:

    def test_create_assigns_id(self, storage, researcher_data):
        researcher = storage.create_researcher(researcher_data)
        assert researcher.id
        assert researcher.keywords == ["cardiology", "heart failure"]
        assert researcher.institution is None

    def test_get_all_and_by_id(self, storage, researcher_data):
        created = storage.create_researcher(researcher_data)

        assert [r.id for r in storage.get_all_researchers()] == [created.id]
        assert storage.get_researcher_by_id(created.id) == created
        assert storage.get_researcher_by_id("missing") is None

    def test_get_all_keeps_creation_order(self, storage, researcher_data):
        names = ["Dr. Zed", "Dr. Amy", "Dr. Mid", "Dr. Bob"]
        for name in names:
            storage.create_researcher(researcher_data.model_copy(update={"name": name}))

        assert [r.name for r in storage.get_all_researchers()] == names


class TestProblems:

    def test_roundtrip(self, storage):
        problem = storage.create_clinician_problem(
            ClinicianProblemCreate(description="Falls in older adults", title="Falls", keywords=["geriatrics"])
        )
        fetched = storage.get_clinician_problem_by_id(problem.id)

        assert fetched.description == "Falls in older adults"
        assert fetched.title == "Falls"
        assert fetched.domain is None
        assert fetched.keywords == ["geriatrics"]
        assert fetched.submitted_at is not None

    def test_unknown_problem(self, storage):
        assert storage.get_clinician_problem_by_id("missing") is None


class TestMatches:

    def test_matches_come_back_by_rank_with_researchers(self, storage, researcher_data):
        first = storage.create_researcher(researcher_data)
        second = storage.create_researcher(researcher_data.model_copy(update={"name": "Dr. Second"}))
        problem = storage.create_clinician_problem(ClinicianProblemCreate(description="heart failure"))

        created = storage.create_matches(problem.id, [
            MatchCreate(researcher_id=second.id, score=0.4, rank=2),
            MatchCreate(researcher_id=first.id, score=1.0, rank=1),
        ])
        results = storage.get_matches_by_problem_id(problem.id)

        assert {m.problem_id for m in created} == {problem.id}
        assert [r.rank for r in results] == [1, 2]
        assert [r.researcher.id for r in results] == [first.id, second.id]
        assert results[1].score == pytest.approx(0.4)

    def test_matches_are_scoped_to_problem(self, storage, researcher_data):
        researcher = storage.create_researcher(researcher_data)
        one = storage.create_clinician_problem(ClinicianProblemCreate(description="one"))
        two = storage.create_clinician_problem(ClinicianProblemCreate(description="two"))
        storage.create_matches(one.id, [MatchCreate(researcher_id=researcher.id, score=1.0, rank=1)])

        assert storage.get_matches_by_problem_id(two.id) == []
        assert len(storage.get_matches_by_problem_id(one.id)) == 1


class TestSeeding:

    def test_seed_fills_empty_store_once(self, storage):
        assert storage.seed() == len(SEED_RESEARCHERS)
        assert storage.seed() == 0
        assert len(storage.get_all_researchers()) == len(SEED_RESEARCHERS)

    def test_sql_seed_survives_reopen(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'seeded.db'}"
        SqlStorage(url, seed=True)
        reopened = SqlStorage(url, seed=True)
        assert len(reopened.get_all_researchers()) == len(SEED_RESEARCHERS)


def test_mem_storage_drops_matches_for_unknown_researcher():
    storage = MemStorage()
    problem = storage.create_clinician_problem(ClinicianProblemCreate(description="x"))
    storage.create_matches(problem.id, [MatchCreate(researcher_id="gone", score=0.5, rank=1)])
    assert storage.get_matches_by_problem_id(problem.id) == []


def test_build_storage_selects_backend(tmp_path):
    mem = build_storage(Settings(storage_backend="memory", seed_researchers=False))
    sql = build_storage(Settings(storage_backend="sql", database_url=f"sqlite:///{tmp_path / 'b.db'}", seed_researchers=True))

    assert isinstance(mem, MemStorage)
    assert mem.get_all_researchers() == []
    assert isinstance(sql, SqlStorage)
    assert len(sql.get_all_researchers()) == len(SEED_RESEARCHERS)
