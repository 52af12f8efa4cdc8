"""
Persistence for researchers, clinician problems and their matches.

Two interchangeable backends implement the same capability set:
an in-process dictionary store and a SQLAlchemy-backed relational store.
`build_storage` picks one at startup from the settings.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterable, List, Optional
import logging
import threading
import uuid

from sqlalchemy import JSON, Column, DateTime, Float, ForeignKey, Integer, String, Text, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from .schemas import (
    ClinicianProblem, ClinicianProblemCreate,
    Match, MatchCreate, MatchResult,
    Researcher, ResearcherCreate,
)
from .seed import SEED_RESEARCHERS
from .settings import Settings

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return str(uuid.uuid4())


class Storage(ABC):
    """Create/read operations the matching service relies on."""

    @abstractmethod
    def create_researcher(self, data: ResearcherCreate) -> Researcher: ...

    @abstractmethod
    def get_all_researchers(self) -> List[Researcher]: ...

    @abstractmethod
    def get_researcher_by_id(self, researcher_id: str) -> Optional[Researcher]: ...

    @abstractmethod
    def create_clinician_problem(self, data: ClinicianProblemCreate) -> ClinicianProblem: ...

    @abstractmethod
    def get_clinician_problem_by_id(self, problem_id: str) -> Optional[ClinicianProblem]: ...

    @abstractmethod
    def create_matches(self, problem_id: str, matches: Iterable[MatchCreate]) -> List[Match]: ...

    @abstractmethod
    def get_matches_by_problem_id(self, problem_id: str) -> List[MatchResult]: ...

    def seed(self, researchers: Iterable[ResearcherCreate] = SEED_RESEARCHERS) -> int:
        """Insert `researchers` when the store holds none yet. Returns how many were added."""
        if self.get_all_researchers():
            return 0
        added = 0
        for data in researchers:
            self.create_researcher(data)
            added += 1
        logger.info("Seeded %d researchers", added)
        return added

    def _join(self, matches: Iterable[Match]) -> List[MatchResult]:
        results: List[MatchResult] = []
        for match in sorted(matches, key=lambda m: m.rank):
            researcher = self.get_researcher_by_id(match.researcher_id)
            if researcher is None:
                logger.warning("Match %s points at missing researcher %s", match.id, match.researcher_id)
                continue
            results.append(MatchResult(researcher=researcher, score=match.score, rank=match.rank))
        return results


class MemStorage(Storage):
    """Dictionary-backed store; contents live as long as the process."""

    def __init__(self, seed: bool = False):
        self._lock = threading.Lock()
        self._researchers: Dict[str, Researcher] = {}
        self._problems: Dict[str, ClinicianProblem] = {}
        self._matches: Dict[str, Match] = {}
        if seed:
            self.seed()

    def create_researcher(self, data: ResearcherCreate) -> Researcher:
        researcher = Researcher(id=_new_id(), **data.model_dump())
        with self._lock:
            self._researchers[researcher.id] = researcher
        return researcher

    def get_all_researchers(self) -> List[Researcher]:
        with self._lock:
            return list(self._researchers.values())

    def get_researcher_by_id(self, researcher_id: str) -> Optional[Researcher]:
        with self._lock:
            return self._researchers.get(researcher_id)

    def create_clinician_problem(self, data: ClinicianProblemCreate) -> ClinicianProblem:
        problem = ClinicianProblem(id=_new_id(), submitted_at=datetime.now(), **data.model_dump())
        with self._lock:
            self._problems[problem.id] = problem
        return problem

    def get_clinician_problem_by_id(self, problem_id: str) -> Optional[ClinicianProblem]:
        with self._lock:
            return self._problems.get(problem_id)

    def create_matches(self, problem_id: str, matches: Iterable[MatchCreate]) -> List[Match]:
        created = [Match(id=_new_id(), problem_id=problem_id, **m.model_dump()) for m in matches]
        with self._lock:
            for match in created:
                self._matches[match.id] = match
        return created

    def get_matches_by_problem_id(self, problem_id: str) -> List[MatchResult]:
        with self._lock:
            problem_matches = [m for m in self._matches.values() if m.problem_id == problem_id]
        return self._join(problem_matches)


Base = declarative_base()


class ResearcherRow(Base):
    __tablename__ = "researchers"

    # insertion order; ids are random UUIDs
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, nullable=False, default=_new_id)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    institution = Column(Text, nullable=True)
    keywords = Column(JSON, nullable=False, default=list)
    description = Column(Text, nullable=False)


class ClinicianProblemRow(Base):
    __tablename__ = "clinician_problems"

    id = Column(String, primary_key=True, default=_new_id)
    description = Column(Text, nullable=False)
    title = Column(Text, nullable=True)
    domain = Column(Text, nullable=True)
    keywords = Column(JSON, nullable=False, default=list)
    submitted_at = Column(DateTime, nullable=False, default=datetime.now)


class MatchRow(Base):
    __tablename__ = "matches"

    id = Column(String, primary_key=True, default=_new_id)
    problem_id = Column(String, ForeignKey("clinician_problems.id"), nullable=False, index=True)
    researcher_id = Column(String, ForeignKey("researchers.id"), nullable=False)
    score = Column(Float, nullable=False)
    rank = Column(Integer, nullable=False)


def _researcher(row: ResearcherRow) -> Researcher:
    return Researcher(
        id=row.id, name=row.name, email=row.email, institution=row.institution,
        keywords=list(row.keywords or []), description=row.description,
    )


def _problem(row: ClinicianProblemRow) -> ClinicianProblem:
    return ClinicianProblem(
        id=row.id, description=row.description, title=row.title, domain=row.domain,
        keywords=list(row.keywords or []), submitted_at=row.submitted_at,
    )


def _match(row: MatchRow) -> Match:
    return Match(
        id=row.id, problem_id=row.problem_id, researcher_id=row.researcher_id,
        score=row.score, rank=row.rank,
    )


class SqlStorage(Storage):
    """Relational store on any SQLAlchemy URL; tables are created on first use."""

    def __init__(self, database_url: str, seed: bool = False):
        url = make_url(database_url)
        connect_args = {}
        if url.get_backend_name() == "sqlite":
            # FastAPI runs sync handlers on a thread pool
            connect_args["check_same_thread"] = False
            if url.database and url.database != ":memory:":
                Path(url.database).parent.mkdir(parents=True, exist_ok=True)

        self.engine = create_engine(url, connect_args=connect_args)
        Base.metadata.create_all(self.engine)
        self._session = sessionmaker(bind=self.engine, expire_on_commit=False)
        if seed:
            self.seed()

    def create_researcher(self, data: ResearcherCreate) -> Researcher:
        with self._session() as session, session.begin():
            row = ResearcherRow(id=_new_id(), **data.model_dump())
            session.add(row)
        return _researcher(row)

    def get_all_researchers(self) -> List[Researcher]:
        with self._session() as session:
            return [_researcher(row) for row in session.query(ResearcherRow).order_by(ResearcherRow.seq).all()]

    def get_researcher_by_id(self, researcher_id: str) -> Optional[Researcher]:
        with self._session() as session:
            row = session.query(ResearcherRow).filter(ResearcherRow.id == researcher_id).first()
            return _researcher(row) if row is not None else None

    def create_clinician_problem(self, data: ClinicianProblemCreate) -> ClinicianProblem:
        with self._session() as session, session.begin():
            row = ClinicianProblemRow(id=_new_id(), submitted_at=datetime.now(), **data.model_dump())
            session.add(row)
        return _problem(row)

    def get_clinician_problem_by_id(self, problem_id: str) -> Optional[ClinicianProblem]:
        with self._session() as session:
            row = session.get(ClinicianProblemRow, problem_id)
            return _problem(row) if row is not None else None

    def create_matches(self, problem_id: str, matches: Iterable[MatchCreate]) -> List[Match]:
        with self._session() as session, session.begin():
            rows = [MatchRow(id=_new_id(), problem_id=problem_id, **m.model_dump()) for m in matches]
            session.add_all(rows)
        return [_match(row) for row in rows]

    def get_matches_by_problem_id(self, problem_id: str) -> List[MatchResult]:
        with self._session() as session:
            rows = (
                session.query(MatchRow)
                .filter(MatchRow.problem_id == problem_id)
                .order_by(MatchRow.rank)
                .all()
            )
            matches = [_match(row) for row in rows]
        return self._join(matches)


def build_storage(settings: Settings) -> Storage:
    """Instantiate the backend named by `settings.storage_backend`."""
    if settings.storage_backend == "sql":
        logger.info("Using SQL storage")
        return SqlStorage(settings.database_url, seed=settings.seed_researchers)
    logger.info("Using in-memory storage")
    return MemStorage(seed=settings.seed_researchers)
