# app/service.py
from __future__ import annotations
from typing import Optional
import logging

from relevance.score import DEFAULT_TOP_N, check_top_n, match_problem_to_researchers

from .schemas import ClinicianProblemCreate, MatchCreate, ProblemWithMatches
from .storage import Storage

logger = logging.getLogger(__name__)


def submit_problem(storage: Storage, data: ClinicianProblemCreate, top_n: int = DEFAULT_TOP_N) -> ProblemWithMatches:
    """Store a clinician problem, rank the researcher pool against it and persist the ranking."""
    top_n = check_top_n(top_n)
    problem = storage.create_clinician_problem(data)
    researchers = storage.get_all_researchers()
    logger.info("Problem %s submitted; scoring %d researchers", problem.id, len(researchers))

    if not researchers:
        return ProblemWithMatches(problem=problem, matches=[])

    scores = match_problem_to_researchers(problem, researchers, top_n)
    storage.create_matches(
        problem.id,
        [MatchCreate(researcher_id=s.researcher_id, score=s.score, rank=i + 1) for i, s in enumerate(scores)],
    )
    matches = storage.get_matches_by_problem_id(problem.id)
    logger.info("Problem %s matched to %d researchers", problem.id, len(matches))
    return ProblemWithMatches(problem=problem, matches=matches)


def get_problem_with_matches(storage: Storage, problem_id: str) -> Optional[ProblemWithMatches]:
    problem = storage.get_clinician_problem_by_id(problem_id)
    if problem is None:
        return None
    return ProblemWithMatches(problem=problem, matches=storage.get_matches_by_problem_id(problem_id))
