# relevance/score.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List, Sequence
import logging

from .errors import InvalidArgument
from .tfidf import TfidfModel
from .tokenize import candidate_document, field, query_document, tokenize

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 5
# Score given to every candidate when the ranking carries no signal
NEUTRAL_SCORE = 0.5


@dataclass(frozen=True)
class MatchScore:
    researcher_id: Any
    score: float


def check_top_n(top_n: Any) -> int:
    if isinstance(top_n, bool) or not isinstance(top_n, int) or top_n <= 0:
        raise InvalidArgument(f"top_n must be a positive integer, got {top_n!r}")
    return top_n


def _candidate_id(researcher: Any) -> Any:
    rid = field(researcher, "id")
    if rid is None:
        raise InvalidArgument("candidate record is missing an id")
    return rid


def match_problem_to_researchers(
    problem: Any,
    researchers: Sequence[Any],
    top_n: int = DEFAULT_TOP_N,
) -> List[MatchScore]:
    """
    Rank `researchers` by TF-IDF relevance to `problem`.

    The corpus is [problem] + researchers in input order, rebuilt on every call.
    A researcher's raw score is the sum, over every token of the problem text,
    of that token's TF-IDF weight in the researcher's document. Raw scores are
    divided by the best one so the top researcher scores exactly 1.0.

    Fallbacks (not errors):
      no researchers               -> []
      problem text has no tokens   -> first top_n researchers, NEUTRAL_SCORE each
      no researcher shares a term  -> every researcher gets NEUTRAL_SCORE

    Ties keep input order. Raises InvalidArgument for malformed records or a
    non-positive top_n.
    """
    top_n = check_top_n(top_n)
    problem_text = query_document(problem)
    ids = [_candidate_id(r) for r in researchers]
    candidate_texts = [candidate_document(r) for r in researchers]

    if not ids:
        return []

    if not tokenize(problem_text):
        logger.debug("Problem text has no terms; returning %d researchers in input order", min(top_n, len(ids)))
        return [MatchScore(researcher_id=rid, score=NEUTRAL_SCORE) for rid in ids[:top_n]]

    model = TfidfModel([problem_text] + candidate_texts)
    raw_scores = model.overlap_scores(query_index=0)[1:]

    max_score = float(raw_scores.max())
    if max_score > 0:
        scores = [min(1.0, float(raw) / max_score) for raw in raw_scores]
    else:
        logger.debug("No researcher shares a term with the problem; using neutral scores")
        scores = [NEUTRAL_SCORE] * len(ids)

    # sorted() is stable, so equal scores keep input order
    order = sorted(range(len(ids)), key=lambda i: -scores[i])
    return [MatchScore(researcher_id=ids[i], score=scores[i]) for i in order[:top_n]]
