import math

import pytest

from relevance.tfidf import TfidfModel
from relevance.tokenize import tokenize


class TestTermStatistics:
    """Counts and document frequencies."""

    @pytest.fixture
    def model(self):
        return TfidfModel(["a b a", "b c", "c"])

    def test_term_frequency(self, model):
        assert model.term_frequency("a", 0) == 2
        assert model.term_frequency("a", 1) == 0
        assert model.term_frequency("zzz", 0) == 0

    def test_document_frequency(self, model):
        assert model.document_frequency("a") == 1
        assert model.document_frequency("b") == 2
        assert model.document_frequency("zzz") == 0

    def test_weight_is_tf_times_idf(self, model):
        assert model.inverse_document_frequency("a") == pytest.approx(math.log(4 / 2))
        assert model.weight("a", 0) == pytest.approx(2 * math.log(2))
        assert model.weight("b", 1) == pytest.approx(math.log(4 / 3))

    def test_idf_decreases_with_document_frequency(self, model):
        assert model.inverse_document_frequency("a") > model.inverse_document_frequency("b")


def test_term_in_every_document_weighs_zero():
    model = TfidfModel(["x y", "x", "x z"])
    assert model.weight("x", 0) == 0.0
    assert model.weight("y", 0) > 0.0


def test_unknown_term_weighs_zero():
    model = TfidfModel(["cardiology", "oncology"])
    assert model.weight("neurology", 1) == 0.0


def test_corpus_without_tokens_builds_empty_model():
    model = TfidfModel(["", "   ", "..."])
    assert model.vocabulary == {}
    assert list(model.overlap_scores(0)) == [0.0, 0.0, 0.0]


def test_overlap_scores_match_per_token_sum():
    docs = ["heart heart failure", "heart failure clinic", "failure analysis", "oncology"]
    model = TfidfModel(docs)
    scores = model.overlap_scores(query_index=0)
    for d in range(len(docs)):
        expected = sum(model.weight(t, d) for t in tokenize(docs[0]))
        assert scores[d] == pytest.approx(expected)
