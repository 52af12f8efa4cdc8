"""Per-call TF-IDF model.

The model is built from an ordered list of documents and never changes after
construction. Term counting is delegated to scikit-learn's CountVectorizer,
fed with our own tokenizer output so that both the query and the candidates
are split identically.

    idf(t)       = ln((1 + n_docs) / (1 + df(t)))
    weight(t, d) = tf(t, d) * idf(t)

A term found in every document therefore weighs exactly 0, and a term found
nowhere has tf = 0 everywhere.
"""

from typing import Dict, List, Sequence

import numpy as np
from scipy import sparse
from sklearn.feature_extraction.text import CountVectorizer

from .tokenize import tokenize


def _pretokenized(tokens: List[str]) -> List[str]:
    return tokens


class TfidfModel:
    """Term statistics over one corpus (document 0 is conventionally the query)."""

    def __init__(self, documents: Sequence[str]):
        token_lists = [tokenize(doc) for doc in documents]
        self.n_documents = len(token_lists)

        if any(token_lists):
            vectorizer = CountVectorizer(analyzer=_pretokenized)
            counts = vectorizer.fit_transform(token_lists).tocsr()
            self.vocabulary: Dict[str, int] = dict(vectorizer.vocabulary_)
        else:
            # CountVectorizer refuses an empty vocabulary
            counts = sparse.csr_matrix((self.n_documents, 0), dtype=np.int64)
            self.vocabulary = {}

        df = np.asarray((counts > 0).sum(axis=0)).ravel()
        self.idf = np.log((1.0 + self.n_documents) / (1.0 + df))
        self.counts = counts
        if self.vocabulary:
            self.weights = (counts @ sparse.diags(self.idf, format="csr")).tocsr()
        else:
            self.weights = counts.astype(float)

    def term_frequency(self, term: str, doc_index: int) -> int:
        col = self.vocabulary.get(term)
        if col is None:
            return 0
        return int(self.counts[doc_index, col])

    def document_frequency(self, term: str) -> int:
        col = self.vocabulary.get(term)
        if col is None:
            return 0
        return int(self.counts[:, col].count_nonzero())

    def inverse_document_frequency(self, term: str) -> float:
        return float(np.log((1.0 + self.n_documents) / (1.0 + self.document_frequency(term))))

    def weight(self, term: str, doc_index: int) -> float:
        """TF-IDF weight of `term` inside document `doc_index`."""
        col = self.vocabulary.get(term)
        if col is None:
            return 0.0
        return float(self.weights[doc_index, col])

    def overlap_scores(self, query_index: int = 0) -> np.ndarray:
        """Sum of weights of every query token occurrence, for every document.

        Equivalent to ``sum(self.weight(t, d) for t in tokens(query))`` per
        document ``d``: each vocabulary column is weighted by how often the
        query repeats that term.
        """
        if not self.vocabulary:
            return np.zeros(self.n_documents)
        query_counts = self.counts[query_index].T
        return np.asarray((self.weights @ query_counts).todense(), dtype=float).ravel()
