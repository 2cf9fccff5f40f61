"""TF-IDF vector-space comparison of a small document set.

Weights follow the classic scheme: raw term count times a dampened inverse
document frequency ``1 + ln(N / (1 + df))``, which stays positive for every
term of the corpus. Each document contributes its top-K weighted terms to a
shared vocabulary, bounding vector size regardless of input length.
"""

import numpy as np
from scipy import sparse
from sklearn.feature_extraction.text import CountVectorizer

from originality.similarity.models import Document, SimilarityPair, SimilarityResult

DEFAULT_TOP_TERMS = 800


def cosine_similarity(u: np.ndarray, v: np.ndarray) -> float:
    """Cosine of the angle between two vectors; 0 when either is all zeros."""
    norm_u = float(np.linalg.norm(u))
    norm_v = float(np.linalg.norm(v))
    if norm_u == 0.0 or norm_v == 0.0:
        return 0.0
    return min(1.0, float(np.dot(u, v)) / (norm_u * norm_v))


def tfidf_matrix(texts: list[str]) -> sparse.csr_matrix:
    """Return a documents x terms matrix of TF-IDF weights."""
    vectorizer = CountVectorizer(lowercase=True, stop_words="english")
    try:
        counts = vectorizer.fit_transform(texts).astype(np.float64)
    except ValueError:
        # Nothing but stop words or punctuation.
        return sparse.csr_matrix((len(texts), 0), dtype=np.float64)
    n_docs = counts.shape[0]
    doc_freq = np.asarray((counts > 0).sum(axis=0)).ravel()
    idf = 1.0 + np.log(n_docs / (1.0 + doc_freq))
    return sparse.csr_matrix(counts.multiply(idf))


def top_term_indices(weights: sparse.csr_matrix, top_terms: int) -> np.ndarray:
    """Union of every row's ``top_terms`` highest-weighted column indices."""
    vocabulary: set[int] = set()
    for i in range(weights.shape[0]):
        row = weights.getrow(i)
        indices, values = row.indices, row.data
        if len(values) > top_terms:
            keep = np.argsort(-values, kind="stable")[:top_terms]
            indices = indices[keep]
        vocabulary.update(int(idx) for idx in indices)
    return np.array(sorted(vocabulary), dtype=np.int64)


def compute_similarities(
    docs: list[Document],
    top_terms: int = DEFAULT_TOP_TERMS,
) -> SimilarityResult:
    """Score every pair of non-empty documents by TF-IDF cosine similarity.

    Documents with empty text are returned in ``docs`` but never paired.
    Fewer than two comparable documents yields no pairs.
    """
    comparable = [doc for doc in docs if doc.text]
    if len(comparable) < 2:
        return SimilarityResult(docs=docs, pairs=[])

    weights = tfidf_matrix([doc.text for doc in comparable])
    vocabulary = top_term_indices(weights, top_terms)
    vectors = weights[:, vocabulary].toarray()

    pairs: list[SimilarityPair] = []
    for i in range(len(comparable)):
        for j in range(i + 1, len(comparable)):
            score = cosine_similarity(vectors[i], vectors[j])
            pairs.append(
                SimilarityPair(
                    a_id=comparable[i].id,
                    b_id=comparable[j].id,
                    score=round(score, 4),
                )
            )
    pairs.sort(key=lambda pair: pair.score, reverse=True)
    return SimilarityResult(docs=docs, pairs=pairs)
