"""Keyword-overlap stand-in for semantic scoring.

Used when no CV embedding or vector store is available.
"""

from collections.abc import Sequence

from models.schemas.semantic import JobText, SemanticScore


def _tokenize(text: str) -> set[str]:
    return {w for w in text.lower().split() if len(w) > 2}


def mock_semantic_scores(jobs: Sequence[JobText], query: str | None) -> list[SemanticScore]:
    """Score each job by the fraction of query words found in its description.

    Returns one score per job in input order. Scores are 0 for an empty
    query, a query with no words longer than 2 characters, or an empty
    description.
    """
    query_words = _tokenize(query) if query else set()
    if not query_words:
        return [SemanticScore(id=job.id, semantic_score=0.0) for job in jobs]

    results: list[SemanticScore] = []
    for job in jobs:
        if not job.description:
            results.append(SemanticScore(id=job.id, semantic_score=0.0))
            continue

        overlap = len(query_words & _tokenize(job.description))
        results.append(SemanticScore(id=job.id, semantic_score=overlap / len(query_words)))
    return results
