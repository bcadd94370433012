"""Embedding-based similarity between a CV and job descriptions.

Every function that touches the embedding provider or the vector store
degrades to None/0 on failure instead of raising, so a missing backend only
lowers ranking quality.
"""

import asyncio
import logging
from collections.abc import Sequence

import numpy as np

from config import settings
from models.schemas.semantic import JobText, SemanticScore
from services import gemini_client, vector_store

logger = logging.getLogger(__name__)


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine similarity of two vectors.

    Returns 0.0 for empty, zero-magnitude or mismatched-length vectors.
    """
    vec_a = np.asarray(a, dtype=np.float64)
    vec_b = np.asarray(b, dtype=np.float64)
    if vec_a.size == 0 or vec_b.size == 0 or vec_a.shape != vec_b.shape:
        return 0.0

    magnitude = float(np.linalg.norm(vec_a) * np.linalg.norm(vec_b))
    if magnitude == 0.0:
        return 0.0
    return float(np.dot(vec_a, vec_b) / magnitude)


async def embed_search_query(query: str) -> list[float] | None:
    """Embed a search query. None means semantic scoring is unavailable."""
    try:
        return await gemini_client.generate_embedding(query)
    except Exception as e:
        logger.warning("Query embedding failed: %s", e)
        return None


async def get_cv_embedding(user_id: str, cv_id: str) -> list[float] | None:
    """Fetch a stored CV embedding; None if missing or the store is unavailable."""
    try:
        return await vector_store.fetch_cv_embedding(user_id, cv_id)
    except Exception as e:
        logger.warning("Could not fetch embedding for CV %s: %s", cv_id, e)
        return None


async def compute_semantic_scores(
    cv_embedding: Sequence[float],
    jobs: Sequence[JobText],
    concurrency: int | None = None,
) -> list[SemanticScore]:
    """Score each job description against the CV embedding.

    Jobs without a description score 0 and are never sent to the provider.
    A failed embedding scores 0 for that job only. Output order matches
    input order.
    """
    semaphore = asyncio.Semaphore(max(1, concurrency or settings.semantic_concurrency))

    async def _score(job: JobText) -> SemanticScore:
        if not job.description:
            return SemanticScore(id=job.id, semantic_score=0.0)
        async with semaphore:
            try:
                job_embedding = await gemini_client.generate_embedding(job.description)
            except Exception as e:
                logger.warning("Embedding failed for job %s: %s", job.id, e)
                return SemanticScore(id=job.id, semantic_score=0.0)
        return SemanticScore(
            id=job.id,
            semantic_score=cosine_similarity(cv_embedding, job_embedding),
        )

    return list(await asyncio.gather(*(_score(job) for job in jobs)))


def blend_scores(keyword_score: float, semantic_score: float, weight: float) -> float:
    """Linear blend: weight=0 is pure keyword, weight=1 is pure semantic.

    weight is not clamped.
    """
    return (1 - weight) * keyword_score + weight * semantic_score
