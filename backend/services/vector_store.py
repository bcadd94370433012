"""Qdrant storage for CV embeddings, namespaced per user.

Each point carries its namespace ("cv-<user_id>") in the payload, and its id
is derived from namespace + CV id so the same CV id under two users never
collides.
"""

import logging
import uuid
from datetime import datetime, timezone

from qdrant_client import AsyncQdrantClient
from qdrant_client.http import models as qm

from config import settings
from models.schemas.semantic import VectorMatch

logger = logging.getLogger(__name__)

_client: AsyncQdrantClient | None = None


class VectorStoreNotConfiguredError(RuntimeError):
    """Raised when QDRANT_URL or the collection name is missing."""


def get_client() -> AsyncQdrantClient:
    global _client
    if not settings.qdrant_url:
        raise VectorStoreNotConfiguredError("QDRANT_URL is not set")
    if _client is None:
        _client = AsyncQdrantClient(
            url=settings.qdrant_url,
            api_key=settings.qdrant_api_key or None,
        )
    return _client


def reset_client() -> None:
    global _client
    _client = None


def get_collection_name() -> str:
    if not settings.qdrant_collection:
        raise VectorStoreNotConfiguredError("QDRANT_COLLECTION is not set")
    return settings.qdrant_collection


def cv_namespace(user_id: str) -> str:
    return f"cv-{user_id}"


def point_id(user_id: str, cv_id: str) -> str:
    return str(uuid.uuid5(uuid.NAMESPACE_URL, f"{cv_namespace(user_id)}/{cv_id}"))


async def ensure_collection() -> None:
    """Create the embeddings collection if it does not exist yet."""
    client = get_client()
    name = get_collection_name()
    if await client.collection_exists(name):
        return
    logger.info("Creating Qdrant collection %s (%d dims)", name, settings.embedding_dimensions)
    await client.create_collection(
        collection_name=name,
        vectors_config=qm.VectorParams(
            size=settings.embedding_dimensions,
            distance=qm.Distance.COSINE,
        ),
    )


async def upsert_cv_embedding(user_id: str, cv_id: str, embedding: list[float]) -> None:
    """Store (or replace) the embedding of a CV."""
    await ensure_collection()
    await get_client().upsert(
        collection_name=get_collection_name(),
        points=[
            qm.PointStruct(
                id=point_id(user_id, cv_id),
                vector=embedding,
                payload={
                    "namespace": cv_namespace(user_id),
                    "user_id": user_id,
                    "cv_id": cv_id,
                    "created_at": datetime.now(timezone.utc).isoformat(),
                },
            )
        ],
    )


async def fetch_cv_embedding(user_id: str, cv_id: str) -> list[float] | None:
    """Return the stored vector for a CV, or None if there is none."""
    records = await get_client().retrieve(
        collection_name=get_collection_name(),
        ids=[point_id(user_id, cv_id)],
        with_vectors=True,
        with_payload=False,
    )
    if not records:
        return None

    vector = records[0].vector
    # Named-vector collections return a dict; this store only writes plain vectors
    if not vector or not isinstance(vector, list):
        return None
    return [float(v) for v in vector]


async def query_similar(
    embedding: list[float],
    top_k: int = 5,
    user_id: str | None = None,
) -> list[VectorMatch]:
    """Nearest stored CVs to an embedding, optionally within one user's namespace."""
    query_filter = None
    if user_id:
        query_filter = qm.Filter(
            must=[
                qm.FieldCondition(
                    key="namespace",
                    match=qm.MatchValue(value=cv_namespace(user_id)),
                )
            ]
        )

    response = await get_client().query_points(
        collection_name=get_collection_name(),
        query=embedding,
        limit=top_k,
        query_filter=query_filter,
        with_payload=True,
    )
    return [
        VectorMatch(
            id=str((point.payload or {}).get("cv_id", point.id)),
            score=point.score or 0.0,
        )
        for point in response.points
    ]


async def delete_cv_embedding(user_id: str, cv_id: str) -> None:
    await get_client().delete(
        collection_name=get_collection_name(),
        points_selector=qm.PointIdsList(points=[point_id(user_id, cv_id)]),
    )
