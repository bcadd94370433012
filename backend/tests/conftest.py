"""Shared test configuration and fixtures."""

import pytest

from config import settings
from services import gemini_client, vector_store


@pytest.fixture(autouse=True)
def _offline_backends(monkeypatch):
    """Start every test with no provider keys and no cached clients."""
    monkeypatch.setattr(settings, "gemini_api_key", "")
    monkeypatch.setattr(settings, "qdrant_url", "")
    monkeypatch.setattr(settings, "qdrant_collection", "cv-embeddings")
    gemini_client.reset_client()
    vector_store.reset_client()
    yield
    gemini_client.reset_client()
    vector_store.reset_client()
