from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from config import settings
from services import gemini_client
from services.gemini_client import GeminiUnavailableError


def _client_with(generate=None, embed=None):
    client = MagicMock()
    client.aio.models.generate_content = generate or AsyncMock()
    client.aio.models.embed_content = embed or AsyncMock()
    return client


def test_no_key_means_no_client():
    assert gemini_client.get_client() is None


def test_client_is_cached(monkeypatch):
    monkeypatch.setattr(settings, "gemini_api_key", "test-key")
    with patch.object(gemini_client.genai, "Client") as cls:
        first = gemini_client.get_client()
        second = gemini_client.get_client()
    assert first is second
    cls.assert_called_once_with(api_key="test-key")


@pytest.mark.asyncio
async def test_generate_embedding_requires_key():
    with pytest.raises(GeminiUnavailableError):
        await gemini_client.generate_embedding("python developer")


@pytest.mark.asyncio
async def test_generate_embedding_returns_values():
    embed = AsyncMock(return_value=SimpleNamespace(
        embeddings=[SimpleNamespace(values=[0.1, 0.2, 0.3])]
    ))
    with patch.object(gemini_client, "get_client", return_value=_client_with(embed=embed)):
        result = await gemini_client.generate_embedding("python developer")

    assert result == [0.1, 0.2, 0.3]
    kwargs = embed.await_args.kwargs
    assert kwargs["model"] == settings.embedding_model
    assert kwargs["contents"] == "python developer"
    assert kwargs["config"].output_dimensionality == settings.embedding_dimensions


@pytest.mark.asyncio
async def test_generate_embedding_empty_response():
    embed = AsyncMock(return_value=SimpleNamespace(embeddings=[]))
    with patch.object(gemini_client, "get_client", return_value=_client_with(embed=embed)):
        with pytest.raises(ValueError):
            await gemini_client.generate_embedding("python developer")


@pytest.mark.asyncio
async def test_generate_json_without_key():
    assert await gemini_client.generate_json("prompt") is None


@pytest.mark.asyncio
async def test_generate_json_strips_code_fences():
    generate = AsyncMock(return_value=SimpleNamespace(text='```json\n{"skills": ["Python"]}\n```'))
    with patch.object(gemini_client, "get_client", return_value=_client_with(generate=generate)):
        assert await gemini_client.generate_json("prompt") == {"skills": ["Python"]}


@pytest.mark.asyncio
async def test_generate_json_invalid_json():
    generate = AsyncMock(return_value=SimpleNamespace(text="not json"))
    with patch.object(gemini_client, "get_client", return_value=_client_with(generate=generate)):
        assert await gemini_client.generate_json("prompt") is None


@pytest.mark.asyncio
async def test_generate_json_api_error():
    generate = AsyncMock(side_effect=RuntimeError("quota exceeded"))
    with patch.object(gemini_client, "get_client", return_value=_client_with(generate=generate)):
        assert await gemini_client.generate_json("prompt") is None
