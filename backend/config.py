import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    gemini_api_key: str = ""
    generation_model: str = "gemini-2.5-flash"
    embedding_model: str = "gemini-embedding-001"
    embedding_dimensions: int = 1536

    # Vector store (Qdrant). Empty URL disables vector scoring.
    qdrant_url: str = ""
    qdrant_api_key: str = ""
    qdrant_collection: str = "cv-embeddings"

    # Ranking
    semantic_weight: float = 0.3  # 0 = keyword only, 1 = semantic only
    semantic_concurrency: int = 5  # max in-flight embedding calls per batch

    max_upload_size_mb: int = 5
    rate_limit: str = "30/minute"
    rate_limit_enabled: bool = True
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
