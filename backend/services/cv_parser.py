"""LLM-backed CV parsing and the text used to embed a parsed CV."""

import logging

from pydantic import ValidationError

from models.schemas.parsed_cv import ParsedCV
from services import gemini_client, prompt_builder

logger = logging.getLogger(__name__)

# Keeps the prompt well inside the model's context window
MAX_CV_CHARS = 30000


async def parse_cv(text: str) -> ParsedCV | None:
    """Extract structured data from raw CV text. None if Gemini is unavailable."""
    if not text.strip():
        return None

    data = await gemini_client.generate_json(
        prompt_builder.build_cv_parse_prompt(text[:MAX_CV_CHARS])
    )
    if data is None:
        return None

    try:
        return ParsedCV(
            skills=[str(s) for s in data.get("skills") or [] if s],
            experience=data.get("experience") or [],
            education=data.get("education") or [],
            summary=data.get("summary") or "",
        )
    except ValidationError as e:
        logger.error("Gemini CV parse had unexpected shape: %s", e)
        return None


def build_embedding_text(parsed_cv: ParsedCV) -> str:
    """Flatten a parsed CV into the text that gets embedded."""
    parts: list[str] = []
    if parsed_cv.summary:
        parts.append(parsed_cv.summary)
    if parsed_cv.skills:
        parts.append(f"Skills: {', '.join(parsed_cv.skills)}")
    if parsed_cv.experience:
        parts.append(". ".join(f"{e.role}: {e.description}" for e in parsed_cv.experience))
    return "\n".join(parts)
