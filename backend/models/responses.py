from typing import Literal

from pydantic import BaseModel

from models.schemas.generated import CoverLetter, InterviewQuestion, TailoredCV


class SkillExtractResponse(BaseModel):
    skills: list[str] = []


class CVEmbedResponse(BaseModel):
    success: bool = True
    cv_id: str
    embedding_dimensions: int = 0


class RankedMatch(BaseModel):
    id: str
    keyword_score: float = 0.0
    semantic_score: float = 0.0  # 0.0-1.0
    blended_score: float = 0.0


class SemanticRankResponse(BaseModel):
    # vector: stored CV embedding, mock: query keyword overlap, unchanged: no scoring
    method: Literal["vector", "mock", "unchanged"] = "unchanged"
    updated: int = 0
    matches: list[RankedMatch] = []


# degraded: the LLM was unavailable and canned content was returned instead
class CoverLetterResponse(BaseModel):
    cover_letter: CoverLetter
    degraded: bool = False


class TailoredCVResponse(BaseModel):
    tailored_cv: TailoredCV
    degraded: bool = False


class InterviewQuestionsResponse(BaseModel):
    questions: list[InterviewQuestion] = []
    degraded: bool = False
