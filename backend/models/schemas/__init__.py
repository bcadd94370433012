"""Pydantic contracts shared between the scoring services and the API."""

from models.schemas.generated import CoverLetter, InterviewQuestion, TailoredCV, TailoredExperience
from models.schemas.parsed_cv import ParsedCV
from models.schemas.semantic import JobText, SemanticScore, VectorMatch
from models.schemas.skills_comparison import GapAnalysis, SkillComparison

__all__ = [
    "CoverLetter",
    "GapAnalysis",
    "InterviewQuestion",
    "JobText",
    "ParsedCV",
    "SemanticScore",
    "SkillComparison",
    "TailoredCV",
    "TailoredExperience",
    "VectorMatch",
]
