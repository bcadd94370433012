from pydantic import BaseModel, Field, field_validator

from models.schemas.parsed_cv import ParsedCV
from models.schemas.skills_comparison import GapAnalysis


class SkillCompareRequest(BaseModel):
    cv_skills: list[str] = Field(default_factory=list, description="Skills listed on the CV")
    required_skills: list[str] | None = Field(
        None, description="Job's required skills; derived from gap_analysis/description when omitted"
    )
    gap_analysis: GapAnalysis | None = None
    description: str | None = Field(None, max_length=20000, description="Job description text")


class SkillExtractRequest(BaseModel):
    description: str | None = Field(None, max_length=20000)


class CVEmbedRequest(BaseModel):
    user_id: str = Field(..., min_length=1)
    cv_id: str = Field(..., min_length=1)
    parsed_cv: ParsedCV


class JobMatchInput(BaseModel):
    id: str
    description: str | None = ""
    match_score: float | None = 0.0  # keyword score, 0-100

    # Stored matches often carry nulls for jobs that were never described or scored
    @field_validator("description", mode="before")
    @classmethod
    def _null_description(cls, value):
        return "" if value is None else value

    @field_validator("match_score", mode="before")
    @classmethod
    def _null_match_score(cls, value):
        return 0.0 if value is None else value


class SemanticRankRequest(BaseModel):
    user_id: str = Field(..., min_length=1)
    cv_id: str | None = None
    query: str | None = Field(None, max_length=1000)
    matches: list[JobMatchInput] = Field(default_factory=list, max_length=500)


class JobInfo(BaseModel):
    title: str | None = Field(None, max_length=300)
    company: str | None = Field(None, max_length=300)
    description: str | None = Field(None, max_length=20000)
    required_skills: list[str] = Field(default_factory=list)


class CoverLetterRequest(BaseModel):
    job: JobInfo
    parsed_cv: ParsedCV | None = None
    tone: str = Field("professional", max_length=50)


class TailoredCVRequest(BaseModel):
    job: JobInfo
    parsed_cv: ParsedCV | None = None


class InterviewQuestionsRequest(BaseModel):
    job: JobInfo
