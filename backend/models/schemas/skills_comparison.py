"""Skill comparison output and the optional gap analysis attached to a job match."""

from pydantic import BaseModel


class SkillComparison(BaseModel):
    """Required skills bucketed against a candidate's skills.

    Every required skill appears in exactly one of matched/partial/missing,
    in the order it was given.
    """
    matched: list[str] = []
    partial: list[str] = []  # substring-only hits, half credit
    missing: list[str] = []
    match_percentage: int = 0  # 0-100
    total: int = 0


class GapAnalysis(BaseModel):
    """Skill breakdown stored alongside a job match (may be absent)."""
    required_skills: list[str] | None = None
    nice_to_have_skills: list[str] | None = None
    matched_skills: list[str] | None = None
    missing_skills: list[str] | None = None
