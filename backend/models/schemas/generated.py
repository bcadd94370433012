"""LLM-generated application material: cover letters, tailored CVs, interview prep."""

from typing import Literal

from pydantic import BaseModel


class CoverLetter(BaseModel):
    subject: str = ""
    body: str = ""
    tone: str = "professional"


class TailoredExperience(BaseModel):
    role: str = ""
    company: str = ""
    duration: str = ""
    highlights: list[str] = []


class TailoredCV(BaseModel):
    """A CV rewritten to emphasise what a specific job asks for."""
    summary: str = ""
    skills: list[str] = []
    experience: list[TailoredExperience] = []
    ats_score: int = 75  # estimated ATS compatibility, 0-100


QuestionType = Literal["behavioral", "technical", "situational", "role-specific", "cultural-fit"]


class InterviewQuestion(BaseModel):
    question: str
    type: QuestionType = "behavioral"
    guidance: str = ""
    tip: str = ""
