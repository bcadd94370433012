"""Structured CV data extracted by the LLM parser."""

from pydantic import BaseModel


class Experience(BaseModel):
    """A single work experience entry."""
    role: str = ""
    company: str = ""
    duration: str = ""
    description: str = ""


class Education(BaseModel):
    degree: str = ""
    institution: str = ""
    year: str = ""


class ParsedCV(BaseModel):
    skills: list[str] = []
    experience: list[Experience] = []
    education: list[Education] = []
    summary: str = ""
