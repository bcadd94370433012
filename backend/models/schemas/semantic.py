"""Inputs and outputs of the semantic scorers."""

from pydantic import BaseModel


class JobText(BaseModel):
    """The part of a job posting the semantic scorers look at."""
    id: str
    description: str = ""


class SemanticScore(BaseModel):
    id: str
    semantic_score: float = 0.0  # 0.0-1.0


class VectorMatch(BaseModel):
    """A nearest-neighbour hit from the vector store."""
    id: str
    score: float = 0.0
