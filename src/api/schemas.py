"""Response models for the HTTP surface."""
from typing import Dict, Optional

from pydantic import BaseModel


class AnalysisResponse(BaseModel):
    scores: Dict[str, int]
    overallFeedback: str
    observation: str


class ErrorResponse(BaseModel):
    error: str


class ParameterResponse(BaseModel):
    key: str
    name: str
    weight: int
    description: str
    inputType: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
