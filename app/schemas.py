# app/schemas.py
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

class ResearcherCreate(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    institution: Optional[str] = None
    keywords: List[str] = Field(default_factory=list, description="Areas of expertise")
    description: str

class Researcher(ResearcherCreate):
    id: str

class ClinicianProblemCreate(BaseModel):
    description: str = Field(..., description="Free-text description of the clinical problem")
    title: Optional[str] = None
    domain: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)

class ClinicianProblem(ClinicianProblemCreate):
    id: str
    submitted_at: datetime

class MatchCreate(BaseModel):
    researcher_id: str
    score: float = Field(..., ge=0.0, le=1.0)
    rank: int = Field(..., ge=1)      # 1-based position in the ranked list

class Match(MatchCreate):
    id: str
    problem_id: str

class MatchResult(BaseModel):
    researcher: Researcher
    score: float
    rank: int

class ProblemWithMatches(BaseModel):
    problem: ClinicianProblem
    matches: List[MatchResult]
