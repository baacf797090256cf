# app/schemas/match.py
from pydantic import BaseModel, Field

from app.matching.explain import Explanation
from app.models.match import JobMatch

class JobOut(BaseModel):
    id: int
    external_id: str | None = None
    title: str
    company: str | None = None
    location: str | None = None
    job_type: str | None = None
    salary: str | None = None
    description: str | None = None
    required_skills: list[str] = Field(default_factory=list)
    experience_level: str | None = None
    source_url: str | None = None

    class Config:
        from_attributes = True

class MatchOut(BaseModel):
    job_id: int
    job: JobOut
    skills_score: float
    experience_score: float
    interests_score: float
    weighted_score: float
    matched_skills: list[str] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)
    strength_areas: list[str] = Field(default_factory=list)
    improvement_areas: list[str] = Field(default_factory=list)

    @classmethod
    def from_row(cls, row: JobMatch) -> "MatchOut":
        exp = Explanation.from_dict(row.match_explanation)
        return cls(
            job_id=row.job_id,
            job=JobOut.model_validate(row.job),
            skills_score=row.skills_score,
            experience_score=row.experience_score,
            interests_score=row.interests_score,
            weighted_score=row.weighted_score,
            matched_skills=exp.matched_skills,
            missing_skills=exp.missing_skills,
            strength_areas=exp.strength_areas,
            improvement_areas=exp.improvement_areas,
        )

class RefreshOut(BaseModel):
    success: bool = True
    match_count: int
    matches: list[MatchOut]
    message: str | None = None

class FilterOptions(BaseModel):
    job_types: list[str]
    locations: list[str]
    experience_levels: list[str]
