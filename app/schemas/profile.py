# app/schemas/profile.py
from datetime import datetime
from pydantic import BaseModel, Field

class ProfileIn(BaseModel):
    resume_text: str
    skills: list[str]
    interests: list[str]
    experience: str | None = None
    career_goals: list[str] = Field(default_factory=list)
    work_environment: str | None = None
    salary_range: str | None = None
    name: str | None = None
    email: str | None = None
    linkedin_url: str | None = None

class ProfileOut(BaseModel):
    user_id: int
    name: str | None
    parsed_skills: list[str]
    interests: list[str]
    career_goals: list[str]
    parsed_experience: str | None
    embedding_updated_at: datetime | None

    class Config:
        from_attributes = True
