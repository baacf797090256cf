# app/schemas/roadmap.py
from datetime import datetime
from typing import Any
from pydantic import BaseModel, Field

class StartPathIn(BaseModel):
    career_id: str
    career_name: str
    missing_skills: list[str] = Field(default_factory=list)
    matched_skills: list[str] = Field(default_factory=list)

class StepUpdate(BaseModel):
    completed: bool

class SavedPathOut(BaseModel):
    id: int
    user_id: int
    career_id: str
    career_name: str
    status: str
    roadmap: list[dict[str, Any]]
    progress_percentage: int
    started_at: datetime | None
    updated_at: datetime | None

    class Config:
        from_attributes = True

class StartPathOut(BaseModel):
    success: bool = True
    roadmap: list[dict[str, Any]]
    saved_path: SavedPathOut
