# app/schemas/application.py
from datetime import datetime
from typing import Literal
from pydantic import BaseModel

ApplicationStatus = Literal["applied", "interviewing", "offered", "rejected", "withdrawn"]

class ApplyIn(BaseModel):
    job_id: int
    notes: str | None = None

class ApplicationUpdate(BaseModel):
    status: ApplicationStatus

class JobBrief(BaseModel):
    id: int
    title: str
    company: str | None
    location: str | None

    class Config:
        from_attributes = True

class ApplicationOut(BaseModel):
    id: int
    job_id: int
    status: str
    notes: str | None
    applied_at: datetime | None
    updated_at: datetime | None
    job: JobBrief | None = None

    class Config:
        from_attributes = True
