# app/api/job_routes.py
from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.seed import seed_jobs
from app.db.session import get_db
from app.models.job import Job
from app.nlp.embeddings import Embedder, get_job_embedder
from app.schemas.match import JobOut

router = APIRouter(prefix="/jobs", tags=["jobs"])

@router.post("/seed", summary="Seed the job catalog (no-op when jobs exist)")
def seed(db: Session = Depends(get_db), embedder: Embedder = Depends(get_job_embedder)):
    return seed_jobs(db, embedder)

@router.get("", response_model=list[JobOut], summary="List catalog jobs")
def list_jobs(db: Session = Depends(get_db)):
    return db.execute(select(Job).order_by(Job.id)).scalars().all()
