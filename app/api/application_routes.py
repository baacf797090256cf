# app/api/application_routes.py
import logging

from fastapi import APIRouter, Depends
from sqlalchemy import select, desc
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from app.auth.deps import get_current_user
from app.core.errors import AlreadyExists, NotFound
from app.db.session import get_db
from app.models.application import AppliedJob
from app.models.job import Job
from app.models.user import User
from app.schemas.application import ApplicationOut, ApplicationUpdate, ApplyIn

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/applications", tags=["Applications"])

def _owned(db: Session, user_id: int, application_id: int) -> AppliedJob:
    row = db.get(AppliedJob, application_id)
    if row is None or row.user_id != user_id:
        raise NotFound("Application not found.")
    return row

@router.post("", response_model=ApplicationOut, status_code=201)
def apply_to_job(payload: ApplyIn, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    if db.get(Job, payload.job_id) is None:
        raise NotFound("Job not found.")
    row = AppliedJob(user_id=user.id, job_id=payload.job_id, status="applied", notes=payload.notes)
    db.add(row)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.info("duplicate application by user %s for job %s: %s", user.id, payload.job_id, exc.orig)
        raise AlreadyExists("You have already applied to this job.") from exc
    db.refresh(row)
    return row

@router.get("", response_model=list[ApplicationOut])
def list_applications(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return db.execute(
        select(AppliedJob)
        .options(joinedload(AppliedJob.job))
        .where(AppliedJob.user_id == user.id)
        .order_by(desc(AppliedJob.applied_at), desc(AppliedJob.id))
    ).scalars().all()

@router.patch("/{application_id}", response_model=ApplicationOut)
def update_application(
    application_id: int,
    payload: ApplicationUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    row = _owned(db, user.id, application_id)
    row.status = payload.status
    db.commit()
    db.refresh(row)
    return row

@router.delete("/{application_id}", status_code=204)
def remove_application(application_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    row = _owned(db, user.id, application_id)
    db.delete(row)
    db.commit()
