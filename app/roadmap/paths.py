# app/roadmap/paths.py
import logging

from sqlalchemy import desc, func, select
from sqlalchemy.orm import Session

from app.core.errors import NotFound
from app.db.upsert import upsert
from app.models.path import SavedPath
from app.models.profile import UserProfile
from app.roadmap.personalizers import RoadmapContext, RoadmapPersonalizer, normalize_steps
from app.roadmap.templates import select_template

logger = logging.getLogger(__name__)

def progress(roadmap: list[dict]) -> tuple[int, str]:
    """Return (percentage, status); status is "completed" exactly at 100."""
    if not roadmap:
        return 0, "active"
    done = sum(1 for s in roadmap if s.get("completed"))
    pct = round(done / len(roadmap) * 100)
    return pct, "completed" if pct == 100 else "active"

def start_path(db: Session, user_id: int, career_id: str, career_name: str,
               personalizer: RoadmapPersonalizer,
               missing_skills: list[str] | None = None,
               matched_skills: list[str] | None = None) -> SavedPath:
    logger.info("generating roadmap for user %s, career: %s", user_id, career_name)
    profile = db.execute(
        select(UserProfile).where(UserProfile.user_id == user_id)
    ).scalars().first()
    key, template = select_template(career_id, career_name)
    ctx = RoadmapContext(
        career_id=career_id,
        career_name=career_name,
        template=template,
        missing_skills=missing_skills or [],
        matched_skills=matched_skills or [],
        experience=profile.parsed_experience if profile else None,
        interests=list(profile.interests or []) if profile else [],
    )
    roadmap = normalize_steps(personalizer.personalize(ctx))

    upsert(db, SavedPath, {
        "user_id": user_id,
        "career_id": career_id,
        "career_name": career_name,
        "roadmap": roadmap,
        "status": "active",
        "progress_percentage": 0,
        "updated_at": func.now(),
    }, keys=("user_id", "career_id"))
    db.commit()
    path = db.execute(
        select(SavedPath)
        .where(SavedPath.user_id == user_id, SavedPath.career_id == career_id)
        .execution_options(populate_existing=True)
    ).scalars().one()
    logger.info("roadmap saved for user %s (%s template, %d steps)", user_id, key, len(roadmap))
    return path

def list_paths(db: Session, user_id: int) -> list[SavedPath]:
    return db.execute(
        select(SavedPath)
        .where(SavedPath.user_id == user_id)
        .order_by(desc(SavedPath.updated_at), desc(SavedPath.id))
    ).scalars().all()

def get_path(db: Session, user_id: int, career_id: str) -> SavedPath:
    path = db.execute(
        select(SavedPath).where(SavedPath.user_id == user_id, SavedPath.career_id == career_id)
    ).scalars().first()
    if path is None:
        raise NotFound("No saved path for this career.")
    return path

def set_step_completed(db: Session, user_id: int, path_id: int, step_id: str, completed: bool) -> SavedPath:
    path = db.get(SavedPath, path_id)
    if path is None or path.user_id != user_id:
        raise NotFound("Saved path not found.")
    if not any(s.get("id") == step_id for s in path.roadmap or []):
        raise NotFound("Roadmap step not found.")
    # new list so the JSON column is flagged dirty
    roadmap = [
        {**s, "completed": completed} if s.get("id") == step_id else s
        for s in path.roadmap
    ]
    path.roadmap = roadmap
    path.progress_percentage, path.status = progress(roadmap)
    db.commit()
    db.refresh(path)
    if path.status == "completed":
        logger.info("user %s completed path %s", user_id, path.career_id)
    return path
