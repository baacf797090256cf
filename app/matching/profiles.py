# app/matching/profiles.py
import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.upsert import upsert
from app.models.profile import UserProfile
from app.nlp.embeddings import Embedder, embed_facets, sanitize
from app.nlp.facets import profile_facet_texts
from app.nlp.vectors import format_vector
from app.schemas.profile import ProfileIn

logger = logging.getLogger(__name__)

def _clean_list(items: list[str]) -> list[str]:
    return [c for c in (sanitize(i) for i in items or []) if c]

def generate_profile_embeddings(db: Session, user_id: int, data: ProfileIn, embedder: Embedder) -> UserProfile:
    """
    Embed the three profile facets and upsert the user's single profile row.
    Nothing is written unless all three embeddings succeed.
    """
    logger.info("generating embeddings for user %s", user_id)
    texts = profile_facet_texts(
        skills=data.skills,
        interests=data.interests,
        experience=data.experience,
        resume_text=data.resume_text,
        career_goals=data.career_goals,
        work_environment=data.work_environment,
        salary_range=data.salary_range,
    )
    vectors = embed_facets(embedder, texts)

    upsert(db, UserProfile, {
        "user_id": user_id,
        "name": sanitize(data.name),
        "email": sanitize(data.email),
        "linkedin_url": sanitize(data.linkedin_url),
        "resume_text": sanitize(data.resume_text),
        "parsed_skills": _clean_list(data.skills),
        "parsed_experience": sanitize(data.experience),
        "interests": _clean_list(data.interests),
        "career_goals": _clean_list(data.career_goals),
        "work_environment": sanitize(data.work_environment),
        "salary_range": sanitize(data.salary_range),
        "skills_embedding": format_vector(vectors["skills"]),
        "experience_embedding": format_vector(vectors["experience"]),
        "interests_embedding": format_vector(vectors["interests"]),
        "embedding_updated_at": datetime.now(tz=timezone.utc),
    }, keys=("user_id",))
    db.commit()
    profile = db.execute(
        select(UserProfile)
        .where(UserProfile.user_id == user_id)
        .execution_options(populate_existing=True)
    ).scalars().one()

    logger.info("stored embeddings for user %s", user_id)
    return profile
