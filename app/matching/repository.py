# app/matching/repository.py
import logging

from sqlalchemy import desc, func, select
from sqlalchemy.orm import Session, joinedload

from app.db.upsert import upsert
from app.matching.scorer import ScoredMatch, score_all
from app.models.match import JobMatch

logger = logging.getLogger(__name__)


class MatchRepository:
    """Persists computed matches per user; rows are keyed by (user_id, job_id)."""

    def __init__(self, db: Session):
        self.db = db

    def save(self, user_id: int, matches: list[ScoredMatch]) -> None:
        for m in matches:
            upsert(self.db, JobMatch, {
                "user_id": user_id,
                "job_id": m.job_id,
                "skills_score": m.skills_score,
                "experience_score": m.experience_score,
                "interests_score": m.interests_score,
                "weighted_score": m.weighted_score,
                "match_explanation": m.explanation.to_dict(),
                "updated_at": func.now(),
            }, keys=("user_id", "job_id"))
        self.db.commit()

    def load(self, user_id: int) -> list[JobMatch]:
        # rows were written through Core; refresh any instances already in the session
        return self.db.execute(
            select(JobMatch)
            .options(joinedload(JobMatch.job))
            .where(JobMatch.user_id == user_id)
            .order_by(desc(JobMatch.weighted_score), JobMatch.job_id)
            .execution_options(populate_existing=True)
        ).scalars().all()

    def refresh(self, user_id: int) -> list[JobMatch]:
        matches = score_all(self.db, user_id)
        self.save(user_id, matches)
        logger.info("computed and stored %d job matches for user %s", len(matches), user_id)
        return self.load(user_id)
