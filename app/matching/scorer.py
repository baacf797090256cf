"""
Multi-facet job scoring.

A profile and a job are compared on three independent facets (skills,
experience, interests). Each facet score is the cosine similarity of the
matching pair of stored vectors, clamped into [0, 1]; the ranking number is
the fixed linear blend in ``WEIGHTS``.

Jobs whose vectors cannot be decoded are skipped with a warning instead of
failing the whole pass, since a partial ranking is still useful.
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

import numpy as np
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import EmbeddingsMissing, ProfileNotFound, VectorFormatError
from app.matching.explain import Explanation, build_explanation
from app.models.job import Job
from app.models.profile import UserProfile
from app.nlp.facets import FACETS
from app.nlp.vectors import parse_vector, similarity

logger = logging.getLogger(__name__)

WEIGHTS = {
    "skills": 0.5,
    "experience": 0.3,
    "interests": 0.2,
}


@dataclass
class ScoredMatch:
    job: Job
    skills_score: float
    experience_score: float
    interests_score: float
    weighted_score: float
    explanation: Explanation

    @property
    def job_id(self) -> int:
        return self.job.id


def weighted_score(scores: dict[str, float]) -> float:
    return sum(scores[f] * WEIGHTS[f] for f in FACETS)


def profile_vectors(profile: UserProfile) -> dict[str, np.ndarray]:
    if not profile.skills_embedding:
        raise EmbeddingsMissing()
    try:
        return {
            f: parse_vector(getattr(profile, f"{f}_embedding"), settings.EMBEDDING_DIM)
            for f in FACETS
        }
    except VectorFormatError as exc:
        logger.warning("profile %s has unusable embeddings: %s", profile.user_id, exc)
        raise EmbeddingsMissing() from exc


def facet_scores(user_vecs: dict[str, np.ndarray], job: Job) -> dict[str, float]:
    return {
        f: similarity(user_vecs[f], parse_vector(getattr(job, f"{f}_embedding"), settings.EMBEDDING_DIM))
        for f in FACETS
    }


def score_job(user_vecs: dict[str, np.ndarray], user_skills: list[str], job: Job) -> ScoredMatch | None:
    try:
        scores = facet_scores(user_vecs, job)
    except VectorFormatError as exc:
        logger.warning("skipping job %s (%s): %s", job.id, job.title, exc)
        return None
    return ScoredMatch(
        job=job,
        skills_score=scores["skills"],
        experience_score=scores["experience"],
        interests_score=scores["interests"],
        weighted_score=weighted_score(scores),
        explanation=build_explanation(user_skills, job.required_skills or [], scores),
    )


def rank(matches: list[ScoredMatch]) -> list[ScoredMatch]:
    return sorted(matches, key=lambda m: (-m.weighted_score, m.job_id))


def score_all(db: Session, user_id: int, workers: int | None = None) -> list[ScoredMatch]:
    """Score every job that has all three vectors against the user's profile."""
    profile = db.execute(
        select(UserProfile).where(UserProfile.user_id == user_id)
    ).scalars().first()
    if not profile:
        raise ProfileNotFound()
    user_vecs = profile_vectors(profile)
    user_skills = list(profile.parsed_skills or [])

    jobs = db.execute(
        select(Job).where(
            Job.skills_embedding.is_not(None),
            Job.experience_embedding.is_not(None),
            Job.interests_embedding.is_not(None),
        )
    ).scalars().all()
    logger.info("scoring %d jobs for user %s", len(jobs), user_id)

    workers = workers or settings.MATCH_WORKERS
    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            scored = list(pool.map(lambda j: score_job(user_vecs, user_skills, j), jobs))
    else:
        scored = [score_job(user_vecs, user_skills, j) for j in jobs]

    return rank([m for m in scored if m is not None])
