# app/api/match_routes.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.auth.deps import get_current_user
from app.core.config import settings
from app.db.session import get_db
from app.matching.filters import MatchFilters, apply_filters, filter_options
from app.matching.repository import MatchRepository
from app.models.user import User
from app.schemas.match import FilterOptions, MatchOut, RefreshOut

router = APIRouter(prefix="/matches", tags=["Matches"])

@router.post("/refresh", response_model=RefreshOut, summary="Recompute all job matches")
def refresh_matches(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    rows = MatchRepository(db).refresh(user.id)
    matches = [MatchOut.from_row(r) for r in rows]
    if not matches:
        return RefreshOut(match_count=0, matches=[], message="No jobs available for matching")
    return RefreshOut(match_count=len(matches), matches=matches[: settings.MATCH_RESULT_LIMIT])

@router.get("", response_model=list[MatchOut], summary="Stored matches, best first")
def get_stored_matches(
    min_score: float = Query(0, ge=0, le=100),
    job_type: list[str] = Query(default=[]),
    location: list[str] = Query(default=[]),
    experience_level: list[str] = Query(default=[]),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    matches = [MatchOut.from_row(r) for r in MatchRepository(db).load(user.id)]
    filters = MatchFilters(
        min_score=min_score,
        job_type=job_type,
        location=location,
        experience_level=experience_level,
    )
    return apply_filters(matches, filters)

@router.get("/filter-options", response_model=FilterOptions)
def get_filter_options(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    matches = [MatchOut.from_row(r) for r in MatchRepository(db).load(user.id)]
    return filter_options(matches)
