# app/api/profile_routes.py
from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.auth.deps import get_current_user
from app.core.errors import ProfileNotFound
from app.db.session import get_db
from app.matching.profiles import generate_profile_embeddings
from app.models.profile import UserProfile
from app.models.user import User
from app.nlp.embeddings import Embedder, get_profile_embedder
from app.schemas.profile import ProfileIn, ProfileOut

router = APIRouter(prefix="/profile", tags=["Profile"])

@router.post("/embeddings", summary="Generate and store profile embeddings")
def generate_embeddings(
    payload: ProfileIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    embedder: Embedder = Depends(get_profile_embedder),
):
    generate_profile_embeddings(db, user.id, payload, embedder)
    return {"success": True, "message": "Embeddings generated and stored successfully"}

@router.get("", response_model=ProfileOut)
def get_profile(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    profile = db.execute(
        select(UserProfile).where(UserProfile.user_id == user.id)
    ).scalars().first()
    if not profile:
        raise ProfileNotFound()
    return profile
