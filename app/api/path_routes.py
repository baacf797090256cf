# app/api/path_routes.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.auth.deps import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.roadmap.paths import get_path, list_paths, set_step_completed, start_path
from app.roadmap.personalizers import RoadmapPersonalizer, get_personalizer
from app.schemas.roadmap import SavedPathOut, StartPathIn, StartPathOut, StepUpdate

router = APIRouter(prefix="/paths", tags=["Paths"])

@router.post("", response_model=StartPathOut, summary="Generate a roadmap and save the path")
def create_path(
    payload: StartPathIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    personalizer: RoadmapPersonalizer = Depends(get_personalizer),
):
    if not payload.career_id.strip() or not payload.career_name.strip():
        raise HTTPException(status_code=400, detail="Missing careerId or careerName")
    path = start_path(
        db, user.id, payload.career_id, payload.career_name, personalizer,
        missing_skills=payload.missing_skills,
        matched_skills=payload.matched_skills,
    )
    return StartPathOut(roadmap=path.roadmap, saved_path=SavedPathOut.model_validate(path))

@router.get("", response_model=list[SavedPathOut])
def get_paths(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return list_paths(db, user.id)

@router.get("/{career_id}", response_model=SavedPathOut)
def get_saved_path(career_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return get_path(db, user.id, career_id)

@router.patch("/{path_id}/steps/{step_id}", response_model=SavedPathOut)
def update_step(
    path_id: int,
    step_id: str,
    payload: StepUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return set_step_completed(db, user.id, path_id, step_id, payload.completed)
