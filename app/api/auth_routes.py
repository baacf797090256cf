# app/api/auth_routes.py
import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.auth.security import create_access_token, hash_password, verify_password
from app.core.errors import AlreadyExists
from app.db.session import get_db
from app.models.user import User
from app.schemas.auth import AccountOut, RegisterIn, Token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])

@router.post("/register", response_model=AccountOut, status_code=201)
def register(payload: RegisterIn, db: Session = Depends(get_db)):
    if db.execute(select(User.id).where(User.email == payload.email)).first():
        raise AlreadyExists("Email already registered.", remedy="Log in instead.")
    user = User(
        email=payload.email,
        full_name=payload.full_name,
        hashed_password=hash_password(payload.password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("registered user %s", user.id)
    return user

@router.post("/login", response_model=Token)
def login(form: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    """OAuth2 password flow; the username field carries the email."""
    user = db.execute(select(User).where(User.email == form.username)).scalars().first()
    if user is None or not verify_password(form.password, user.hashed_password):
        raise HTTPException(status_code=401, detail="Invalid email or password")
    return Token(access_token=create_access_token(user.email))
