from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, Integer, DateTime, func
from app.db.base import Base

class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    full_name: Mapped[str | None] = mapped_column(String(255))
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    profile = relationship(
        "UserProfile",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan"
    )
    matches = relationship(
        "JobMatch",
        back_populates="user",
        cascade="all, delete-orphan"
    )
    saved_paths = relationship(
        "SavedPath",
        back_populates="user",
        cascade="all, delete-orphan"
    )
    applications = relationship(
        "AppliedJob",
        back_populates="user",
        cascade="all, delete-orphan"
    )
