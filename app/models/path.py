from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, String, DateTime, ForeignKey, JSON, UniqueConstraint, func
from app.db.base import Base

class SavedPath(Base):
    __tablename__ = "saved_paths"
    __table_args__ = (UniqueConstraint("user_id", "career_id", name="uq_saved_paths_user_career"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
        nullable=False
    )
    career_id: Mapped[str] = mapped_column(String(128), nullable=False)
    career_name: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(String(16), default="active", nullable=False)  # active | paused | completed
    roadmap: Mapped[list] = mapped_column(JSON, default=list)
    progress_percentage: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    started_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="saved_paths")
