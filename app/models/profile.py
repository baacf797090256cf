from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, String, Text, DateTime, ForeignKey, JSON, func
from app.db.base import Base

class UserProfile(Base):
    """One row per user, overwritten on every embedding regeneration."""
    __tablename__ = "user_profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        index=True,
        nullable=False
    )
    name: Mapped[str | None] = mapped_column(String(255))
    email: Mapped[str | None] = mapped_column(String(255))
    linkedin_url: Mapped[str | None] = mapped_column(String(512))
    resume_text: Mapped[str | None] = mapped_column(Text)
    parsed_skills: Mapped[list] = mapped_column(JSON, default=list)
    parsed_experience: Mapped[str | None] = mapped_column(Text)
    interests: Mapped[list] = mapped_column(JSON, default=list)
    career_goals: Mapped[list] = mapped_column(JSON, default=list)
    work_environment: Mapped[str | None] = mapped_column(String(255))
    salary_range: Mapped[str | None] = mapped_column(String(255))

    # "[0.1,0.2,...]" vector literals, see app.nlp.vectors
    skills_embedding: Mapped[str | None] = mapped_column(Text)
    experience_embedding: Mapped[str | None] = mapped_column(Text)
    interests_embedding: Mapped[str | None] = mapped_column(Text)
    embedding_updated_at: Mapped[datetime | None] = mapped_column(DateTime)

    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    user = relationship("User", back_populates="profile")
