# app/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.core.log import configure_logging
from app.db.session import engine, SessionLocal
from app.db.base import Base

# Import models so SQLAlchemy knows about them (for create_all)
from app.models.user import User  # noqa: F401
from app.models.profile import UserProfile  # noqa: F401
from app.models.job import Job  # noqa: F401
from app.models.match import JobMatch  # noqa: F401
from app.models.path import SavedPath  # noqa: F401
from app.models.application import AppliedJob  # noqa: F401

# Routers
from app.api.auth_routes import router as auth_router
from app.api.profile_routes import router as profile_router
from app.api.match_routes import router as match_router
from app.api.job_routes import router as job_router
from app.api.path_routes import router as path_router
from app.api.application_routes import router as application_router

# Seeder
from app.db.seed import seed_jobs
from app.nlp.embeddings import get_job_embedder

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title=settings.APP_NAME)

    # Root -> redirect to Swagger UI
    @app.get("/", include_in_schema=False)
    def root():
        return RedirectResponse(url="/docs")

    @app.get("/health", tags=["Health"])
    def health():
        return {"status": "ok"}

    # CORS
    origins = [o.strip() for o in settings.BACKEND_CORS_ORIGINS.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # Ensure tables exist (uses the DATABASE_URL from .env)
    Base.metadata.create_all(bind=engine)

    if settings.SEED_JOBS_ON_STARTUP:
        with SessionLocal() as db:
            result = seed_jobs(db, get_job_embedder())
            if not result.get("skipped"):
                logger.info("seeded %d catalog jobs", sum(1 for r in result["results"] if r["success"]))

    # API routes
    app.include_router(auth_router)         # /auth/register, /auth/login
    app.include_router(profile_router)      # /profile/*
    app.include_router(match_router)        # /matches/*
    app.include_router(job_router)          # /jobs/*
    app.include_router(path_router)         # /paths/*
    app.include_router(application_router)  # /applications/*

    return app


app = create_app()
