"""Shared fixtures: a throwaway SQLite database, a network-free embedder and auth helpers."""
import os
import re
import tempfile
from pathlib import Path

# must be set before the app (and its engine) is imported
_TMP = Path(tempfile.mkdtemp(prefix="careergraph-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP / 'test.db'}"
os.environ["SEED_DELAY_SECONDS"] = "0"
os.environ["SEED_JOBS_ON_STARTUP"] = "false"
os.environ.pop("LLM_API_KEY", None)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.auth.security import create_access_token  # noqa: E402
from app.db.base import Base  # noqa: E402
from app.db.session import SessionLocal, engine  # noqa: E402
from app.main import app  # noqa: E402
from app.models.user import User  # noqa: E402
from app.nlp.embeddings import KeywordHashEmbedder, get_job_embedder, get_profile_embedder  # noqa: E402

_WORD_RE = re.compile(r"[A-Za-z][A-Za-z0-9+#.\-]*")


def fake_keywords(text: str) -> list[str]:
    """Stand-in for the LLM: the distinct words of the text, in order."""
    return list(dict.fromkeys(w.lower() for w in _WORD_RE.findall(text or "")))


@pytest.fixture
def embedder() -> KeywordHashEmbedder:
    return KeywordHashEmbedder(extractor=fake_keywords)


@pytest.fixture(autouse=True)
def _fresh_schema():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    with SessionLocal() as s:
        yield s


@pytest.fixture
def client(embedder):
    app.dependency_overrides[get_profile_embedder] = lambda: embedder
    app.dependency_overrides[get_job_embedder] = lambda: embedder
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def _make(email: str = "ada@example.com") -> tuple[User, dict]:
        user = User(email=email, hashed_password="x", full_name="Ada")
        db.add(user)
        db.commit()
        db.refresh(user)
        token = create_access_token(email)
        return user, {"Authorization": f"Bearer {token}"}
    return _make


@pytest.fixture
def auth(make_user):
    return make_user()[1]
