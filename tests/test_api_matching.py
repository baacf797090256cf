import threading

import pytest
from sqlalchemy import func, select

from app.core.config import settings
from app.core.errors import UpstreamServiceError
from app.db.seed import SAMPLE_JOBS, seed_jobs
from app.db.session import SessionLocal
from app.main import app
from app.matching import profiles
from app.models.job import Job
from app.models.match import JobMatch
from app.models.profile import UserProfile
from app.nlp.embeddings import KeywordHashEmbedder, get_profile_embedder
from app.schemas.profile import ProfileIn

PROFILE = {
    "resume_text": "Built ETL pipelines and ML feature stores in Python and SQL.",
    "skills": ["Python", "SQL", "Machine Learning"],
    "interests": ["AI", "data"],
    "experience": "Senior data engineer, 6 years of Python and SQL",
    "career_goals": ["ML Engineer"],
    "work_environment": "Remote",
    "name": "Ada\x00 Lovelace",
}


def _setup(client, auth):
    assert client.post("/jobs/seed").json()["success"] is True
    r = client.post("/profile/embeddings", json=PROFILE, headers=auth)
    assert r.status_code == 200, r.text


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


@pytest.mark.parametrize("method, path", [
    ("post", "/profile/embeddings"),
    ("get", "/profile"),
    ("post", "/matches/refresh"),
    ("get", "/matches"),
    ("get", "/matches/filter-options"),
    ("get", "/paths"),
    ("get", "/applications"),
])
def test_protected_routes_require_token(client, method, path):
    assert getattr(client, method)(path).status_code == 401
    bad = {"Authorization": "Bearer not-a-jwt"}
    assert getattr(client, method)(path, headers=bad).status_code == 401


def test_register_then_login(client):
    r = client.post("/auth/register", json={"email": "grace@example.com", "password": "hopper123"})
    assert r.status_code == 201
    again = client.post("/auth/register", json={"email": "grace@example.com", "password": "hopper123"})
    assert again.status_code == 409
    assert client.post("/auth/register", json={"email": "x@example.com", "password": "short"}).status_code == 422

    r = client.post("/auth/login", data={"username": "grace@example.com", "password": "hopper123"})
    token = r.json()["access_token"]
    assert client.get("/matches", headers={"Authorization": f"Bearer {token}"}).json() == []
    r = client.post("/auth/login", data={"username": "grace@example.com", "password": "wrong"})
    assert r.status_code == 401


def test_profile_embeddings_are_stored(client, auth, db):
    r = client.post("/profile/embeddings", json=PROFILE, headers=auth)
    assert r.json() == {"success": True, "message": "Embeddings generated and stored successfully"}

    profile = db.execute(select(UserProfile)).scalars().one()
    assert profile.name == "Ada Lovelace"
    assert profile.parsed_skills == ["Python", "SQL", "Machine Learning"]
    assert profile.skills_embedding.startswith("[")
    assert profile.embedding_updated_at is not None

    body = client.get("/profile", headers=auth).json()
    assert body["parsed_skills"] == PROFILE["skills"]


@pytest.mark.parametrize("missing", ["resume_text", "skills", "interests"])
def test_profile_required_fields(client, auth, db, missing):
    payload = {k: v for k, v in PROFILE.items() if k != missing}
    r = client.post("/profile/embeddings", json=payload, headers=auth)
    assert r.status_code == 422
    assert db.execute(select(func.count()).select_from(UserProfile)).scalar_one() == 0


def test_empty_profile_body_is_rejected(client, auth, db):
    assert client.post("/profile/embeddings", json={}, headers=auth).status_code == 422
    assert db.execute(select(func.count()).select_from(UserProfile)).scalar_one() == 0


def test_profile_resubmission_updates_the_same_row(client, auth, db):
    client.post("/profile/embeddings", json=PROFILE, headers=auth)
    first = db.execute(select(UserProfile.id, UserProfile.skills_embedding)).one()

    changed = {**PROFILE, "skills": ["Go", "Kubernetes"], "resume_text": ""}
    assert client.post("/profile/embeddings", json=changed, headers=auth).status_code == 200

    db.expire_all()
    after = db.execute(select(UserProfile)).scalars().one()
    assert after.id == first.id
    assert after.parsed_skills == ["Go", "Kubernetes"]
    assert after.skills_embedding != first.skills_embedding


def test_profile_embedding_failure_persists_nothing(client, auth, db):
    def failing(text):
        raise UpstreamServiceError()

    app.dependency_overrides[get_profile_embedder] = lambda: KeywordHashEmbedder(extractor=failing)
    r = client.post("/profile/embeddings", json=PROFILE, headers=auth)
    assert r.status_code == 502
    assert set(r.json()) == {"error", "remedy"}
    assert db.execute(select(func.count()).select_from(UserProfile)).scalar_one() == 0


def test_missing_profile_is_404_with_remedy(client, auth):
    r = client.post("/matches/refresh", headers=auth)
    assert r.status_code == 404
    assert r.json()["remedy"] == "Complete your profile to get job matches."
    assert client.get("/profile", headers=auth).status_code == 404


def test_seed_inserts_catalog_once(client, db):
    first = client.post("/jobs/seed").json()
    assert first["success"] is True
    assert all(r["success"] for r in first["results"])
    assert len(client.get("/jobs").json()) == len(SAMPLE_JOBS)

    second = client.post("/jobs/seed").json()
    assert second == {
        "success": True, "message": "Jobs already seeded", "skipped": True, "existingCount": len(SAMPLE_JOBS),
    }


def test_seed_skips_without_embedding_when_a_job_exists(db):
    db.add(Job(title="Existing"))
    db.commit()
    calls = []

    def spy(text):
        calls.append(text)
        return ["x"]

    result = seed_jobs(db, KeywordHashEmbedder(extractor=spy))
    assert result["skipped"] is True
    assert result["existingCount"] == 1
    assert calls == []
    assert db.execute(select(func.count()).select_from(Job)).scalar_one() == 1


def test_seed_records_per_job_failures(db):
    def picky(text):
        if "Data Scientist" in text:
            raise UpstreamServiceError()
        return text.lower().split()

    result = seed_jobs(db, KeywordHashEmbedder(extractor=picky), delay=0)
    failed = [r for r in result["results"] if not r["success"]]
    assert [r["job"] for r in failed] == ["Data Scientist"]
    assert db.execute(select(func.count()).select_from(Job)).scalar_one() == len(SAMPLE_JOBS) - 1


def test_refresh_ranks_and_persists_everything(client, auth, db):
    _setup(client, auth)
    body = client.post("/matches/refresh", headers=auth).json()

    assert body["success"] is True
    assert body["match_count"] == len(SAMPLE_JOBS)
    scores = [m["weighted_score"] for m in body["matches"]]
    assert scores == sorted(scores, reverse=True)
    for m in body["matches"]:
        expected = 0.5 * m["skills_score"] + 0.3 * m["experience_score"] + 0.2 * m["interests_score"]
        assert m["weighted_score"] == pytest.approx(expected)
        assert 0 <= m["weighted_score"] <= 1
        assert len(m["matched_skills"]) <= 10
        assert len(m["missing_skills"]) <= 5
    assert db.execute(select(func.count()).select_from(JobMatch)).scalar_one() == len(SAMPLE_JOBS)


def test_refresh_truncates_response_not_storage(client, auth, db, monkeypatch):
    _setup(client, auth)
    monkeypatch.setattr(settings, "MATCH_RESULT_LIMIT", 3)

    body = client.post("/matches/refresh", headers=auth).json()
    assert len(body["matches"]) == 3
    assert len(client.get("/matches", headers=auth).json()) == len(SAMPLE_JOBS)


def test_refresh_is_idempotent(client, auth):
    _setup(client, auth)
    first = client.post("/matches/refresh", headers=auth).json()["matches"]
    second = client.post("/matches/refresh", headers=auth).json()["matches"]
    assert [m["job_id"] for m in first] == [m["job_id"] for m in second]
    assert [m["weighted_score"] for m in first] == [m["weighted_score"] for m in second]


def test_refresh_with_empty_catalog(client, auth):
    client.post("/profile/embeddings", json=PROFILE, headers=auth)
    body = client.post("/matches/refresh", headers=auth).json()
    assert body == {"success": True, "match_count": 0, "matches": [], "message": "No jobs available for matching"}


def test_stored_matches_empty_for_new_user(client, auth):
    assert client.get("/matches", headers=auth).json() == []


def test_stored_matches_filters(client, auth):
    _setup(client, auth)
    client.post("/matches/refresh", headers=auth)

    remote = client.get("/matches", params={"location": "Remote"}, headers=auth).json()
    assert {m["job"]["title"] for m in remote} == {"Backend Engineer", "DevOps Engineer"}

    senior_or_entry = client.get(
        "/matches", params=[("experience_level", "senior"), ("experience_level", "entry")], headers=auth
    ).json()
    assert len(senior_or_entry) == 6

    assert client.get("/matches", params={"min_score": 101}, headers=auth).status_code == 422

    opts = client.get("/matches/filter-options", headers=auth).json()
    assert opts["job_types"] == ["Full-time"]
    assert set(opts["experience_levels"]) == {"Senior", "Mid-level", "Entry-level"}
    assert "Remote" in opts["locations"]


def test_matches_are_scoped_to_the_caller(client, auth, make_user):
    _setup(client, auth)
    client.post("/matches/refresh", headers=auth)
    _, other = make_user("bob@example.com")
    assert client.get("/matches", headers=other).json() == []


def test_concurrent_profile_submissions_keep_one_row(make_user, embedder, monkeypatch):
    user, _ = make_user()
    barrier = threading.Barrier(2, timeout=10)
    real_embed_facets = profiles.embed_facets

    def embed_then_wait(emb, texts):
        vectors = real_embed_facets(emb, texts)
        barrier.wait()
        return vectors

    monkeypatch.setattr(profiles, "embed_facets", embed_then_wait)
    errors = []

    def submit():
        try:
            with SessionLocal() as session:
                profiles.generate_profile_embeddings(session, user.id, ProfileIn(**PROFILE), embedder)
        except Exception as exc:
            errors.append(type(exc).__name__)

    threads = [threading.Thread(target=submit) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    with SessionLocal() as session:
        assert session.execute(select(func.count()).select_from(UserProfile)).scalar_one() == 1
