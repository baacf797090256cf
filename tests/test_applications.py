import pytest

from app.models.job import Job


@pytest.fixture
def job(db):
    job = Job(title="Backend Engineer", company="DataFlow Systems", location="Remote")
    db.add(job)
    db.commit()
    return job


def test_apply_list_update_delete(client, auth, job):
    r = client.post("/applications", json={"job_id": job.id, "notes": "referral"}, headers=auth)
    assert r.status_code == 201
    app_id = r.json()["id"]
    assert r.json()["status"] == "applied"

    listed = client.get("/applications", headers=auth).json()
    assert [a["id"] for a in listed] == [app_id]
    assert listed[0]["job"]["title"] == "Backend Engineer"

    r = client.patch(f"/applications/{app_id}", json={"status": "interviewing"}, headers=auth)
    assert r.json()["status"] == "interviewing"
    assert client.patch(f"/applications/{app_id}", json={"status": "ghosted"}, headers=auth).status_code == 422

    assert client.delete(f"/applications/{app_id}", headers=auth).status_code == 204
    assert client.get("/applications", headers=auth).json() == []


def test_duplicate_application_conflicts(client, auth, job):
    assert client.post("/applications", json={"job_id": job.id}, headers=auth).status_code == 201
    r = client.post("/applications", json={"job_id": job.id}, headers=auth)
    assert r.status_code == 409
    assert r.json()["error"] == "You have already applied to this job."


def test_unknown_job(client, auth):
    assert client.post("/applications", json={"job_id": 999}, headers=auth).status_code == 404


def test_other_users_application_is_hidden(client, auth, job, make_user):
    app_id = client.post("/applications", json={"job_id": job.id}, headers=auth).json()["id"]
    _, other = make_user("mallory@example.com")
    assert client.patch(f"/applications/{app_id}", json={"status": "offered"}, headers=other).status_code == 404
    assert client.delete(f"/applications/{app_id}", headers=other).status_code == 404
    assert client.get("/applications", headers=other).json() == []
