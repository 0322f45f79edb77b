"""
Test suite for recruiter endpoints.

Tests cover:
- Signup (password hashing, duplicate email)
- Login
- Lookup by email
- Linking and unlinking jobs
"""

import pytest
from bson import ObjectId


@pytest.fixture
def recruiter(client, sample_recruiter_data):
    response = client.post("/api/v1/recruiters/signup", json=sample_recruiter_data)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def job(client, sample_job_data):
    return client.post("/api/v1/jobs", json=sample_job_data).json()


class TestSignup:
    def test_signup_success(self, recruiter, sample_recruiter_data):
        assert ObjectId.is_valid(recruiter["id"])
        assert recruiter["email"] == sample_recruiter_data["email"]
        assert recruiter["company"] == sample_recruiter_data["company"]
        assert recruiter["jobIds"] == []
        assert "password" not in recruiter
        assert "hashedPassword" not in recruiter

    def test_signup_duplicate_email(self, client, recruiter, sample_recruiter_data):
        response = client.post("/api/v1/recruiters/signup", json=sample_recruiter_data)

        assert response.status_code == 400
        assert "already registered" in response.json()["detail"]

    def test_signup_short_password(self, client, sample_recruiter_data):
        sample_recruiter_data["password"] = "short"

        response = client.post("/api/v1/recruiters/signup", json=sample_recruiter_data)

        assert response.status_code == 422

    def test_signup_invalid_email(self, client, sample_recruiter_data):
        sample_recruiter_data["email"] = "not-an-email"

        response = client.post("/api/v1/recruiters/signup", json=sample_recruiter_data)

        assert response.status_code == 422


class TestLogin:
    def test_login_success(self, client, recruiter, sample_recruiter_data):
        response = client.post("/api/v1/recruiters/login", json={
            "email": sample_recruiter_data["email"],
            "password": sample_recruiter_data["password"],
        })

        assert response.status_code == 200
        assert response.json()["id"] == recruiter["id"]

    def test_login_wrong_password(self, client, recruiter, sample_recruiter_data):
        response = client.post("/api/v1/recruiters/login", json={
            "email": sample_recruiter_data["email"],
            "password": "WrongPassword1!",
        })

        assert response.status_code == 401


class TestLookup:
    def test_get_by_email(self, client, recruiter):
        response = client.get(f"/api/v1/recruiters/{recruiter['email']}")

        assert response.status_code == 200
        assert response.json() == recruiter

    def test_get_unknown_email(self, client):
        response = client.get("/api/v1/recruiters/nobody@example.com")

        assert response.status_code == 404


class TestJobLinks:
    def test_append_job(self, client, recruiter, job):
        response = client.post(
            f"/api/v1/recruiters/{recruiter['email']}/appendjob",
            json={"jobId": job["id"]},
        )

        assert response.status_code == 200
        assert response.json()["jobIds"] == [job["id"]]

    def test_append_jobs_keeps_order(self, client, recruiter, sample_job_data):
        job_ids = [
            client.post("/api/v1/jobs", json=dict(sample_job_data, position=f"Job {i}")).json()["id"]
            for i in range(3)
        ]
        for job_id in job_ids:
            client.post(f"/api/v1/recruiters/{recruiter['email']}/appendjob", json={"jobId": job_id})

        response = client.get(f"/api/v1/recruiters/{recruiter['email']}")

        assert response.json()["jobIds"] == job_ids

    def test_append_unknown_job(self, client, recruiter):
        response = client.post(
            f"/api/v1/recruiters/{recruiter['email']}/appendjob",
            json={"jobId": str(ObjectId())},
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Job not found"

    def test_append_job_unknown_recruiter(self, client, job):
        response = client.post(
            "/api/v1/recruiters/nobody@example.com/appendjob",
            json={"jobId": job["id"]},
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Recruiter not found"

    def test_append_job_with_bare_id_body(self, client, recruiter, job):
        """The frontend posts the job id itself as the JSON body."""
        response = client.post(
            f"/api/v1/recruiters/{recruiter['email']}/appendjob",
            json=job["id"],
        )

        assert response.status_code == 200
        assert response.json()["jobIds"] == [job["id"]]

    def test_remove_job_with_bare_id_body(self, client, recruiter, job):
        email = recruiter["email"]
        client.post(f"/api/v1/recruiters/{email}/appendjob", json=job["id"])

        response = client.post(f"/api/v1/recruiters/{email}/removejob", json=job["id"])

        assert response.status_code == 200
        assert response.json()["jobIds"] == []

    def test_append_malformed_bare_id(self, client, recruiter):
        response = client.post(
            f"/api/v1/recruiters/{recruiter['email']}/appendjob",
            json="abc",
        )

        assert response.status_code == 422

    def test_append_malformed_job_id(self, client, recruiter):
        response = client.post(
            f"/api/v1/recruiters/{recruiter['email']}/appendjob",
            json={"jobId": "abc"},
        )

        assert response.status_code == 422

    def test_delete_then_remove_job(self, client, recruiter, job):
        """The job is deleted first and unlinked afterwards."""
        email = recruiter["email"]
        client.post(f"/api/v1/recruiters/{email}/appendjob", json={"jobId": job["id"]})

        assert client.delete(f"/api/v1/jobs/{job['id']}").status_code == 204
        response = client.post(f"/api/v1/recruiters/{email}/removejob", json={"jobId": job["id"]})

        assert response.status_code == 200
        assert response.json()["jobIds"] == []

    def test_remove_job_not_linked(self, client, recruiter):
        response = client.post(
            f"/api/v1/recruiters/{recruiter['email']}/removejob",
            json={"jobId": str(ObjectId())},
        )

        assert response.status_code == 404
        assert "not linked" in response.json()["detail"]
