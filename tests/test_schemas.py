"""
Tests for identifier adapters and response schemas.
"""

import pytest
from bson import ObjectId
from pydantic import ValidationError

from app.models import Job, JobApplication, Recruiter
from app.schemas.application import JobApplicationCreateRequest, JobApplicationResponse
from app.schemas.common import object_id_to_str, object_ids_to_str, parse_object_id
from app.schemas.job import JobCreateRequest, JobResponse
from app.schemas.recruiter import JobIdRequest, RecruiterResponse


class TestIdentifierAdapters:
    """Tests for ObjectId <-> hex string conversion"""

    def test_object_id_to_str_is_lowercase_hex(self):
        oid = ObjectId("65A1B2C3D4E5F60718293A4B")
        assert object_id_to_str(oid) == "65a1b2c3d4e5f60718293a4b"

    def test_object_id_to_str_none(self):
        assert object_id_to_str(None) is None

    def test_object_ids_to_str_preserves_order(self):
        a, b, c = ObjectId(), ObjectId(), ObjectId()
        assert object_ids_to_str([c, a, b]) == [str(c), str(a), str(b)]

    def test_object_ids_to_str_none_stays_none(self):
        assert object_ids_to_str(None) is None

    def test_object_ids_to_str_empty(self):
        assert object_ids_to_str([]) == []

    def test_parse_object_id(self):
        oid = ObjectId()
        assert parse_object_id(str(oid)) == oid
        assert parse_object_id(oid) is oid

    @pytest.mark.parametrize("value", ["", "xyz", "123", None, "g" * 24])
    def test_parse_object_id_rejects_invalid(self, value):
        with pytest.raises(ValueError):
            parse_object_id(value)


class TestRecruiterResponse:
    """Tests for recruiter serialization"""

    def make_recruiter(self, job_ids):
        return Recruiter(
            id=ObjectId(),
            name="Jane",
            email="jane@example.com",
            hashed_password="hash",
            job_ids=job_ids,
        )

    def test_job_ids_serialize_to_hex_in_order(self):
        a, b = ObjectId(), ObjectId()
        recruiter = self.make_recruiter([a, b])

        data = RecruiterResponse.from_entity(recruiter).model_dump(by_alias=True)

        assert data["jobIds"] == [str(a), str(b)]
        assert data["id"] == str(recruiter.id)

    def test_unset_job_ids_serialize_to_null(self):
        recruiter = self.make_recruiter(None)

        data = RecruiterResponse.from_entity(recruiter).model_dump(by_alias=True)

        assert "jobIds" in data
        assert data["jobIds"] is None

    def test_password_is_never_serialized(self):
        data = RecruiterResponse.from_entity(self.make_recruiter([])).model_dump(by_alias=True)

        assert "password" not in data
        assert "hashed_password" not in data
        assert "hashedPassword" not in data


class TestOtherResponses:
    def test_job_response(self):
        job = Job(id=ObjectId(), position="Engineer", company="Acme", skills=["Python"])

        data = JobResponse.from_entity(job).model_dump()

        assert data["id"] == str(job.id)
        assert data["skills"] == ["Python"]
        assert data["version"] == 0

    def test_application_response_uses_job_id_alias(self):
        application = JobApplication(id=ObjectId(), job_id=ObjectId(), name="Sam")

        data = JobApplicationResponse.from_entity(application).model_dump(by_alias=True)

        assert data["jobId"] == str(application.job_id)
        assert data["id"] == str(application.id)


class TestRequestValidation:
    def test_experience_format(self):
        JobCreateRequest(position="Engineer", company="Acme", experience="3+ years")
        JobCreateRequest(position="Engineer", company="Acme", experience="1 year")

        with pytest.raises(ValidationError):
            JobCreateRequest(position="Engineer", company="Acme", experience="three years")

    def test_job_id_request_accepts_alias_and_normalises_case(self):
        oid = ObjectId()
        request = JobIdRequest(jobId=str(oid).upper())
        assert request.job_id == str(oid)

    def test_application_request_rejects_malformed_job_id(self):
        with pytest.raises(ValidationError):
            JobApplicationCreateRequest(jobId="not-an-id")
