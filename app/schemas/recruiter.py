"""
Pydantic schemas for Recruiter signup, login and profile responses.
"""

from pydantic import AfterValidator, BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Annotated, List, Optional, Union
from bson import ObjectId

from app.models.recruiter import Recruiter
from app.schemas.common import object_id_to_str, object_ids_to_str, validate_object_id_str


class RecruiterSignupRequest(BaseModel):
    """Request schema for recruiter registration."""
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(
        ...,
        min_length=8,
        max_length=72,  # bcrypt limit
        description="Password must be 8-72 characters"
    )
    company: Optional[str] = None
    location: Optional[str] = None


class RecruiterLoginRequest(BaseModel):
    """Request schema for recruiter login."""
    email: EmailStr
    password: str


class JobIdRequest(BaseModel):
    """Body of the appendjob/removejob calls."""
    model_config = ConfigDict(populate_by_name=True)

    job_id: str = Field(..., alias="jobId")

    @field_validator('job_id')
    @classmethod
    def validate_job_id(cls, v: str) -> str:
        return validate_object_id_str(v)


# The frontend posts the bare id string as the body; {"jobId": ...} is accepted too
JobIdBody = Union[JobIdRequest, Annotated[str, AfterValidator(validate_object_id_str)]]


def job_id_from_body(body: JobIdBody) -> ObjectId:
    if isinstance(body, JobIdRequest):
        return ObjectId(body.job_id)
    return ObjectId(body)


class RecruiterResponse(BaseModel):
    """
    Recruiter profile response (no password).

    jobIds is null, not [], when the recruiter's list was never set.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    email: str
    company: Optional[str] = None
    location: Optional[str] = None
    job_ids: Optional[List[str]] = Field(None, alias="jobIds")

    @classmethod
    def from_entity(cls, recruiter: Recruiter) -> "RecruiterResponse":
        return cls(
            id=object_id_to_str(recruiter.id),
            name=recruiter.name,
            email=recruiter.email,
            company=recruiter.company,
            location=recruiter.location,
            job_ids=object_ids_to_str(recruiter.job_ids),
        )
