"""
Pydantic schemas for JobApplication API requests/responses.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from app.models.application import JobApplication
from app.schemas.common import object_id_to_str, validate_object_id_str


class JobApplicationCreateRequest(BaseModel):
    """Request to apply for a job."""
    model_config = ConfigDict(populate_by_name=True)

    job_id: str = Field(..., alias="jobId", description="Hex id of the job being applied to")
    name: Optional[str] = Field(None, max_length=200)
    email: Optional[EmailStr] = None

    @field_validator('job_id')
    @classmethod
    def validate_job_id(cls, v: str) -> str:
        return validate_object_id_str(v)


class JobApplicationResponse(BaseModel):
    """Application response with identifiers as hex strings."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    job_id: str = Field(..., alias="jobId")
    name: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def from_entity(cls, application: JobApplication) -> "JobApplicationResponse":
        return cls(
            id=object_id_to_str(application.id),
            job_id=object_id_to_str(application.job_id),
            name=application.name,
            email=application.email,
        )
