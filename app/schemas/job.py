from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
import re

from app.models.job import Job
from app.schemas.common import object_id_to_str

EXPERIENCE_PATTERN = re.compile(r'^\d+\+?\s*years?$')


class JobCreateRequest(BaseModel):
    """Schema for posting a new job"""
    position: str = Field(..., min_length=1, max_length=200)
    company: str = Field(..., min_length=1, max_length=200)
    location: Optional[str] = None
    experience: Optional[str] = Field(None, description="Required experience, e.g. '3+ years'")
    description: Optional[str] = None
    skills: List[str] = Field(default_factory=list)

    @field_validator('experience')
    @classmethod
    def validate_experience_format(cls, v: Optional[str]) -> Optional[str]:
        """Experience must look like '3 years' or '3+ years'"""
        if v is not None and not EXPERIENCE_PATTERN.match(v):
            raise ValueError("Experience format should be like '3+ years'")
        return v


class JobUpdateRequest(JobCreateRequest):
    """
    Schema for replacing a job.

    version must be the value last read; a mismatch means someone else
    saved the job in between.
    """
    version: int = Field(..., ge=0)


class JobResponse(BaseModel):
    """Schema for job response"""
    id: str
    position: str
    company: str
    location: Optional[str] = None
    experience: Optional[str] = None
    description: Optional[str] = None
    skills: List[str] = []
    version: int

    @classmethod
    def from_entity(cls, job: Job) -> "JobResponse":
        return cls(
            id=object_id_to_str(job.id),
            position=job.position,
            company=job.company,
            location=job.location,
            experience=job.experience,
            description=job.description,
            skills=job.skills,
            version=job.version,
        )
