from typing import List, Optional
from pydantic import Field
from app.models.base import MongoDocument


class Job(MongoDocument):
    """
    Job model representing a position posted by a recruiter.

    Ownership lives on the recruiter side (Recruiter.job_ids); deleting a
    job does not touch recruiters or applications.
    """
    collection_name = "jobs"

    position: str
    company: str
    location: Optional[str] = None
    experience: Optional[str] = None
    description: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
