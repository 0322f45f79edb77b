from typing import Optional
from bson import ObjectId
from pydantic import Field
from app.models.base import MongoDocument


class JobApplication(MongoDocument):
    """
    An application submitted against a job.

    job_id is a plain reference: many applications may point at the same
    job and nothing here checks that the job exists.
    """
    collection_name = "job_applications"

    job_id: ObjectId = Field(alias="jobId")
    name: Optional[str] = None
    email: Optional[str] = None
