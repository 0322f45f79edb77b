"""
Recruiter document model.

A recruiter owns an ordered list of job references (job_ids). The list is
mutated in memory with add_job_id/remove_job_id and persisted with a full
document replace guarded by the version field.
"""

from typing import List, Optional
from bson import ObjectId
from pydantic import Field
from app.models.base import MongoDocument


class Recruiter(MongoDocument):
    """Hiring account. Looked up by email."""
    collection_name = "recruiters"

    name: str
    email: str
    hashed_password: str = Field(alias="hashedPassword", repr=False)
    company: Optional[str] = None
    location: Optional[str] = None
    job_ids: Optional[List[ObjectId]] = Field(default_factory=list, alias="jobIds")

    def add_job_id(self, job_id: ObjectId) -> None:
        """Append a job reference. Duplicates are allowed."""
        if self.job_ids is None:
            self.job_ids = []
        self.job_ids.append(job_id)

    def remove_job_id(self, job_id: ObjectId) -> bool:
        """
        Remove the first occurrence of job_id.

        Returns:
            True if an entry was removed, False if job_id was not present
            (including when job_ids is unset)
        """
        if not self.job_ids:
            return False
        try:
            self.job_ids.remove(job_id)
        except ValueError:
            return False
        return True
