"""
CRUD operations for JobApplication model.
"""

from typing import List, Optional
from bson import ObjectId
from pymongo.database import Database

from app.core.exceptions import ReferenceNotFoundError
from app.crud import base
from app.models.application import JobApplication
from app.models.job import Job
from app.schemas.application import JobApplicationCreateRequest


def create(db: Database, application_data: JobApplicationCreateRequest) -> JobApplication:
    """
    Create a new application after checking the job exists.

    Args:
        db: MongoDB database
        application_data: Validated application data

    Returns:
        Created JobApplication with id

    Raises:
        ReferenceNotFoundError: If the referenced job does not exist
    """
    job_id = ObjectId(application_data.job_id)
    if base.get_by_id(db, Job, job_id) is None:
        raise ReferenceNotFoundError(Job.collection_name, job_id)

    application = JobApplication(
        job_id=job_id,
        name=application_data.name,
        email=application_data.email,
    )
    return base.save(db, application)


def save(db: Database, application: JobApplication) -> JobApplication:
    """Insert or fully replace an application (see app.crud.base.save)."""
    return base.save(db, application)


def get_by_id(db: Database, application_id: ObjectId) -> Optional[JobApplication]:
    return base.get_by_id(db, JobApplication, application_id)


def get_by_job_id(db: Database, job_id: ObjectId) -> Optional[JobApplication]:
    """
    Retrieve one application for a job.

    Query: {"jobId": job_id} on the jobId index. When several applications
    reference the job, the earliest created one is returned.

    Returns:
        JobApplication if any exists for the job, None otherwise
    """
    return base.find_one(db, JobApplication, {"jobId": job_id}, sort=base.CREATION_ORDER)


def get_multi_by_job_id(db: Database, job_id: ObjectId) -> List[JobApplication]:
    """Retrieve every application for a job, oldest first."""
    return base.find_many(db, JobApplication, {"jobId": job_id}, sort=base.CREATION_ORDER)


def get_all(db: Database) -> List[JobApplication]:
    return base.find_many(db, JobApplication, sort=base.CREATION_ORDER)


def delete(db: Database, application_id: ObjectId) -> bool:
    """
    Delete an application by ID.

    Returns:
        True if deleted, False if not found
    """
    return base.delete(db, JobApplication, application_id)
