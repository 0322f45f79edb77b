"""
CRUD operations for Job model.

Implements the Repository pattern to encapsulate all database operations
for jobs, providing a clean interface for the API layer.
"""

from typing import List, Optional
from bson import ObjectId
from pymongo.database import Database

from app.crud import base
from app.models.job import Job
from app.schemas.job import JobCreateRequest, JobUpdateRequest


def create(db: Database, job_data: JobCreateRequest) -> Job:
    """
    Create a new job in the database.

    Args:
        db: MongoDB database
        job_data: Validated job creation data

    Returns:
        Created Job instance with id
    """
    job = Job(
        position=job_data.position,
        company=job_data.company,
        location=job_data.location,
        experience=job_data.experience,
        description=job_data.description,
        skills=job_data.skills,
    )
    return base.save(db, job)


def save(db: Database, job: Job) -> Job:
    """Insert or fully replace a job (see app.crud.base.save)."""
    return base.save(db, job)


def get_by_id(db: Database, job_id: ObjectId) -> Optional[Job]:
    """
    Retrieve a job by its ID.

    Args:
        db: MongoDB database
        job_id: Job ID to retrieve

    Returns:
        Job instance if found, None otherwise
    """
    return base.get_by_id(db, Job, job_id)


def get_all(db: Database, skip: int = 0, limit: int = 0) -> List[Job]:
    """
    Retrieve jobs in insertion order.

    Args:
        db: MongoDB database
        skip: Number of records to skip (offset)
        limit: Maximum number of records to return (0 = all)

    Returns:
        List of Job instances
    """
    return base.find_many(db, Job, sort=base.CREATION_ORDER, skip=skip, limit=limit)


def replace(db: Database, job_id: ObjectId, job_data: JobUpdateRequest) -> Optional[Job]:
    """
    Replace every field of an existing job.

    Args:
        db: MongoDB database
        job_id: Job ID to replace
        job_data: New field values plus the version last read by the caller

    Returns:
        Updated Job instance if found, None otherwise

    Raises:
        StaleEntityError: If job_data.version is not the stored version
    """
    if get_by_id(db, job_id) is None:
        return None

    job = Job(
        id=job_id,
        version=job_data.version,
        position=job_data.position,
        company=job_data.company,
        location=job_data.location,
        experience=job_data.experience,
        description=job_data.description,
        skills=job_data.skills,
    )
    return base.save(db, job)


def delete(db: Database, job_id: ObjectId) -> bool:
    """
    Delete a job by ID.

    Recruiters referencing the job and applications against it are left
    untouched.

    Returns:
        True if deleted, False if not found
    """
    return base.delete(db, Job, job_id)
