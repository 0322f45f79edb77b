"""
CRUD operations for Recruiter model.

Job membership changes (append_job/remove_job) are read-modify-write on
the whole document. The save is conditional on the version that was read,
so a concurrent writer causes a re-read instead of a lost update.
"""

import logging
from typing import List, Optional, Tuple
from bson import ObjectId
from pymongo.database import Database

from app.core.exceptions import ReferenceNotFoundError, StaleEntityError
from app.core.security import get_password_hash, verify_password
from app.crud import base
from app.models.job import Job
from app.models.recruiter import Recruiter
from app.schemas.recruiter import RecruiterSignupRequest

logger = logging.getLogger(__name__)

# Attempts for a job-list update before the conflict is surfaced to the caller
MAX_UPDATE_ATTEMPTS = 3


def create(db: Database, signup_data: RecruiterSignupRequest) -> Recruiter:
    """
    Create a recruiter with a bcrypt-hashed password and no jobs.

    Raises:
        pymongo.errors.DuplicateKeyError: If the email is already registered
    """
    recruiter = Recruiter(
        name=signup_data.name,
        email=signup_data.email,
        hashed_password=get_password_hash(signup_data.password),
        company=signup_data.company,
        location=signup_data.location,
    )
    return base.save(db, recruiter)


def save(db: Database, recruiter: Recruiter) -> Recruiter:
    """Insert or fully replace a recruiter (see app.crud.base.save)."""
    return base.save(db, recruiter)


def get_by_id(db: Database, recruiter_id: ObjectId) -> Optional[Recruiter]:
    return base.get_by_id(db, Recruiter, recruiter_id)


def get_by_email(db: Database, email: str) -> Optional[Recruiter]:
    """
    Retrieve a recruiter by email.

    Query: {"email": email} on the unique email index. Matching is exact
    and case-sensitive.

    Returns:
        Recruiter if found, None otherwise
    """
    return base.find_one(db, Recruiter, {"email": email})


def get_all(db: Database) -> List[Recruiter]:
    return base.find_many(db, Recruiter, sort=base.CREATION_ORDER)


def delete(db: Database, recruiter_id: ObjectId) -> bool:
    """
    Delete a recruiter by ID. Their jobs are not deleted.

    Returns:
        True if deleted, False if not found
    """
    return base.delete(db, Recruiter, recruiter_id)


def authenticate(db: Database, email: str, password: str) -> Optional[Recruiter]:
    """
    Check a recruiter's credentials.

    Returns:
        Recruiter if the email exists and the password matches, None otherwise
    """
    recruiter = get_by_email(db, email)
    if recruiter is None:
        return None
    if not verify_password(password, recruiter.hashed_password):
        return None
    return recruiter


def append_job(db: Database, email: str, job_id: ObjectId) -> Optional[Recruiter]:
    """
    Add a job to a recruiter's job list.

    Args:
        db: MongoDB database
        email: Recruiter email
        job_id: Job to append (must exist)

    Returns:
        Updated Recruiter, or None if no recruiter has this email

    Raises:
        ReferenceNotFoundError: If the job does not exist
        StaleEntityError: If every attempt lost a concurrent update
    """
    if base.get_by_id(db, Job, job_id) is None:
        raise ReferenceNotFoundError(Job.collection_name, job_id)

    for attempt in range(1, MAX_UPDATE_ATTEMPTS + 1):
        recruiter = get_by_email(db, email)
        if recruiter is None:
            return None

        recruiter.add_job_id(job_id)
        try:
            return base.save(db, recruiter)
        except StaleEntityError:
            if attempt == MAX_UPDATE_ATTEMPTS:
                raise
            logger.info(f"Retrying append of job {job_id} for {email} (attempt {attempt})")


def remove_job(db: Database, email: str, job_id: ObjectId) -> Tuple[Optional[Recruiter], bool]:
    """
    Remove the first occurrence of a job from a recruiter's job list.

    The job itself need not exist any more; the usual flow deletes the
    job first and unlinks it afterwards.

    Returns:
        (recruiter, removed): recruiter is None if no recruiter has this
        email; removed is False when the job was not in the list, in which
        case nothing is written

    Raises:
        StaleEntityError: If every attempt lost a concurrent update
    """
    for attempt in range(1, MAX_UPDATE_ATTEMPTS + 1):
        recruiter = get_by_email(db, email)
        if recruiter is None:
            return None, False

        if not recruiter.remove_job_id(job_id):
            return recruiter, False
        try:
            return base.save(db, recruiter), True
        except StaleEntityError:
            if attempt == MAX_UPDATE_ATTEMPTS:
                raise
            logger.info(f"Retrying removal of job {job_id} for {email} (attempt {attempt})")
