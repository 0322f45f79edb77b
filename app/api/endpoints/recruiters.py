"""
Recruiter endpoints.

- POST /recruiters/signup: create an account (password stored as bcrypt hash)
- POST /recruiters/login: check credentials and return the profile
- GET /recruiters/{email}: profile lookup by email
- POST /recruiters/{email}/appendjob: link a posted job to the recruiter
- POST /recruiters/{email}/removejob: unlink a job (normally after deleting it)

Session handling is left to the caller; login only verifies credentials.
"""

import logging
from fastapi import APIRouter, Body, HTTPException, Depends, status
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from app.core.database import get_db
from app.core.exceptions import ReferenceNotFoundError, StaleEntityError
from app.crud import recruiter as recruiter_crud
from app.schemas.recruiter import (
    JobIdBody,
    RecruiterLoginRequest,
    RecruiterResponse,
    RecruiterSignupRequest,
    job_id_from_body,
)

router = APIRouter(prefix="/recruiters", tags=["Recruiters"])
logger = logging.getLogger(__name__)


@router.post("/signup", status_code=201, response_model=RecruiterResponse)
def signup(
    request: RecruiterSignupRequest,
    db: Database = Depends(get_db)
):
    """Register a new recruiter account."""
    if recruiter_crud.get_by_email(db, request.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered"
        )

    try:
        recruiter = recruiter_crud.create(db, request)
    except DuplicateKeyError:
        # Lost a race with a concurrent signup for the same email
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered"
        )

    logger.info(f"Registered recruiter {recruiter.id}")
    return RecruiterResponse.from_entity(recruiter)


@router.post("/login", response_model=RecruiterResponse)
def login(
    request: RecruiterLoginRequest,
    db: Database = Depends(get_db)
):
    """Verify recruiter credentials."""
    recruiter = recruiter_crud.authenticate(db, request.email, request.password)
    if not recruiter:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password"
        )
    return RecruiterResponse.from_entity(recruiter)


@router.get("/{email}", response_model=RecruiterResponse)
def get_recruiter(email: str, db: Database = Depends(get_db)):
    recruiter = recruiter_crud.get_by_email(db, email)

    if not recruiter:
        raise HTTPException(status_code=404, detail="Recruiter not found")

    return RecruiterResponse.from_entity(recruiter)


@router.post("/{email}/appendjob", response_model=RecruiterResponse)
def append_job(
    email: str,
    body: JobIdBody = Body(...),
    db: Database = Depends(get_db)
):
    """Add a job to the recruiter's job list. The job must exist."""
    job_id = job_id_from_body(body)
    try:
        recruiter = recruiter_crud.append_job(db, email, job_id)
    except ReferenceNotFoundError:
        raise HTTPException(status_code=404, detail="Job not found")
    except StaleEntityError as e:
        raise HTTPException(status_code=409, detail=str(e))

    if not recruiter:
        raise HTTPException(status_code=404, detail="Recruiter not found")

    logger.info(f"Linked job {job_id} to recruiter {recruiter.id}")
    return RecruiterResponse.from_entity(recruiter)


@router.post("/{email}/removejob", response_model=RecruiterResponse)
def remove_job(
    email: str,
    body: JobIdBody = Body(...),
    db: Database = Depends(get_db)
):
    """Remove a job from the recruiter's job list."""
    job_id = job_id_from_body(body)
    try:
        recruiter, removed = recruiter_crud.remove_job(db, email, job_id)
    except StaleEntityError as e:
        raise HTTPException(status_code=409, detail=str(e))

    if not recruiter:
        raise HTTPException(status_code=404, detail="Recruiter not found")
    if not removed:
        raise HTTPException(status_code=404, detail="Job is not linked to this recruiter")

    logger.info(f"Unlinked job {job_id} from recruiter {recruiter.id}")
    return RecruiterResponse.from_entity(recruiter)
