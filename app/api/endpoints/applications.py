"""
Job application endpoints.

- POST /applications: apply for an existing job
- GET /applications: list applications, optionally for one job
- GET /applications/job/{job_id}: earliest application for a job
- GET /applications/{application_id}
- DELETE /applications/{application_id}
"""

import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Depends, status
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.core.database import get_db
from app.core.deps import path_object_id
from app.core.exceptions import ReferenceNotFoundError
from app.crud import application as application_crud
from app.schemas.application import JobApplicationCreateRequest, JobApplicationResponse

router = APIRouter(prefix="/applications", tags=["Applications"])
logger = logging.getLogger(__name__)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=JobApplicationResponse)
def apply_for_job(
    request: JobApplicationCreateRequest,
    db: Database = Depends(get_db)
):
    """Submit an application. The job must exist."""
    try:
        application = application_crud.create(db, request)
    except ReferenceNotFoundError:
        raise HTTPException(status_code=404, detail="Job not found")
    except PyMongoError as e:
        logger.error(f"Error creating application for job {request.job_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to create application: {str(e)}")

    logger.info(f"Application {application.id} submitted for job {application.job_id}")
    return JobApplicationResponse.from_entity(application)


@router.get("", response_model=list[JobApplicationResponse])
def list_applications(
    job_id: Optional[str] = None,
    db: Database = Depends(get_db)
):
    """
    List applications, oldest first.

    Args:
        job_id: Optional filter; only applications for this job
    """
    if job_id is not None:
        applications = application_crud.get_multi_by_job_id(db, path_object_id(job_id, "job id"))
    else:
        applications = application_crud.get_all(db)
    return [JobApplicationResponse.from_entity(a) for a in applications]


@router.get("/job/{job_id}", response_model=JobApplicationResponse)
def get_application_for_job(job_id: str, db: Database = Depends(get_db)):
    """Return the earliest application submitted for a job."""
    application = application_crud.get_by_job_id(db, path_object_id(job_id, "job id"))

    if not application:
        raise HTTPException(status_code=404, detail="No application found for this job")

    return JobApplicationResponse.from_entity(application)


@router.get("/{application_id}", response_model=JobApplicationResponse)
def get_application(application_id: str, db: Database = Depends(get_db)):
    application = application_crud.get_by_id(db, path_object_id(application_id, "application id"))

    if not application:
        raise HTTPException(status_code=404, detail="Application not found")

    return JobApplicationResponse.from_entity(application)


@router.delete("/{application_id}", status_code=204)
def delete_application(application_id: str, db: Database = Depends(get_db)):
    deleted = application_crud.delete(db, path_object_id(application_id, "application id"))

    if not deleted:
        raise HTTPException(status_code=404, detail="Application not found")

    logger.info(f"Deleted application {application_id}")
    return None
