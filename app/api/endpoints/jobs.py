import logging
from fastapi import APIRouter, HTTPException, Depends
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.core.database import get_db
from app.core.deps import path_object_id
from app.core.exceptions import StaleEntityError
from app.crud import job as job_crud
from app.schemas.job import JobCreateRequest, JobUpdateRequest, JobResponse

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.post("", status_code=201, response_model=JobResponse)
def create_job(
    request: JobCreateRequest,
    db: Database = Depends(get_db)
):
    """
    Post a new job.

    The job is not linked to any recruiter here; the client follows up with
    POST /recruiters/{email}/appendjob using the returned id.
    """
    try:
        new_job = job_crud.create(db, request)
    except PyMongoError as e:
        logger.error(f"Error creating job: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to create job: {str(e)}")

    logger.info(f"Created job {new_job.id}: {new_job.position} at {new_job.company}")
    return JobResponse.from_entity(new_job)


@router.get("", response_model=list[JobResponse])
def list_jobs(
    skip: int = 0,
    limit: int = 0,
    db: Database = Depends(get_db)
):
    """
    List jobs in posting order.

    Args:
        skip: Number of records to skip (default: 0)
        limit: Maximum number of records to return (default: 0, meaning all)
    """
    jobs = job_crud.get_all(db, skip=max(skip, 0), limit=max(limit, 0))
    return [JobResponse.from_entity(job) for job in jobs]


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: str, db: Database = Depends(get_db)):
    """Retrieve a job by ID."""
    job = job_crud.get_by_id(db, path_object_id(job_id, "job id"))

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    return JobResponse.from_entity(job)


@router.put("/{job_id}", response_model=JobResponse)
def replace_job(
    job_id: str,
    request: JobUpdateRequest,
    db: Database = Depends(get_db)
):
    """
    Replace all fields of a job.

    The request must carry the version returned by the last read. A 409
    means the job changed since then; re-read and resubmit.
    """
    try:
        job = job_crud.replace(db, path_object_id(job_id, "job id"), request)
    except StaleEntityError as e:
        raise HTTPException(status_code=409, detail=str(e))

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    logger.info(f"Replaced job {job.id} (version {job.version})")
    return JobResponse.from_entity(job)


@router.delete("/{job_id}", status_code=204)
def delete_job(job_id: str, db: Database = Depends(get_db)):
    """
    Delete a job by ID.

    Applications and recruiter job lists that reference it are not touched.
    """
    deleted = job_crud.delete(db, path_object_id(job_id, "job id"))

    if not deleted:
        raise HTTPException(status_code=404, detail="Job not found")

    logger.info(f"Deleted job {job_id}")
    return None
