import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session

from jobly.database import get_db
from jobly.dependencies import CurrentUser, get_current_admin
from jobly.repos import job_repo
from jobly.schemas.job import (
    JobCreate,
    JobDeletedResponse,
    JobDetailResponse,
    JobFilter,
    JobListResponse,
    JobResponse,
    JobUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/jobs", tags=["jobs"])


def get_job_filter(request: Request) -> JobFilter:
    """Validate the raw query string so unknown keys are rejected, not ignored."""
    try:
        return JobFilter.model_validate(dict(request.query_params))
    except ValidationError as e:
        raise RequestValidationError(e.errors()) from e


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
def create_job(
    body: JobCreate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_admin),
):
    """Create a job. Admin only."""
    job = job_repo.create(
        db,
        body.title,
        body.company_handle,
        salary=body.salary,
        equity=body.equity,
    )
    logger.info("Job %s created by admin %s", job["id"], user.username)
    return JobResponse(job=job)


@router.get("", response_model=JobListResponse)
def list_jobs(
    filters: JobFilter = Depends(get_job_filter),
    db: Session = Depends(get_db),
):
    """
    List jobs with their company name, ordered by id.
    Optional filters: title (case-insensitive substring), minSalary, hasEquity.
    """
    jobs = job_repo.find_all(
        db,
        title=filters.title,
        min_salary=filters.min_salary,
        has_equity=filters.has_equity,
    )
    logger.debug("GET /jobs filters=%s count=%d", filters.model_dump(exclude_none=True), len(jobs))
    return JobListResponse(jobs=jobs)


@router.get("/{job_id}", response_model=JobDetailResponse)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """Return a job with its company embedded."""
    return JobDetailResponse(job=job_repo.get(db, job_id))


@router.patch("/{job_id}", response_model=JobResponse)
def update_job(
    job_id: int,
    body: JobUpdate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_admin),
):
    """Change any of title, salary, equity. Admin only."""
    job = job_repo.update(db, job_id, body.model_dump(exclude_unset=True))
    logger.info("Job %s updated by admin %s", job_id, user.username)
    return JobResponse(job=job)


@router.delete("/{job_id}", response_model=JobDeletedResponse)
def delete_job(
    job_id: int,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_admin),
):
    """Delete a job. Admin only."""
    job_repo.remove(db, job_id)
    logger.info("Job %s deleted by admin %s", job_id, user.username)
    return JobDeletedResponse(deleted=job_id)
