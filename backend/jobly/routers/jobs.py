from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from jobly.database import get_db
from jobly.schemas.job import JobCreate, JobDetail, JobListItem, JobResponse, JobUpdate
from jobly.services import job_service

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("", response_model=JobResponse, status_code=201)
async def create_job(req: JobCreate, db: Session = Depends(get_db)):
    return job_service.create(db, req.model_dump())


@router.get("", response_model=list[JobListItem])
async def list_jobs(
    title: str | None = None,
    min_salary: int | None = Query(None, ge=0),
    has_equity: bool | None = None,
    db: Session = Depends(get_db),
):
    return job_service.find_all(
        db, title=title, min_salary=min_salary, has_equity=has_equity
    )


@router.get("/{job_id}", response_model=JobDetail)
async def get_job(job_id: int, db: Session = Depends(get_db)):
    return job_service.get(db, job_id)


@router.patch("/{job_id}", response_model=JobResponse)
async def update_job(job_id: int, req: JobUpdate, db: Session = Depends(get_db)):
    # Explicit nulls are kept so they clear the column
    return job_service.update(db, job_id, req.model_dump(exclude_unset=True))


@router.delete("/{job_id}")
async def delete_job(job_id: int, db: Session = Depends(get_db)):
    job_service.remove(db, job_id)
    return {"deleted": job_id}
