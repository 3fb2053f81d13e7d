from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from jobly.database import get_db
from jobly.schemas.company import (
    CompanyCreate,
    CompanyDetail,
    CompanyResponse,
    CompanyUpdate,
)
from jobly.services import company_service

router = APIRouter(prefix="/companies", tags=["companies"])


@router.post("", response_model=CompanyResponse, status_code=201)
async def create_company(req: CompanyCreate, db: Session = Depends(get_db)):
    return company_service.create(db, req.model_dump())


@router.get("", response_model=list[CompanyResponse])
async def list_companies(
    name: str | None = None,
    min_employees: int | None = Query(None, ge=0),
    max_employees: int | None = Query(None, ge=0),
    db: Session = Depends(get_db),
):
    return company_service.find_all(
        db, name=name, min_employees=min_employees, max_employees=max_employees
    )


@router.get("/{handle}", response_model=CompanyDetail)
async def get_company(handle: str, db: Session = Depends(get_db)):
    return company_service.get(db, handle)


@router.patch("/{handle}", response_model=CompanyResponse)
async def update_company(handle: str, req: CompanyUpdate, db: Session = Depends(get_db)):
    return company_service.update(db, handle, req.model_dump(exclude_unset=True))


@router.delete("/{handle}")
async def delete_company(handle: str, db: Session = Depends(get_db)):
    company_service.remove(db, handle)
    return {"deleted": handle}
