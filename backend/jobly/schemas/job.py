from decimal import Decimal, InvalidOperation

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jobly.schemas.company import CompanyResponse


def _check_equity(value: str | None) -> str | None:
    if value is None:
        return value
    try:
        equity = Decimal(value)
    except InvalidOperation:
        raise ValueError("equity must be a decimal number") from None
    if not equity.is_finite() or not 0 <= equity <= 1:
        raise ValueError("equity must be between 0 and 1")
    return value


class JobCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1)
    salary: int | None = Field(None, ge=0)
    equity: str | None = None
    company_handle: str

    @field_validator("equity")
    @classmethod
    def equity_in_range(cls, value):
        return _check_equity(value)


class JobUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Omitted means unchanged; title may not be set to null
    title: str = Field(None, min_length=1)
    salary: int | None = Field(None, ge=0)
    equity: str | None = None

    @field_validator("equity")
    @classmethod
    def equity_in_range(cls, value):
        return _check_equity(value)


class JobResponse(BaseModel):
    id: int
    title: str
    salary: int | None
    equity: str | None
    company_handle: str


class JobListItem(JobResponse):
    company_name: str | None


class JobDetail(BaseModel):
    id: int
    title: str
    salary: int | None
    equity: str | None
    company: CompanyResponse | None
