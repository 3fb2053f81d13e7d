from pydantic import BaseModel, ConfigDict, Field


class CompanyCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    handle: str = Field(min_length=1, max_length=25)
    name: str = Field(min_length=1)
    description: str
    num_employees: int | None = Field(None, ge=0)
    logo_url: str | None = None


class CompanyUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(None, min_length=1)
    description: str = None
    num_employees: int | None = Field(None, ge=0)
    logo_url: str | None = None


class CompanyResponse(BaseModel):
    handle: str
    name: str
    description: str
    num_employees: int | None
    logo_url: str | None


class CompanyJob(BaseModel):
    id: int
    title: str
    salary: int | None
    equity: str | None


class CompanyDetail(CompanyResponse):
    jobs: list[CompanyJob] = []
