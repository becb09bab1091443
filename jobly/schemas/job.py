from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# Decimal string in [0, 1]: "0", "0.065", ".5", "1", "1.00"
EQUITY_PATTERN = r"^(0?\.\d+|0|1(\.0+)?)$"

# jobs.salary is a PostgreSQL INTEGER
MAX_SALARY = 2_147_483_647


class WireModel(BaseModel):
    """Request model: only the camelCase names are accepted."""

    model_config = ConfigDict(alias_generator=to_camel)


class CamelModel(WireModel):
    """Response model: built from snake_case repo rows, serialized as camelCase."""

    model_config = ConfigDict(populate_by_name=True)


class JobCreate(WireModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1, max_length=200)
    salary: int | None = Field(default=None, ge=0, le=MAX_SALARY, strict=True)
    equity: str | None = Field(default=None, pattern=EQUITY_PATTERN)
    company_handle: str = Field(min_length=1, max_length=25)


class JobUpdate(WireModel):
    """Partial update. id and companyHandle are not accepted."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, min_length=1, max_length=200)
    salary: int | None = Field(default=None, ge=0, le=MAX_SALARY, strict=True)
    equity: str | None = Field(default=None, pattern=EQUITY_PATTERN)

    @field_validator("title")
    @classmethod
    def title_not_null(cls, v):
        if v is None:
            raise ValueError("title may not be null")
        return v


class JobFilter(WireModel):
    """Query-string filters for GET /jobs. Unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")

    # An empty title matches every job.
    title: str | None = None
    min_salary: int | None = Field(default=None, ge=0, le=MAX_SALARY)
    has_equity: bool | None = None


class Company(CamelModel):
    handle: str
    name: str
    description: str | None = None
    num_employees: int | None = None
    logo_url: str | None = None


class Job(CamelModel):
    id: int
    title: str
    salary: int | None = None
    equity: str | None = None
    company_handle: str


class JobSummary(Job):
    company_name: str


class JobDetail(CamelModel):
    id: int
    title: str
    salary: int | None = None
    equity: str | None = None
    company: Company | None = None


class JobResponse(BaseModel):
    job: Job


class JobListResponse(BaseModel):
    jobs: list[JobSummary]


class JobDetailResponse(BaseModel):
    job: JobDetail


class JobDeletedResponse(BaseModel):
    deleted: int
