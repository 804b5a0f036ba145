from decimal import Decimal, InvalidOperation
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from typing import Annotated, Any, List, Optional

# Upper bound of a PostgreSQL INTEGER column
MAX_SALARY = 2147483647


def normalize_equity(value: Any) -> Optional[str]:
    """
    Accept equity as a number or numeric string in [0, 1].

    Returns the value as a string, since equity is exposed as a string.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError("equity must be a number between 0 and 1")
    if isinstance(value, (int, float, Decimal)):
        text = str(value)
    elif isinstance(value, str):
        text = value.strip()
    else:
        raise ValueError("equity must be a number between 0 and 1")

    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ValueError("equity must be a number between 0 and 1")

    if not amount.is_finite() or amount < 0 or amount > 1:
        raise ValueError("equity must be a number between 0 and 1")
    return text


Equity = Annotated[Optional[str], BeforeValidator(normalize_equity)]


class JobCreateRequest(BaseModel):
    """Schema for creating a new job"""
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0, le=MAX_SALARY, strict=True)
    equity: Equity = None
    company_handle: str = Field(..., min_length=1, max_length=25, alias="companyHandle")


class JobUpdateRequest(BaseModel):
    """
    Schema for a partial job update.

    Only title, salary and equity can change; id and companyHandle are
    rejected as unknown fields. Fields left out are not touched, fields sent
    as null are cleared.
    """
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0, le=MAX_SALARY, strict=True)
    equity: Equity = None

    @field_validator("title")
    @classmethod
    def title_not_null(cls, v: Optional[str]) -> str:
        """title is NOT NULL in storage"""
        if v is None:
            raise ValueError("title cannot be null")
        return v


class JobFilters(BaseModel):
    """Optional filters for listing jobs (all combine with AND)"""
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    min_salary: Optional[int] = Field(None, ge=0, alias="minSalary")
    has_equity: Optional[bool] = Field(None, alias="hasEquity")


class JobResponse(BaseModel):
    """Schema for job response"""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[str] = None
    company_handle: str = Field(..., alias="companyHandle")


class JobSingleResponse(BaseModel):
    job: JobResponse


class JobListResponse(BaseModel):
    jobs: List[JobResponse]


class JobDeleteResponse(BaseModel):
    deleted: str
