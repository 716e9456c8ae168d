"""
Pydantic schemas for API request/response validation.
JSON fields are camelCase on the wire; snake_case names are accepted too.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StrictInt, field_validator
from pydantic.alias_generators import to_camel

from salary_api.core.deductions import CountryCode, DeductionType


MIN_SALARY_CENTS = 0
MAX_SALARY_CENTS = 1_000_000_000_000  # $10 billion
MAX_EMAIL_LENGTH = 255

DataT = TypeVar("DataT")


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


class EmployeeCountry(str, Enum):
    """Countries an employee record may be created with (XX is internal only)."""
    US = "US"
    UK = "UK"
    IN = "IN"
    CA = "CA"


SalaryCents = Annotated[StrictInt, Field(ge=MIN_SALARY_CENTS, le=MAX_SALARY_CENTS)]
Name = Annotated[str, Field(min_length=2, max_length=100)]
JobTitle = Annotated[str, Field(min_length=2, max_length=100)]


# ── Envelope Schemas ──

class ApiResponse(BaseModel, Generic[DataT]):
    status: str = "success"
    data: DataT


class FieldError(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    status: str = "error"
    message: str
    errors: list[FieldError] | None = None


# ── Employee Schemas ──

class _EmployeeInput(CamelModel):
    @field_validator("email", mode="after", check_fields=False)
    @classmethod
    def normalize_email(cls, value: str | None) -> str | None:
        if value is None:
            return value
        if len(value) > MAX_EMAIL_LENGTH:
            raise ValueError(f"Email must be at most {MAX_EMAIL_LENGTH} characters")
        return value.lower()

    def to_record(self) -> dict[str, Any]:
        """Column values for the employees table, without unset or null fields."""
        record = self.model_dump(exclude_unset=True, exclude_none=True)
        if "country" in record:
            record["country"] = CountryCode(record["country"].value)
        return record


class EmployeeCreate(_EmployeeInput):
    name: Name
    email: EmailStr
    job_title: JobTitle
    country: EmployeeCountry
    gross_salary_cents: SalaryCents


class EmployeeUpdate(_EmployeeInput):
    name: Name | None = None
    email: EmailStr | None = None
    job_title: JobTitle | None = None
    country: EmployeeCountry | None = None
    gross_salary_cents: SalaryCents | None = None


class EmployeeResponse(CamelModel):
    id: int
    name: str
    email: str
    job_title: str
    country: CountryCode
    gross_salary_cents: int
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int


class EmployeeListResponse(ApiResponse[list[EmployeeResponse]]):
    pagination: Pagination


# ── Salary Schemas ──

class DeductionResponse(CamelModel):
    type: DeductionType
    amount_cents: int
    percentage: float
    description: str


class SalaryBreakdownResponse(CamelModel):
    gross_salary_cents: int
    deductions: list[DeductionResponse]
    total_deductions_cents: int
    net_salary_cents: int


# ── Metrics Schemas ──

class CountryMetricsResponse(CamelModel):
    country: str
    avg_salary_cents: int
    min_salary_cents: int
    max_salary_cents: int
    employee_count: int


class JobTitleMetricsResponse(CamelModel):
    job_title: str
    avg_salary_cents: int
    min_salary_cents: int
    max_salary_cents: int
    employee_count: int


class SalaryMetricsResponse(CamelModel):
    by_country: list[CountryMetricsResponse]
    by_job_title: list[JobTitleMetricsResponse]
