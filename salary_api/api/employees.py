"""
Employee API routes.
CRUD for employee records, soft delete/restore, salary breakdowns and
aggregate salary metrics.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, status

from salary_api.api.deps import get_employee_service
from salary_api.schemas.schemas import (
    ApiResponse,
    CountryMetricsResponse,
    EmployeeCountry,
    EmployeeCreate,
    EmployeeListResponse,
    EmployeeResponse,
    EmployeeUpdate,
    ErrorResponse,
    JobTitleMetricsResponse,
    Pagination,
    SalaryBreakdownResponse,
    SalaryMetricsResponse,
)
from salary_api.services.employee import MAX_PAGE_LIMIT, EmployeeService

router = APIRouter(
    responses={
        400: {"model": ErrorResponse, "description": "Validation failed"},
        404: {"model": ErrorResponse, "description": "Not Found"},
    },
)

EmployeeId = Annotated[int, Path(ge=1, description="Employee ID")]


def _country_value(country: EmployeeCountry | None) -> str | None:
    return country.value if country else None


def _job_title_value(job_title: str | None) -> str | None:
    if job_title is None:
        return None
    return job_title.strip() or None


@router.get("/salary-metrics", response_model=ApiResponse[SalaryMetricsResponse])
def get_salary_metrics(
    country: EmployeeCountry | None = None,
    job_title: str | None = Query(None, alias="jobTitle", max_length=100),
    service: EmployeeService = Depends(get_employee_service),
):
    """Salary metrics by country and by job title; each filter narrows its own grouping."""
    metrics = service.get_salary_metrics(
        country=_country_value(country),
        job_title=_job_title_value(job_title),
    )
    return ApiResponse(data=SalaryMetricsResponse.model_validate(metrics))


@router.get("/metrics/by-country", response_model=ApiResponse[list[CountryMetricsResponse]])
def get_metrics_by_country(service: EmployeeService = Depends(get_employee_service)):
    metrics = service.get_salary_metrics_by_country()
    return ApiResponse(data=[CountryMetricsResponse.model_validate(m) for m in metrics])


@router.get("/metrics/by-job-title", response_model=ApiResponse[list[JobTitleMetricsResponse]])
def get_metrics_by_job_title(service: EmployeeService = Depends(get_employee_service)):
    metrics = service.get_salary_metrics_by_job_title()
    return ApiResponse(data=[JobTitleMetricsResponse.model_validate(m) for m in metrics])


@router.post(
    "",
    response_model=ApiResponse[EmployeeResponse],
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse, "description": "Email already exists"}},
)
def create_employee(data: EmployeeCreate, service: EmployeeService = Depends(get_employee_service)):
    """Create a new employee. Emails are unique across active and deleted records."""
    employee = service.create_employee(data.to_record())
    return ApiResponse(data=EmployeeResponse.model_validate(employee))


@router.get("", response_model=EmployeeListResponse)
def list_employees(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=MAX_PAGE_LIMIT),
    country: EmployeeCountry | None = None,
    job_title: str | None = Query(None, alias="jobTitle", max_length=100),
    service: EmployeeService = Depends(get_employee_service),
):
    """List active employees, newest first, with filtering and pagination."""
    result = service.list_employees(
        country=_country_value(country),
        job_title=_job_title_value(job_title),
        page=page,
        limit=limit,
    )
    return EmployeeListResponse(
        data=[EmployeeResponse.model_validate(e) for e in result.employees],
        pagination=Pagination(
            page=result.page,
            limit=result.limit,
            total=result.total,
            total_pages=result.total_pages,
        ),
    )


@router.get("/deleted", response_model=ApiResponse[list[EmployeeResponse]])
def list_deleted_employees(service: EmployeeService = Depends(get_employee_service)):
    employees = service.list_deleted_employees()
    return ApiResponse(data=[EmployeeResponse.model_validate(e) for e in employees])


@router.get("/{employee_id}", response_model=ApiResponse[EmployeeResponse])
def get_employee(
    employee_id: EmployeeId,
    service: EmployeeService = Depends(get_employee_service),
):
    employee = service.get_employee(employee_id)
    return ApiResponse(data=EmployeeResponse.model_validate(employee))


@router.put(
    "/{employee_id}",
    response_model=ApiResponse[EmployeeResponse],
    responses={409: {"model": ErrorResponse, "description": "Email already exists"}},
)
def update_employee(
    data: EmployeeUpdate,
    employee_id: EmployeeId,
    service: EmployeeService = Depends(get_employee_service),
):
    """Update the given fields of an employee."""
    employee = service.update_employee(employee_id, data.to_record())
    return ApiResponse(data=EmployeeResponse.model_validate(employee))


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_employee(
    employee_id: EmployeeId,
    service: EmployeeService = Depends(get_employee_service),
):
    """Soft delete: the record is hidden but can be restored."""
    service.delete_employee(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{employee_id}/restore",
    response_model=ApiResponse[EmployeeResponse],
    responses={409: {"model": ErrorResponse, "description": "Employee is not deleted"}},
)
def restore_employee(
    employee_id: EmployeeId,
    service: EmployeeService = Depends(get_employee_service),
):
    employee = service.restore_employee(employee_id)
    return ApiResponse(data=EmployeeResponse.model_validate(employee))


@router.delete("/{employee_id}/force", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def force_delete_employee(
    employee_id: EmployeeId,
    service: EmployeeService = Depends(get_employee_service),
):
    """Permanently delete an employee, active or soft-deleted."""
    service.force_delete_employee(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{employee_id}/salary", response_model=ApiResponse[SalaryBreakdownResponse])
def get_salary_breakdown(
    employee_id: EmployeeId,
    service: EmployeeService = Depends(get_employee_service),
):
    """Salary breakdown with tax, insurance and retirement deductions."""
    breakdown = service.get_salary_breakdown(employee_id)
    return ApiResponse(data=SalaryBreakdownResponse.model_validate(breakdown))
