"""
Employee Service
Business rules for employee records: email uniqueness, soft delete and
restore, salary breakdowns and aggregate salary metrics.
"""

import math
from dataclasses import dataclass, field
from typing import Any

from salary_api.core.deductions import SalaryBreakdown, build_breakdown
from salary_api.core.errors import ConflictError, NotFoundError, ValidationError
from salary_api.core.metrics import CountrySalaryMetrics, JobTitleSalaryMetrics, SalaryMetrics
from salary_api.models import Employee
from salary_api.repositories.employee import EmployeeRepository

MAX_PAGE_LIMIT = 100


@dataclass
class EmployeePage:
    employees: list[Employee] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 10
    total_pages: int = 0


class EmployeeService:
    def __init__(self, repository: EmployeeRepository):
        self.repository = repository

    def create_employee(self, data: dict[str, Any]) -> Employee:
        if self.repository.email_exists(data["email"]):
            raise ConflictError(f"Employee with email {data['email']} already exists")
        return self.repository.create(data)

    def get_employee(self, employee_id: int) -> Employee:
        employee = self.repository.find_by_id(employee_id)
        if employee is None:
            raise NotFoundError("Employee", employee_id)
        return employee

    def list_employees(
        self,
        country: str | None = None,
        job_title: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> EmployeePage:
        if page < 1:
            raise ValidationError("Page must be at least 1")
        if not 1 <= limit <= MAX_PAGE_LIMIT:
            raise ValidationError(f"Limit must be between 1 and {MAX_PAGE_LIMIT}")

        employees, total = self.repository.find_all(
            country=country, job_title=job_title, page=page, limit=limit
        )
        return EmployeePage(
            employees=employees,
            total=total,
            page=page,
            limit=limit,
            total_pages=math.ceil(total / limit),
        )

    def list_deleted_employees(self) -> list[Employee]:
        return self.repository.find_deleted()

    def update_employee(self, employee_id: int, data: dict[str, Any]) -> Employee:
        employee = self.get_employee(employee_id)

        new_email = data.get("email")
        if new_email and new_email != employee.email:
            if self.repository.email_exists(new_email, exclude_id=employee_id):
                raise ConflictError(f"Employee with email {new_email} already exists")

        return self.repository.update(employee, data)

    def delete_employee(self, employee_id: int) -> None:
        employee = self.get_employee(employee_id)
        self.repository.soft_delete(employee)

    def restore_employee(self, employee_id: int) -> Employee:
        employee = self.repository.find_by_id(employee_id, include_deleted=True)
        if employee is None:
            raise NotFoundError("Employee", employee_id)
        if not employee.is_deleted:
            raise ConflictError(f"Employee with id {employee_id} is not deleted")
        return self.repository.restore(employee)

    def force_delete_employee(self, employee_id: int) -> None:
        employee = self.repository.find_by_id(employee_id, include_deleted=True)
        if employee is None:
            raise NotFoundError("Employee", employee_id)
        self.repository.hard_delete(employee)

    def get_salary_breakdown(self, employee_id: int) -> SalaryBreakdown:
        employee = self.get_employee(employee_id)
        return build_breakdown(employee.gross_salary_cents, employee.country)

    def get_salary_metrics_by_country(self) -> list[CountrySalaryMetrics]:
        return self.repository.salary_metrics_by_country()

    def get_salary_metrics_by_job_title(self) -> list[JobTitleSalaryMetrics]:
        return self.repository.salary_metrics_by_job_title()

    def get_salary_metrics(
        self, country: str | None = None, job_title: str | None = None
    ) -> SalaryMetrics:
        """Each filter narrows only its own grouping."""
        return SalaryMetrics(
            by_country=self.repository.salary_metrics_by_country(country),
            by_job_title=self.repository.salary_metrics_by_job_title(job_title),
        )
