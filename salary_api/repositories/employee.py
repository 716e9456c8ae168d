"""
Employee repository.
All database access for employees. Soft-deleted rows (deleted_at set) are
hidden from lookups, listings and metrics unless asked for explicitly.
"""

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from salary_api.core.errors import ConflictError
from salary_api.core.metrics import (
    CountrySalaryMetrics,
    JobTitleSalaryMetrics,
    country_metrics_from_row,
    job_title_metrics_from_row,
)
from salary_api.models import Employee

logger = logging.getLogger(__name__)


class EmployeeRepository:
    def __init__(self, session: Session):
        self.session = session

    def _commit(self, employee: Employee) -> Employee:
        email = employee.email
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            # A concurrent writer can take the email between the check and the insert
            raise ConflictError(f"Employee with email {email} already exists") from e
        self.session.refresh(employee)
        return employee

    def create(self, data: dict[str, Any]) -> Employee:
        employee = Employee(**data)
        self.session.add(employee)
        self._commit(employee)
        logger.info("Created employee id=%s", employee.id)
        return employee

    def find_by_id(self, employee_id: int, include_deleted: bool = False) -> Employee | None:
        query = select(Employee).where(Employee.id == employee_id)
        if not include_deleted:
            query = query.where(Employee.deleted_at.is_(None))
        return self.session.scalars(query).first()

    def find_all(
        self,
        country: str | None = None,
        job_title: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[Employee], int]:
        query = select(Employee).where(Employee.deleted_at.is_(None))
        if country:
            query = query.where(Employee.country == country)
        if job_title:
            query = query.where(Employee.job_title == job_title)

        total = self.session.scalar(select(func.count()).select_from(query.subquery())) or 0

        offset = (page - 1) * limit
        rows = self.session.scalars(
            query.order_by(Employee.created_at.desc(), Employee.id.desc())
            .limit(limit)
            .offset(offset)
        ).all()

        return list(rows), total

    def find_deleted(self) -> list[Employee]:
        query = (
            select(Employee)
            .where(Employee.deleted_at.is_not(None))
            .order_by(Employee.deleted_at.desc(), Employee.id.desc())
        )
        return list(self.session.scalars(query).all())

    def update(self, employee: Employee, changes: dict[str, Any]) -> Employee:
        for key, value in changes.items():
            setattr(employee, key, value)
        return self._commit(employee)

    def soft_delete(self, employee: Employee) -> Employee:
        employee.deleted_at = datetime.now(timezone.utc)
        self._commit(employee)
        logger.info("Soft-deleted employee id=%s", employee.id)
        return employee

    def restore(self, employee: Employee) -> Employee:
        employee.deleted_at = None
        self._commit(employee)
        logger.info("Restored employee id=%s", employee.id)
        return employee

    def hard_delete(self, employee: Employee) -> None:
        employee_id = employee.id
        self.session.delete(employee)
        self.session.commit()
        logger.info("Permanently deleted employee id=%s", employee_id)

    def email_exists(self, email: str, exclude_id: int | None = None) -> bool:
        # Soft-deleted rows still hold their email under the unique constraint
        query = select(Employee.id).where(Employee.email == email)
        if exclude_id is not None:
            query = query.where(Employee.id != exclude_id)
        return self.session.scalars(query).first() is not None

    def salary_metrics_by_country(self, country: str | None = None) -> list[CountrySalaryMetrics]:
        query = (
            select(
                Employee.country,
                func.avg(Employee.gross_salary_cents),
                func.min(Employee.gross_salary_cents),
                func.max(Employee.gross_salary_cents),
                func.count(Employee.id),
            )
            .where(Employee.deleted_at.is_(None))
            .group_by(Employee.country)
            .order_by(Employee.country)
        )
        if country:
            query = query.where(Employee.country == country)

        return [country_metrics_from_row(*row) for row in self.session.execute(query).all()]

    def salary_metrics_by_job_title(self, job_title: str | None = None) -> list[JobTitleSalaryMetrics]:
        query = (
            select(
                Employee.job_title,
                func.avg(Employee.gross_salary_cents),
                func.min(Employee.gross_salary_cents),
                func.max(Employee.gross_salary_cents),
                func.count(Employee.id),
            )
            .where(Employee.deleted_at.is_(None))
            .group_by(Employee.job_title)
            .order_by(Employee.job_title)
        )
        if job_title:
            query = query.where(Employee.job_title == job_title)

        return [job_title_metrics_from_row(*row) for row in self.session.execute(query).all()]
