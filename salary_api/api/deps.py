"""
Shared API dependencies.
Provides reusable FastAPI dependencies for database access and services.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from salary_api.database import get_db
from salary_api.repositories.employee import EmployeeRepository
from salary_api.services.employee import EmployeeService


def get_employee_repository(db: Session = Depends(get_db)) -> EmployeeRepository:
    return EmployeeRepository(db)


def get_employee_service(
    repository: EmployeeRepository = Depends(get_employee_repository),
) -> EmployeeService:
    """Use as a FastAPI dependency: Depends(get_employee_service)"""
    return EmployeeService(repository)
