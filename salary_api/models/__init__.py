from salary_api.models.base import Base, TimestampMixin
from salary_api.models.employee import Employee

__all__ = [
    "Base",
    "TimestampMixin",
    "Employee",
]
