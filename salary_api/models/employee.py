from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Enum, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from salary_api.core.deductions.brackets import CountryCode
from salary_api.models.base import Base, TimestampMixin


class Employee(Base, TimestampMixin):
    __tablename__ = "employees"
    __table_args__ = (
        Index("idx_employees_country_job_title", "country", "job_title"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    job_title: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    country: Mapped[CountryCode] = mapped_column(
        Enum(CountryCode, name="country_code_enum", native_enum=False, length=2),
        nullable=False,
        index=True,
    )
    # Annual gross salary in cents
    gross_salary_cents: Mapped[int] = mapped_column(BigInteger, nullable=False)
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True
    )

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def __repr__(self) -> str:
        return f"<Employee(id={self.id}, email={self.email})>"
