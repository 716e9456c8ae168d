"""
Salary aggregate metrics.
Grouped average/min/max/count of gross salary, per country and per job title.
The grouping itself runs in the database; these are the result shapes.
"""

from dataclasses import dataclass, field

from salary_api.core.money import round_half_up_cents


@dataclass(frozen=True)
class CountrySalaryMetrics:
    country: str
    avg_salary_cents: int
    min_salary_cents: int
    max_salary_cents: int
    employee_count: int


@dataclass(frozen=True)
class JobTitleSalaryMetrics:
    job_title: str
    avg_salary_cents: int
    min_salary_cents: int
    max_salary_cents: int
    employee_count: int


@dataclass
class SalaryMetrics:
    by_country: list[CountrySalaryMetrics] = field(default_factory=list)
    by_job_title: list[JobTitleSalaryMetrics] = field(default_factory=list)


def country_metrics_from_row(country, avg, minimum, maximum, count) -> CountrySalaryMetrics:
    return CountrySalaryMetrics(
        country=getattr(country, "value", country),
        avg_salary_cents=round_half_up_cents(avg),
        min_salary_cents=int(minimum),
        max_salary_cents=int(maximum),
        employee_count=int(count),
    )


def job_title_metrics_from_row(job_title, avg, minimum, maximum, count) -> JobTitleSalaryMetrics:
    return JobTitleSalaryMetrics(
        job_title=job_title,
        avg_salary_cents=round_half_up_cents(avg),
        min_salary_cents=int(minimum),
        max_salary_cents=int(maximum),
        employee_count=int(count),
    )
