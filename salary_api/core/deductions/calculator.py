"""
Salary Deduction Calculator
Computes tax, insurance and retirement deductions from an annual gross salary.

All amounts are integer cents. Every percentage is applied with floor
division, and each tax bracket is floored on its own before summing.

Deductions:
  - Tax: progressive, per-country brackets (see brackets.py)
  - Insurance: 5% of gross, capped at $10,000/year
  - Retirement: 3% of gross, capped at $5,000/year

Countries without brackets (including the XX sentinel) get no deductions.
"""

from dataclasses import dataclass, field
from enum import Enum

from salary_api.core.deductions.brackets import CountryCode, brackets_for, has_deductions
from salary_api.core.money import format_cents_as_dollars, percent_of


INSURANCE_RATE = 5
INSURANCE_CAP_CENTS = 1_000_000

RETIREMENT_RATE = 3
RETIREMENT_CAP_CENTS = 500_000


class DeductionType(str, Enum):
    TAX = "TAX"
    INSURANCE = "INSURANCE"
    RETIREMENT = "RETIREMENT"


@dataclass(frozen=True)
class Deduction:
    type: DeductionType
    amount_cents: int
    percentage: float
    description: str


@dataclass(frozen=True)
class SalaryBreakdown:
    gross_salary_cents: int
    deductions: list[Deduction] = field(default_factory=list)
    total_deductions_cents: int = 0
    net_salary_cents: int = 0


DESCRIPTIONS: dict[DeductionType, str] = {
    DeductionType.TAX: "Progressive income tax based on tax brackets",
    DeductionType.INSURANCE: (
        f"Health insurance ({INSURANCE_RATE}% of gross, "
        f"max {format_cents_as_dollars(INSURANCE_CAP_CENTS)}/year)"
    ),
    DeductionType.RETIREMENT: (
        f"Retirement contribution ({RETIREMENT_RATE}% of gross, "
        f"max {format_cents_as_dollars(RETIREMENT_CAP_CENTS)}/year)"
    ),
}


def calculate_tax(gross_cents: int, country: CountryCode | str) -> int:
    """
    Progressive tax in cents.

    A bracket applies while the remaining salary is strictly above its
    floor; the amount taxed in it is removed from the remaining salary
    before the next bracket is tested.

    US, 5,000,000 cents: 100,000 (10% of the first 1,000,000)
    + 359,999 (12% of 2,999,999) = 459,999.
    """
    if not has_deductions(country):
        return 0

    remaining = gross_cents
    total_tax = 0

    for bracket in brackets_for(country):
        if remaining <= bracket.min_cents:
            continue

        in_bracket = remaining - bracket.min_cents
        if bracket.max_cents is not None:
            in_bracket = min(in_bracket, bracket.max_cents - bracket.min_cents)

        total_tax += percent_of(in_bracket, bracket.rate)
        remaining -= in_bracket

    return total_tax


def calculate_insurance(gross_cents: int, country: CountryCode | str) -> int:
    if not has_deductions(country):
        return 0
    return min(percent_of(gross_cents, INSURANCE_RATE), INSURANCE_CAP_CENTS)


def calculate_retirement(gross_cents: int, country: CountryCode | str) -> int:
    if not has_deductions(country):
        return 0
    return min(percent_of(gross_cents, RETIREMENT_RATE), RETIREMENT_CAP_CENTS)


def _share_of(amount_cents: int, gross_cents: int) -> float:
    return (amount_cents / gross_cents) * 100 if gross_cents > 0 else 0.0


def build_breakdown(gross_cents: int, country: CountryCode | str) -> SalaryBreakdown:
    """
    Full salary breakdown for one employee.

    Negative gross is treated as zero everywhere, including the reported
    gross, so it yields the same all-zero breakdown as a zero salary.
    """
    effective_gross = max(0, gross_cents)

    amounts = {
        DeductionType.TAX: calculate_tax(effective_gross, country),
        DeductionType.INSURANCE: calculate_insurance(effective_gross, country),
        DeductionType.RETIREMENT: calculate_retirement(effective_gross, country),
    }

    deductions = [
        Deduction(
            type=kind,
            amount_cents=amount,
            percentage=_share_of(amount, effective_gross),
            description=DESCRIPTIONS[kind],
        )
        for kind, amount in amounts.items()
    ]
    total_deductions = sum(amounts.values())

    return SalaryBreakdown(
        gross_salary_cents=effective_gross,
        deductions=deductions,
        total_deductions_cents=total_deductions,
        net_salary_cents=effective_gross - total_deductions,
    )
