from salary_api.core.deductions.brackets import (
    DEDUCTION_COUNTRIES,
    TAX_BRACKETS,
    CountryCode,
    TaxBracket,
    brackets_for,
    has_deductions,
)
from salary_api.core.deductions.calculator import (
    Deduction,
    DeductionType,
    SalaryBreakdown,
    build_breakdown,
    calculate_insurance,
    calculate_retirement,
    calculate_tax,
)

__all__ = [
    "DEDUCTION_COUNTRIES",
    "TAX_BRACKETS",
    "CountryCode",
    "TaxBracket",
    "brackets_for",
    "has_deductions",
    "Deduction",
    "DeductionType",
    "SalaryBreakdown",
    "build_breakdown",
    "calculate_insurance",
    "calculate_retirement",
    "calculate_tax",
]
