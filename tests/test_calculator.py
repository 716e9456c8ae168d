"""
Tests for the salary deduction calculator.

US brackets (cents):
  10% on 0 - 1,000,000
  12% on 1,000,001 - 4,000,000
  22% on 4,000,001 - 8,500,000
  24% above 8,500,001

A bracket is visited only while the remaining salary is strictly above its
floor, and the amount taxed in each bracket is removed from the remaining
salary before the next test.
"""

import pytest

from salary_api.core.deductions import (
    CountryCode,
    DeductionType,
    build_breakdown,
    calculate_insurance,
    calculate_retirement,
    calculate_tax,
)
from salary_api.core.deductions.calculator import INSURANCE_CAP_CENTS, RETIREMENT_CAP_CENTS

MAX_SAFE_INTEGER = 2**53 - 1
SUPPORTED = [CountryCode.US, CountryCode.UK, CountryCode.IN, CountryCode.CA]


class TestCalculateTax:
    def test_us_reference_salary(self):
        # 100,000 (10% of 1,000,000) + 359,999 (12% of 2,999,999, floored)
        assert calculate_tax(5_000_000, CountryCode.US) == 459_999

    def test_uk_reference_salary(self):
        # 0 on the first 1,250,000, then 20% of 2,499,999
        assert calculate_tax(5_000_000, CountryCode.UK) == 499_999

    def test_in_reference_salary(self):
        # 0 on the first 25,000,000, then 5% of 9,999,999
        assert calculate_tax(60_000_000, CountryCode.IN) == 499_999

    def test_ca_reference_salary(self):
        # 735,000 (15% of 4,900,000) + 40,999 (20.5% of 199,999, floored)
        assert calculate_tax(10_000_000, CountryCode.CA) == 775_999

    def test_us_100k(self):
        # 100,000 + 359,999 + 440,000 (22% of 2,000,000)
        assert calculate_tax(10_000_000, CountryCode.US) == 899_999

    def test_us_300k_reaches_top_bracket(self):
        # 100,000 + 359,999 + 989,999 + 3,120,000 (24% of 13,000,001)
        assert calculate_tax(30_000_000, CountryCode.US) == 4_569_998

    def test_accepts_plain_string_country(self):
        assert calculate_tax(5_000_000, "US") == 459_999

    def test_zero_salary(self):
        assert calculate_tax(0, CountryCode.US) == 0

    def test_one_cent(self):
        assert calculate_tax(1, CountryCode.US) == 0

    def test_very_high_salary(self):
        tax = calculate_tax(100_000_000, CountryCode.US)
        assert 0 < tax < 100_000_000

    def test_sentinel_country_has_no_tax(self):
        assert calculate_tax(100_000, CountryCode.XX) == 0

    def test_unknown_country_has_no_tax(self):
        assert calculate_tax(100_000_000, "ZZ") == 0


class TestBracketBoundaries:
    def test_exactly_first_bracket_ceiling(self):
        assert calculate_tax(1_000_000, CountryCode.US) == 100_000

    def test_remaining_equal_to_floor_skips_bracket(self):
        # Remaining after the first bracket is 1,000,001, not strictly above the floor
        assert calculate_tax(2_000_001, CountryCode.US) == 100_000

    def test_one_cent_above_floor_enters_bracket(self):
        # 1 cent at 12% floors to 0
        assert calculate_tax(2_000_002, CountryCode.US) == 100_000

    def test_bracket_tax_floored_per_bracket(self):
        # 9 cents at 12% = 1.08 -> 1
        assert calculate_tax(2_000_010, CountryCode.US) == 100_001

    def test_decremented_remaining_stops_walk_early(self):
        # 4,000,001 remains after three brackets; it never exceeds the 24% floor
        us_tax = calculate_tax(10_000_000, CountryCode.US)
        assert us_tax == 100_000 + 359_999 + 440_000


class TestCappedDeductions:
    def test_insurance_under_cap(self):
        assert calculate_insurance(10_000_000, CountryCode.US) == 500_000

    def test_insurance_capped(self):
        assert calculate_insurance(30_000_000, CountryCode.US) == INSURANCE_CAP_CENTS

    def test_insurance_uses_floor(self):
        assert calculate_insurance(1_000_300, CountryCode.US) == 50_015
        assert calculate_insurance(19, CountryCode.US) == 0

    def test_retirement_under_cap(self):
        assert calculate_retirement(10_000_000, CountryCode.US) == 300_000

    def test_retirement_capped(self):
        assert calculate_retirement(20_000_000, CountryCode.US) == RETIREMENT_CAP_CENTS

    def test_zero_salary(self):
        assert calculate_insurance(0, CountryCode.US) == 0
        assert calculate_retirement(0, CountryCode.US) == 0

    def test_caps_are_not_per_country(self):
        for country in SUPPORTED:
            assert calculate_insurance(MAX_SAFE_INTEGER, country) == 1_000_000
            assert calculate_retirement(MAX_SAFE_INTEGER, country) == 500_000

    def test_no_deductions_for_sentinel_country(self):
        assert calculate_insurance(30_000_000, CountryCode.XX) == 0
        assert calculate_retirement(30_000_000, CountryCode.XX) == 0


class TestBuildBreakdown:
    def test_us_100k_breakdown(self):
        details = build_breakdown(10_000_000, CountryCode.US)

        assert details.gross_salary_cents == 10_000_000
        assert [d.type for d in details.deductions] == [
            DeductionType.TAX,
            DeductionType.INSURANCE,
            DeductionType.RETIREMENT,
        ]
        assert [d.amount_cents for d in details.deductions] == [899_999, 500_000, 300_000]
        assert details.total_deductions_cents == 1_699_999
        assert details.net_salary_cents == 8_300_001

    def test_descriptions(self):
        details = build_breakdown(10_000_000, CountryCode.US)
        assert "tax" in details.deductions[0].description
        assert "insurance" in details.deductions[1].description
        assert "Retirement" in details.deductions[2].description

    def test_percentages(self):
        details = build_breakdown(10_000_000, CountryCode.US)
        tax, insurance, retirement = details.deductions

        assert tax.percentage == pytest.approx(8.99999)
        assert insurance.percentage == pytest.approx(5.0)
        assert retirement.percentage == pytest.approx(3.0)
        for deduction in details.deductions:
            assert 0 < deduction.percentage <= 100

    def test_zero_salary(self):
        details = build_breakdown(0, CountryCode.US)
        assert details.total_deductions_cents == 0
        assert details.net_salary_cents == 0
        assert all(d.amount_cents == 0 and d.percentage == 0 for d in details.deductions)

    def test_one_cent(self):
        details = build_breakdown(1, CountryCode.US)
        assert details.gross_salary_cents == 1
        assert details.total_deductions_cents == 0
        assert details.net_salary_cents == 1

    def test_negative_salary_treated_as_zero(self):
        details = build_breakdown(-1_000, CountryCode.US)
        assert details == build_breakdown(0, CountryCode.US)
        assert details.gross_salary_cents == 0
        assert details.net_salary_cents == 0

    def test_maximum_safe_integer_salary(self):
        details = build_breakdown(MAX_SAFE_INTEGER, CountryCode.US)
        insurance, retirement = details.deductions[1], details.deductions[2]

        assert details.gross_salary_cents == MAX_SAFE_INTEGER
        assert insurance.amount_cents == INSURANCE_CAP_CENTS
        assert retirement.amount_cents == RETIREMENT_CAP_CENTS
        assert details.total_deductions_cents > 0
        assert details.net_salary_cents < MAX_SAFE_INTEGER

    def test_unsupported_country(self):
        details = build_breakdown(100_000, CountryCode.XX)
        assert [d.amount_cents for d in details.deductions] == [0, 0, 0]
        assert details.net_salary_cents == 100_000


class TestBreakdownProperties:
    SALARIES = [0, 1, 99, 1_000_000, 1_000_001, 2_000_001, 4_900_001, 12_345_678, 99_999_999, 10**12]

    @pytest.mark.parametrize("country", SUPPORTED)
    def test_totals_add_up(self, country):
        for gross in self.SALARIES:
            details = build_breakdown(gross, country)
            amounts = [d.amount_cents for d in details.deductions]
            assert details.total_deductions_cents == sum(amounts)
            assert details.net_salary_cents == gross - details.total_deductions_cents
            assert details.net_salary_cents >= 0

    @pytest.mark.parametrize("country", SUPPORTED)
    def test_caps_hold(self, country):
        for gross in self.SALARIES:
            assert calculate_insurance(gross, country) <= INSURANCE_CAP_CENTS
            assert calculate_retirement(gross, country) <= RETIREMENT_CAP_CENTS

    @pytest.mark.parametrize("country", SUPPORTED)
    def test_tax_never_decreases_with_salary(self, country):
        previous = 0
        for gross in range(0, 40_000_000, 49_999):
            tax = calculate_tax(gross, country)
            assert tax >= previous
            previous = tax

    @pytest.mark.parametrize("country", [CountryCode.XX, "ZZ", ""])
    def test_unsupported_countries_are_all_zero(self, country):
        for gross in self.SALARIES:
            details = build_breakdown(gross, country)
            assert details.total_deductions_cents == 0
            assert details.net_salary_cents == gross
