"""
Tax Bracket Table
Per-country progressive income tax brackets, in integer cents.

Tax Brackets (annual gross):
  US: 10% up to $10,000 / 12% to $40,000 / 22% to $85,000 / 24% above
  UK: 0% up to £12,500 / 20% to £50,000 / 40% above
  IN: 0% up to ₹250,000 / 5% to ₹500,000 / 20% to ₹1,000,000 / 30% above
  CA: 15% up to $49,000 / 20.5% to $98,000 / 26% to $152,000 / 29% above

XX is the "no country" sentinel: it is a known code with no brackets, so no
deductions of any kind apply to it. Unknown codes behave the same way.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class CountryCode(str, Enum):
    US = "US"
    UK = "UK"
    IN = "IN"
    CA = "CA"
    XX = "XX"


@dataclass(frozen=True)
class TaxBracket:
    min_cents: int
    max_cents: int | None  # None = no upper limit
    rate: Decimal  # percentage, e.g. Decimal("20.5")

    @property
    def is_unbounded(self) -> bool:
        return self.max_cents is None


TAX_BRACKETS: dict[CountryCode, tuple[TaxBracket, ...]] = {
    CountryCode.US: (
        TaxBracket(0, 1_000_000, Decimal("10")),
        TaxBracket(1_000_001, 4_000_000, Decimal("12")),
        TaxBracket(4_000_001, 8_500_000, Decimal("22")),
        TaxBracket(8_500_001, None, Decimal("24")),
    ),
    CountryCode.UK: (
        TaxBracket(0, 1_250_000, Decimal("0")),
        TaxBracket(1_250_001, 5_000_000, Decimal("20")),
        TaxBracket(5_000_001, None, Decimal("40")),
    ),
    CountryCode.IN: (
        TaxBracket(0, 25_000_000, Decimal("0")),
        TaxBracket(25_000_001, 50_000_000, Decimal("5")),
        TaxBracket(50_000_001, 100_000_000, Decimal("20")),
        TaxBracket(100_000_001, None, Decimal("30")),
    ),
    CountryCode.CA: (
        TaxBracket(0, 4_900_000, Decimal("15")),
        TaxBracket(4_900_001, 9_800_000, Decimal("20.5")),
        TaxBracket(9_800_001, 15_200_000, Decimal("26")),
        TaxBracket(15_200_001, None, Decimal("29")),
    ),
    CountryCode.XX: (),
}

DEDUCTION_COUNTRIES: tuple[CountryCode, ...] = tuple(
    country for country, brackets in TAX_BRACKETS.items() if brackets
)


def brackets_for(country: CountryCode | str) -> tuple[TaxBracket, ...]:
    """Return the ordered brackets for a country, or () when none apply."""
    return TAX_BRACKETS.get(country, ())


def has_deductions(country: CountryCode | str) -> bool:
    return len(brackets_for(country)) > 0
