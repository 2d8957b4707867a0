"""
Money helpers. Amounts are stored as integer cents and shown as currency units.
"""
from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")


def to_cents(amount: float | int | Decimal | None) -> int:
    if amount is None:
        return 0
    value = Decimal(str(amount)).quantize(CENT, rounding=ROUND_HALF_UP)
    return int(value * 100)


def from_cents(cents: int | None) -> float:
    return float(Decimal(cents or 0) / 100)


def percent_of(cents: int, percent: int | float) -> int:
    """`percent` % of an amount in cents, rounded half up to whole currency units."""
    units = Decimal(cents) * Decimal(str(percent)) / Decimal(10000)
    return int(units.quantize(Decimal(1), rounding=ROUND_HALF_UP)) * 100


def format_amount(cents: int) -> str:
    return f"{Decimal(cents) / 100:.2f}"
