"""Money helpers. Amounts are stored as integer cents."""

from decimal import Decimal, ROUND_HALF_UP


def to_cents(amount: Decimal | int | str) -> int:
    """Convert a major-unit amount to integer cents, rounding half up."""
    value = Decimal(str(amount)) * 100
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def from_cents(cents: int | None) -> Decimal:
    return (Decimal(cents or 0) / Decimal("100")).quantize(Decimal("0.01"))


def format_currency(cents: int | None) -> str:
    """Render cents as a US dollar string: 123456 -> ``$1,234.56``."""
    amount = from_cents(cents)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"
