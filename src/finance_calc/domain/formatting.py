"""Presentation helpers for calculator results.

Amounts are rendered with Indian digit grouping (12,34,567) and, for the
compact form, the magnitude suffixes used on Indian financial statements.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

RUPEE = "₹"

CRORE = Decimal("10000000")
LAKH = Decimal("100000")
THOUSAND = Decimal("1000")

# (threshold, suffix, decimals), checked from largest to smallest
MAGNITUDE_SUFFIXES: tuple[tuple[Decimal, str, int], ...] = (
    (CRORE, "Cr", 2),
    (LAKH, "L", 2),
    (THOUSAND, "K", 1),
)


def _quantize(amount: Decimal, decimals: int) -> Decimal:
    return amount.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def group_indian(digits: str) -> str:
    """Group an unsigned run of integer digits as 12,34,56,789."""
    if len(digits) <= 3:
        return digits

    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_currency(amount: Decimal | int, symbol: str = RUPEE, decimals: int = 0) -> str:
    """
    Format an amount with a currency symbol and Indian digit grouping.

    Args:
        amount: Monetary amount
        symbol: Currency symbol prefix
        decimals: Fixed number of fractional digits (rounded ROUND_HALF_UP)

    Returns:
        e.g. format_currency(Decimal("1234567.5"), decimals=2) -> "₹12,34,567.50"
    """
    value = _quantize(Decimal(amount), decimals)
    sign = "-" if value < 0 else ""
    integer_part, _, fraction = f"{abs(value):f}".partition(".")

    text = group_indian(integer_part)
    if decimals > 0:
        text = f"{text}.{fraction}"
    return f"{sign}{symbol}{text}"


def format_large_number(amount: Decimal | int, symbol: str = RUPEE) -> str:
    """
    Compact amount with a magnitude suffix.

    >= 1 crore (10^7) -> "₹1.25Cr", >= 1 lakh (10^5) -> "₹3.40L",
    >= 1 thousand -> "₹12.5K"; smaller amounts are shown in full.
    The sign is kept in front of the symbol for negative amounts.
    """
    value = Decimal(amount)
    sign = "-" if value < 0 else ""
    magnitude = abs(value)

    for threshold, suffix, decimals in MAGNITUDE_SUFFIXES:
        if magnitude >= threshold:
            scaled = _quantize(magnitude / threshold, decimals)
            return f"{sign}{symbol}{scaled:f}{suffix}"

    decimals = 0 if magnitude == magnitude.to_integral_value() else 2
    return sign + format_currency(magnitude, symbol=symbol, decimals=decimals)


def format_tenure(months: int) -> str:
    """Render a month count as "2 years 3 months", "1 year" or "5 months"."""
    years, remaining = divmod(months, 12)

    def plural(count: int, unit: str) -> str:
        return f"{count} {unit}{'' if count == 1 else 's'}"

    if years == 0:
        return plural(remaining, "month")
    if remaining == 0:
        return plural(years, "year")
    return f"{plural(years, 'year')} {plural(remaining, 'month')}"


def calculate_percentage(value: Decimal | int, total: Decimal | int) -> Decimal:
    """Share of value in total, in percent; zero when total is zero."""
    if total == 0:
        return Decimal("0")
    return Decimal(value) / Decimal(total) * 100
