"""
YGO Prices — Money display helpers

Prices from the service are USD Decimals. These helpers render them for
people; nothing here feeds back into the records.
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP

_CENTS = Decimal("0.01")


def format_usd(amount: Decimal) -> str:
    """
    Render a USD amount with thousands separators.

    Examples:
        >>> format_usd(Decimal("1234.5"))
        '$1,234.50'
        >>> format_usd(Decimal("-3"))
        '-$3.00'
    """
    rounded = amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.2f}"


def format_shift(percent: Decimal) -> str:
    """
    Render a percentage shift with an explicit sign.

    Examples:
        >>> format_shift(Decimal("12.5"))
        '+12.50%'
        >>> format_shift(Decimal("-0.004"))
        '0.00%'
    """
    rounded = percent.quantize(_CENTS, rounding=ROUND_HALF_UP)
    if rounded == 0:
        return "0.00%"
    return f"{rounded:+.2f}%"
