"""
Wire formatting for calculation results.

Results are rendered with the shortest digit string that round-trips to the
same float, in ``%g`` layout: plain decimals while the decimal exponent is in
``[-4, 6)``, scientific notation with a signed two-digit exponent otherwise.

Examples:
    >>> format_number(14.0)
    '14'
    >>> format_number(2.5)
    '2.5'
    >>> format_number(1e6)
    '1e+06'
    >>> format_number(0.00001)
    '1e-05'
"""

from __future__ import annotations

import math
from decimal import Decimal

# Exponents at or above this switch to scientific notation
_SCIENTIFIC_AT = 6
# Exponents below this switch to scientific notation
_SCIENTIFIC_BELOW = -4


def _shortest_digits(value: float) -> tuple[str, int]:
    """Return (digits, decimal_point) for a finite, non-zero, positive float.

    ``repr`` already yields the shortest round-trip representation; Decimal
    splits it into a digit string and a decimal point position.
    """
    _, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0")
    point = len(digit_tuple) + exponent
    return digits, point


def format_number(value: float) -> str:
    """Render a result float as text for the response envelope."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    sign = "-" if value < 0 else ""
    digits, point = _shortest_digits(abs(value))
    exp = point - 1

    if exp < _SCIENTIFIC_BELOW or exp >= _SCIENTIFIC_AT:
        mantissa = digits[0]
        if len(digits) > 1:
            mantissa += "." + digits[1:]
        exp_sign = "+" if exp >= 0 else "-"
        return f"{sign}{mantissa}e{exp_sign}{abs(exp):02d}"

    if point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return f"{sign}{digits}{'0' * (point - len(digits))}"
    return f"{sign}{digits[:point]}.{digits[point:]}"


__all__ = ["format_number"]
