"""
Value coercion used by the rules.

Length and format rules look at the text form of a value, ``required`` at
its emptiness and ``numeric`` at whether it reads as a number.
"""

import math
import re
from decimal import Decimal
from typing import Any

NUMERIC_PATTERN = re.compile(r"-?[0-9]+(\.[0-9]+)?", re.ASCII)


def _float_text(value: float) -> str:
    """
    Render a finite float the way a JSON producer in a browser would.

    Shortest round-trip digits, positional for magnitudes in [1e-6, 1e21), otherwise
    exponent form with an explicit sign.

    Examples:
        >>> _float_text(0.00005)
        '0.00005'
        >>> _float_text(1e-7)
        '1e-7'
        >>> _float_text(1e22)
        '1e+22'
    """
    if value == 0:
        return "0"
    if value < 0:
        return "-" + _float_text(-value)

    _, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0")
    exponent += len(digit_tuple) - len(digits)

    # point position relative to the first digit
    k = len(digits)
    n = exponent + k

    if k <= n <= 21:
        return digits + "0" * (n - k)
    if 0 < n <= 21:
        return digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return "0." + "0" * -n + digits

    e = n - 1
    sign = "+" if e >= 0 else "-"
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{mantissa}e{sign}{abs(e)}"


def to_text(value: Any) -> str:
    """
    Render a payload value as text for length and format rules.

    Args:
        value: Any payload value (None when absent)

    Returns:
        "" for None, "true"/"false" for booleans, "8" for 8.0,
        "0.00005" for 5e-05, "1e+22" for 1e22, str() otherwise

    Examples:
        >>> to_text(None)
        ''
        >>> to_text(8)
        '8'
        >>> to_text(12.5)
        '12.5'
        >>> to_text(False)
        'false'
    """
    if value is None:
        return ""

    # bool before int: True is an int
    if isinstance(value, bool):
        return "true" if value else "false"

    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return _float_text(value)

    return str(value)


def is_blank(value: Any) -> bool:
    """
    Check whether a value counts as missing for the ``required`` rule.

    None, "", False and NaN are blank. Numeric zero, empty lists and empty
    dicts are not.

    Examples:
        >>> is_blank(0)
        False
        >>> is_blank("")
        True
        >>> is_blank(float("nan"))
        True
    """
    if value is None:
        return True

    if isinstance(value, bool):
        return not value

    if isinstance(value, int):
        return False

    if isinstance(value, float):
        return math.isnan(value)

    if isinstance(value, Decimal):
        return value.is_nan()

    if isinstance(value, str):
        return value == ""

    return False


def is_number(value: Any) -> bool:
    """
    Check whether a value reads as a number for the ``numeric`` rule.

    Ints, finite floats and finite Decimals are numbers. Strings are numbers
    only if they fully match ``-?[0-9]+(\\.[0-9]+)?``. Booleans are not.

    Examples:
        >>> is_number("12.5")
        True
        >>> is_number(" 12")
        False
        >>> is_number(0)
        True
    """
    if isinstance(value, bool):
        return False

    if isinstance(value, int):
        return True

    if isinstance(value, float):
        return math.isfinite(value)

    if isinstance(value, Decimal):
        return value.is_finite()

    if isinstance(value, str):
        return NUMERIC_PATTERN.fullmatch(value) is not None

    return False
