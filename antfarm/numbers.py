"""Number-to-text conversions used by the formatter."""

from __future__ import annotations

import math
from fractions import Fraction
from numbers import Real

MAX_PRECISION = 4932

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_HALF = Fraction(1, 2)


def _check_finite(n: Real) -> None:
    if isinstance(n, float) and not math.isfinite(n):
        raise ValueError(f"not a finite number: {n!r}")


def digit_count(n: Real, base: int = 10) -> int:
    """Return how many times ``n`` can be divided by ``base`` while staying >= 1."""
    if base < 2:
        raise ValueError("base must be at least 2")
    _check_finite(n)
    whole = math.floor(n)
    count = 0
    while whole >= 1:
        whole //= base
        count += 1
    return count


def itoa_base_unsigned(nbr: int, base: int, upper: bool = False) -> str:
    """Write a non-negative integer in ``base``, with upper-case letters if asked."""
    if nbr < 0:
        raise ValueError("number must not be negative")
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"unsupported base: {base}")
    digits = []
    while True:
        nbr, remainder = divmod(nbr, base)
        digits.append(_DIGITS[remainder])
        if not nbr:
            break
    text = "".join(reversed(digits))
    return text.upper() if upper else text


def itoa_decimal(nbr: int) -> str:
    """Write a signed integer in decimal."""
    if nbr < 0:
        return "-" + itoa_base_unsigned(-nbr, 10)
    return itoa_base_unsigned(nbr, 10)


def epsilon(num: Real) -> Real:
    """Return the fractional part of ``num``; values below 1 come back unchanged."""
    _check_finite(num)
    if num < 1:
        return num
    return num - math.floor(num)


def _to_even(x: Fraction) -> Fraction:
    return x + 1 if int(x) % 2 else x


def _whole_digits(n: Fraction) -> str:
    if n < 1:
        return "0"
    return str(math.floor(n))


def _join(whole: Fraction, fraction: Fraction, precision: int) -> str:
    pad = precision - digit_count(fraction)
    text = _whole_digits(whole)
    if fraction != 0 or pad > 0:
        text += "." + "0" * max(pad, 0) + _whole_digits(fraction)
    return text


def float_to_string(num: Real, precision: int) -> str:
    """Write the magnitude of ``num`` with ``precision`` fractional digits.

    Ties are rounded to even. The text may carry trailing digits beyond
    ``precision`` that the caller is expected to cut off.
    """
    if precision < 0:
        raise ValueError("precision must not be negative")
    _check_finite(num)
    precision = min(precision, MAX_PRECISION)
    whole = abs(Fraction(num))
    part = epsilon(whole) * 10**precision
    eps = epsilon(part)
    if eps == _HALF:
        if precision > 0:
            part = _to_even(part)
        else:
            whole = _to_even(whole)
    elif eps > _HALF:
        if precision > 0:
            part += 1
        else:
            whole += 1
    width = digit_count(part)
    if width > precision:
        whole += 1
        part -= 10**width
    return _join(whole, part, precision)


def is_bad_float(result: str) -> bool:
    """Tell whether a rendered float is 'nan' or 'inf'."""
    return "nan" in result or "inf" in result