"""Rendering of printf-style format strings."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Iterator
from numbers import Real

from antfarm.numbers import (
    float_to_string,
    is_bad_float,
    itoa_base_unsigned,
    itoa_decimal,
)
from antfarm.spec import FLAGS, Spec, apply_length, parse_format

MAX_WIDTH = 2147483645

_DEFAULT_FLOAT_PRECISION = 6
_CHECKED_CONVERSIONS = "diouxXfp"
_INTEGER_BASES = {"d": 10, "i": 10, "u": 10, "o": 8, "x": 16, "X": 16}
_POINTER_MASK = (1 << 64) - 1


class FormatError(ValueError):
    """Raised when a format string cannot be rendered with its arguments."""


def _is_digit(ch: str) -> bool:
    return len(ch) == 1 and "0" <= ch <= "9"


def _leading_int(text: str) -> int:
    end = 0
    while end < len(text) and _is_digit(text[end]):
        end += 1
    return int(text[:end]) if end else 0


def _next_arg(args: Iterator[object]) -> object:
    try:
        return next(args)
    except StopIteration:
        raise FormatError("not enough arguments for format string") from None


def _int_arg(args: Iterator[object]) -> int:
    value = _next_arg(args)
    if not isinstance(value, int):
        raise FormatError(f"expected an integer argument, got {value!r}")
    return value


def _take_asterisks(
    text: str, width: int, precision: int, args: Iterator[object]
) -> tuple[int, int]:
    star = text.find("*")
    if star == -1:
        return width, precision
    dot = text.rfind(".")
    if dot == -1:
        width = apply_length(_int_arg(args), "", "d")
    elif star > dot:
        precision = apply_length(_int_arg(args), "", "d")
    else:
        width = apply_length(_int_arg(args), "", "d")
        if "*" in text[dot:]:
            precision = apply_length(_int_arg(args), "", "d")
    return width, precision


def _check_limits(conversion: str, width: int, precision: int) -> None:
    if precision > MAX_WIDTH and conversion in _CHECKED_CONVERSIONS:
        raise FormatError(f"precision too large: {precision}")
    if width > MAX_WIDTH:
        raise FormatError(f"width too large: {width}")


def _convert(spec: Spec, conversion: str, args: Iterator[object]) -> str:
    if conversion in _INTEGER_BASES:
        value = apply_length(_int_arg(args), spec.length_modifier(), conversion)
        if conversion in "di":
            return itoa_decimal(value)
        return itoa_base_unsigned(
            value, _INTEGER_BASES[conversion], upper=conversion == "X"
        )
    if conversion == "f":
        return ""
    if conversion == "c":
        value = _next_arg(args)
        if isinstance(value, int):
            return chr(value & 0xFF)
        if isinstance(value, str) and value:
            return value[0]
        raise FormatError(f"expected a character argument, got {value!r}")
    if conversion == "s":
        value = _next_arg(args)
        return "(null)" if value is None else str(value)
    if conversion == "p":
        value = _next_arg(args)
        if value is None:
            address = 0
        elif isinstance(value, int):
            address = value & _POINTER_MASK
        else:
            address = id(value)
        return "0x" + itoa_base_unsigned(address, 16)
    if conversion == "%":
        return "%"
    return conversion


def _render_float(value: object, precision: int) -> str:
    if not isinstance(value, Real):
        raise FormatError(f"expected a number argument, got {value!r}")
    if precision < 0:
        precision = _DEFAULT_FLOAT_PRECISION
    is_nan = isinstance(value, float) and math.isnan(value)
    if isinstance(value, float) and math.isinf(value):
        result = "inf"
    elif is_nan:
        result = "nan"
    else:
        result = float_to_string(value, precision)
    if isinstance(value, float):
        negative = math.copysign(1.0, value) < 0
    else:
        negative = value < 0
    if negative and not result.startswith("-") and not is_nan:
        result = "-" + result
    return result


def _integer_precision(result: str, precision: int) -> str:
    size = len(result)
    if precision == 0 and size == 1:
        return ""
    if precision > 0 and result.startswith(("+", "-")) and precision > size - 1:
        return result[0] + "0" * (precision - size + 1) + result[1:]
    if precision > 0 and precision > size:
        return "0" * (precision - size) + result
    return result


def _float_precision(result: str, precision: int) -> str:
    dot = result.find(".")
    if dot == -1:
        return result
    fraction = result[dot + 1:]
    if precision > 0 and precision > len(fraction):
        return result + "0" * (precision - len(fraction))
    if precision == 0:
        return result[:dot]
    if 0 < precision < len(fraction):
        kept = fraction[:precision]
        if fraction[precision] > "4":
            kept = kept[:-1] + chr(ord(kept[-1]) + 1)
        return result[:dot + 1] + kept
    return result


def _string_precision(result: str, precision: int) -> str:
    if 0 < precision < len(result):
        return result[:precision]
    if precision == 0:
        return ""
    return result


def _pointer_precision(result: str, precision: int) -> str:
    size = len(result)
    if precision > size - 2 and result.startswith("0x"):
        return "0x" + "0" * (precision - size + 2) + result[2:]
    return result


def _apply_precision(
    conversion: str, result: str, precision: int, args: Iterator[object]
) -> str:
    if conversion in _INTEGER_BASES:
        return _integer_precision(result, precision)
    if conversion == "f":
        return _float_precision(_render_float(_next_arg(args), precision), precision)
    if conversion == "s":
        return _string_precision(result, precision)
    if conversion == "p":
        return _pointer_precision(result, precision)
    return result


def _scan_width(text: str, width: int) -> int:
    def at(k: int) -> str:
        return text[k] if k < len(text) else ""

    i = 0
    while i < len(text):
        while i < len(text) and not _is_digit(text[i]) and text[i] != ".":
            i += 1
        if at(i) == "0":
            i += 1
        while i < len(text) and not _is_digit(text[i]) and text[i] != ".":
            i += 1
        if at(i) == ".":
            while at(i) == "." or _is_digit(at(i)):
                i += 1
        if _is_digit(at(i)):
            end = i
            while _is_digit(at(end)):
                end += 1
            if at(end) != "*":
                width = int(text[i:end])
            i = end
    return width


def _hex_prefix(spec: Spec, conversion: str, result: str, width: int,
                precision: int) -> str:
    prefix = "0x" if conversion == "x" else "0X"
    gap = width - len(result)
    if (spec.has_flag("0") and not spec.has_flag("-")
            and precision == -1 and gap > 0):
        return prefix + "0" * max(gap - 2, 0) + result
    return prefix + result


def _alternate_form(spec: Spec, conversion: str, result: str, width: int,
                    precision: int) -> str:
    if conversion == "o" and not result.startswith("0"):
        return "0" + result
    if conversion in "xX" and result and result.strip("0"):
        return _hex_prefix(spec, conversion, result, width, precision)
    if (conversion == "f" and "." not in result and result
            and not is_bad_float(result)):
        return result + "."
    return result


def _sign(spec: Spec, conversion: str, result: str) -> str:
    if spec.has_flag("+"):
        if conversion in "idf" and not result.startswith("-") and "nan" not in result:
            return "+" + result
    elif spec.has_flag(" "):
        if (conversion in "idf" and not result.startswith(("-", "+"))
                and (conversion != "f" or "nan" not in result)):
            return " " + result
    return result


def _zero_pad(spec: Spec, conversion: str, result: str, width: int,
              precision: int) -> str:
    if conversion in "diouxX" and precision > -1:
        if spec.has_flag("-"):
            return result.ljust(width)
        return result.rjust(width)
    gap = width - len(result)
    if result.startswith(("-", "+")) or (result.startswith(" ") and spec.has_flag(" ")):
        return result[0] + "0" * gap + result[1:]
    return "0" * gap + result


def _pad(spec: Spec, conversion: str, result: str, width: int,
         precision: int) -> str:
    size = len(result)
    if width == -1:
        return result
    if width < 0:
        width = -width
        return result.ljust(width) if width > size else result
    if width <= size:
        return result
    if spec.has_flag("-"):
        return result.ljust(width)
    if spec.has_flag("0") and (conversion != "f" or not is_bad_float(result)):
        return _zero_pad(spec, conversion, result, width, precision)
    return result.rjust(width)


def render_spec(spec: Spec, args: Iterable[object]) -> str:
    """Render one piece of a format string, taking its arguments from ``args``.

    ``args`` is consumed as an iterator, so successive calls that share one
    iterator take successive arguments.
    """
    args = iter(args)
    text = spec.text
    if not text.startswith("%"):
        return text
    width, precision = _take_asterisks(text, spec.width, spec.precision, args)
    if text == "%":
        return ""
    conversion = spec.conversion()
    result = _convert(spec, conversion, args)

    dot = text.rfind(".")
    if precision != -1 or dot != -1 or conversion == "f":
        if precision == -1:
            if dot == -1:
                precision = _DEFAULT_FLOAT_PRECISION
            elif _is_digit(text[dot + 1:dot + 2]):
                precision = _leading_int(text[dot + 1:])
            else:
                precision = 0
                j = dot + 1
                while j < len(text) and text[j] in FLAGS:
                    j += 1
                if _is_digit(text[j:j + 1]):
                    width = _leading_int(text[j:])
        _check_limits(conversion, width, precision)
        result = _apply_precision(conversion, result, precision, args)

    width = _scan_width(text, width)
    _check_limits(conversion, width, precision)

    if spec.has_flag("#"):
        result = _alternate_form(spec, conversion, result, width, precision)
    result = _sign(spec, conversion, result)
    return _pad(spec, conversion, result, width, precision)


def format_string(fmt: str, *args: object) -> str:
    """Render ``fmt`` with ``args``; surplus arguments are ignored."""
    remaining = iter(args)
    return "".join(render_spec(spec, remaining) for spec in parse_format(fmt))


def printf(fmt: str, *args: object) -> int:
    """Write the rendered ``fmt`` to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)