"""Checks on the lines of a farm description."""

from __future__ import annotations

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _all_digits(text: str) -> bool:
    return all("0" <= ch <= "9" for ch in text)


def _is_num(ch: str) -> bool:
    return ch.isascii() and (ch.isdigit() or ch in "+-")


def _signed_value(text: str) -> int:
    digits = text.lstrip("+-")
    value = int(digits) if digits else 0
    return -value if text.startswith("-") else value


def is_valid_ant_num(line: str) -> bool:
    """Tell whether ``line`` is a positive number of ants that fits an int."""
    if not line or not (("0" <= line[0] <= "9") or line[0] == "+"):
        return False
    if not _all_digits(line[1:]):
        return False
    return 0 < _signed_value(line) <= _INT_MAX


def is_coordinate(text: str) -> bool:
    """Tell whether ``text`` is a signed number that fits an int."""
    if not text or not _is_num(text[0]) or not _all_digits(text[1:]):
        return False
    return _INT_MIN <= _signed_value(text) <= _INT_MAX


def is_room(line: str) -> bool:
    """Tell whether ``line`` describes a room: 'name x y'."""
    if line.count(" ") != 2:
        return False
    first = line.find(" ")
    last = line.rfind(" ")
    if last == 0 or last == len(line) - 1:
        return False
    if not _is_num(line[first + 1]) or not _is_num(line[last + 1]):
        return False
    if line[:first].startswith(("L", "#")):
        return False
    return is_coordinate(line[first + 1:last]) and is_coordinate(line[last + 1:])


def is_link(line: str) -> bool:
    """Tell whether ``line`` looks like a link: 'first-second'."""
    return (
        bool(line)
        and not line.startswith("#")
        and line.count("-") == 1
        and not line.startswith("-")
        and not line.endswith("-")
    )


def is_comment(line: str) -> bool:
    """Tell whether ``line`` is a comment or a command."""
    return line.startswith("#")