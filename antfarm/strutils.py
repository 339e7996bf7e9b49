"""Small string and integer helpers used across the package."""

from __future__ import annotations

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_WHITESPACE = " \n\t"
_SENTENCE_BREAKS = "\n!.?"


def rfind_index(s: str | None, c: str) -> int:
    """Return the index of the last occurrence of ``c`` in ``s``, or -1."""
    if s is None:
        return -1
    if c == "\0":
        return len(s)
    return s.rfind(c)


def reverse_prefix(s: str | None, length: int) -> str | None:
    """Return ``s`` with its first ``length`` characters reversed."""
    if s is None:
        return None
    length = max(length, 0)
    return s[:length][::-1] + s[length:]


def split_on(s: str | None, c: str) -> list[str] | None:
    """Split ``s`` on the delimiter ``c``, dropping empty pieces."""
    if s is None or not c:
        return None
    return [part for part in s.split(c) if part]


def find_substring(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1."""
    return haystack.find(needle)


def substring(s: str | None, start: int, length: int) -> str | None:
    """Return up to ``length`` characters of ``s`` from ``start``.

    Returns None when ``s`` is None or ``start`` lies past the end.
    """
    if s is None or start < 0 or start > len(s):
        return None
    return s[start:start + max(length, 0)]


def trim(s: str | None) -> str | None:
    """Strip spaces, newlines and tabs from both ends of ``s``."""
    if s is None:
        return None
    return s.strip(_WHITESPACE)


def _map_ascii(c: str | int, low: int, high: int, shift: int) -> str | int:
    code = c if isinstance(c, int) else ord(c)
    if low <= code <= high:
        code += shift
    return code if isinstance(c, int) else chr(code)


def to_lower(c: str | int) -> str | int:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    return _map_ascii(c, ord("A"), ord("Z"), 32)


def to_upper(c: str | int) -> str | int:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    return _map_ascii(c, ord("a"), ord("z"), -32)


def to_power(nbr: int, power: int) -> int:
    """Raise ``nbr`` to ``power``; return 0 if a 64-bit result would overflow."""
    if power < 0:
        raise ValueError("power must not be negative")
    result = 1
    for _ in range(power):
        result *= nbr
        if not _INT64_MIN <= result <= _INT64_MAX:
            return 0
    return result


def to_sentence(s: str | None) -> str | None:
    """Upper-case the first character and each one following '\\n', '!', '.' or '?'."""
    if s is None:
        return None
    out = []
    up = True
    for ch in s:
        if up:
            ch = to_upper(ch)
            up = False
        if ch in _SENTENCE_BREAKS:
            up = True
        out.append(ch)
    return "".join(out)