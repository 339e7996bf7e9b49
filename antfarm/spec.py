"""Splitting of format strings into literal text and conversion specs."""

from __future__ import annotations

from dataclasses import dataclass

FLAGS = "+- #0"

_SINGLE_LENGTHS = "lLh"
_DOUBLE_LENGTHS = frozenset({"ll", "hh"})
_BITS = {"": 32, "h": 16, "hh": 8, "l": 64, "L": 64, "ll": 64}


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


@dataclass
class Spec:
    """One piece of a format string: literal text or a '%' conversion."""

    text: str
    width: int = -1
    precision: int = -1

    def conversion(self) -> str:
        """Return the conversion character, the last one of the spec."""
        return self.text[-1]

    def length_modifier(self) -> str:
        """Return the length modifier: '', 'h', 'hh', 'l', 'll' or 'L'."""
        modifier = ""
        for ch in self.text[1:-1]:
            if modifier and modifier == ch and ch * 2 in _DOUBLE_LENGTHS:
                modifier = ch * 2
            elif ch in _SINGLE_LENGTHS:
                modifier = ch
        return modifier

    def has_flag(self, c: str) -> bool:
        """Tell whether the spec carries flag ``c``.

        A '0' counts as a flag only right after '%' or another flag.
        """
        if c != "0":
            return c in self.text
        return any(
            ch == "0" and prev != "0" and (prev == "%" or prev in FLAGS)
            for prev, ch in zip(self.text, self.text[1:])
        )


def spec_length(text: str) -> int:
    """Return the length of the conversion spec at the start of ``text``, or -1."""
    if not text.startswith("%"):
        return -1
    i = 1
    while i < len(text):
        ch = text[i]
        if not (ch in FLAGS or _is_digit(ch) or ch in ".*" or ch in _SINGLE_LENGTHS):
            break
        i += 1
    return min(i + 1, len(text))


def parse_format(text: str) -> list[Spec]:
    """Split a format string into literal chunks and conversion specs."""
    specs = []
    while text:
        length = spec_length(text)
        if length == -1:
            length = text.find("%")
            if length == -1:
                length = len(text)
        specs.append(Spec(text[:length]))
        text = text[length:]
    return specs


def apply_length(value: int, modifier: str, conversion: str) -> int:
    """Narrow ``value`` to the integer type named by ``modifier``.

    'd' and 'i' give signed results; other conversions give unsigned ones.
    """
    if modifier not in _BITS:
        raise ValueError(f"unknown length modifier: {modifier!r}")
    if conversion == "f" and modifier in ("l", "L"):
        return value
    bits = _BITS[modifier]
    narrowed = int(value) & ((1 << bits) - 1)
    if conversion in ("d", "i") and narrowed >= 1 << (bits - 1):
        narrowed -= 1 << bits
    return narrowed