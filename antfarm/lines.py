"""Line-by-line reading from a text stream."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO


class LineReader:
    """Reads lines from a stream one at a time, without their newlines."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def next_line(self) -> str | None:
        """Return the next line without its trailing newline, or None at the end."""
        raw = self._stream.readline()
        if not raw:
            return None
        return raw[:-1] if raw.endswith("\n") else raw

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(stream: TextIO) -> list[str]:
    """Return every remaining line of ``stream``."""
    return list(LineReader(stream))