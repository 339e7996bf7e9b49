"""Building a farm from the lines of its description."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from antfarm.farm import Farm, FarmError, Room
from antfarm.validation import is_comment, is_link, is_room, is_valid_ant_num

_START = "##start"
_END = "##end"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_room(line: str, is_start: bool, is_end: bool) -> Room:
    """Build a room from a line already known to be 'name x y'."""
    first = line.find(" ")
    last = line.rfind(" ")
    return Room(
        name=line[:first],
        x=_atoi(line[first + 1:]),
        y=_atoi(line[last + 1:]),
        is_start=is_start,
        is_end=is_end,
    )


def _read_ants(farm: Farm, lines: Iterator[str]) -> None:
    for line in lines:
        farm.text.append(line)
        if is_valid_ant_num(line):
            farm.ant_num = int(line)
            return
        if not is_comment(line):
            raise FarmError("Wrong number of ants")


def _add_room(farm: Farm, line: str, start: int, end: int) -> None:
    if (
        start > 1
        or end > 1
        or (start == 1 and farm.start_room() is not None)
        or (end == 1 and farm.end_room() is not None)
        or (start == 1 and end == 1)
    ):
        raise FarmError("Commands are wrong")
    farm.add_room(parse_room(line, start == 1, end == 1))


def _make_link(farm: Farm, line: str) -> None:
    first_name, _, second_name = line.partition("-")
    first = farm.room_by_name(first_name)
    second = farm.room_by_name(second_name)
    if first is None or second is None:
        raise FarmError("Wrong link")
    farm.link(first, second)


def read_farm(lines: Iterable[str]) -> Farm:
    """Read the ant count, rooms and links; stop at the first empty line."""
    farm = Farm()
    remaining = iter(lines)
    _read_ants(farm, remaining)
    start = end = 0
    link_mode = False
    for line in remaining:
        if not line:
            break
        farm.text.append(line)
        if line == _START:
            start += 1
        elif line == _END:
            end += 1
        elif not link_mode and is_room(line):
            _add_room(farm, line, start, end)
            start = end = 0
        elif is_link(line):
            link_mode = True
            _make_link(farm, line)
        elif not is_comment(line):
            raise FarmError("Wrong link" if link_mode else "Wrong room")
    return farm