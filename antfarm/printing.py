"""Text output: the map, the found paths and the moves of the ants."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from antfarm.ants import Move
from antfarm.farm import Farm, Room

SEPARATOR = "---------------------------\n"


def format_path(path: Sequence[Room]) -> str:
    """Describe one path room by room, with its length."""
    parts = []
    for room in path:
        parts.append(f"room {room.name}")
        if not room.is_end:
            parts.append(" -> ")
    return "".join(parts) + f"\nOverall: {len(path)} steps\n\n"


def format_paths(paths: Sequence[Sequence[Room]], print_ants: bool) -> str:
    """Describe every found path; close with a separator if moves follow."""
    text = SEPARATOR + f"{len(paths)} path were found\n\n"
    text += "".join(format_path(path) for path in paths)
    if print_ants:
        text += SEPARATOR + "\n"
    return text


def format_rooms(farm: Farm) -> str:
    """List every room with its distance and the rooms it links to."""
    lines = []
    for room in farm.rooms:
        links = "".join(f" {other.name} ({other.distance})" for other in room.tubes)
        lines.append(f"Room {room.name} ({room.distance}) links to{links}\n")
    return "".join(lines)


def format_task(text: Iterable[str]) -> str:
    """Echo the lines the farm was read from, followed by a blank line."""
    return "".join(f"{line}\n" for line in text) + "\n"


def format_turn(turn: Iterable[Move]) -> str:
    """Write the moves of one turn on one line."""
    return "".join(f"{move} " for move in turn) + "\n"