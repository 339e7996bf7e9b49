"""Marching the ants along the found paths, turn by turn."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from antfarm.farm import FarmError, Room


@dataclass(frozen=True)
class Move:
    """One ant stepping into one room during a turn."""

    ant: int
    room: str

    def __str__(self) -> str:
        return f"L{self.ant}-{self.room}"


@dataclass
class _Ant:
    ident: int
    path: Sequence[Room]
    position: int = 0


def sum_of_differences(paths: Sequence[Sequence[Room]], index: int) -> int:
    """Return how many steps longer path ``index`` is than all shorter paths together."""
    length = len(paths[index])
    return sum(length - len(path) for path in paths[:index])


def _launch(
    ant_num: int, last_id: int, paths: Sequence[Sequence[Room]], marching: list[_Ant]
) -> int:
    launched = 0
    for index, path in enumerate(paths):
        last_id += 1
        remaining = ant_num - last_id + 1
        if remaining <= sum_of_differences(paths, index):
            break
        marching.append(_Ant(last_id, path))
        launched += 1
    return launched


def run_ants(ant_num: int, paths: Sequence[Sequence[Room]]) -> list[list[Move]]:
    """Send ``ant_num`` ants along ``paths`` and return the moves of every turn.

    Paths are taken shortest first; an ant is sent down a longer path only
    while enough ants wait for it to beat queueing on the shorter ones.
    """
    if ant_num > 0 and not paths:
        raise FarmError("There are no connection between start and finish")
    waiting = ant_num
    finished = 0
    marching: list[_Ant] = []
    turns: list[list[Move]] = []
    while finished < ant_num:
        if waiting > 0:
            waiting -= _launch(ant_num, ant_num - waiting, paths, marching)
        moves: list[Move] = []
        still_marching: list[_Ant] = []
        for ant in marching:
            room = ant.path[ant.position]
            moves.append(Move(ant.ident, room.name))
            if room.is_end or ant.position == len(ant.path) - 1:
                finished += 1
            else:
                ant.position += 1
                still_marching.append(ant)
        marching = still_marching
        turns.append(moves)
    return turns