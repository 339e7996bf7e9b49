"""Search for vertex-disjoint paths from the start room to the end room."""

from __future__ import annotations

from collections import deque

from antfarm.farm import Farm, FarmError, Room


def _require_start(farm: Farm) -> Room:
    start = farm.start_room()
    if start is None:
        raise FarmError("Commands are wrong")
    return start


def start_end_path(farm: Farm) -> list[Room] | None:
    """Return the one-step path if the start room links straight to the end."""
    start = _require_start(farm)
    for room in start.tubes:
        if room.is_end:
            return [room]
    return None


def _form_path(farm: Farm) -> list[Room]:
    steps: list[Room] = []
    room = farm.end_room()
    while room is not None and not room.is_start:
        steps.append(room)
        room = room.parent
    steps.reverse()
    return steps


def find_path(farm: Farm) -> list[Room] | None:
    """Find a shortest path through rooms not yet used; None if there is none.

    The path lists the rooms after the start, ending with the end room.
    """
    start = _require_start(farm)
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current.is_end:
            return _form_path(farm)
        for room in current.tubes:
            if (
                room.parent is None
                and not room.is_start
                and not room.is_in_path
                and not (current.is_start and room.is_end)
            ):
                room.parent = current
                queue.append(room)
    return None


def reset_rooms(farm: Farm, path: list[Room]) -> None:
    """Forget the search state and mark the rooms of ``path`` as taken."""
    for room in farm.rooms:
        room.parent = None
    for room in path:
        if not room.is_start and not room.is_end:
            room.is_in_path = True


def collect_paths(farm: Farm) -> list[Room]:
    """Find disjoint paths, store them on the farm shortest first, and return them."""
    paths: list[list[Room]] = []
    direct = start_end_path(farm)
    if direct is not None:
        paths.insert(0, direct)
    while (path := find_path(farm)) is not None:
        paths.insert(0, path)
        reset_rooms(farm, path)
    paths.sort(key=len)
    for path in paths:
        path[0].distance = len(path)
    farm.paths = paths
    return paths