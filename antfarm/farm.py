"""Rooms, tunnels and the farm that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field


class FarmError(Exception):
    """Raised when the farm description is invalid or cannot be solved."""


@dataclass(eq=False)
class Room:
    """A room of the farm, with the tunnels leading out of it."""

    name: str
    x: int = 0
    y: int = 0
    is_start: bool = False
    is_end: bool = False
    distance: int = 0
    tubes: list[Room] = field(default_factory=list, repr=False)
    is_in_path: bool = False
    parent: Room | None = field(default=None, repr=False)

    def is_connected_to(self, other: Room) -> bool:
        """Tell whether a tunnel leads from this room to ``other``."""
        return any(linked is other for linked in self.tubes)


class Farm:
    """The whole farm: ants, rooms, found paths and the text it was read from."""

    def __init__(self, ant_num: int = 0) -> None:
        self.ant_num = ant_num
        self.rooms: list[Room] = []
        self.paths: list[list[Room]] = []
        self.text: list[str] = []
        self._by_name: dict[str, Room] = {}
        self._coordinates: set[tuple[int, int]] = set()

    def room_by_name(self, name: str) -> Room | None:
        """Return the room called ``name``, or None."""
        return self._by_name.get(name)

    def start_room(self) -> Room | None:
        """Return the start room, or None if there is none."""
        return next((room for room in self.rooms if room.is_start), None)

    def end_room(self) -> Room | None:
        """Return the end room, or None if there is none."""
        return next((room for room in self.rooms if room.is_end), None)

    def is_unique(self, room: Room) -> bool:
        """Tell whether no room yet shares ``room``'s name or coordinates."""
        return (
            room.name not in self._by_name
            and (room.x, room.y) not in self._coordinates
        )

    def add_room(self, room: Room) -> None:
        """Add ``room``; the newest room comes first in ``rooms``."""
        if not self.is_unique(room):
            raise FarmError("Room is not unique")
        self.rooms.insert(0, room)
        self._by_name[room.name] = room
        self._coordinates.add((room.x, room.y))

    def link(self, first: Room, second: Room) -> None:
        """Dig a tunnel between two distinct, not yet connected rooms."""
        if first is second or first.is_connected_to(second):
            raise FarmError("Wrong link")
        first.tubes.insert(0, second)
        second.tubes.insert(0, first)