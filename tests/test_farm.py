import pytest

from antfarm.farm import Farm, FarmError, Room


def _farm_with(*rooms):
    farm = Farm()
    for room in rooms:
        farm.add_room(room)
    return farm


def test_room_by_name_finds_added_rooms():
    a, b = Room("a", 0, 0), Room("b", 1, 1)
    farm = _farm_with(a, b)
    assert farm.room_by_name("a") is a
    assert farm.room_by_name("b") is b
    assert farm.room_by_name("c") is None


def test_newest_room_comes_first():
    a, b, c = Room("a", 0, 0), Room("b", 1, 1), Room("c", 2, 2)
    farm = _farm_with(a, b, c)
    assert farm.rooms == [c, b, a]


def test_start_and_end_rooms():
    start = Room("s", 0, 0, is_start=True)
    end = Room("e", 1, 0, is_end=True)
    middle = Room("m", 2, 0)
    farm = _farm_with(start, middle, end)
    assert farm.start_room() is start
    assert farm.end_room() is end


def test_missing_start_and_end():
    farm = _farm_with(Room("a", 0, 0))
    assert farm.start_room() is None
    assert farm.end_room() is None


def test_duplicate_name_is_not_unique():
    farm = _farm_with(Room("a", 0, 0))
    duplicate = Room("a", 5, 5)
    assert not farm.is_unique(duplicate)
    with pytest.raises(FarmError, match="Room is not unique"):
        farm.add_room(duplicate)


def test_duplicate_coordinates_are_not_unique():
    farm = _farm_with(Room("a", 3, 4))
    duplicate = Room("b", 3, 4)
    assert not farm.is_unique(duplicate)
    with pytest.raises(FarmError, match="Room is not unique"):
        farm.add_room(duplicate)
    assert farm.is_unique(Room("b", 4, 3))


def test_link_connects_both_ways():
    a, b = Room("a", 0, 0), Room("b", 1, 1)
    farm = _farm_with(a, b)
    assert not a.is_connected_to(b)
    farm.link(a, b)
    assert a.is_connected_to(b)
    assert b.is_connected_to(a)


def test_newest_tube_comes_first():
    a, b, c = Room("a", 0, 0), Room("b", 1, 1), Room("c", 2, 2)
    farm = _farm_with(a, b, c)
    farm.link(a, b)
    farm.link(a, c)
    assert a.tubes == [c, b]


def test_link_to_itself_is_rejected():
    a = Room("a", 0, 0)
    farm = _farm_with(a)
    with pytest.raises(FarmError, match="Wrong link"):
        farm.link(a, a)


def test_double_link_is_rejected():
    a, b = Room("a", 0, 0), Room("b", 1, 1)
    farm = _farm_with(a, b)
    farm.link(a, b)
    with pytest.raises(FarmError, match="Wrong link"):
        farm.link(b, a)
    assert a.tubes == [b]