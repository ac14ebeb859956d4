import pytest

from othello.geometry import RAYS, Direction, Position, ray, rays_for


def indexes(cells):
    return [int(c) for c in cells]


def test_xy_index():
    for (x, y), index in [((0, 0), 0), ((1, 0), 1), ((1, 1), 9), ((7, 7), 63)]:
        assert Position.from_xy(x, y) == Position(index)
        assert Position(index).xy == (x, y)


def test_out_of_range_positions():
    with pytest.raises(ValueError):
        Position(64)
    with pytest.raises(ValueError):
        Position(-1)
    with pytest.raises(ValueError):
        Position.from_xy(8, 0)


def test_notation():
    assert str(Position.from_xy(3, 2)) == "d3"
    assert Position.from_notation("d3") == Position(19)
    assert Position.from_notation("H8") == Position(63)
    assert str(Position(0)) == "a1"
    for bad in ["i1", "a9", "a", "a10", ""]:
        with pytest.raises(ValueError):
            Position.from_notation(bad)


def test_positions_are_ordered():
    cells = [Position.from_notation(t) for t in ["e6", "c4", "f5", "d3"]]
    assert [str(c) for c in sorted(cells)] == ["d3", "c4", "f5", "e6"]


def test_corner_rays():
    assert indexes(ray(0, Direction.N)) == [0]
    assert indexes(ray(0, Direction.NE)) == [0]
    assert indexes(ray(0, Direction.E)) == [0, 1, 2, 3, 4, 5, 6, 7]
    assert indexes(ray(0, Direction.SE)) == [0, 9, 18, 27, 36, 45, 54, 63]
    assert indexes(ray(0, Direction.S)) == [0, 8, 16, 24, 32, 40, 48, 56]
    assert indexes(ray(0, Direction.W)) == [0]

    assert indexes(ray(7, Direction.SW)) == [7, 14, 21, 28, 35, 42, 49, 56]
    assert indexes(ray(7, Direction.W)) == [7, 6, 5, 4, 3, 2, 1, 0]
    assert indexes(ray(7, Direction.E)) == [7]

    assert indexes(ray(56, Direction.N)) == [56, 48, 40, 32, 24, 16, 8, 0]
    assert indexes(ray(56, Direction.NE)) == [56, 49, 42, 35, 28, 21, 14, 7]
    assert indexes(ray(56, Direction.S)) == [56]

    assert indexes(ray(63, Direction.N)) == [63, 55, 47, 39, 31, 23, 15, 7]
    assert indexes(ray(63, Direction.NW)) == [63, 54, 45, 36, 27, 18, 9, 0]
    assert indexes(ray(63, Direction.SE)) == [63]


def test_centre_rays():
    expected = {
        Direction.N: [27, 19, 11, 3],
        Direction.NE: [27, 20, 13, 6],
        Direction.E: [27, 28, 29, 30, 31],
        Direction.SE: [27, 36, 45, 54, 63],
        Direction.S: [27, 35, 43, 51, 59],
        Direction.SW: [27, 34, 41, 48],
        Direction.W: [27, 26, 25, 24],
        Direction.NW: [27, 18, 9, 0],
    }
    lines = rays_for(27)
    assert len(lines) == 8
    for direction, cells in expected.items():
        assert indexes(lines[direction]) == cells


def test_rays_never_wrap():
    for origin, lines in enumerate(RAYS):
        assert len(lines) == 8
        for line in lines:
            assert line[0] == origin
            for a, b in zip(line, line[1:]):
                assert abs(a.x - b.x) <= 1 and abs(a.y - b.y) <= 1
