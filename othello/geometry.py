"""Board geometry: cell positions, compass directions and precomputed rays."""
from __future__ import annotations

from enum import IntEnum
from typing import Tuple

BOARD_SIZE = 8
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

COLUMNS = "abcdefgh"
ROWS = "12345678"


class Position(int):
    """A board cell addressed by flat index ``column + row * 8``.

    Positions behave as plain integers (ordering, hashing, list indexing) but
    refuse to be constructed outside ``[0, 64)``. Their string form is the
    coordinate token used in transcripts, e.g. ``d3``.
    """

    __slots__ = ()

    def __new__(cls, index: int) -> "Position":
        if not 0 <= index < CELL_COUNT:
            raise ValueError(f"Position out of bounds - index: {index}")
        return super().__new__(cls, index)

    @classmethod
    def from_xy(cls, x: int, y: int) -> "Position":
        if not (0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE):
            raise ValueError(f"Position out of bounds - x: {x}, y: {y}")
        return cls(y * BOARD_SIZE + x)

    @classmethod
    def from_notation(cls, token: str) -> "Position":
        """Parse a coordinate token such as ``d3`` (case-insensitive)."""
        token = token.strip().lower()
        if len(token) != 2 or token[0] not in COLUMNS or token[1] not in ROWS:
            raise ValueError(f"Invalid coordinate: {token!r}")
        return cls.from_xy(COLUMNS.index(token[0]), ROWS.index(token[1]))

    @property
    def x(self) -> int:
        return int(self) % BOARD_SIZE

    @property
    def y(self) -> int:
        return int(self) // BOARD_SIZE

    @property
    def xy(self) -> Tuple[int, int]:
        return self.x, self.y

    def __str__(self) -> str:
        return COLUMNS[self.x] + ROWS[self.y]

    def __repr__(self) -> str:
        return f"Position({int(self)})"


class Direction(IntEnum):
    """The eight compass directions, in ray table order."""

    N = 0
    NE = 1
    E = 2
    SE = 3
    S = 4
    SW = 5
    W = 6
    NW = 7

    @property
    def step(self) -> Tuple[int, int]:
        return _STEPS[self]


# (dx, dy) per direction; row 0 is the top of the board.
_STEPS = (
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
)

Ray = Tuple[Position, ...]

POSITIONS: Tuple[Position, ...] = tuple(Position(i) for i in range(CELL_COUNT))


def _build_ray(origin: Position, direction: Direction) -> Ray:
    dx, dy = direction.step
    x, y = origin.xy
    cells = [origin]
    # Stop before stepping past column 0/7 or row 0/7.
    while 0 <= x + dx < BOARD_SIZE and 0 <= y + dy < BOARD_SIZE:
        x += dx
        y += dy
        cells.append(POSITIONS[y * BOARD_SIZE + x])
    return tuple(cells)


def _build_rays() -> Tuple[Tuple[Ray, ...], ...]:
    return tuple(
        tuple(_build_ray(origin, direction) for direction in Direction)
        for origin in POSITIONS
    )


# Built once at import and never mutated.
RAYS: Tuple[Tuple[Ray, ...], ...] = _build_rays()


def rays_for(position: int) -> Tuple[Ray, ...]:
    """Return the 8 rays of ``position``, each starting with the cell itself."""
    return RAYS[position]


def ray(position: int, direction: Direction) -> Ray:
    return RAYS[position][direction]
