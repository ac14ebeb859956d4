"""Othello discs and the 8x8 board."""
from __future__ import annotations

from enum import IntEnum
from typing import Iterator, List, Optional

from .geometry import BOARD_SIZE, CELL_COUNT, COLUMNS, POSITIONS, Position


class Disc(IntEnum):
    """Player colour. Values mirror the usual ``1`` / ``-1`` board encoding."""

    DARK = 1
    LIGHT = -1

    def opposite(self) -> "Disc":
        return Disc(-self.value)

    @property
    def glyph(self) -> str:
        return "○" if self is Disc.DARK else "●"

    def __str__(self) -> str:
        return self.glyph


EMPTY_GLYPH = "·"


class Board:
    """64 cells, each holding a :class:`Disc` or ``None``.

    Cells are addressed by flat index (see :class:`~othello.geometry.Position`).
    Indexes are not validated here; callers are expected to pass positions.
    """

    __slots__ = ("cells",)

    def __init__(self) -> None:
        self.cells: List[Optional[Disc]] = [None] * CELL_COUNT

    @classmethod
    def standard(cls) -> "Board":
        """Return the starting board with the four centre discs."""
        board = cls()
        board.set(Position.from_xy(3, 3), Disc.LIGHT)
        board.set(Position.from_xy(4, 3), Disc.DARK)
        board.set(Position.from_xy(4, 4), Disc.LIGHT)
        board.set(Position.from_xy(3, 4), Disc.DARK)
        return board

    def copy(self) -> "Board":
        new_board = Board.__new__(Board)
        new_board.cells = self.cells[:]
        return new_board

    def get(self, position: int) -> Optional[Disc]:
        return self.cells[position]

    def set(self, position: int, disc: Disc) -> None:
        self.cells[position] = disc

    def positions_of(self, disc: Optional[Disc]) -> Iterator[Position]:
        """Yield every position holding ``disc`` (``None`` for empty cells)."""
        cells = self.cells
        return (POSITIONS[i] for i in range(CELL_COUNT) if cells[i] is disc)

    def count(self, disc: Optional[Disc]) -> int:
        return self.cells.count(disc)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells == other.cells

    def __str__(self) -> str:
        lines = ["  " + " ".join(COLUMNS)]
        for row in range(BOARD_SIZE):
            start = row * BOARD_SIZE
            glyphs = (
                EMPTY_GLYPH if cell is None else cell.glyph
                for cell in self.cells[start:start + BOARD_SIZE]
            )
            lines.append(f"{row + 1} " + " ".join(glyphs))
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Board(dark={self.count(Disc.DARK)}, light={self.count(Disc.LIGHT)})"
