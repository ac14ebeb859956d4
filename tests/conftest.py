import sys
from pathlib import Path
from typing import Iterable

import pytest

# Ensure project root is on path
sys.path.append(str(Path(__file__).resolve().parents[1]))

from othello.board import Board, Disc
from othello.game import Game


def build_game(dark: Iterable[int] = (), light: Iterable[int] = (), turn: Disc = Disc.DARK) -> Game:
    """Return a game whose board holds exactly ``dark`` and ``light`` discs."""
    dark, light = set(dark), set(light)
    assert not dark & light
    game = Game()
    game.board = Board()
    for cell in dark:
        game.board.set(cell, Disc.DARK)
    for cell in light:
        game.board.set(cell, Disc.LIGHT)
    game.dark = len(dark)
    game.light = len(light)
    game.empty = 64 - len(dark) - len(light)
    game.turn = turn
    return game


@pytest.fixture
def make_game():
    return build_game
