"""Othello game logic: state, move validation and enumeration, replay."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, NamedTuple, Optional, Set, Tuple

from . import log
from .board import Board, Disc
from .geometry import CELL_COUNT, Position, rays_for

PASS_TOKEN = "p"

_SEPARATORS = re.compile(r"[,\s]+")


@dataclass(frozen=True)
class Play:
    """One transcript entry: a move at ``position`` or, when ``None``, a pass."""

    position: Optional[Position] = None

    @property
    def is_pass(self) -> bool:
        return self.position is None

    @classmethod
    def parse(cls, token: str) -> "Play":
        token = token.strip().lower()
        if token == PASS_TOKEN:
            return PASS
        return cls(Position.from_notation(token))

    def __str__(self) -> str:
        return PASS_TOKEN if self.position is None else str(self.position)


PASS = Play()


@dataclass(frozen=True)
class ValidMove:
    """A legal target cell together with every disc it flips.

    ``flips`` is sorted and free of duplicates, so two moves found through
    different rays or search directions compare equal. ``player`` is the
    colour the move was found for.
    """

    position: Position
    flips: Tuple[Position, ...]
    player: Disc

    @property
    def score(self) -> int:
        return len(self.flips)

    def __str__(self) -> str:
        return str(self.position)


class Score(NamedTuple):
    dark: int
    light: int

    @property
    def winner(self) -> Optional[Disc]:
        """Return the colour with more discs, or ``None`` for a draw."""
        if self.dark > self.light:
            return Disc.DARK
        if self.light > self.dark:
            return Disc.LIGHT
        return None


def _consolidate(found: Dict[Position, Set[Position]], player: Disc) -> List[ValidMove]:
    return [ValidMove(target, tuple(sorted(found[target])), player) for target in sorted(found)]


class Game:
    """Othello game state and rules engine.

    A new game starts from the standard four-disc position with dark to move.
    Counters are maintained incrementally, so ``dark + light + empty`` is
    always 64. The transcript records every move and pass and is enough to
    rebuild the game with :meth:`from_transcript`.
    """

    def __init__(self) -> None:
        self.turn = Disc.DARK
        self.dark = 2
        self.light = 2
        self.empty = CELL_COUNT - 4
        self.board = Board.standard()
        self.transcript: List[Play] = []
        self.is_complete = False

    def copy(self) -> "Game":
        """Return an independent copy of the game.

        Duplicating the few fields by hand is much faster than
        ``copy.deepcopy`` for the thousands of copies made during rollouts.
        """

        # Bypass ``__init__`` to avoid building the starting board only to
        # overwrite it immediately.
        new_game = Game.__new__(Game)
        new_game.turn = self.turn
        new_game.dark = self.dark
        new_game.light = self.light
        new_game.empty = self.empty
        new_game.board = self.board.copy()
        new_game.transcript = self.transcript[:]
        new_game.is_complete = self.is_complete
        return new_game

    @classmethod
    def from_transcript(cls, plays: Iterable[Play]) -> Optional["Game"]:
        """Rebuild a game by replaying ``plays`` from the starting position.

        Every recorded move is validated again against the rebuilt state.
        ``None`` is returned as soon as one of them is not legal; a partially
        replayed game is never returned.
        """
        game = cls()
        for number, play in enumerate(plays, start=1):
            if play.is_pass:
                game.pass_turn()
                continue
            valid_move = game.validate_move(play.position)
            if valid_move is None:
                log.warning(
                    f"Replay failed at play {number} ({play}): "
                    f"not a legal move for {game.turn.name.lower()}"
                )
                return None
            game.apply(valid_move)
        # A transcript does not record the final pass of a finished game.
        game._validate_completion()
        return game

    def count(self, player: Disc) -> int:
        return self.dark if player is Disc.DARK else self.light

    def score(self) -> Score:
        return Score(self.dark, self.light)

    def validate_move(self, position: int, player: Optional[Disc] = None) -> Optional[ValidMove]:
        """Return the move at ``position`` for ``player`` or ``None`` if illegal."""
        if player is None:
            player = self.turn
        position = Position(position)
        if self.board.get(position) is not None:
            return None
        flips = self._flips_from(position, player, player.opposite())
        if not flips:
            return None
        return ValidMove(position, tuple(sorted(flips)), player)

    def valid_moves(self, player: Optional[Disc] = None) -> List[ValidMove]:
        """Return every legal move for ``player`` sorted by position.

        The search starts from whichever set of cells is smaller: the
        player's own discs or the empty cells. Both searches find the same
        moves.
        """
        if player is None:
            player = self.turn
        if self.count(player) < self.empty:
            found = self._moves_from_discs(player)
        else:
            found = self._moves_from_empties(player)
        return _consolidate(found, player)

    def has_moves(self, player: Optional[Disc] = None) -> bool:
        return bool(self.valid_moves(player))

    def _flips_from(self, origin: Position, player: Disc, opponent: Disc) -> Set[Position]:
        """Collect the discs flipped by ``player`` playing at the empty ``origin``."""
        cells = self.board.cells
        flips: Set[Position] = set()
        for line in rays_for(origin):
            run = []
            for cell in line[1:]:
                disc = cells[cell]
                if disc is opponent:
                    run.append(cell)
                    continue
                # Own disc closes the run; an empty cell ends the ray.
                if disc is player and run:
                    flips.update(run)
                break
        return flips

    def _moves_from_empties(self, player: Disc) -> Dict[Position, Set[Position]]:
        opponent = player.opposite()
        found: Dict[Position, Set[Position]] = {}
        for origin in self.board.positions_of(None):
            flips = self._flips_from(origin, player, opponent)
            if flips:
                found[origin] = flips
        return found

    def _moves_from_discs(self, player: Disc) -> Dict[Position, Set[Position]]:
        # Walk away from each own disc over opponent discs; the empty cell
        # that ends the run is a legal target flipping that run.
        cells = self.board.cells
        opponent = player.opposite()
        found: Dict[Position, Set[Position]] = {}
        for origin in self.board.positions_of(player):
            for line in rays_for(origin):
                run = []
                for cell in line[1:]:
                    disc = cells[cell]
                    if disc is opponent:
                        run.append(cell)
                        continue
                    if disc is None and run:
                        found.setdefault(cell, set()).update(run)
                    break
        return found

    def apply(self, move: ValidMove) -> None:
        """Play ``move`` for the current player.

        ``move`` must come from :meth:`validate_move` or :meth:`valid_moves`
        on this state; its flips are not checked again. A move found for the
        colour that is not on turn raises ``ValueError``.
        """
        player = self.turn
        if move.player is not player:
            raise ValueError(
                f"{move} was found for {move.player.name.lower()} but "
                f"{player.name.lower()} is to move"
            )
        board = self.board
        for cell in move.flips:
            board.set(cell, player)
        board.set(move.position, player)

        changed = move.score
        if player is Disc.DARK:
            self.dark += changed + 1
            self.light -= changed
        else:
            self.light += changed + 1
            self.dark -= changed
        self.empty -= 1

        self.transcript.append(Play(move.position))
        if self.empty == 0:
            self.is_complete = True
        self.turn = player.opposite()

    def pass_turn(self) -> None:
        """Forfeit the current player's turn.

        A pass answering a pass ends the game and is not recorded.
        """
        if self.transcript and self.transcript[-1].is_pass:
            self.is_complete = True
        else:
            self.transcript.append(PASS)
            self.turn = self.turn.opposite()

    def make_move(self, position: int) -> bool:
        """Validate and play ``position`` for the current player.

        Returns ``True`` if the move was played and ``False`` if it is not
        legal (or the game is already over).
        """
        if self.is_complete:
            return False
        move = self.validate_move(position)
        if move is None:
            return False
        self.apply(move)
        return True

    def _validate_completion(self) -> None:
        if not self.has_moves(Disc.DARK) and not self.has_moves(Disc.LIGHT):
            self.is_complete = True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Game):
            return NotImplemented
        return (
            self.turn is other.turn
            and self.dark == other.dark
            and self.light == other.light
            and self.empty == other.empty
            and self.is_complete == other.is_complete
            and self.board == other.board
            and self.transcript == other.transcript
        )

    def __str__(self) -> str:
        return (
            f"{self.board}"
            f"Turn: {self.turn.glyph} Dark: {self.dark} Light: {self.light} Empty: {self.empty}\n"
        )

    def __repr__(self) -> str:
        return (
            f"Game(turn={self.turn.name}, dark={self.dark}, light={self.light}, "
            f"empty={self.empty}, complete={self.is_complete})"
        )


def format_transcript(plays: Iterable[Play], sep: str = ",") -> str:
    return sep.join(str(play) for play in plays)


def parse_transcript(text: str) -> List[Play]:
    """Parse a transcript such as ``"d3,c3,p"`` or ``"d3c3p"``.

    Tokens are separated by commas or whitespace; within one chunk they may
    run together. Raises ``ValueError`` on a malformed token, including one
    split by a space such as ``"d 3"``.
    """
    plays: List[Play] = []
    for chunk in _SEPARATORS.split(text.strip().lower()):
        i = 0
        while i < len(chunk):
            if chunk[i] == PASS_TOKEN:
                plays.append(Play.parse(chunk[i]))
                i += 1
            else:
                plays.append(Play.parse(chunk[i:i + 2]))
                i += 2
    return plays
