"""Bot strategies for Othello.

Every bot plays for ``game.turn`` and answers :meth:`next_play` with a
:class:`~othello.game.ValidMove`, or ``None`` when it has to pass.
:meth:`score_moves` exposes the score behind that choice for every legal
move, in enumeration order. When several moves score the same, the first
one (lowest position) is chosen.
"""
from __future__ import annotations

import random
from typing import Callable, Dict, List, Optional, Protocol, Sequence, Tuple

from . import config, log
from .board import Disc
from .game import Game, ValidMove
from .geometry import Position
from .monte import evaluate_moves

Scored = List[Tuple[ValidMove, float]]


class Strategy(Protocol):
    name: str
    version: str

    def score_moves(self, game: Game) -> Scored:
        ...

    def next_play(self, game: Game) -> Optional[ValidMove]:
        ...


def best_move(scored: Sequence[Tuple[ValidMove, float]]) -> Optional[ValidMove]:
    """Return the highest scored move, the earliest one on a tie."""
    if not scored:
        return None
    return max(scored, key=lambda item: item[1])[0]


class RandomBot:
    """Random: pick any legal move with equal probability."""

    name = "random"
    version = "0.1"

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)

    def score_moves(self, game: Game) -> Scored:
        return [(move, self.rng.random()) for move in game.valid_moves()]

    def next_play(self, game: Game) -> Optional[ValidMove]:
        moves = game.valid_moves()
        if not moves:
            return None
        return self.rng.choice(moves)


class SimpleBot:
    """Simple: always the last legal move in enumeration order."""

    name = "simple"
    version = "0.1"

    def score_moves(self, game: Game) -> Scored:
        return [(move, index) for index, move in enumerate(game.valid_moves())]

    def next_play(self, game: Game) -> Optional[ValidMove]:
        moves = game.valid_moves()
        return moves[-1] if moves else None


class MaximizeBot:
    """Maximize: choose the move that flips the most discs."""

    name = "maximize"
    version = "0.1"

    def score_moves(self, game: Game) -> Scored:
        return [(move, move.score) for move in game.valid_moves()]

    def next_play(self, game: Game) -> Optional[ValidMove]:
        return best_move(self.score_moves(game))


class MinimizeBot:
    """Minimize: choose the move that flips the fewest discs."""

    name = "minimize"
    version = "0.1"

    def score_moves(self, game: Game) -> Scored:
        return [(move, -move.score) for move in game.valid_moves()]

    def next_play(self, game: Game) -> Optional[ValidMove]:
        return best_move(self.score_moves(game))


CORNERS = {
    Position(0): (Position(1), Position(8), Position(9)),
    Position(7): (Position(6), Position(14), Position(15)),
    Position(56): (Position(48), Position(49), Position(57)),
    Position(63): (Position(54), Position(55), Position(62)),
}

GOOD, NEUTRAL, BAD = 2, 1, 0


class CornersBot:
    """Corners: take a corner when possible, avoid squares that give one away.

    A square next to an empty corner is ranked lowest because it lets the
    opponent take that corner. Everything else is neutral.
    """

    name = "corners"
    version = "0.1"

    @staticmethod
    def rank(game: Game, move: ValidMove) -> int:
        if move.position in CORNERS:
            return GOOD
        for corner, neighbours in CORNERS.items():
            if move.position in neighbours and game.board.get(corner) is None:
                return BAD
        return NEUTRAL

    def score_moves(self, game: Game) -> Scored:
        return [(move, self.rank(game, move)) for move in game.valid_moves()]

    def next_play(self, game: Game) -> Optional[ValidMove]:
        return best_move(self.score_moves(game))


class ConstrainBot:
    """Constrain: choose the move giving the opponent the fewest options next turn."""

    name = "constrain"
    version = "0.1"

    def score_moves(self, game: Game) -> Scored:
        """Score each move by minus the opponent's move count after it."""
        opponent = game.turn.opposite()
        scored = []
        for move in game.valid_moves():
            sim = game.copy()
            sim.apply(move)
            scored.append((move, -len(sim.valid_moves(opponent))))
        return scored

    def next_play(self, game: Game) -> Optional[ValidMove]:
        return best_move(self.score_moves(game))


class MonteCarloBot:
    """Monte: score every move by finishing the game at random many times.

    Each candidate gets ``rounds`` rollouts in which both sides play like
    :class:`RandomBot`; the candidate with the most wins for the player to
    move is chosen. Candidates are evaluated in parallel (see
    :mod:`othello.monte`). Passing ``seed`` makes the bot reproducible.
    """

    name = "monte"
    version = "0.1"

    def __init__(
        self,
        rounds: Optional[int] = None,
        workers: Optional[int] = None,
        executor: Optional[str] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.rounds = config.MONTE_ROUNDS if rounds is None else rounds
        self.workers = config.MONTE_WORKERS if workers is None else workers
        self.executor = config.MONTE_EXECUTOR if executor is None else executor
        if self.rounds < 1:
            raise ValueError(f"rounds must be positive, got {self.rounds}")
        if self.executor not in config.EXECUTORS:
            raise ValueError(
                f"Unknown executor {self.executor!r}; expected one of {', '.join(config.EXECUTORS)}"
            )
        self.rng = random.Random(seed)

    def score_moves(self, game: Game) -> Scored:
        """Return ``(move, wins)`` for every legal move, in enumeration order."""
        moves = game.valid_moves()
        wins = evaluate_moves(game, moves, self.rounds, self.workers, self.executor, self.rng)
        return list(zip(moves, wins))

    def next_play(self, game: Game) -> Optional[ValidMove]:
        scored = self.score_moves(game)
        choice = best_move(scored)
        if choice is not None and log.enabled("debug"):
            tallies = ", ".join(f"{move}={wins}" for move, wins in scored)
            log.debug(f"monte {game.turn.name.lower()} ({self.rounds} rounds): {tallies} -> {choice}")
        return choice

    def __repr__(self) -> str:
        return f"MonteCarloBot(rounds={self.rounds}, workers={self.workers}, executor={self.executor!r})"


def solve(strategy: Strategy, game: Game) -> Game:
    """Finish ``game`` with ``strategy`` playing both sides."""
    while not game.is_complete:
        move = strategy.next_play(game)
        if move is None:
            game.pass_turn()
        else:
            game.apply(move)
    return game


def play_match(dark: Strategy, light: Strategy, game: Optional[Game] = None) -> Game:
    """Play ``game`` (a new one by default) to the end, one bot per colour."""
    if game is None:
        game = Game()
    players = {Disc.DARK: dark, Disc.LIGHT: light}
    while not game.is_complete:
        move = players[game.turn].next_play(game)
        if move is None:
            game.pass_turn()
        else:
            game.apply(move)
    winner = game.score().winner
    log.info(
        f"{dark.name} (dark) {game.dark} - {game.light} {light.name} (light): "
        f"{'draw' if winner is None else players[winner].name + ' wins'}"
    )
    return game


BotFactory = Callable[..., Strategy]

BOTS: Dict[str, BotFactory] = {
    "random": RandomBot,
    "simple": SimpleBot,
    "maximize": MaximizeBot,
    "minimize": MinimizeBot,
    "corners": CornersBot,
    "constrain": ConstrainBot,
    "monte": MonteCarloBot,
}


def create_bot(name: str, **options) -> Strategy:
    """Build the bot registered under ``name``, passing ``options`` to it."""
    factory = BOTS.get(name.strip().lower())
    if factory is None:
        raise ValueError(f"Unknown strategy {name!r} -- try {', '.join(BOTS)}")
    return factory(**options)
