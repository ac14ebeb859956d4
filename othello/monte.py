"""Parallel Monte Carlo rollouts for scoring candidate moves.

Work is split by candidate move. Every unit gets its own copy of the game and
its own random seed, so units share nothing and can run on threads or
processes without locking. The results are collected in candidate order.
"""
from __future__ import annotations

import random
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from typing import List, Optional, Sequence

from . import config
from .game import Game, ValidMove


def rollout_wins(game: Game, move: ValidMove, rounds: int, seed: int) -> int:
    """Count how many of ``rounds`` random finishes after ``move`` are won.

    A rollout is won when the player to move in ``game`` ends with strictly
    more discs than the opponent. This runs in worker threads or processes
    and must stay picklable.
    """
    # Import here to avoid a circular import with the bot registry
    from .bots import RandomBot, solve

    player = game.turn
    bot = RandomBot(seed=seed)
    wins = 0
    for _ in range(rounds):
        sim = game.copy()
        sim.apply(move)
        solve(bot, sim)
        if sim.score().winner is player:
            wins += 1
    return wins


def evaluate_moves(
    game: Game,
    moves: Sequence[ValidMove],
    rounds: int,
    workers: int = 1,
    executor: str = "thread",
    rng: Optional[random.Random] = None,
) -> List[int]:
    """Return the rollout win tally of every move in ``moves``, in order.

    Args:
        game: State the moves are legal in; it is never modified.
        moves: Candidate moves for ``game.turn``.
        rounds: Rollouts per candidate.
        workers: Parallel units; ``1`` evaluates inline.
        executor: ``"thread"`` or ``"process"``.
        rng: Source of the per-candidate seeds.
    """
    if executor not in config.EXECUTORS:
        raise ValueError(f"Unknown executor {executor!r}; expected one of {', '.join(config.EXECUTORS)}")
    if rng is None:
        rng = random.Random()
    seeds = [rng.getrandbits(64) for _ in moves]

    # For a single candidate or worker, don't bother with parallelism
    if workers <= 1 or len(moves) <= 1:
        return [rollout_wins(game, move, rounds, seed) for move, seed in zip(moves, seeds)]

    # Each call owns its pool, so concurrent callers never share one
    pool_class = ProcessPoolExecutor if executor == "process" else ThreadPoolExecutor
    with pool_class(max_workers=min(workers, len(moves))) as pool:
        return _fan_out(pool, game, moves, rounds, seeds)


def _fan_out(
    pool: Executor,
    game: Game,
    moves: Sequence[ValidMove],
    rounds: int,
    seeds: Sequence[int],
) -> List[int]:
    futures = [
        pool.submit(rollout_wins, game.copy(), move, rounds, seed)
        for move, seed in zip(moves, seeds)
    ]
    return [future.result() for future in futures]
