"""Runtime settings read from the environment.

Every value can also be overridden per object through constructor arguments;
the environment only supplies defaults.
"""
from __future__ import annotations

import os

# Rollouts played for every candidate move by the Monte Carlo bot
MONTE_ROUNDS = int(os.getenv("OTHELLO_MONTE_ROUNDS", "100"))

# Number of parallel rollout workers (default to CPU count - 1, min 1)
MONTE_WORKERS = max(1, int(os.getenv("OTHELLO_MONTE_WORKERS", str(max(1, (os.cpu_count() or 2) - 1)))))

# "thread" or "process"
MONTE_EXECUTOR = os.getenv("OTHELLO_MONTE_EXECUTOR", "thread").strip().lower()

# Minimum level printed by othello.log
LOG_LEVEL = os.getenv("OTHELLO_LOG_LEVEL", "warning").strip().lower()

EXECUTORS = ("thread", "process")
