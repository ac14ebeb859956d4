"""Rich-based console logging for the engine and its bots."""
from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.theme import Theme

from . import config

THEME = Theme({
    "info": "cyan",
    "warning": "yellow",
    "error": "bold red",
    "debug": "dim white",
})

LEVELS = {"debug": 10, "info": 20, "warning": 30, "error": 40}

# Shared console; diagnostics go to stderr so stdout stays free for callers.
console = Console(theme=THEME, stderr=True)

_threshold = LEVELS.get(config.LOG_LEVEL, LEVELS["warning"])


def set_level(level: str) -> None:
    """Change the minimum level printed, e.g. ``set_level("debug")``."""
    global _threshold
    if level not in LEVELS:
        raise ValueError(f"Unknown log level {level!r}; expected one of {', '.join(LEVELS)}")
    _threshold = LEVELS[level]


def enabled(level: str) -> bool:
    return LEVELS[level] >= _threshold


def _log(level: str, message: str, **kwargs: Any) -> None:
    if enabled(level):
        console.log(f"[{level}]{level.upper()}:[/{level}] {message}", **kwargs)


def debug(message: str, **kwargs: Any) -> None:
    _log("debug", message, **kwargs)


def info(message: str, **kwargs: Any) -> None:
    _log("info", message, **kwargs)


def warning(message: str, **kwargs: Any) -> None:
    _log("warning", message, **kwargs)


def error(message: str, **kwargs: Any) -> None:
    _log("error", message, **kwargs)
