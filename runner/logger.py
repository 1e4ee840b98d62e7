"""Channel logger for the runner.

Each subsystem logs through its own named channel (``run``, ``collision``,
``highscore``, ``settings``, ``rng``, ``app``). Lines are written as
``[HH:MM:SS] LEVEL channel: msg``.

The global minimum level comes from ``RUNNER_LOG_LEVEL`` (default INFO).
``RUNNER_LOG_LEVELS`` overrides single channels, e.g.
``RUNNER_LOG_LEVELS=collision=DEBUG,highscore=ERROR``. Headless tools call
``set_level`` to quiet the per-crash lines during long simulations.
"""

from __future__ import annotations

import os
import sys
import time
from dataclasses import dataclass
from typing import Dict, TextIO

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


def _parse_channel_levels(raw: str) -> Dict[str, int]:
    levels = {}
    for item in raw.split(","):
        name, sep, level = item.partition("=")
        numeric = _LEVELS.get(level.strip().upper())
        if sep and name.strip() and numeric is not None:
            levels[name.strip()] = numeric
    return levels


_min_level = _LEVELS.get(os.environ.get("RUNNER_LOG_LEVEL", "INFO").upper(), 20)
_channel_levels = _parse_channel_levels(os.environ.get("RUNNER_LOG_LEVELS", ""))


def set_level(level: str, channel: str | None = None) -> None:
    """Change the minimum level globally or for one channel."""
    global _min_level
    numeric = _LEVELS[level.upper()]
    if channel is None:
        _min_level = numeric
    else:
        _channel_levels[channel] = numeric


def level_for(channel: str) -> int:
    return _channel_levels.get(channel, _min_level)


@dataclass
class Logger:
    name: str
    stream: TextIO | None = sys.stdout

    def enabled(self, level: str) -> bool:
        return _LEVELS[level] >= level_for(self.name)

    def _log(self, level: str, *parts):
        if self.stream is None or not self.enabled(level):
            return
        ts = time.strftime("%H:%M:%S")
        msg = " ".join(str(p) for p in parts)
        try:
            self.stream.write(f"[{ts}] {level:<5} {self.name}: {msg}\n")
            self.stream.flush()
        except (OSError, ValueError):
            # Windowed launches may run without a usable stdout.
            return

    def debug(self, *parts):
        self._log("DEBUG", *parts)

    def info(self, *parts):
        self._log("INFO", *parts)

    def warn(self, *parts):
        self._log("WARN", *parts)

    def error(self, *parts):
        self._log("ERROR", *parts)


def get_logger(name: str = "runner") -> Logger:
    return Logger(name)


__all__ = ["get_logger", "set_level", "level_for", "Logger"]
