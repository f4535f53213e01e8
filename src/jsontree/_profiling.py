"""
Opt-in hot path profiling for the parser productions.

Each production runs inside a ``ProfileContext`` that records its wall time,
the characters it consumed and whether it failed. Recording is off unless
``JSONTREE_PROFILE`` is set before import (and Python runs without ``-O``),
or ``enable_profiling()`` is called.
"""

import os
import time
from dataclasses import dataclass
from typing import Any

from ._errors import Position

_enabled = __debug__ and "JSONTREE_PROFILE" in os.environ
_hot_path_stats: dict[str, "HotPathStats"] = {}


@dataclass
class HotPathStats:
    """Accumulated timings for one production."""

    function_name: str
    call_count: int = 0
    failure_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(
        self, duration_ns: int, chars: int = 0, failed: bool = False
    ) -> None:
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars
        if failed:
            self.failure_count += 1


class ProfileContext:
    """
    Times one production call starting at ``start``.

    The production reports where it stopped through ``consumed``; a call
    that raises is recorded as a failure with nothing consumed.
    """

    __slots__ = ("_started_ns", "end", "name", "start")

    def __init__(self, name: str, start: Position) -> None:
        self.name = name
        self.start = start
        self.end = start
        self._started_ns = 0

    def consumed(self, end: Position) -> None:
        self.end = end

    def __enter__(self) -> "ProfileContext":
        if _enabled:
            self._started_ns = time.perf_counter_ns()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if not _enabled or not self._started_ns:
            return
        duration = time.perf_counter_ns() - self._started_ns
        stats = _hot_path_stats.get(self.name)
        if stats is None:
            stats = _hot_path_stats[self.name] = HotPathStats(self.name)
        failed = exc_type is not None
        chars = 0 if failed else self.end - self.start
        stats.record_call(duration, chars, failed)


def profiling_enabled() -> bool:
    return _enabled


def enable_profiling() -> None:
    """Starts recording production statistics."""
    global _enabled
    _enabled = True


def disable_profiling() -> None:
    global _enabled
    _enabled = False


def get_hot_path_stats() -> dict[str, HotPathStats]:
    """Returns current profiling statistics."""
    return _hot_path_stats.copy()


def clear_hot_path_stats() -> None:
    _hot_path_stats.clear()
