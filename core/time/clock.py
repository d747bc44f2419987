"""
Composer Core Time — Runtime Clock
=====================================
Transactions are timestamped when the factory creates them, events
inherit the timestamp of the transaction that emitted them.

Processors never read wall-clock time. They compare against
``tx.timestamp`` so a test can replay a scenario deterministically
by swapping the runtime clock.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Protocol


# ══════════════════════════════════════════════════════════════
# CLOCK PROTOCOL
# ══════════════════════════════════════════════════════════════

class Clock(Protocol):
    """Source of transaction timestamps."""

    def now_utc(self) -> datetime:
        ...  # pragma: no cover


# ══════════════════════════════════════════════════════════════
# IMPLEMENTATIONS
# ══════════════════════════════════════════════════════════════

class SystemClock:
    """Wall-clock time, used when a runtime is built without a clock."""

    def now_utc(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """
    Deterministic clock for scenario tests.

    Usage:
        clock = FixedClock(datetime(2026, 2, 19, tzinfo=timezone.utc))
        runtime = EmbeddedRuntime(clock=clock)
        clock.advance(days=2)   # next transaction arrives late
    """

    def __init__(self, fixed_dt: datetime) -> None:
        if fixed_dt.tzinfo is None:
            raise ValueError("FixedClock requires timezone-aware datetime.")
        self._fixed_dt = fixed_dt

    def now_utc(self) -> datetime:
        return self._fixed_dt

    def advance(self, **delta: float) -> datetime:
        """Move the clock forward by the given timedelta fields; returns the new time."""
        self._fixed_dt = self._fixed_dt + timedelta(**delta)
        return self._fixed_dt


# ══════════════════════════════════════════════════════════════
# DEFAULT CLOCK
# ══════════════════════════════════════════════════════════════

_default_clock: Clock = SystemClock()


def set_default_clock(clock: Clock) -> None:
    global _default_clock
    _default_clock = clock


def get_default_clock() -> Clock:
    return _default_clock


def now_utc() -> datetime:
    return _default_clock.now_utc()
