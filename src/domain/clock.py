"""Injectable time source for domain code."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone


class Clock(ABC):
    """
    Abstract clock.

    Entities and aggregates receive a clock instead of reading the system
    time directly, so timestamps are deterministic under test.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Get the current time (timezone-aware, UTC)."""
        pass


class SystemClock(Clock):
    """Clock backed by the system time."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock(Clock):
    """Clock that always returns the same instant until advanced."""

    def __init__(self, fixed_time: datetime):
        self._time = fixed_time

    def now(self) -> datetime:
        return self._time

    def advance_to(self, new_time: datetime) -> None:
        """Move the clock to a new instant."""
        self._time = new_time


default_clock = SystemClock()


def resolve_clock(clock: "Clock | None") -> Clock:
    """Return the given clock, or the system clock when none is given."""
    return clock if clock is not None else default_clock
