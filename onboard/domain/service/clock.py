"""Time source for expiry and acceptance timestamps."""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta

from onboard.domain.model.common import utcnow


class Clock(ABC):
    """Source of the current time."""

    @abstractmethod
    def now(self) -> datetime:
        """Current aware UTC datetime."""
        pass


class SystemClock(Clock):
    """Wall clock."""

    def now(self) -> datetime:
        return utcnow()


class FrozenClock(Clock):
    """Manually driven clock for tests and local scenarios."""

    def __init__(self, now: datetime | None = None) -> None:
        self._now = now or utcnow()

    def now(self) -> datetime:
        return self._now

    def set(self, now: datetime) -> None:
        self._now = now

    def advance(self, **delta: float) -> datetime:
        """Move the clock forward, e.g. ``advance(days=8)``."""
        self._now = self._now + timedelta(**delta)
        return self._now
