from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional


@dataclass(frozen=True)
class CommunicationEvent:
    """A satellite seen by a ground station at a given step."""
    timestamp: datetime
    satellite_name: str
    station_name: str

    def to_line(self) -> str:
        return (
            f"At time {format_timestamp(self.timestamp)}, "
            f"{self.satellite_name} connects with {self.station_name}"
        )


def format_timestamp(ts: datetime) -> str:
    return ts.isoformat(sep=" ", timespec="milliseconds")


class MonotonicClock:
    """
    Wall-clock source for event timestamps that never goes backwards,
    even if the system clock is adjusted between steps.
    """

    def __init__(self, now: Optional[Callable[[], datetime]] = None):
        self._now = now or datetime.now
        self._last: Optional[datetime] = None

    def __call__(self) -> datetime:
        t = self._now()
        if self._last is not None and t < self._last:
            t = self._last
        self._last = t
        return t
