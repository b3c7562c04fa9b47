"""
Exception types raised across satcom_sim.

Construction-time validation uses plain ValueError; the types below cover
failures at the IO boundary, where callers need more than a message.
"""

from __future__ import annotations

from typing import List, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from satcom_sim.simulation.events import CommunicationEvent


class SatcomSimError(Exception):
    """Base class for recoverable simulation errors."""


class SnapshotParseError(SatcomSimError, ValueError):
    """A snapshot line could not be parsed."""

    def __init__(self, line_no: int, line: str, reason: str):
        self.line_no = line_no
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_no}: {reason} ({line.strip()!r})")


class EventSinkError(SatcomSimError, OSError):
    """Communication events could not be appended to the sink."""

    def __init__(self, message: str, events: Sequence["CommunicationEvent"] = ()):
        super().__init__(message)
        self.events: List["CommunicationEvent"] = list(events)
