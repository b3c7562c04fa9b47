"""
Destinations for communication events.

A sink receives all events of one step in a single append() call. The
file sink writes them with a single write() on an O_APPEND descriptor
and reports a short write. Lines are only ever appended.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Protocol, Sequence, Union

from satcom_sim.errors import EventSinkError
from satcom_sim.simulation.events import CommunicationEvent

logger = logging.getLogger(__name__)


class EventSink(Protocol):
    def append(self, events: Sequence[CommunicationEvent]) -> None:
        ...


class NullEventSink:
    """Drops every event."""

    def append(self, events: Sequence[CommunicationEvent]) -> None:
        return None


class MemoryEventSink:
    """Keeps rendered lines in memory; one inner list per non-empty batch."""

    def __init__(self):
        self.batches: List[List[str]] = []

    @property
    def lines(self) -> List[str]:
        return [line for batch in self.batches for line in batch]

    def append(self, events: Sequence[CommunicationEvent]) -> None:
        if events:
            self.batches.append([ev.to_line() for ev in events])


class FileEventSink:
    """
    Append-only text log, one line per event.

    A batch is encoded up front and handed to a single write() on an
    O_APPEND descriptor, so its lines land together after whatever is
    already in the file. If the OS accepts only part of the batch, the
    error says how many bytes made it; the events carried by
    EventSinkError are the whole batch, some of which may be on disk.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def append(self, events: Sequence[CommunicationEvent]) -> None:
        if not events:
            return
        data = "".join(ev.to_line() + "\n" for ev in events).encode("utf-8")
        try:
            fd = os.open(self.path, os.O_WRONLY | os.O_APPEND | os.O_CREAT, 0o644)
            try:
                written = os.write(fd, data)
            finally:
                os.close(fd)
        except OSError as e:
            raise EventSinkError(f"{self.path}: {e}", events) from e
        if written != len(data):
            raise EventSinkError(
                f"{self.path}: partial write, {written} of {len(data)} bytes appended", events
            )
