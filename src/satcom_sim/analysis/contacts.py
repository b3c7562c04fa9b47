from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List, Tuple

from satcom_sim.physics.visibility import compute_access_windows
from satcom_sim.simulation.engine import SimulationLog
from satcom_sim.simulation.events import CommunicationEvent


def contact_counts(events: Iterable[CommunicationEvent]) -> Dict[Tuple[str, str], int]:
    """Number of events per (satellite name, station name)."""
    return dict(Counter((ev.satellite_name, ev.station_name) for ev in events))


def contact_counts_from_log(log: SimulationLog) -> Dict[Tuple[str, str], int]:
    return contact_counts(ev for (_t, ev) in log.events)


def access_windows_from_log(log: SimulationLog) -> Dict[Tuple[str, str], List[Tuple[float, float]]]:
    """
    Convert sampled visibility time series into access windows for each (station, satellite).
    Needs a VisibilitySystem in the run.
    """
    out: Dict[Tuple[str, str], List[Tuple[float, float]]] = {}

    for key, samples in log.visibility.items():
        times = [t for (t, _vis) in samples]
        flags = [vis for (_t, vis) in samples]
        out[key] = compute_access_windows(times, flags)

    return out
