from __future__ import annotations

from datetime import datetime
from typing import List

from satcom_sim.simulation.scenario import Scenario
from satcom_sim.simulation.events import CommunicationEvent


def detect_communications(scenario: Scenario, timestamp: datetime) -> List[CommunicationEvent]:
    """
    One event per (satellite, station) pair currently in range.
    Outer loop over satellites, inner over stations, both in insertion order.
    """
    events: List[CommunicationEvent] = []
    stations = scenario.ground_station_list()
    for sat in scenario.satellite_list():
        for gs in stations:
            if gs.can_detect(sat):
                events.append(CommunicationEvent(timestamp, sat.name, gs.name))
    return events
