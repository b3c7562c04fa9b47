from __future__ import annotations

from typing import Optional

from satcom_sim.objects.ground_station import GroundStation, StationCategory
from satcom_sim.objects.satellite import Satellite, SatelliteCategory
from satcom_sim.simulation.scenario import Scenario


def sample_scenario(trajectory_limit: Optional[int] = None) -> Scenario:
    """Two satellites placed at 90 deg and three co-located stations at the origin."""
    scenario = Scenario(name="Sample")

    scenario.add_satellite(Satellite(
        "Satellite1", 1000, 7000000, 1000, 90, 0,
        SatelliteCategory.RECEIVER, 0.001,
        trajectory_limit=trajectory_limit,
    ))
    scenario.add_satellite(Satellite(
        "Satellite2", 1500, 8000000, 1000, 90, 0,
        SatelliteCategory.TRANSMITTER, 0.001,
        trajectory_limit=trajectory_limit,
    ))

    scenario.add_ground_station(GroundStation("Station1", 500, 0, 0, 10000, StationCategory.COMMUNICATING))
    scenario.add_ground_station(GroundStation("Station2", 600, 0, 0, 45, StationCategory.TRACKING))
    scenario.add_ground_station(GroundStation("Station3", 700, 0, 0, 5000, StationCategory.BOTH))
    return scenario
