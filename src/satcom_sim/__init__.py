"""Circular-orbit satellite simulator with ground-station contact logging."""

from satcom_sim.objects import (
    CelestialBody,
    GroundStation,
    Satellite,
    SatelliteCategory,
    StationCategory,
)
from satcom_sim.simulation.engine import Engine, SimulationLog
from satcom_sim.simulation.events import CommunicationEvent
from satcom_sim.simulation.scenario import Scenario

__version__ = "0.1.0"

__all__ = [
    "CelestialBody",
    "GroundStation",
    "Satellite",
    "SatelliteCategory",
    "StationCategory",
    "Engine",
    "SimulationLog",
    "CommunicationEvent",
    "Scenario",
]
