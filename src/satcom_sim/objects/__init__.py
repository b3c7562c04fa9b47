from satcom_sim.objects.body import CelestialBody
from satcom_sim.objects.satellite import Satellite, SatelliteCategory
from satcom_sim.objects.ground_station import GroundStation, StationCategory

__all__ = [
    "CelestialBody",
    "Satellite",
    "SatelliteCategory",
    "GroundStation",
    "StationCategory",
]
