from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Union

from satcom_sim.objects.body import CelestialBody
from satcom_sim.objects.satellite import Satellite
from satcom_sim.objects.ground_station import GroundStation

# Stable handle given to editors: (kind, index in that kind's list)
BodyId = Tuple[str, int]


@dataclass
class Scenario:
    """
    Container for all bodies in a simulation run, in insertion order.
    Keep this pure: just data + lookup, no stepping logic.
    """
    name: str = "Scenario"
    satellites: List[Satellite] = field(default_factory=list)
    ground_stations: List[GroundStation] = field(default_factory=list)

    def add_satellite(self, sat: Satellite) -> BodyId:
        self.satellites.append(sat)
        return (Satellite.kind, len(self.satellites) - 1)

    def add_ground_station(self, gs: GroundStation) -> BodyId:
        self.ground_stations.append(gs)
        return (GroundStation.kind, len(self.ground_stations) - 1)

    def satellite_list(self) -> List[Satellite]:
        return list(self.satellites)

    def ground_station_list(self) -> List[GroundStation]:
        return list(self.ground_stations)

    def bodies(self) -> Iterator[CelestialBody]:
        """Satellites first, then ground stations, each in insertion order."""
        yield from self.satellites
        yield from self.ground_stations

    def body_ids(self) -> List[BodyId]:
        ids: List[BodyId] = [(Satellite.kind, i) for i in range(len(self.satellites))]
        ids += [(GroundStation.kind, i) for i in range(len(self.ground_stations))]
        return ids

    def get(self, body_id: BodyId) -> Union[Satellite, GroundStation]:
        kind, index = body_id
        if kind == Satellite.kind:
            pool: list = self.satellites
        elif kind == GroundStation.kind:
            pool = self.ground_stations
        else:
            raise LookupError(f"Unknown body kind: {kind!r}")
        if not 0 <= index < len(pool):
            raise LookupError(f"No {kind} at index {index}")
        return pool[index]

    def find(self, name: str) -> Optional[BodyId]:
        """Id of the first body with this name (satellites searched first)."""
        for i, sat in enumerate(self.satellites):
            if sat.name == name:
                return (Satellite.kind, i)
        for i, gs in enumerate(self.ground_stations):
            if gs.name == name:
                return (GroundStation.kind, i)
        return None

    def replace_with(self, other: "Scenario") -> None:
        """Take over other's bodies, dropping everything held before."""
        self.satellites = list(other.satellites)
        self.ground_stations = list(other.ground_stations)

    def clear(self) -> None:
        self.satellites = []
        self.ground_stations = []

    def __len__(self) -> int:
        return len(self.satellites) + len(self.ground_stations)
