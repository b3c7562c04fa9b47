from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from satcom_sim.objects.body import Category, CelestialBody
from satcom_sim.objects.satellite import Satellite
from satcom_sim.physics.visibility import in_range


class StationCategory(Category):
    COMMUNICATING = "Communicating"
    TRACKING = "Tracking"
    BOTH = "Both"


@dataclass(eq=False)
class GroundStation(CelestialBody):
    """Fixed station that detects satellites within detection_range of its position."""
    detection_range: float = 0.0
    category: StationCategory = StationCategory.COMMUNICATING

    kind = "ground_station"

    def __post_init__(self):
        if math.isnan(self.detection_range) or self.detection_range < 0:
            raise ValueError(f"Detection range must be non-negative. Got: {self.detection_range}")

    def update_position(self, dt_s: float) -> None:
        # Stations do not move.
        return None

    def can_detect(self, sat: Satellite) -> bool:
        return in_range(self.position, sat.position, self.detection_range)

    def to_record(self) -> Tuple[str, float, float, float, float, StationCategory]:
        """Field order of a snapshot line."""
        return (self.name, self.mass, self.x, self.y, self.detection_range, self.category)
