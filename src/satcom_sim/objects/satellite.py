from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional, Tuple, Union

from satcom_sim.core.frames import Vector2
from satcom_sim.objects.body import Category, CelestialBody
from satcom_sim.physics.orbit import (
    advance_on_circle,
    initial_position,
    initial_velocity,
)


class SatelliteCategory(Category):
    RECEIVER = "Receiver"
    TRANSMITTER = "Transmitter"


Trajectory = Union[List[Vector2], Deque[Vector2]]


@dataclass(init=False, eq=False)
class Satellite(CelestialBody):
    """
    A satellite on a fixed-radius circular orbit about the origin.

    orbit_radius, speed, angle (deg) and phase (deg) are fixed at
    construction. velocity_x / velocity_y are derived from speed and angle
    once and are descriptive only; advance() never reads or updates them.
    """
    velocity_x: float
    velocity_y: float
    category: SatelliteCategory
    angular_velocity: float
    trajectory: Trajectory = field(repr=False)

    kind = "satellite"

    def __init__(
        self,
        name: str,
        mass: float,
        orbit_radius: float,
        speed: float,
        angle: float,
        phase: float,
        category: SatelliteCategory,
        angular_velocity: float,
        trajectory_limit: Optional[int] = None,
    ):
        x, y = initial_position(orbit_radius, angle)
        super().__init__(name=name, mass=mass, x=x, y=y)
        self.velocity_x, self.velocity_y = initial_velocity(speed, angle)
        self.category = category
        self.angular_velocity = angular_velocity
        self._orbit_radius = orbit_radius
        self._speed = speed
        self._angle = angle
        self._phase = phase

        if trajectory_limit is None:
            self.trajectory = [(x, y)]
        else:
            if trajectory_limit <= 0:
                raise ValueError(f"Trajectory limit must be positive. Got: {trajectory_limit}")
            self.trajectory = deque([(x, y)], maxlen=trajectory_limit)

    @property
    def orbit_radius(self) -> float:
        return self._orbit_radius

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def angle(self) -> float:
        return self._angle

    @property
    def phase(self) -> float:
        return self._phase

    @property
    def trajectory_limit(self) -> Optional[int]:
        return getattr(self.trajectory, "maxlen", None)

    def advance(self, dt_s: float) -> Vector2:
        """Move along the orbit by angular_velocity * dt_s and record the new position."""
        self.x, self.y = advance_on_circle(
            self.position, self._orbit_radius, self.angular_velocity, dt_s
        )
        self.trajectory.append((self.x, self.y))
        return self.x, self.y

    def update_position(self, dt_s: float) -> None:
        self.advance(dt_s)

    def to_record(self) -> Tuple[str, float, float, float, float, float, SatelliteCategory, float]:
        """Field order of a snapshot line."""
        return (
            self.name,
            self.mass,
            self._orbit_radius,
            self._speed,
            self._angle,
            self._phase,
            self.category,
            self.angular_velocity,
        )
