from __future__ import annotations

import math

from satcom_sim.core.frames import Vector2, from_polar, polar_angle


def initial_position(orbit_radius: float, angle_deg: float) -> Vector2:
    """Placement on the circle of radius orbit_radius at angle_deg from +x."""
    return from_polar(orbit_radius, math.radians(angle_deg))


def initial_velocity(speed: float, angle_deg: float) -> Vector2:
    """
    Tangential (counter-clockwise) velocity at the placement angle.
    Descriptive only: the motion law below never reads it.
    """
    a = math.radians(angle_deg)
    return (-speed * math.sin(a), speed * math.cos(a))


def advance_on_circle(
    position: Vector2,
    orbit_radius: float,
    angular_velocity_rad_s: float,
    dt_s: float,
) -> Vector2:
    """
    Rotate a point on a circular orbit by angular_velocity * dt.

    The current angle is re-derived from the position on every call, so
    advancing by dt1 then dt2 lands where advancing by dt1 + dt2 does
    (up to rounding). A point at the origin is treated as angle 0.
    """
    theta = polar_angle(position) + angular_velocity_rad_s * dt_s
    return from_polar(orbit_radius, theta)


def orbital_period_s(angular_velocity_rad_s: float) -> float:
    """Time for one full revolution; inf for a stationary satellite."""
    if angular_velocity_rad_s == 0.0:
        return math.inf
    return 2.0 * math.pi / abs(angular_velocity_rad_s)
