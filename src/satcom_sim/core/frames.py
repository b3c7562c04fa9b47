from __future__ import annotations

import math
from typing import Tuple

Vector2 = Tuple[float, float]


def sub(a: Vector2, b: Vector2) -> Vector2:
    return (a[0]-b[0], a[1]-b[1])


def norm(v: Vector2) -> float:
    return math.hypot(v[0], v[1])


def distance(a: Vector2, b: Vector2) -> float:
    """Euclidean distance between two planar points."""
    return norm(sub(a, b))


def polar_angle(v: Vector2) -> float:
    """
    Angle of v from the +x axis in radians, in (-pi, pi].
    The origin has no direction; it is reported as 0.0.
    """
    x, y = v
    if x == 0.0 and y == 0.0:
        return 0.0
    return math.atan2(y, x)


def from_polar(radius: float, angle_rad: float) -> Vector2:
    return (radius * math.cos(angle_rad), radius * math.sin(angle_rad))
