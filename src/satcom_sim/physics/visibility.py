from __future__ import annotations

from typing import List, Optional, Tuple

from satcom_sim.core.frames import Vector2, distance


def in_range(station_xy: Vector2, satellite_xy: Vector2, detection_range: float) -> bool:
    """
    Range test used by ground stations. The boundary is inclusive:
    a satellite exactly detection_range away is in range.
    """
    return distance(station_xy, satellite_xy) <= detection_range


def compute_access_windows(
    times_s: List[float],
    visible_flags: List[bool],
) -> List[Tuple[float, float]]:
    """
    Convert a boolean visibility time series into access windows [t_start, t_end].
    Assumes times_s is sorted and evenly-ish spaced (works best with uniform dt).
    """
    if len(times_s) != len(visible_flags):
        raise ValueError("times_s and visible_flags must be same length.")

    windows: List[Tuple[float, float]] = []
    in_pass = False
    t_start: Optional[float] = None

    for t, vis in zip(times_s, visible_flags):
        if vis and not in_pass:
            in_pass = True
            t_start = t
        elif (not vis) and in_pass:
            in_pass = False
            windows.append((t_start if t_start is not None else times_s[0], t))
            t_start = None

    if in_pass and t_start is not None:
        windows.append((t_start, times_s[-1]))

    return windows
