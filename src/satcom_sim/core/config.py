from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Optional

from satcom_sim.core.constants import (
    DEFAULT_DURATION_S,
    DEFAULT_LOG_PATH,
    DEFAULT_TICK_INTERVAL_S,
    DEFAULT_TIME_STEP_S,
)


def parse_float(text: str) -> Optional[float]:
    """Parse a user-entered number. Returns None if it is not a finite float."""
    try:
        value = float(text.strip())
    except (AttributeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_float_or(text: str, default: float) -> float:
    """Lenient per-field parse: invalid input keeps the previous value."""
    value = parse_float(text)
    return default if value is None else value


@dataclass(frozen=True)
class SimulationConfig:
    """
    Run settings for a fixed-step simulation.

    Units:
        time_step_s: simulated seconds advanced per step
        total_duration_s: simulated seconds before the scheduler stops
        tick_interval_s: wall-clock pause between steps (0 = no pause)
        log_path: append-only communication log
        trajectory_limit: max positions retained per satellite (None = all)
    """
    time_step_s: float = DEFAULT_TIME_STEP_S
    total_duration_s: float = DEFAULT_DURATION_S
    tick_interval_s: float = DEFAULT_TICK_INTERVAL_S
    log_path: str = DEFAULT_LOG_PATH
    trajectory_limit: Optional[int] = None

    def __post_init__(self):
        if not math.isfinite(self.time_step_s) or self.time_step_s <= 0:
            raise ValueError(f"Time step must be positive. Got: {self.time_step_s}")
        if not math.isfinite(self.total_duration_s) or self.total_duration_s < 0:
            raise ValueError(f"Total duration must be non-negative. Got: {self.total_duration_s}")
        if not math.isfinite(self.tick_interval_s) or self.tick_interval_s < 0:
            raise ValueError(f"Tick interval must be non-negative. Got: {self.tick_interval_s}")
        if self.trajectory_limit is not None and self.trajectory_limit <= 0:
            raise ValueError(f"Trajectory limit must be positive. Got: {self.trajectory_limit}")
        if not self.log_path.strip():
            raise ValueError("Log path cannot be empty or whitespace.")

    @classmethod
    def from_inputs(
        cls,
        duration_text: str,
        step_text: str,
        base: Optional["SimulationConfig"] = None,
    ) -> "SimulationConfig":
        """
        Build a config from the two text inputs of the run controls.
        Both must parse; otherwise nothing changes and ValueError is raised.
        """
        duration = parse_float(duration_text)
        step = parse_float(step_text)
        if duration is None or step is None:
            raise ValueError("Please enter valid numbers for total duration and time step.")
        return replace(base or cls(), total_duration_s=duration, time_step_s=step)

    @property
    def step_count(self) -> int:
        """Number of steps needed for elapsed time to reach total_duration_s."""
        return max(0, math.ceil(self.total_duration_s / self.time_step_s - 1e-9))
