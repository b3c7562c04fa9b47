from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from satcom_sim.core.config import SimulationConfig
from satcom_sim.errors import EventSinkError
from satcom_sim.simulation.engine import Engine

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    steps: int = 0
    elapsed_s: float = 0.0
    events: int = 0
    sink_failures: int = 0
    stopped: bool = False


class FixedStepScheduler:
    """
    Drives Engine.step at a fixed simulated dt until the configured duration
    has elapsed, optionally pausing tick_interval_s of wall-clock time
    between steps. A failed log write is reported and the run goes on.
    """

    def __init__(
        self,
        engine: Engine,
        config: SimulationConfig,
        on_tick: Optional[Callable[[Engine], None]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.engine = engine
        self.config = config
        self.on_tick = on_tick
        self._sleep = sleep
        self._stop_requested = False

    def stop(self) -> None:
        """Finish the current step, then return from run()."""
        self._stop_requested = True

    def run(self) -> RunSummary:
        self._stop_requested = False
        summary = RunSummary()
        dt = self.config.time_step_s
        n_steps = self.config.step_count
        logger.info("Running %d step(s) of %gs (%gs simulated)", n_steps, dt, self.config.total_duration_s)

        for i in range(n_steps):
            try:
                events = self.engine.step(dt)
                summary.events += len(events)
            except EventSinkError as e:
                summary.sink_failures += 1
                summary.events += len(e.events)
            summary.steps += 1

            if self.on_tick is not None:
                self.on_tick(self.engine)
            if self._stop_requested:
                summary.stopped = True
                break
            if self.config.tick_interval_s > 0 and i + 1 < n_steps:
                self._sleep(self.config.tick_interval_s)

        summary.elapsed_s = self.engine.elapsed_s
        logger.info(
            "Finished after %d step(s): %d event(s), %d failed log write(s)",
            summary.steps, summary.events, summary.sink_failures,
        )
        return summary
