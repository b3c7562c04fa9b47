from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Protocol, Tuple

from satcom_sim.core.frames import Vector2
from satcom_sim.errors import EventSinkError
from satcom_sim.io.event_sink import EventSink, NullEventSink
from satcom_sim.simulation.detection import detect_communications
from satcom_sim.simulation.events import CommunicationEvent, MonotonicClock
from satcom_sim.simulation.scenario import Scenario

logger = logging.getLogger(__name__)


class System(Protocol):
    """
    Plugin interface for per-step observers.
    Each system runs after the move and detection phases and can write to the log.
    """
    name: str

    def on_step(self, t_s: float, scenario: Scenario, log: "SimulationLog") -> None:
        ...


@dataclass
class SimulationLog:
    """
    In-memory record of a run, keyed by body name.
    The persistent communication log is the engine's sink; this is for analysis and plots.
    """
    # Positions: sat name -> list of (t, (x, y))
    positions: Dict[str, List[Tuple[float, Vector2]]] = field(default_factory=dict)

    # Visibility: (station name, sat name) -> list of (t, in_range)
    visibility: Dict[Tuple[str, str], List[Tuple[float, bool]]] = field(default_factory=dict)

    # Communication events with the simulated time of the step that produced them
    events: List[Tuple[float, CommunicationEvent]] = field(default_factory=list)

    def record_position(self, sat_name: str, t_s: float, r: Vector2) -> None:
        self.positions.setdefault(sat_name, []).append((t_s, r))

    def record_visibility(self, gs_name: str, sat_name: str, t_s: float, visible: bool) -> None:
        self.visibility.setdefault((gs_name, sat_name), []).append((t_s, visible))

    def record_events(self, t_s: float, events: List[CommunicationEvent]) -> None:
        self.events.extend((t_s, ev) for ev in events)


@dataclass
class Engine:
    """
    Synchronous fixed-step engine. One step runs to completion before the next;
    the cadence is decided by the caller (see FixedStepScheduler).
    """
    scenario: Scenario
    sink: EventSink = field(default_factory=NullEventSink)
    systems: List[System] = field(default_factory=list)
    clock: Callable = field(default_factory=MonotonicClock)
    log: SimulationLog = field(default_factory=SimulationLog)
    elapsed_s: float = 0.0
    steps: int = 0

    def step(self, dt_s: float) -> List[CommunicationEvent]:
        """
        Advance every satellite by dt_s, then report every (satellite, station)
        pair in range. Detection always sees post-move positions for all pairs.

        Raises EventSinkError if the batch could not be appended; by then the
        scenario, elapsed time and in-memory log are already updated.
        """
        if not math.isfinite(dt_s):
            raise ValueError(f"dt_s must be finite. Got: {dt_s}")

        for sat in self.scenario.satellites:
            sat.advance(dt_s)
        self.elapsed_s += dt_s
        self.steps += 1

        events = detect_communications(self.scenario, self.clock())
        for ev in events:
            logger.info(ev.to_line())
        logger.debug("step %d t=%.3fs: %d event(s)", self.steps, self.elapsed_s, len(events))

        self.log.record_events(self.elapsed_s, events)
        for sys in self.systems:
            sys.on_step(self.elapsed_s, self.scenario, self.log)

        try:
            self.sink.append(events)
        except EventSinkError as e:
            logger.error("Error writing communication log: %s", e)
            raise
        return events

    def reload(self, scenario: Scenario) -> None:
        """
        Swap in freshly loaded bodies and start over: the in-memory log,
        elapsed time and step count are reset so series keyed by name do not
        mix bodies from before and after the reload. The sink is kept.
        """
        self.scenario.replace_with(scenario)
        self.log = SimulationLog()
        self.elapsed_s = 0.0
        self.steps = 0
        logger.info(
            "Reloaded %d satellite(s) and %d ground station(s)",
            len(self.scenario.satellites), len(self.scenario.ground_stations),
        )

    def run(self, duration_s: float, dt_s: float) -> SimulationLog:
        """Step until duration_s of simulated time has elapsed from now."""
        if dt_s <= 0:
            raise ValueError("dt_s must be positive.")
        if duration_s < 0:
            raise ValueError("duration_s must be >= 0.")

        n_steps = math.ceil(duration_s / dt_s - 1e-9)
        for _ in range(n_steps):
            self.step(dt_s)
        return self.log
