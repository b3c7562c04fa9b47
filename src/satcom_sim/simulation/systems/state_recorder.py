from __future__ import annotations

from dataclasses import dataclass

from satcom_sim.simulation.scenario import Scenario
from satcom_sim.simulation.engine import SimulationLog


@dataclass
class StateRecorderSystem:
    name: str = "state_recorder"

    def on_step(self, t_s: float, scenario: Scenario, log: SimulationLog) -> None:
        for sat in scenario.satellite_list():
            log.record_position(sat.name, t_s, sat.position)
