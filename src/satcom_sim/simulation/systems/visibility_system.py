from __future__ import annotations

from dataclasses import dataclass

from satcom_sim.simulation.scenario import Scenario
from satcom_sim.simulation.engine import SimulationLog


@dataclass
class VisibilitySystem:
    name: str = "visibility"

    def on_step(self, t_s: float, scenario: Scenario, log: SimulationLog) -> None:
        sats = scenario.satellite_list()
        gss = scenario.ground_station_list()

        for gs in gss:
            for sat in sats:
                log.record_visibility(gs.name, sat.name, t_s, gs.can_detect(sat))
