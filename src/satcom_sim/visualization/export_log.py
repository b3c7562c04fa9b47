from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from satcom_sim.simulation.engine import SimulationLog
from satcom_sim.simulation.events import format_timestamp
from satcom_sim.simulation.scenario import Scenario


def playback_bundle(scenario: Scenario, log: SimulationLog) -> Dict[str, Any]:
    """
    JSON-ready bundle:
    {
      "satellites": { "Satellite1": {"category": "Receiver", "orbit_radius": ..., "trajectory": [[x,y], ...]}, ...},
      "ground_stations": { "Station1": {"category": "...", "x":..., "y":..., "detection_range":...}, ...},
      "events": [ {"t": 0.1, "timestamp": "...", "satellite": "...", "station": "..."}, ...]
    }
    """
    data: Dict[str, Any] = {"satellites": {}, "ground_stations": {}, "events": []}

    for sat in scenario.satellites:
        data["satellites"][sat.name] = {
            "category": sat.category.value,
            "orbit_radius": sat.orbit_radius,
            "angular_velocity": sat.angular_velocity,
            "trajectory": [[x, y] for (x, y) in sat.trajectory],
        }

    for gs in scenario.ground_stations:
        data["ground_stations"][gs.name] = {
            "category": gs.category.value,
            "x": gs.x,
            "y": gs.y,
            "detection_range": gs.detection_range,
        }

    for t, ev in log.events:
        data["events"].append({
            "t": t,
            "timestamp": format_timestamp(ev.timestamp),
            "satellite": ev.satellite_name,
            "station": ev.station_name,
        })

    return data


def export_playback_bundle(
    scenario: Scenario,
    log: SimulationLog,
    out_path: str = "out/playback_bundle.json",
) -> str:
    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(playback_bundle(scenario, log), f)

    return out_path
