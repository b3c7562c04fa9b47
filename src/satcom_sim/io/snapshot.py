"""
Save/load of scenario bodies as plain text.

Format:
    Satellite:
    <name>, <mass>, <orbitRadius>, <speed>, <angle>, <phase>, <category>, <angularVelocity>
    Ground Station:
    <name>, <mass>, <x>, <y>, <detectionRange>, <category>

A header line with nothing after the colon opens a section; the following
lines are bodies of that kind. A line carrying its fields after the label
("Satellite: Sat1, 1000, ...") is also accepted as a single body.

Only construction parameters are persisted: trajectories and the current
orbit position are not, so a loaded satellite starts back at its
placement angle.
"""

from __future__ import annotations

import logging
import math
from functools import partial
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from satcom_sim.core.constants import GROUND_STATION_SECTION, SATELLITE_SECTION
from satcom_sim.errors import SnapshotParseError
from satcom_sim.objects.ground_station import GroundStation, StationCategory
from satcom_sim.objects.satellite import Satellite, SatelliteCategory
from satcom_sim.simulation.scenario import Scenario

logger = logging.getLogger(__name__)

SATELLITE_FIELDS = 8
GROUND_STATION_FIELDS = 6


def format_value(value) -> str:
    if isinstance(value, float):
        # repr() round-trips exactly
        return repr(value)
    return str(value)


def format_record(record) -> str:
    return ", ".join(format_value(v) for v in record)


def check_name(name: str) -> str:
    """
    Names are written unquoted, so they must survive the split on commas,
    the trim and the section-label test of loads().
    """
    if not name or name != name.strip():
        raise ValueError(f"Name cannot be saved (empty or padded with whitespace): {name!r}")
    if "," in name or len(name.splitlines()) != 1:
        raise ValueError(f"Name cannot be saved (contains a comma or line break): {name!r}")
    label, sep, _rest = name.partition(":")
    if sep and label.strip() in (SATELLITE_SECTION, GROUND_STATION_SECTION):
        raise ValueError(f"Name cannot be saved (starts with a section label): {name!r}")
    return name


def dumps(scenario: Scenario) -> str:
    """Render the snapshot. Raises ValueError for a name the format cannot hold."""
    for body in scenario.bodies():
        check_name(body.name)

    lines: List[str] = [f"{SATELLITE_SECTION}:"]
    lines += [format_record(sat.to_record()) for sat in scenario.satellites]
    lines.append(f"{GROUND_STATION_SECTION}:")
    lines += [format_record(gs.to_record()) for gs in scenario.ground_stations]
    return "\n".join(lines) + "\n"


def save_snapshot(scenario: Scenario, path: Union[str, Path]) -> str:
    text = dumps(scenario)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    logger.info(
        "Saved %d satellite(s) and %d ground station(s) to %s",
        len(scenario.satellites), len(scenario.ground_stations), path,
    )
    return str(path)


def _number(raw: str, label: str, line_no: int, line: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise SnapshotParseError(line_no, line, f"{label} is not a number: {raw!r}") from None
    if math.isnan(value):
        raise SnapshotParseError(line_no, line, f"{label} is not a number: {raw!r}")
    return value


def _category(enum_cls, raw: str, line_no: int, line: str):
    try:
        return enum_cls.parse(raw)
    except ValueError as e:
        raise SnapshotParseError(line_no, line, str(e)) from None


def _split(payload: str, expected: int, kind: str, line_no: int, line: str) -> List[str]:
    fields = [f.strip() for f in payload.split(",")]
    if len(fields) != expected:
        raise SnapshotParseError(
            line_no, line, f"{kind} needs {expected} fields, got {len(fields)}"
        )
    if not fields[0]:
        raise SnapshotParseError(line_no, line, f"{kind} name is empty")
    return fields


def parse_satellite(
    payload: str,
    line_no: int = 0,
    line: Optional[str] = None,
    trajectory_limit: Optional[int] = None,
) -> Satellite:
    line = payload if line is None else line
    f = _split(payload, SATELLITE_FIELDS, "Satellite", line_no, line)
    return Satellite(
        name=f[0],
        mass=_number(f[1], "mass", line_no, line),
        orbit_radius=_number(f[2], "orbit radius", line_no, line),
        speed=_number(f[3], "speed", line_no, line),
        angle=_number(f[4], "angle", line_no, line),
        phase=_number(f[5], "phase", line_no, line),
        category=_category(SatelliteCategory, f[6], line_no, line),
        angular_velocity=_number(f[7], "angular velocity", line_no, line),
        trajectory_limit=trajectory_limit,
    )


def parse_ground_station(payload: str, line_no: int = 0, line: Optional[str] = None) -> GroundStation:
    line = payload if line is None else line
    f = _split(payload, GROUND_STATION_FIELDS, "Ground station", line_no, line)
    try:
        return GroundStation(
            name=f[0],
            mass=_number(f[1], "mass", line_no, line),
            x=_number(f[2], "x", line_no, line),
            y=_number(f[3], "y", line_no, line),
            detection_range=_number(f[4], "detection range", line_no, line),
            category=_category(StationCategory, f[5], line_no, line),
        )
    except SnapshotParseError:
        raise
    except ValueError as e:
        raise SnapshotParseError(line_no, line, str(e)) from None


def loads(text: str, name: str = "Snapshot", trajectory_limit: Optional[int] = None) -> Scenario:
    """Parse a whole snapshot into a fresh Scenario. Nothing is kept on error."""
    parsers: Dict[str, Callable] = {
        SATELLITE_SECTION: partial(parse_satellite, trajectory_limit=trajectory_limit),
        GROUND_STATION_SECTION: parse_ground_station,
    }
    scenario = Scenario(name=name)
    section: Optional[str] = None

    for line_no, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped:
            continue

        label, sep, rest = stripped.partition(":")
        if sep and label.strip() in parsers:
            label = label.strip()
            if not rest.strip():
                section = label
                continue
            body = parsers[label](rest, line_no, line)
        elif section is not None:
            body = parsers[section](stripped, line_no, line)
        else:
            raise SnapshotParseError(line_no, line, "data line outside of a section")

        if isinstance(body, Satellite):
            scenario.add_satellite(body)
        else:
            scenario.add_ground_station(body)

    return scenario


def load_snapshot(path: Union[str, Path], trajectory_limit: Optional[int] = None) -> Scenario:
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        scenario = loads(f.read(), name=path.stem, trajectory_limit=trajectory_limit)
    logger.info(
        "Loaded %d satellite(s) and %d ground station(s) from %s",
        len(scenario.satellites), len(scenario.ground_stations), path,
    )
    return scenario


def load_into(
    scenario: Scenario,
    path: Union[str, Path],
    trajectory_limit: Optional[int] = None,
) -> Scenario:
    """
    Replace scenario's bodies with the snapshot's. The file is parsed
    completely first; on any error scenario is left as it was.

    Only the bodies change. When an Engine drives the scenario, use
    Engine.reload(load_snapshot(path)) so its log and clock restart too.
    """
    try:
        loaded = load_snapshot(path, trajectory_limit=trajectory_limit)
    except SnapshotParseError as e:
        logger.error("Error loading simulation data: %s", e)
        raise
    scenario.replace_with(loaded)
    return scenario
