"""
Entity-editor boundary.

Editors never hold a body reference; they ask for a body by BodyId, read
its fields as text and send back text. Numeric fields that do not parse
keep their previous value, the rest of the edit still applies.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping

from satcom_sim.core.config import parse_float
from satcom_sim.objects.body import CelestialBody
from satcom_sim.objects.ground_station import GroundStation
from satcom_sim.objects.satellite import Satellite
from satcom_sim.simulation.scenario import BodyId, Scenario

logger = logging.getLogger(__name__)

COMMON_FIELDS = ("name", "mass", "x", "y")
SATELLITE_FIELDS = COMMON_FIELDS + ("velocity_x", "velocity_y")
GROUND_STATION_FIELDS = COMMON_FIELDS + ("detection_range",)


def field_names(body: CelestialBody) -> tuple:
    if isinstance(body, Satellite):
        return SATELLITE_FIELDS
    if isinstance(body, GroundStation):
        return GROUND_STATION_FIELDS
    return COMMON_FIELDS


def editable_fields(scenario: Scenario, body_id: BodyId) -> Dict[str, str]:
    """Current values as text, in form order."""
    body = scenario.get(body_id)
    return {key: str(getattr(body, key)) for key in field_names(body)}


def apply_edit(scenario: Scenario, body_id: BodyId, fields: Mapping[str, str]) -> List[str]:
    """
    Write edited fields onto the body and return the names that changed.
    Unknown field names raise KeyError; unknown ids raise LookupError.
    """
    body = scenario.get(body_id)
    allowed = field_names(body)
    unknown = [k for k in fields if k not in allowed]
    if unknown:
        raise KeyError(f"Not editable on {body.kind}: {', '.join(unknown)}")

    applied: List[str] = []
    for key in allowed:
        if key not in fields:
            continue
        raw = fields[key]
        if key == "name":
            body.name = raw
            applied.append(key)
            continue
        value = parse_float(raw)
        if value is None:
            logger.debug("Ignoring invalid %s for %s: %r", key, body.name, raw)
            continue
        if key == "detection_range" and value < 0:
            logger.debug("Ignoring negative detection range for %s: %r", body.name, raw)
            continue
        setattr(body, key, value)
        applied.append(key)
    return applied
