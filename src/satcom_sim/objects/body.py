from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from satcom_sim.core.frames import Vector2


class Category(Enum):
    """Enum whose values are the symbolic names written to snapshots."""

    @classmethod
    def parse(cls, text: str):
        token = text.strip()
        for member in cls:
            if member.value == token:
                return member
        names = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown {cls.__name__} '{token}'. Expected one of: {names}")

    def __str__(self) -> str:
        return self.value


@dataclass(eq=False)
class CelestialBody(ABC):
    """
    Anything with a name, a mass and a planar position.

    Bodies compare by identity: they are mutable entities owned by a
    Scenario and edited in place between steps. Names should be unique
    within a scenario but nothing enforces it.
    """
    name: str
    mass: float
    x: float = 0.0
    y: float = 0.0

    kind = "body"

    @property
    def position(self) -> Vector2:
        return (self.x, self.y)

    @abstractmethod
    def update_position(self, dt_s: float) -> None:
        ...
