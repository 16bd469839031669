"""
SourceParameters - Pure Python description of the active power source.

This module contains no Qt dependencies.
"""

import math
from dataclasses import dataclass, replace

from simulation.constants import (DEFAULT_FREQUENCY, DEFAULT_SPEED_SCALE,
                                  DEFAULT_VOLTAGE, SPEED_SCALE_MAX,
                                  SPEED_SCALE_MIN)

SOURCE_KINDS = ("DC", "AC")


def clamp_speed_scale(scale: float) -> float:
    """Clamp a slider value into the supported speed-scale range."""
    return max(SPEED_SCALE_MIN, min(SPEED_SCALE_MAX, float(scale)))


@dataclass(frozen=True)
class SourceParameters:
    """
    The active source configuration.

    Instances are immutable; a template load or slider change replaces the
    whole object. frequency only matters for AC and falls back to 50 Hz
    unless positive and finite. speed_scale is clamped to [0.1, 2.0].
    """

    kind: str = "DC"
    voltage: float = DEFAULT_VOLTAGE
    frequency: float = DEFAULT_FREQUENCY
    speed_scale: float = DEFAULT_SPEED_SCALE

    def __post_init__(self):
        kind = str(self.kind).upper()
        if kind not in SOURCE_KINDS:
            kind = "DC"
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "voltage", float(self.voltage))
        frequency = float(self.frequency)
        object.__setattr__(self, "frequency", frequency if 0 < frequency < math.inf else DEFAULT_FREQUENCY)
        object.__setattr__(self, "speed_scale", clamp_speed_scale(self.speed_scale))

    @property
    def is_ac(self) -> bool:
        return self.kind == "AC"

    def with_speed_scale(self, speed_scale: float) -> "SourceParameters":
        return replace(self, speed_scale=speed_scale)

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "voltage": self.voltage,
            "frequency": self.frequency,
            "speed_scale": self.speed_scale,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SourceParameters":
        return cls(
            kind=data.get("kind", "DC"),
            voltage=data.get("voltage", DEFAULT_VOLTAGE),
            frequency=data.get("frequency", DEFAULT_FREQUENCY),
            speed_scale=data.get("speed_scale", DEFAULT_SPEED_SCALE),
        )
