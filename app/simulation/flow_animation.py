"""
simulation/flow_animation.py

Arc-length parametrized flow path and the animator that moves the current
indicator along it.

The path is every wire's points concatenated in wire-list order. The
indicator loops around it forever; there is no end to reach. This module
contains no Qt dependencies: the caller supplies timestamps (seconds from
any monotonic clock) on every tick.
"""

import bisect
import enum
import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, Optional

from simulation.constants import FALLBACK_PATH

logger = logging.getLogger(__name__)


class FlowState(enum.Enum):
    FLOWING = "flowing"
    FROZEN = "frozen"


@dataclass(frozen=True)
class FlowFrame:
    """What the renderer needs for one frame."""

    current_magnitude: float
    is_flowing: bool
    position: Optional[tuple[float, float]]


@dataclass
class FlowPath:
    """
    Flattened polyline with cumulative arc lengths.

    ``lengths[i]`` is the distance along the path from points[0] to
    points[i]; it starts at 0 and never decreases.
    """

    points: list[tuple[float, float]] = field(default_factory=list)
    lengths: list[float] = field(default_factory=lambda: [0.0])

    @classmethod
    def from_points(cls, points: Iterable[tuple[float, float]]) -> "FlowPath":
        points = [(float(x), float(y)) for x, y in points]
        lengths = [0.0]
        for (x0, y0), (x1, y1) in zip(points, points[1:]):
            lengths.append(lengths[-1] + math.hypot(x1 - x0, y1 - y0))
        return cls(points=points, lengths=lengths)

    @classmethod
    def from_wires(cls, wires) -> "FlowPath":
        """
        Concatenate wire paths in list order.

        With no wires at all, a fixed horizontal segment is used so the
        indicator still has somewhere to sit.
        """
        wires = list(wires)
        if not wires:
            return cls.from_points(FALLBACK_PATH)

        points = []
        for wire in wires:
            points.extend(wire.path)
        return cls.from_points(points)

    @property
    def total_length(self) -> float:
        return self.lengths[-1]

    def __len__(self) -> int:
        return len(self.points)

    def point_at(self, progress: float) -> Optional[tuple[float, float]]:
        """
        Resolve a fractional position along the path to an (x, y) point.

        Returns None when the path has no length to place a point on.
        """
        total = self.total_length
        if len(self.points) < 2 or total <= 0:
            return None

        target = progress * total
        # First index whose cumulative length reaches the target
        index = bisect.bisect_left(self.lengths, target, 1)
        index = min(index, len(self.lengths) - 1)
        start_len = self.lengths[index - 1]
        seg_len = self.lengths[index] - start_len
        local = (target - start_len) / seg_len if seg_len > 0 else 0.0

        (x0, y0), (x1, y1) = self.points[index - 1], self.points[index]
        return (x0 + (x1 - x0) * local, y0 + (y1 - y0) * local)


class FlowAnimator:
    """
    Owns the flow path, the indicator progress and the flowing/frozen state.

    The owner is the only writer: call rebuild() when the wire set changes
    and tick() once per frame.
    """

    def __init__(self, wires=()):
        self.path = FlowPath.from_wires(wires)
        self.progress = 0.0
        self.state = FlowState.FROZEN
        self._last_time: Optional[float] = None

    @property
    def is_flowing(self) -> bool:
        return self.state is FlowState.FLOWING

    def rebuild(self, wires) -> None:
        """Rebuild the path from the current wires. Progress restarts at 0."""
        self.path = FlowPath.from_wires(wires)
        self.progress = 0.0
        logger.debug("Flow path rebuilt: %d points, %.1f px",
                     len(self.path), self.path.total_length)

    def reset_clock(self, now: float) -> None:
        """Anchor elapsed-time measurement at ``now`` (seconds)."""
        self._last_time = now

    def tick(self, now: float, speed: float) -> FlowState:
        """
        Advance the indicator for the time elapsed since the previous tick.

        Args:
            now: current clock reading in seconds
            speed: indicator speed in px/sec (0 freezes the indicator)
        """
        elapsed = 0.0 if self._last_time is None else max(0.0, now - self._last_time)
        self._last_time = now

        if speed > 0 and len(self.path) > 1:
            total = self.path.total_length
            if total > 0:
                self.progress = (self.progress + speed * elapsed / total) % 1.0
            self.state = FlowState.FLOWING
        else:
            self.progress = 0.0
            self.state = FlowState.FROZEN
        return self.state

    def position(self) -> Optional[tuple[float, float]]:
        return self.path.point_at(self.progress)
