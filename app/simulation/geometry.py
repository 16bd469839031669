"""
simulation/geometry.py

Point-to-segment projection and nearest-point-on-wire search.

Used for snapping dropped or dragged components onto wires. All points are
(x, y) tuples in canvas coordinates.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Optional

from simulation.constants import SNAP_THRESHOLD


@dataclass(frozen=True)
class SnapResult:
    """A point on a wire close enough to a query position to snap to."""

    x: float
    y: float
    wire_id: str
    t: float  # Parameter along the owning segment, 0..1
    distance: float

    @property
    def point(self) -> tuple[float, float]:
        return (self.x, self.y)


def project_point_to_segment(
    p: tuple[float, float],
    a: tuple[float, float],
    b: tuple[float, float],
) -> tuple[tuple[float, float], float]:
    """
    Project p onto the closed segment [a, b].

    Returns:
        ((x, y), t) where t in [0, 1] is the position along the segment.
        A zero-length segment yields (a, 0.0).
    """
    vx = b[0] - a[0]
    vy = b[1] - a[1]
    wx = p[0] - a[0]
    wy = p[1] - a[1]
    len2 = vx * vx + vy * vy or 1.0
    t = (wx * vx + wy * vy) / len2
    t = max(0.0, min(1.0, t))
    return (a[0] + t * vx, a[1] + t * vy), t


def find_nearest_point(
    p: tuple[float, float],
    wires: Iterable,
    threshold: float = SNAP_THRESHOLD,
) -> Optional[SnapResult]:
    """
    Find the closest point on any wire segment to p.

    Args:
        p: Query position (x, y).
        wires: WireData objects (anything with ``wire_id`` and ``path``).
        threshold: Only points strictly closer than this are considered.

    Returns:
        SnapResult for the nearest point, or None if no segment is within
        the threshold. On equal distances the first segment found wins.
    """
    px, py = p
    best_distance = threshold
    best = None

    for wire in wires:
        path = wire.path
        for i in range(len(path) - 1):
            (x, y), t = project_point_to_segment(p, path[i], path[i + 1])
            distance = math.hypot(px - x, py - y)
            if distance < best_distance:
                best_distance = distance
                best = (x, y, wire.wire_id, t)

    if best is None:
        return None
    x, y, wire_id, t = best
    return SnapResult(x=x, y=y, wire_id=wire_id, t=t, distance=best_distance)
