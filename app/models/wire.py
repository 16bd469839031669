"""
WireData - Pure Python data model for circuit wires.

This module contains no Qt dependencies. Path points are stored as
tuples (x, y) rather than QPointF.
"""

from dataclasses import dataclass, field


@dataclass
class WireData:
    """
    Pure Python data class representing a wire between two component ports.

    Ports are logical names ('left', 'right'); they are not checked against
    the path geometry. The path is given in traversal order and its points
    need not be evenly spaced.
    """

    wire_id: str
    start_component_id: str
    start_port: str
    end_component_id: str
    end_port: str
    path: list[tuple[float, float]] = field(default_factory=list)

    def is_drawable(self) -> bool:
        """A wire needs at least two points to be drawn or traversed."""
        return len(self.path) >= 2

    def segments(self) -> list[tuple[tuple[float, float], tuple[float, float]]]:
        """Return consecutive (start, end) point pairs along the path."""
        return list(zip(self.path, self.path[1:]))

    def connects_component(self, component_id: str) -> bool:
        """Check if this wire connects to the given component."""
        return self.start_component_id == component_id or self.end_component_id == component_id

    def to_dict(self) -> dict:
        """Serialize wire to dictionary (catalog format)."""
        return {
            "id": self.wire_id,
            "start_comp": self.start_component_id,
            "start_port": self.start_port,
            "end_comp": self.end_component_id,
            "end_port": self.end_port,
            "path": [{"x": x, "y": y} for x, y in self.path],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WireData":
        """Deserialize wire from dictionary."""
        return cls(
            wire_id=data["id"],
            start_component_id=data["start_comp"],
            start_port=data.get("start_port", "right"),
            end_component_id=data["end_comp"],
            end_port=data.get("end_port", "left"),
            path=[(float(p["x"]), float(p["y"])) for p in data.get("path", [])],
        )

    def __repr__(self) -> str:
        return (
            f"WireData({self.wire_id}: {self.start_component_id}[{self.start_port}] -> "
            f"{self.end_component_id}[{self.end_port}], {len(self.path)} pts)"
        )
