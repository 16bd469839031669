"""
ComponentData - Pure Python data model for circuit components.

This module contains no Qt dependencies. All positions are represented as
tuples (x, y) rather than QPointF.

Component types use display names as canonical identifiers:
'Resistor', 'Capacitor', 'Inductor', 'Switch', 'DC Source', 'AC Source'
"""

from dataclasses import dataclass
from typing import Optional

from simulation.value_parser import parse_quantity

# Component type definitions using display names (canonical)
COMPONENT_TYPES = [
    "Resistor",
    "Capacitor",
    "Inductor",
    "Switch",
    "DC Source",
    "AC Source",
]

# ID prefixes per component type (R1, C1, L1, S1, V1, AC1)
COMPONENT_SYMBOLS = {
    "Resistor": "R",
    "Capacitor": "C",
    "Inductor": "L",
    "Switch": "S",
    "DC Source": "V",
    "AC Source": "AC",
}

SOURCE_TYPES = ("DC Source", "AC Source")

# Mapping from the catalog's kebab-case type names to display names.
# Used when materializing template data.
_KEY_TO_DISPLAY = {
    "resistor": "Resistor",
    "capacitor": "Capacitor",
    "inductor": "Inductor",
    "switch": "Switch",
    "voltage-source": "DC Source",
    "ac-source": "AC Source",
}

_DISPLAY_TO_KEY = {display: key for key, display in _KEY_TO_DISPLAY.items()}


def display_type(raw_type: str) -> str:
    """Normalize a catalog key or display name to the display name."""
    return _KEY_TO_DISPLAY.get(raw_type, raw_type)


@dataclass
class ComponentData:
    """
    Pure Python data class representing a placed circuit component.

    numeric_value caches the parsed SI magnitude of ``value`` (None when the
    string does not parse). Wire attachment is recorded when the component
    was snapped onto a wire: attached_t is the segment-local parameter of
    the snapped point.
    """

    component_id: str
    component_type: str
    value: str
    position: tuple[float, float]  # (x, y) in canvas coordinates
    numeric_value: Optional[float] = None
    is_on: Optional[bool] = None  # Switches only
    attached_wire_id: Optional[str] = None
    attached_t: Optional[float] = None
    is_selected: bool = False

    def __post_init__(self):
        """Parse the value string and default switches to closed."""
        if self.numeric_value is None:
            self.numeric_value = parse_quantity(self.value)
        if self.component_type == "Switch" and self.is_on is None:
            self.is_on = True

    def set_value(self, value: str) -> None:
        """Replace the value string and refresh the parsed magnitude."""
        self.value = value
        self.numeric_value = parse_quantity(value)

    def is_switch(self) -> bool:
        return self.component_type == "Switch"

    def is_source(self) -> bool:
        return self.component_type in SOURCE_TYPES

    def is_attached(self) -> bool:
        return self.attached_wire_id is not None

    def attach(self, wire_id: str, t: float) -> None:
        self.attached_wire_id = wire_id
        self.attached_t = t

    def detach(self) -> None:
        self.attached_wire_id = None
        self.attached_t = None

    def to_dict(self) -> dict:
        """Serialize component to dictionary (catalog format)."""
        data = {
            "type": _DISPLAY_TO_KEY.get(self.component_type, self.component_type),
            "id": self.component_id,
            "value": self.value,
            "pos": {"x": self.position[0], "y": self.position[1]},
        }
        if self.is_switch():
            data["switch_state"] = bool(self.is_on)
        if self.is_attached():
            data["attached_wire"] = self.attached_wire_id
            data["attached_t"] = self.attached_t
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ComponentData":
        """
        Deserialize component from dictionary.

        Accepts both catalog keys (voltage-source, ac-source) and display
        names (DC Source, AC Source) in the 'type' field.
        """
        component_type = display_type(data["type"])

        component = cls(
            component_id=data["id"],
            component_type=component_type,
            value=data["value"],
            position=(data["pos"]["x"], data["pos"]["y"]),
            is_on=data.get("switch_state"),
        )
        if "attached_wire" in data:
            component.attach(data["attached_wire"], data.get("attached_t", 0.0))
        return component

    def __repr__(self) -> str:
        return (
            f"ComponentData(id={self.component_id!r}, type={self.component_type!r}, "
            f"value={self.value!r}, pos={self.position})"
        )
