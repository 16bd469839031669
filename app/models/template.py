"""Data classes and static catalog for the component palette and pre-built circuits."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class PaletteEntry:
    """One draggable entry in the component palette."""

    component_type: str
    name: str
    value: str
    symbol: str
    description: str


@dataclass
class CircuitTemplate:
    """A pre-built circuit: metadata plus circuit data in catalog format.

    ``circuit`` holds a CircuitModel-compatible dict (components, wires,
    source).
    """

    template_id: str
    name: str
    description: str = ""
    circuit: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "id": self.template_id,
            "name": self.name,
            "description": self.description,
            "circuit": self.circuit,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CircuitTemplate":
        return cls(
            template_id=data["id"],
            name=data.get("name", data["id"]),
            description=data.get("description", ""),
            circuit=data.get("circuit", {}),
        )


COMPONENT_PALETTE = [
    PaletteEntry("Resistor", "Resistor", "10Ω", "R", "Resistor - 10 Ohms"),
    PaletteEntry("Capacitor", "Capacitor", "1µF", "C", "Capacitor - 1 microFarad"),
    PaletteEntry("Inductor", "Inductor", "1mH", "L", "Inductor - 1 milliHenry"),
    PaletteEntry("Switch", "Switch", "ON", "S", "Switch - Open/Close"),
    PaletteEntry("DC Source", "DC Source", "9V", "V", "DC Voltage Source - 9 Volts"),
    PaletteEntry("AC Source", "AC Source", "120V", "~", "AC Voltage Source - 120V RMS"),
]


def palette_entry(component_type: str) -> Optional[PaletteEntry]:
    """Return the palette entry for a component type, or None if it has none."""
    for entry in COMPONENT_PALETTE:
        if entry.component_type == component_type:
            return entry
    return None


def _component(kind, comp_id, x, y, value, **extra):
    data = {"type": kind, "id": comp_id, "value": value, "pos": {"x": x, "y": y}}
    data.update(extra)
    return data


def _wire(wire_id, start, end, points):
    return {
        "id": wire_id,
        "start_comp": start,
        "start_port": "right",
        "end_comp": end,
        "end_port": "left",
        "path": [{"x": x, "y": y} for x, y in points],
    }


# Return wire shared by all three templates: right of the last part, down,
# back along the bottom, and up into the source.
def _return_path(right_x, source_x):
    return [(right_x, 215), (right_x + 40, 215), (right_x + 40, 300), (source_x, 300), (source_x, 230)]


PREBUILT_CIRCUITS = [
    {
        "id": "dc-circuit",
        "name": "DC Circuit",
        "description": "Basic DC circuit with voltage source, resistor, and switch",
        "circuit": {
            "components": [
                _component("voltage-source", "dc-source", 100, 200, "9V"),
                _component("resistor", "dc-resistor", 250, 200, "10Ω"),
                _component("switch", "dc-switch", 400, 200, "ON", switch_state=True),
            ],
            "wires": [
                _wire("dc-w1", "dc-source", "dc-resistor", [(160, 215), (250, 215)]),
                _wire("dc-w2", "dc-resistor", "dc-switch", [(310, 215), (400, 215)]),
                _wire("dc-w3", "dc-switch", "dc-source", _return_path(460, 100)),
            ],
            "source": {"kind": "DC", "voltage": 9.0},
        },
    },
    {
        "id": "ac-circuit",
        "name": "AC Circuit",
        "description": "AC circuit with RLC components in series",
        "circuit": {
            "components": [
                _component("ac-source", "ac-source", 100, 200, "120V"),
                _component("resistor", "ac-resistor", 250, 200, "10Ω"),
                _component("capacitor", "ac-capacitor", 400, 200, "1µF"),
                _component("inductor", "ac-inductor", 550, 200, "1mH"),
            ],
            "wires": [
                _wire("ac-w1", "ac-source", "ac-resistor", [(160, 215), (250, 215)]),
                _wire("ac-w2", "ac-resistor", "ac-capacitor", [(310, 215), (400, 215)]),
                _wire("ac-w3", "ac-capacitor", "ac-inductor", [(460, 215), (550, 215)]),
                _wire("ac-w4", "ac-inductor", "ac-source", _return_path(610, 100)),
            ],
            "source": {"kind": "AC", "voltage": 120.0, "frequency": 50.0},
        },
    },
    {
        "id": "ohms-law",
        "name": "Ohm's Law Demo",
        "description": "Simple circuit demonstrating V = I × R",
        "circuit": {
            "components": [
                _component("voltage-source", "ohm-source", 200, 200, "9V"),
                _component("resistor", "ohm-resistor", 400, 200, "3Ω"),
            ],
            "wires": [
                _wire("ohm-w1", "ohm-source", "ohm-resistor", [(260, 215), (400, 215)]),
                _wire("ohm-w2", "ohm-resistor", "ohm-source", _return_path(460, 200)),
            ],
            "source": {"kind": "DC", "voltage": 9.0},
        },
    },
]
