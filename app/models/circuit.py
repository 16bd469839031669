"""
CircuitModel - Central data store for circuit state.

This module contains no Qt dependencies. It holds the placed components,
the wires, and the active source parameters.
"""

from dataclasses import dataclass, field
from typing import Optional

from .component import ComponentData
from .source import SourceParameters
from .wire import WireData


@dataclass
class CircuitModel:
    """
    Central data store holding all circuit state.

    Components keep insertion order; wires keep list order, which is the
    order the flow indicator traverses them.
    """

    components: dict[str, ComponentData] = field(default_factory=dict)
    wires: list[WireData] = field(default_factory=list)
    source: SourceParameters = field(default_factory=SourceParameters)
    component_counter: dict[str, int] = field(default_factory=dict)
    wire_counter: int = 0

    # Catalog entry this circuit was loaded from, if any
    template_id: Optional[str] = None

    # --- Component operations ---

    def add_component(self, component: ComponentData) -> None:
        """Add a component to the circuit."""
        self.components[component.component_id] = component

    def remove_component(self, component_id: str) -> Optional[ComponentData]:
        """Remove a component and return it (None if unknown)."""
        return self.components.pop(component_id, None)

    def selected_components(self) -> list[ComponentData]:
        return [c for c in self.components.values() if c.is_selected]

    # --- Wire operations ---

    def add_wire(self, wire: WireData) -> None:
        self.wires.append(wire)

    def find_wire(self, wire_id: str) -> Optional[WireData]:
        for wire in self.wires:
            if wire.wire_id == wire_id:
                return wire
        return None

    def remove_wire(self, wire_id: str) -> Optional[WireData]:
        """
        Remove a wire by ID and detach every component snapped onto it.

        Returns the removed wire, or None if no wire has that ID.
        """
        wire = self.find_wire(wire_id)
        if wire is None:
            return None
        self.wires.remove(wire)
        for component in self.components.values():
            if component.attached_wire_id == wire_id:
                component.detach()
        return wire

    # --- Circuit operations ---

    def clear(self) -> None:
        """Clear components and wires. Source parameters are kept."""
        self.components.clear()
        self.wires.clear()
        self.component_counter.clear()
        self.wire_counter = 0
        self.template_id = None

    # --- Serialization ---

    def to_dict(self) -> dict:
        """Serialize circuit to dictionary (catalog format)."""
        data = {
            "components": [c.to_dict() for c in self.components.values()],
            "wires": [w.to_dict() for w in self.wires],
            "source": self.source.to_dict(),
            "counters": self.component_counter.copy(),
        }
        if self.template_id:
            data["template_id"] = self.template_id
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "CircuitModel":
        """Deserialize circuit from dictionary."""
        model = cls()
        model.component_counter = data.get("counters", {}).copy()
        model.template_id = data.get("template_id")
        if "source" in data:
            model.source = SourceParameters.from_dict(data["source"])

        for comp_data in data.get("components", []):
            component = ComponentData.from_dict(comp_data)
            model.components[component.component_id] = component

        for wire_data in data.get("wires", []):
            model.wires.append(WireData.from_dict(wire_data))
        model.wire_counter = len(model.wires)

        return model
