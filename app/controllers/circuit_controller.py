"""
CircuitController - Orchestrates component and wire CRUD operations.

This module contains no Qt dependencies. It manages the CircuitModel
and notifies views of changes through an observer pattern.
"""

import logging
from typing import Any, Callable, Optional

from models.circuit import CircuitModel
from models.component import COMPONENT_SYMBOLS, ComponentData
from models.source import SourceParameters
from models.template import palette_entry
from models.wire import WireData
from simulation.constants import SNAP_THRESHOLD
from simulation.geometry import SnapResult, find_nearest_point

logger = logging.getLogger(__name__)


class CircuitController:
    """
    Controller for circuit component and wire operations.

    Manages the CircuitModel and notifies registered observers when
    the model changes. Views register callbacks to stay in sync.

    Observer events:
        component_added (ComponentData) - A new component was placed
        component_removed (str) - A component was removed (by ID)
        component_moved (ComponentData) - A component was dragged
        component_value_changed (ComponentData) - A component's value changed
        switch_toggled (ComponentData) - A switch was opened or closed
        selection_changed (list[str]) - IDs of the selected components
        wire_added (WireData) - A new wire was added
        wire_removed (str) - A wire was removed (by ID)
        wire_routed (WireData) - A wire's path was replaced
        source_changed (SourceParameters) - Source parameters were replaced
        circuit_cleared (None) - The entire circuit was cleared
        circuit_loaded (CircuitModel) - A new circuit replaced the old one
        analysis_updated (AnalysisResult) - Sent by SimulationController
    """

    def __init__(self, model: Optional[CircuitModel] = None,
                 snap_threshold: float = SNAP_THRESHOLD):
        self.model = model or CircuitModel()
        self.snap_threshold = snap_threshold
        self._observers: list[Callable[[str, Any], None]] = []

    def add_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Register a callback for model change events."""
        if callback not in self._observers:
            self._observers.append(callback)

    def remove_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Unregister a previously registered callback."""
        if callback in self._observers:
            self._observers.remove(callback)

    def _notify(self, event: str, data: Any) -> None:
        """Notify all observers of a model change."""
        for observer in list(self._observers):
            try:
                observer(event, data)
            except (TypeError, AttributeError, RuntimeError) as e:
                logger.error("Error notifying observer: %s", e)

    # --- Snapping ---

    def snap_to_wire(self, position: tuple[float, float]) -> Optional[SnapResult]:
        """Return the nearest wire point within the snap threshold, if any."""
        return find_nearest_point(position, self.model.wires, self.snap_threshold)

    def _place(self, component: ComponentData, position: tuple[float, float],
               snap: bool) -> None:
        """Set position, snapping onto the nearest wire when one is close."""
        snapped = self.snap_to_wire(position) if snap else None
        if snapped is None:
            component.position = position
            component.detach()
        else:
            component.position = snapped.point
            component.attach(snapped.wire_id, snapped.t)

    # --- Component operations ---

    def _next_component_id(self, component_type: str) -> str:
        symbol = COMPONENT_SYMBOLS.get(component_type, 'X')
        count = self.model.component_counter.get(symbol, 0)
        while True:
            count += 1
            component_id = f"{symbol}{count}"
            if component_id not in self.model.components:
                break
        self.model.component_counter[symbol] = count
        return component_id

    def add_component(self, component_type: str,
                      position: tuple[float, float],
                      snap: bool = True) -> ComponentData:
        """
        Create and add a new component at a drop position.

        Generates a unique ID using the component counter (R1, R2, V1, etc.)
        and snaps onto the nearest wire within the snap threshold.
        The starting value is the one shown on the component palette.

        Returns:
            The newly created ComponentData.
        """
        entry = palette_entry(component_type)
        component = ComponentData(
            component_id=self._next_component_id(component_type),
            component_type=component_type,
            value=entry.value if entry else "",
            position=position,
        )
        self._place(component, position, snap)
        self.model.add_component(component)
        self._notify('component_added', component)
        return component

    def remove_component(self, component_id: str) -> None:
        """Remove a component. Wires are left in place."""
        if self.model.remove_component(component_id) is None:
            return
        self._notify('component_removed', component_id)

    def remove_selected(self) -> list[str]:
        """Remove every selected component and return their IDs."""
        removed = [c.component_id for c in self.model.selected_components()]
        for component_id in removed:
            self.remove_component(component_id)
        return removed

    def move_component(self, component_id: str,
                       position: tuple[float, float],
                       snap: bool = True) -> None:
        """Move a component during a drag, snapping onto nearby wires."""
        component = self.model.components.get(component_id)
        if component is None:
            return
        self._place(component, position, snap)
        self._notify('component_moved', component)

    def update_component_value(self, component_id: str, value: str) -> None:
        """Update a component's value string and its parsed magnitude."""
        component = self.model.components.get(component_id)
        if component is None:
            return
        component.set_value(value)
        self._notify('component_value_changed', component)

    def set_switch(self, component_id: str, on: bool) -> None:
        component = self.model.components.get(component_id)
        if component is None or not component.is_switch():
            return
        component.is_on = on
        component.value = "ON" if on else "OFF"
        self._notify('switch_toggled', component)

    def toggle_switch(self, component_id: str) -> None:
        """Open a closed switch or close an open one."""
        component = self.model.components.get(component_id)
        if component is None or not component.is_switch():
            return
        self.set_switch(component_id, not component.is_on)

    # --- Selection ---

    def _notify_selection(self) -> None:
        selected = [c.component_id for c in self.model.selected_components()]
        self._notify('selection_changed', selected)

    def toggle_selection(self, component_id: str) -> None:
        component = self.model.components.get(component_id)
        if component is None:
            return
        component.is_selected = not component.is_selected
        self._notify_selection()

    def clear_selection(self) -> None:
        for component in self.model.components.values():
            component.is_selected = False
        self._notify_selection()

    # --- Wire operations ---

    def _next_wire_id(self) -> str:
        count = self.model.wire_counter
        while True:
            count += 1
            wire_id = f"W{count}"
            if self.model.find_wire(wire_id) is None:
                break
        self.model.wire_counter = count
        return wire_id

    def add_wire(self, start_comp_id: str, start_port: str,
                 end_comp_id: str, end_port: str,
                 path: Optional[list[tuple[float, float]]] = None) -> WireData:
        """
        Create and add a new wire connection.

        Returns:
            The newly created WireData.
        """
        wire = WireData(
            wire_id=self._next_wire_id(),
            start_component_id=start_comp_id,
            start_port=start_port,
            end_component_id=end_comp_id,
            end_port=end_port,
            path=list(path or []),
        )
        self.model.add_wire(wire)
        self._notify('wire_added', wire)
        return wire

    def remove_wire(self, wire_id: str) -> None:
        """Remove a wire and detach components snapped onto it."""
        if self.model.remove_wire(wire_id) is not None:
            self._notify('wire_removed', wire_id)

    def update_wire_path(self, wire_id: str,
                         path: list[tuple[float, float]]) -> None:
        """Replace a wire's polyline."""
        wire = self.model.find_wire(wire_id)
        if wire is None:
            return
        wire.path = list(path)
        self._notify('wire_routed', wire)

    # --- Source operations ---

    def set_source_parameters(self, source: SourceParameters) -> None:
        """Replace the active source parameters wholesale."""
        self.model.source = source
        self._notify('source_changed', source)

    def set_speed_scale(self, speed_scale: float) -> None:
        """Apply a speed slider change (clamped to 0.1-2.0)."""
        self.set_source_parameters(self.model.source.with_speed_scale(speed_scale))

    # --- Circuit operations ---

    def load_circuit(self, model: CircuitModel) -> None:
        """Replace the whole circuit, including its source parameters."""
        self.model.components = model.components
        self.model.wires = model.wires
        self.model.source = model.source
        self.model.component_counter = model.component_counter
        self.model.wire_counter = model.wire_counter
        self.model.template_id = model.template_id
        self._notify('circuit_loaded', self.model)

    def clear_circuit(self) -> None:
        """Clear the entire circuit."""
        self.model.clear()
        self._notify('circuit_cleared', None)
