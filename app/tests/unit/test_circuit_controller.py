"""Tests for CircuitController."""

import pytest
from controllers.circuit_controller import CircuitController
from models.circuit import CircuitModel
from models.source import SourceParameters
from models.template import COMPONENT_PALETTE


@pytest.fixture
def controller():
    return CircuitController()


@pytest.fixture
def events():
    """Fixture that returns a list and a callback that appends events to it."""
    recorded = []

    def callback(event, data):
        recorded.append((event, data))

    return recorded, callback


@pytest.fixture
def wired_controller(controller):
    """Controller with one horizontal wire from (0,100) to (200,100)."""
    controller.add_wire("V1", "right", "R1", "left", [(0.0, 100.0), (200.0, 100.0)])
    return controller


class TestObserverPattern:
    def test_add_observer(self, controller, events):
        recorded, callback = events
        controller.add_observer(callback)
        controller.clear_circuit()
        assert len(recorded) == 1

    def test_remove_observer(self, controller, events):
        recorded, callback = events
        controller.add_observer(callback)
        controller.remove_observer(callback)
        controller.clear_circuit()
        assert len(recorded) == 0

    def test_duplicate_observer_not_added(self, controller, events):
        recorded, callback = events
        controller.add_observer(callback)
        controller.add_observer(callback)
        controller.clear_circuit()
        assert len(recorded) == 1

    def test_remove_nonexistent_observer_safe(self, controller, events):
        _, callback = events
        controller.remove_observer(callback)  # Should not raise

    def test_failing_observer_does_not_block_others(self, controller, events):
        recorded, callback = events

        def broken(event, data):
            raise RuntimeError("view destroyed")

        controller.add_observer(broken)
        controller.add_observer(callback)
        controller.clear_circuit()
        assert recorded == [("circuit_cleared", None)]


class TestComponentOperations:
    def test_add_component_generates_id(self, controller, events):
        recorded, callback = events
        controller.add_observer(callback)
        comp = controller.add_component("Resistor", (100.0, 200.0))
        assert comp.component_id == "R1"
        assert comp.component_type == "Resistor"
        assert comp.position == (100.0, 200.0)
        assert comp.value == "10Ω"
        assert comp.numeric_value == pytest.approx(10.0)
        assert recorded[-1] == ("component_added", comp)

    def test_add_multiple_components_increments_counter(self, controller):
        r1 = controller.add_component("Resistor", (0.0, 0.0))
        r2 = controller.add_component("Resistor", (100.0, 0.0))
        v1 = controller.add_component("DC Source", (50.0, 50.0))
        ac1 = controller.add_component("AC Source", (50.0, 90.0))
        assert r1.component_id == "R1"
        assert r2.component_id == "R2"
        assert v1.component_id == "V1"
        assert ac1.component_id == "AC1"

    def test_generated_id_skips_existing(self, controller):
        controller.model.components["R1"] = controller.add_component("Resistor", (0.0, 0.0))
        controller.model.component_counter.clear()
        assert controller.add_component("Resistor", (0.0, 0.0)).component_id == "R2"

    @pytest.mark.parametrize("entry", COMPONENT_PALETTE, ids=lambda e: e.component_type)
    def test_new_component_takes_palette_value(self, controller, entry):
        comp = controller.add_component(entry.component_type, (0.0, 0.0))
        assert comp.value == entry.value

    def test_type_without_palette_entry_has_empty_value(self, controller):
        assert controller.add_component("Diode", (0.0, 0.0)).value == ""

    def test_new_switch_is_closed(self, controller):
        sw = controller.add_component("Switch", (0.0, 0.0))
        assert sw.is_on is True

    def test_remove_component_notifies(self, controller, events):
        recorded, callback = events
        controller.add_component("Resistor", (0.0, 0.0))
        controller.add_observer(callback)
        controller.remove_component("R1")
        assert ("component_removed", "R1") in recorded
        assert "R1" not in controller.model.components

    def test_remove_nonexistent_component_is_silent(self, controller, events):
        recorded, callback = events
        controller.add_observer(callback)
        controller.remove_component("R99")
        assert recorded == []

    def test_update_component_value(self, controller, events):
        recorded, callback = events
        comp = controller.add_component("Inductor", (0.0, 0.0))
        controller.add_observer(callback)
        controller.update_component_value("L1", "10mH")
        assert comp.numeric_value == pytest.approx(0.01)
        assert recorded[-1] == ("component_value_changed", comp)


class TestSnapping:
    def test_drop_near_wire_snaps(self, wired_controller):
        comp = wired_controller.add_component("Resistor", (50.0, 110.0))
        assert comp.position == pytest.approx((50.0, 100.0))
        assert comp.attached_wire_id == "W1"
        assert comp.attached_t == pytest.approx(0.25)

    def test_drop_far_from_wire_does_not_snap(self, wired_controller):
        comp = wired_controller.add_component("Resistor", (50.0, 150.0))
        assert comp.position == (50.0, 150.0)
        assert comp.attached_wire_id is None

    def test_snap_disabled(self, wired_controller):
        comp = wired_controller.add_component("Resistor", (50.0, 110.0), snap=False)
        assert comp.position == (50.0, 110.0)
        assert not comp.is_attached()

    def test_drag_snaps_and_unsnaps(self, wired_controller, events):
        recorded, callback = events
        comp = wired_controller.add_component("Resistor", (50.0, 150.0))
        wired_controller.add_observer(callback)

        wired_controller.move_component("R1", (150.0, 95.0))
        assert comp.position == pytest.approx((150.0, 100.0))
        assert comp.attached_wire_id == "W1"

        wired_controller.move_component("R1", (150.0, 300.0))
        assert comp.position == (150.0, 300.0)
        assert not comp.is_attached()
        assert [e for e, _ in recorded] == ["component_moved", "component_moved"]

    def test_custom_threshold(self):
        controller = CircuitController(snap_threshold=5.0)
        controller.add_wire("V1", "right", "R1", "left", [(0.0, 0.0), (100.0, 0.0)])
        assert controller.snap_to_wire((50.0, 8.0)) is None
        assert controller.snap_to_wire((50.0, 4.0)) is not None

    def test_move_unknown_component_is_silent(self, controller):
        controller.move_component("R42", (0.0, 0.0))  # Should not raise


class TestSwitchesAndSelection:
    def test_toggle_switch(self, controller, events):
        recorded, callback = events
        sw = controller.add_component("Switch", (0.0, 0.0))
        controller.add_observer(callback)
        controller.toggle_switch("S1")
        assert sw.is_on is False
        assert sw.value == "OFF"
        controller.toggle_switch("S1")
        assert sw.is_on is True
        assert [e for e, _ in recorded] == ["switch_toggled", "switch_toggled"]

    def test_toggle_non_switch_ignored(self, controller, events):
        recorded, callback = events
        controller.add_component("Resistor", (0.0, 0.0))
        controller.add_observer(callback)
        controller.toggle_switch("R1")
        assert recorded == []

    def test_toggle_selection(self, controller, events):
        recorded, callback = events
        controller.add_component("Resistor", (0.0, 0.0))
        controller.add_component("Capacitor", (0.0, 0.0))
        controller.add_observer(callback)
        controller.toggle_selection("R1")
        controller.toggle_selection("C1")
        assert recorded[-1] == ("selection_changed", ["R1", "C1"])
        controller.toggle_selection("R1")
        assert recorded[-1] == ("selection_changed", ["C1"])

    def test_clear_selection(self, controller):
        comp = controller.add_component("Resistor", (0.0, 0.0))
        controller.toggle_selection("R1")
        controller.clear_selection()
        assert comp.is_selected is False

    def test_remove_selected(self, controller):
        controller.add_component("Resistor", (0.0, 0.0))
        controller.add_component("Resistor", (0.0, 0.0))
        controller.toggle_selection("R2")
        assert controller.remove_selected() == ["R2"]
        assert list(controller.model.components) == ["R1"]


class TestWireOperations:
    def test_add_wire(self, controller, events):
        recorded, callback = events
        controller.add_observer(callback)
        wire = controller.add_wire("V1", "right", "R1", "left", [(0, 0), (10, 0)])
        assert wire.wire_id == "W1"
        assert wire.path == [(0, 0), (10, 0)]
        assert recorded[-1] == ("wire_added", wire)

    def test_remove_wire_detaches(self, wired_controller, events):
        recorded, callback = events
        comp = wired_controller.add_component("Resistor", (50.0, 105.0))
        wired_controller.add_observer(callback)
        wired_controller.remove_wire("W1")
        assert not comp.is_attached()
        assert recorded[-1] == ("wire_removed", "W1")

    def test_remove_unknown_wire_silent(self, controller, events):
        recorded, callback = events
        controller.add_observer(callback)
        controller.remove_wire("W9")
        assert recorded == []

    def test_update_wire_path(self, wired_controller, events):
        recorded, callback = events
        wired_controller.add_observer(callback)
        wired_controller.update_wire_path("W1", [(0, 0), (0, 50)])
        wire = wired_controller.model.wires[0]
        assert wire.path == [(0, 0), (0, 50)]
        assert recorded[-1] == ("wire_routed", wire)

    def test_wire_ids_increment(self, controller):
        a = controller.add_wire("A", "right", "B", "left")
        b = controller.add_wire("B", "right", "A", "left")
        assert (a.wire_id, b.wire_id) == ("W1", "W2")


class TestSourceAndCircuit:
    def test_set_source_parameters(self, controller, events):
        recorded, callback = events
        controller.add_observer(callback)
        source = SourceParameters(kind="AC", voltage=120.0)
        controller.set_source_parameters(source)
        assert controller.model.source is source
        assert recorded[-1] == ("source_changed", source)

    def test_set_speed_scale_clamps(self, controller):
        controller.set_speed_scale(3.0)
        assert controller.model.source.speed_scale == 2.0

    def test_load_circuit_replaces_everything(self, controller, events):
        recorded, callback = events
        controller.add_component("Resistor", (0.0, 0.0))
        controller.add_observer(callback)
        new_model = CircuitModel(source=SourceParameters(kind="AC", voltage=230.0))
        new_model.template_id = "custom"
        controller.load_circuit(new_model)
        assert controller.model.components == {}
        assert controller.model.source.voltage == 230.0
        assert controller.model.template_id == "custom"
        assert recorded[-1] == ("circuit_loaded", controller.model)

    def test_clear_circuit(self, wired_controller):
        wired_controller.add_component("Resistor", (0.0, 0.0))
        wired_controller.clear_circuit()
        assert wired_controller.model.components == {}
        assert wired_controller.model.wires == []
