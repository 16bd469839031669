"""
Shared test fixtures for the Circuit Flow test suite.

All fixtures build pure-Python model objects (no Qt dependencies).
"""

import os
import sys
from pathlib import Path

# Ensure app/ is on sys.path so bare imports (models, simulation, GUI, controllers)
# work when running individual test files (e.g., python -m pytest app/tests/unit/test_foo.py).
_app_dir = str(Path(__file__).resolve().parent.parent)
if _app_dir not in sys.path:
    sys.path.insert(0, _app_dir)

# Headless Qt for the timer tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from models.component import ComponentData
from models.source import SourceParameters
from models.wire import WireData


def make_component(component_type, component_id, value, position=(0.0, 0.0), **kwargs):
    """Helper to create a ComponentData with minimal boilerplate."""
    return ComponentData(
        component_id=component_id,
        component_type=component_type,
        value=value,
        position=position,
        **kwargs,
    )


def make_wire(wire_id, path, start_id="A", end_id="B"):
    """Helper to create a WireData from a list of (x, y) points."""
    return WireData(
        wire_id=wire_id,
        start_component_id=start_id,
        start_port="right",
        end_component_id=end_id,
        end_port="left",
        path=list(path),
    )


@pytest.fixture
def dc_source():
    return SourceParameters(kind="DC", voltage=9.0)


@pytest.fixture
def ac_source():
    return SourceParameters(kind="AC", voltage=120.0, frequency=50.0)


@pytest.fixture
def ohms_law_components():
    """9V source in series with a 3 ohm resistor."""
    return [
        make_component("DC Source", "V1", "9V"),
        make_component("Resistor", "R1", "3Ω"),
    ]


@pytest.fixture
def loop_wires():
    """
    Two wires forming a 100 x 50 rectangle, traversed clockwise.

    W1: (0,0) -> (100,0) -> (100,50)
    W2: (100,50) -> (0,50) -> (0,0)
    """
    return [
        make_wire("W1", [(0, 0), (100, 0), (100, 50)], "V1", "R1"),
        make_wire("W2", [(100, 50), (0, 50), (0, 0)], "R1", "V1"),
    ]
