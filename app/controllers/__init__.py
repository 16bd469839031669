"""
Controllers for Circuit Flow.

This package contains controller classes that orchestrate operations
between models and views using an observer pattern. Only the settings
controller touches Qt (QSettings).
"""

from .circuit_controller import CircuitController
from .settings_controller import SettingsController
from .simulation_controller import SimulationController
from .template_controller import TemplateController, validate_template_data

__all__ = [
    "CircuitController",
    "SimulationController",
    "TemplateController",
    "SettingsController",
    "validate_template_data",
]
