"""
SettingsController - Persists source and canvas preferences across sessions.

Preferences are stored with QSettings so they follow the platform's native
settings location.
"""

import logging

from PyQt6.QtCore import QSettings

from models.source import SourceParameters
from simulation.constants import (DEFAULT_FREQUENCY, DEFAULT_SPEED_SCALE,
                                  DEFAULT_VOLTAGE, SNAP_THRESHOLD)

logger = logging.getLogger(__name__)

ORGANIZATION = "Circuit Flow"
APPLICATION = "Circuit Flow"


def _to_float(value, default: float) -> float:
    # QSettings may hand values back as strings depending on the backend
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


class SettingsController:
    """Load and save user preferences."""

    def load_source_parameters(self) -> SourceParameters:
        """Return the saved source parameters, or defaults if none saved."""
        settings = QSettings(ORGANIZATION, APPLICATION)
        return SourceParameters(
            kind=settings.value("source/kind", "DC") or "DC",
            voltage=_to_float(settings.value("source/voltage", DEFAULT_VOLTAGE), DEFAULT_VOLTAGE),
            frequency=_to_float(settings.value("source/frequency", DEFAULT_FREQUENCY), DEFAULT_FREQUENCY),
            speed_scale=_to_float(settings.value("source/speed_scale", DEFAULT_SPEED_SCALE),
                                  DEFAULT_SPEED_SCALE),
        )

    def save_source_parameters(self, source: SourceParameters) -> None:
        settings = QSettings(ORGANIZATION, APPLICATION)
        settings.setValue("source/kind", source.kind)
        settings.setValue("source/voltage", source.voltage)
        settings.setValue("source/frequency", source.frequency)
        settings.setValue("source/speed_scale", source.speed_scale)
        logger.debug("Saved source preferences: %s", source)

    def load_snap_threshold(self) -> float:
        settings = QSettings(ORGANIZATION, APPLICATION)
        threshold = _to_float(settings.value("canvas/snap_threshold", SNAP_THRESHOLD), SNAP_THRESHOLD)
        return threshold if threshold > 0 else SNAP_THRESHOLD
