"""
Pure Python data models for Circuit Flow.

This package contains Qt-free data classes that represent circuit elements.
All models use only Python standard library types (no PyQt6 dependencies).
"""

from .circuit import CircuitModel
from .component import (
    COMPONENT_SYMBOLS,
    COMPONENT_TYPES,
    ComponentData,
)
from .source import SourceParameters
from .template import COMPONENT_PALETTE, PREBUILT_CIRCUITS, CircuitTemplate, PaletteEntry, palette_entry
from .wire import WireData

__all__ = [
    "CircuitModel",
    "ComponentData",
    "COMPONENT_TYPES",
    "COMPONENT_SYMBOLS",
    "SourceParameters",
    "WireData",
    "CircuitTemplate",
    "PaletteEntry",
    "COMPONENT_PALETTE",
    "palette_entry",
    "PREBUILT_CIRCUITS",
]
