"""
constants.py - Centralized constants for the circuit-flow engine.

This file is the SINGLE SOURCE OF TRUTH for:
- Analysis floors and display caps
- Animation speed mapping (px/sec per amp, floor, cap)
- Snap threshold and flow-path fallback geometry
- Per-type default magnitudes used when a value string does not parse
"""

# Analysis settings
EPSILON = 1e-6                 # Floor for resistance/impedance denominators
MAX_CURRENT = 10.0             # Display-range cap in amperes
DEFAULT_VOLTAGE = 9.0          # Volts
DEFAULT_FREQUENCY = 50.0       # Hz (AC only)

# Magnitudes used when a component value fails to parse (SI base units)
DEFAULT_RESISTANCE = 100.0     # Ohms
DEFAULT_CAPACITANCE = 1e-6     # Farads
DEFAULT_INDUCTANCE = 0.01      # Henries

# Speed-scale slider range (inclusive)
SPEED_SCALE_MIN = 0.1
SPEED_SCALE_MAX = 2.0
DEFAULT_SPEED_SCALE = 1.0

# Animation speed mapping
SPEED_PER_AMP = 120.0          # px/sec per ampere
MAX_ANIMATION_SPEED = 600.0    # px/sec
MIN_ANIMATION_SPEED = 10.0     # px/sec for any non-negligible current
CURRENT_THRESHOLD = 1e-6       # Amperes below which the indicator freezes

# Canvas interaction
SNAP_THRESHOLD = 20.0          # Pixels for snapping components to wires

# Indicator placement when the circuit has no wires
FALLBACK_PATH = ((50.0, 50.0), (250.0, 50.0))

# Frame clock
TICK_INTERVAL_MS = 16          # ~60 frames per second
