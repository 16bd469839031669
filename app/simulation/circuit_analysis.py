"""
simulation/circuit_analysis.py

Steady-state current magnitude for a single series loop, and the animation
speed derived from it.

Component values are aggregated by type regardless of position: the engine
assumes one effective series path and does not solve circuit topology.
The result is a display magnitude for the flow animation, capped at 10 A.
"""

import logging
import math
from dataclasses import dataclass

from simulation.constants import (CURRENT_THRESHOLD, DEFAULT_CAPACITANCE,
                                  DEFAULT_INDUCTANCE, DEFAULT_RESISTANCE,
                                  EPSILON, MAX_ANIMATION_SPEED, MAX_CURRENT,
                                  MIN_ANIMATION_SPEED, SPEED_PER_AMP)
from simulation.value_parser import format_value, parse_quantity

logger = logging.getLogger(__name__)

# Magnitude used per type when a value is missing, unparseable or not positive
TYPE_DEFAULTS = {
    "Resistor": DEFAULT_RESISTANCE,
    "Capacitor": DEFAULT_CAPACITANCE,
    "Inductor": DEFAULT_INDUCTANCE,
}


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one analysis pass."""

    current_magnitude: float = 0.0
    animation_speed: float = 0.0
    total_resistance: float = EPSILON
    total_capacitance: float = 0.0
    total_inductance: float = 0.0
    impedance: float = EPSILON
    open_switch: bool = False
    blocked_by_capacitor: bool = False

    @property
    def has_current(self) -> bool:
        return self.current_magnitude > CURRENT_THRESHOLD

    def describe(self) -> str:
        """Short human-readable summary, e.g. '3 A through 3 Ω'."""
        if self.open_switch:
            return "Open circuit"
        if self.blocked_by_capacitor:
            return "Blocked by capacitor"
        if math.isinf(self.impedance):
            return "No current (impedance out of range)"
        return (f"{format_value(self.current_magnitude, 'A')} through "
                f"{format_value(self.impedance, 'Ω')}")


def component_magnitude(component) -> float:
    """
    Return the SI magnitude used for a resistor, capacitor or inductor.

    A positive pre-parsed numeric_value wins; otherwise the value string is
    parsed; otherwise the per-type default applies.
    """
    default = TYPE_DEFAULTS.get(component.component_type, 0.0)
    numeric = getattr(component, "numeric_value", None)
    if numeric is None or numeric <= 0:
        numeric = parse_quantity(component.value)
    if numeric is None or numeric <= 0:
        return default
    return numeric


def has_open_switch(components) -> bool:
    """True when any switch in the list is off."""
    return any(c.component_type == "Switch" and c.is_on is False for c in components)


def _clamp_current(current: float) -> float:
    return max(0.0, min(current, MAX_CURRENT))


def analyze_circuit(components, source) -> AnalysisResult:
    """
    Compute the current magnitude and animation speed for the circuit.

    Args:
        components: iterable of ComponentData (order does not matter)
        source: SourceParameters describing the active source

    Returns:
        AnalysisResult. Pure and deterministic for identical inputs.
    """
    components = list(components)

    if has_open_switch(components):
        return AnalysisResult(open_switch=True)

    totals = {"Resistor": EPSILON, "Capacitor": 0.0, "Inductor": 0.0}
    for component in components:
        if component.component_type in totals:
            totals[component.component_type] += component_magnitude(component)

    resistance = totals["Resistor"]
    capacitance = totals["Capacitor"]
    inductance = totals["Inductor"]

    blocked = False
    if source.is_ac:
        omega = 2 * math.pi * source.frequency
        xl = omega * inductance
        xc = 0.0
        if capacitance > EPSILON:
            susceptance = omega * capacitance
            xc = 1 / susceptance if susceptance > 0 else math.inf
        impedance = max(math.hypot(resistance, xl - xc), EPSILON)
        current = source.voltage / impedance
    elif capacitance > EPSILON:
        # A charged capacitor blocks steady-state DC
        impedance = math.inf
        current = 0.0
        blocked = True
    else:
        impedance = resistance
        current = source.voltage / resistance

    current = _clamp_current(current)
    result = AnalysisResult(
        current_magnitude=current,
        animation_speed=get_animation_speed(current, source.speed_scale),
        total_resistance=resistance,
        total_capacitance=capacitance,
        total_inductance=inductance,
        impedance=impedance,
        blocked_by_capacitor=blocked,
    )
    logger.debug("Analysis (%s %.3gV): %s", source.kind, source.voltage, result.describe())
    return result


def compute_current_magnitude(components, source) -> float:
    """Current magnitude in amperes, clamped to [0, 10]."""
    return analyze_circuit(components, source).current_magnitude


def get_animation_speed(current_magnitude: float, speed_scale: float = 1.0) -> float:
    """
    Map a current magnitude to an indicator speed in px/sec.

    Any current above the threshold moves at least MIN_ANIMATION_SPEED;
    nothing moves faster than MAX_ANIMATION_SPEED.
    """
    if current_magnitude <= CURRENT_THRESHOLD:
        return 0.0
    speed = SPEED_PER_AMP * current_magnitude * speed_scale
    return max(min(speed, MAX_ANIMATION_SPEED), MIN_ANIMATION_SPEED)
