"""
SimulationController - Keeps the analysis result and flow animation current.

This module contains no Qt dependencies. It listens to CircuitController
events, recomputes the current magnitude on every circuit change, rebuilds
the flow path when the wire set changes, and advances the indicator when
ticked by a frame clock.
"""

import logging
from typing import Any, Optional

from models.circuit import CircuitModel
from simulation.circuit_analysis import AnalysisResult, analyze_circuit
from simulation.flow_animation import FlowAnimator, FlowFrame

logger = logging.getLogger(__name__)

# Events that change the wire set and therefore the flow path
WIRE_EVENTS = frozenset({
    "wire_added",
    "wire_removed",
    "wire_routed",
    "circuit_cleared",
    "circuit_loaded",
})

# Events that do not affect the analysis
IGNORED_EVENTS = frozenset({"selection_changed", "analysis_updated"})


class SimulationController:
    """
    Controller for the analysis and flow-animation pipeline.

    Coordinates: circuit change -> analyze -> animation speed -> tick -> frame
    """

    def __init__(self, model: Optional[CircuitModel] = None, circuit_ctrl=None):
        self.model = model or (circuit_ctrl.model if circuit_ctrl else CircuitModel())
        self.circuit_ctrl = circuit_ctrl
        self.animator = FlowAnimator(self.model.wires)
        self.result: AnalysisResult = analyze_circuit(
            self.model.components.values(), self.model.source
        )
        if self.circuit_ctrl:
            self.circuit_ctrl.add_observer(self._on_circuit_event)

    def detach(self) -> None:
        """Stop listening to the circuit controller."""
        if self.circuit_ctrl:
            self.circuit_ctrl.remove_observer(self._on_circuit_event)

    def _on_circuit_event(self, event: str, data: Any) -> None:
        if event in IGNORED_EVENTS:
            return
        if event in WIRE_EVENTS:
            self.animator.rebuild(self.model.wires)
        self.recompute()

    def recompute(self) -> AnalysisResult:
        """Re-run the analysis on the current model and notify observers."""
        self.result = analyze_circuit(self.model.components.values(), self.model.source)
        if self.circuit_ctrl:
            self.circuit_ctrl._notify("analysis_updated", self.result)
        return self.result

    @property
    def current_magnitude(self) -> float:
        return self.result.current_magnitude

    def start_clock(self, now: float) -> None:
        """Anchor the animation clock, e.g. when a frame ticker starts."""
        self.animator.reset_clock(now)

    def tick(self, now: float) -> FlowFrame:
        """Advance the flow indicator to ``now`` and return the frame to draw."""
        self.animator.tick(now, self.result.animation_speed)
        return self.frame()

    def frame(self) -> FlowFrame:
        return FlowFrame(
            current_magnitude=self.result.current_magnitude,
            is_flowing=self.animator.is_flowing,
            position=self.animator.position(),
        )
