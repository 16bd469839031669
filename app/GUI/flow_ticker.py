"""
GUI/flow_ticker.py

Per-frame clock that drives the flow animation from the Qt event loop.
"""

import logging
import time

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from simulation.constants import TICK_INTERVAL_MS

logger = logging.getLogger(__name__)


class FlowTicker(QObject):
    """
    Repeating frame clock for a SimulationController.

    The loop keeps running whether or not current flows, so flow resumes
    without re-deriving a start time. The owning view must call stop() when
    it is torn down. The timer is parented to the ticker and reused across
    start/stop cycles.

    Signals:
        frameReady(FlowFrame): emitted after every tick
    """

    frameReady = pyqtSignal(object)

    def __init__(self, simulation_ctrl, interval_ms=TICK_INTERVAL_MS,
                 clock=time.monotonic, parent=None):
        super().__init__(parent)
        self.simulation_ctrl = simulation_ctrl
        self.interval_ms = interval_ms
        self._clock = clock
        self._timer = None
        self.last_frame = None

    def start(self):
        """Start (or restart) ticking at the configured interval."""
        if self._timer is None:
            self._timer = QTimer(self)
            self._timer.setSingleShot(False)
            self._timer.timeout.connect(self._on_timeout)
        self.simulation_ctrl.start_clock(self._clock())
        self._timer.start(self.interval_ms)
        logger.debug("Flow ticker started (%d ms)", self.interval_ms)

    def stop(self):
        """Cancel the repeating tick. Safe to call when not running."""
        if self._timer is not None:
            self._timer.stop()

    def is_running(self):
        return self._timer is not None and self._timer.isActive()

    def _on_timeout(self):
        self.last_frame = self.simulation_ctrl.tick(self._clock())
        self.frameReady.emit(self.last_frame)
