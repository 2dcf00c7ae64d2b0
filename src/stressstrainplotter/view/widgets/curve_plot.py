"""Chart widget showing a stress-strain curve."""
from __future__ import annotations

import logging
from typing import Optional, TYPE_CHECKING

import pyqtgraph as pg
from PySide6.QtWidgets import QWidget

from stressstrainplotter.config import STRAIN_AXIS_LABEL, STRESS_AXIS_LABEL

if TYPE_CHECKING:
    from stressstrainplotter.model.curve import Curve

logger = logging.getLogger(__name__)


class CurvePlotWidget(pg.PlotWidget):
    """XY line chart of a single Curve."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setBackground('w')
        self.showGrid(x=True, y=True)
        self.setLabel('bottom', STRAIN_AXIS_LABEL, color='black')
        self.setLabel('left', STRESS_AXIS_LABEL, color='black')
        self.getAxis('bottom').setPen('k')
        self.getAxis('left').setPen('k')
        self.addLegend()
        self.setMinimumWidth(400)

    def set_curve(self, curve: Curve) -> None:
        """Replace the displayed series."""
        self.clear()
        self.setTitle(curve.title, color='k')

        pen = pg.mkPen(color=(0, 120, 215), width=2)
        self.plot(curve.x, curve.y, pen=pen, name=curve.name or None)
        self.enableAutoRange()
        logger.debug(f"Plotted curve '{curve.name}' with {len(curve)} points.")

    def clear_curve(self) -> None:
        self.clear()
        self.setTitle(None)
