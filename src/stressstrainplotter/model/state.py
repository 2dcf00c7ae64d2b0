"""
Project State (Data Model)
==========================
This module defines the data held by the running application window.

Why is this file needed?
------------------------
1. State Management: It holds the input text, the input order flag, the
   material parameters and the last outputs in one place.
2. Decoupling: Views read from this object; the controller writes to it.
   The model functions never see it, they only get plain values.

Classes:
    ProjectState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Optional

from stressstrainplotter.model.curve import Curve
from stressstrainplotter.model.materials import MaterialParameters

logger = logging.getLogger(__name__)


@dataclass
class ProjectState:
    """
    Holds everything the window displays.
    Pass this instance to the controller and the views.
    """
    input_text: str = ""

    # True while the input columns are (strain, stress). Informational only.
    is_stress_strain: bool = True

    parameters: MaterialParameters = field(default_factory=MaterialParameters)

    curve: Optional[Curve] = None
    script: Optional[str] = None

    input_path: Optional[str] = None
    script_path: Optional[str] = None

    @property
    def order_label(self) -> str:
        return "Strain - Stress" if self.is_stress_strain else "Stress - Strain"

    def reset(self) -> None:
        """Clear all data for a new session"""
        self.input_text = ""
        self.is_stress_strain = True
        self.parameters = MaterialParameters()
        self.curve = None
        self.script = None
        self.input_path = None
        self.script_path = None
        logger.info("Project state has been reset.")
