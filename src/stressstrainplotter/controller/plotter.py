"""
Plotter Controller
==================
This module runs the user requests (switch, plot, generate, import, export)
against a ProjectState.

Why is this file needed?
------------------------
1. Translation: It converts the window state (raw text, parameters) into the
   plain values the model functions take, and stores their results back.
2. Atomicity: The state is only written after a request fully succeeded, so a
   failed request leaves the previous curve and script on screen.

It has no Qt dependency; the view calls it and presents the exceptions.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from stressstrainplotter.model.apdl import generate_script
from stressstrainplotter.model.curve import Curve, build_curve
from stressstrainplotter.model.errors import StressStrainError
from stressstrainplotter.model.io import IOManager
from stressstrainplotter.model.samples import parse_samples, switch_order

if TYPE_CHECKING:
    from stressstrainplotter.model.materials import MaterialParameters
    from stressstrainplotter.model.state import ProjectState

# Get logger
logger = logging.getLogger(__name__)


class PlotterController:
    def __init__(self, project_state: ProjectState, skip_blank_lines: bool = False) -> None:
        self.project = project_state
        self.skip_blank_lines = skip_blank_lines

    def set_input_text(self, text: str) -> None:
        self.project.input_text = text

    def set_parameters(self, parameters: MaterialParameters) -> None:
        self.project.parameters = parameters

    def new_session(self) -> None:
        """Drop the input, outputs and parameters, back to a fresh window."""
        self.project.reset()

    def switch_input_order(self) -> str:
        """Swap the columns of the input text and flip the order flag."""
        switched = switch_order(self.project.input_text)
        self.project.input_text = switched
        self.project.is_stress_strain = not self.project.is_stress_strain
        logger.info(f"Input order switched to: {self.project.order_label}")
        return switched

    def plot_curve(self) -> Curve:
        """Parse the input text into the curve shown in the chart."""
        logger.info("Building stress-strain curve.")
        try:
            samples = parse_samples(self.project.input_text, skip_blank_lines=self.skip_blank_lines)
        except StressStrainError as e:
            logger.warning(f"Plotting failed: {e}")
            raise

        curve = build_curve(samples, self.project.parameters.material_name)
        self.project.curve = curve
        logger.debug(f"Curve '{curve.name}' has {len(curve)} points.")
        return curve

    def generate_script(self) -> str:
        """Parse the input text and generate the APDL script."""
        logger.info("Generating APDL script.")
        try:
            samples = parse_samples(self.project.input_text, skip_blank_lines=self.skip_blank_lines)
            script = generate_script(self.project.parameters, samples)
        except StressStrainError as e:
            logger.warning(f"APDL generation failed: {e}")
            raise

        self.project.script = script
        return script

    def load_input(self, filepath: str) -> str:
        """Replace the input text with the contents of a data file."""
        text = IOManager.read_input(filepath)
        self.project.input_text = text
        self.project.input_path = filepath
        return text

    def export_script(self, filepath: str) -> None:
        """Write the last generated script to a file."""
        if self.project.script is None:
            raise StressStrainError("No APDL script has been generated yet.")
        IOManager.write_script(self.project.script, filepath)
        self.project.script_path = filepath
