"""
Configuration & Global Constants
================================
This module serves as the central registry for application-wide constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers and labels (e.g., 100.0, "SOLID92")
   from being scattered throughout the code.
2. Defaults: The GUI and the model read the same default material parameters
   from here, so a fresh window and a fresh ``MaterialParameters`` agree.

Exports:
    VISIBLE_APP_NAME (str): Window title of the application.
    DEFAULT_TEMPERATURE (float): Default reference temperature in °C.
    DEFAULT_POISSON_RATIO (float): Default Poisson ratio.
    PERCENT (float): Divisor converting strain in percent to fractional strain.
"""
ORG_ID = "stressstrainplotter"
APP_ID = "stress-strain-plotter"
VISIBLE_APP_NAME = "Stress-Strain Curve Plotter"

# Material parameter defaults
DEFAULT_TEMPERATURE: float = 22.0
DEFAULT_POISSON_RATIO: float = 0.35
DEFAULT_MATERIAL_NAME: str = ""

# Strain is typed in percent, the solver expects fractional strain
PERCENT: float = 100.0

# Chart labels
CURVE_TITLE_SUFFIX = " --- Stress-Strain Curve"
STRAIN_AXIS_LABEL = "Strain [-]"
STRESS_AXIS_LABEL = "Stress [MPa]"

# File dialogs
INPUT_FILE_FILTER = "Data (*.txt *.dat *.csv);;All Files (*)"
SCRIPT_FILE_FILTER = "APDL (*.mac *.inp *.txt);;All Files (*)"
