"""Stress-strain curve plotter and APDL material script generator."""
