"""
Model Errors
============
Exceptions raised by the model layer.

All of them derive from ``StressStrainError`` (a ``ValueError``), so the view
can catch one type and show the message to the user, while tests and other
callers can tell the individual failure kinds apart.
"""
from __future__ import annotations


class StressStrainError(ValueError):
    """Base class for all recoverable input/data errors."""


# --- Parsing ---

class ParseError(StressStrainError):
    """The raw input text could not be turned into samples."""

    def __init__(self, message: str, line_number: int, content: str) -> None:
        super().__init__(message)
        self.line_number = line_number
        self.content = content


class MalformedRowError(ParseError):
    """A line does not contain exactly two tokens."""

    def __init__(self, line_number: int, content: str) -> None:
        super().__init__(
            f"Invalid data format on line {line_number}: expected 2 values, got '{content}'.",
            line_number,
            content,
        )


class NotANumberError(ParseError):
    """A token is not a finite number."""

    def __init__(self, line_number: int, content: str, token: str) -> None:
        super().__init__(
            f"Value '{token}' on line {line_number} is not a number.",
            line_number,
            content,
        )
        self.token = token


# --- Modulus estimation ---

class EstimationError(StressStrainError):
    """The elastic modulus could not be estimated."""


class EmptyDatasetError(EstimationError):
    def __init__(self) -> None:
        super().__init__("Empty dataset.")


class DivisionByZeroError(EstimationError):
    def __init__(self) -> None:
        super().__init__("Strain of the first sample is zero, modulus is undefined.")


class ModulusOverflowError(EstimationError):
    def __init__(self, stress: float, strain: float) -> None:
        super().__init__(f"Modulus is not a finite number for stress={stress}, strain={strain}.")


# --- Script generation ---

class GenerationError(StressStrainError):
    """The APDL script could not be generated."""


class GenerationEmptyDatasetError(GenerationError):
    def __init__(self) -> None:
        super().__init__("Empty dataset.")


class EstimationFailedError(GenerationError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"Modulus estimation failed: {reason}")
        self.reason = reason


class InvalidParameterError(StressStrainError):
    """A material parameter is out of range."""
