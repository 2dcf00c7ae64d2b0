"""
APDL Script Generation
======================
Builds the material definition commands inserted after material definitions
in /PREP7 (Workbench "Commands" object).

The keyword tokens (MPTEMP, MPDATA, ET, TB, TBTEMP, TBPT, MATID) are read by
the solver and must be kept character for character.
"""
from __future__ import annotations

from decimal import Context, Decimal, ROUND_HALF_UP
import logging

from stressstrainplotter.model.errors import EstimationError, EstimationFailedError, GenerationEmptyDatasetError
from stressstrainplotter.model.materials import MaterialParameters
from stressstrainplotter.model.modulus import estimate_modulus
from stressstrainplotter.model.samples import SampleSequence
from stressstrainplotter.utils import format_number, percent_to_fraction

logger = logging.getLogger(__name__)

HEADER = (
    "! Commands inserted into this file will be executed just after material definitions in /PREP7.\n"
    "\n"
    "! Active UNIT system in Workbench when this object was created: Metric (mm, t, N, s, mV, mA)\n"
    "\n"
    "! NOTE: Any data that requires units (such as mass) is assumed to be in the consistent solver unit system.\n"
    "\n"
    "! See Solving Units in the help system for more information.\n"
)


# Wide enough for any finite double written out in fixed point
_STRAIN_CONTEXT = Context(prec=400)
_STRAIN_EXPONENT = Decimal("0.0001")


def format_strain(strain: float) -> str:
    """Strain with 4 decimals, rounding half up on the shortest decimal form of the value."""
    return str(Decimal(repr(strain)).quantize(_STRAIN_EXPONENT, rounding=ROUND_HALF_UP, context=_STRAIN_CONTEXT))


def format_row(strain_percent: float, stress: float) -> str:
    """One multilinear elastic table point, strain as a fraction with 4 decimals."""
    return f"TBPT,,{format_strain(percent_to_fraction(strain_percent))}, {format_number(stress)}"


def generate_script(params: MaterialParameters, samples: SampleSequence) -> str:
    """
    Generate the APDL material definition for the given samples.

    Args:
        params: Temperature, Poisson ratio and mesh kind.
        samples: (strain [%], stress) pairs in table order.

    Returns:
        The complete script, every line terminated with a newline.

    Raises:
        GenerationEmptyDatasetError: No samples.
        EstimationFailedError: The modulus could not be estimated.
        InvalidParameterError: A parameter is not a finite number.
    """
    if not samples:
        raise GenerationEmptyDatasetError()
    params.validate()

    try:
        youngs_modulus = estimate_modulus(samples)
    except EstimationError as e:
        raise EstimationFailedError(str(e)) from e

    temperature = format_number(params.temperature)
    lines = [
        "/prep7",
        "MPTEMP,,,,,,,,",
        f"MPTEMP, 1, {temperature}",
        f"MPDATA, EX, MATID, , {format_number(youngs_modulus)}",
        f"MPDATA, PRXY, MATID, , {format_number(params.poisson_ratio)}",
        f"ET, MATID, {params.mesh_kind.element_type}",
        f"TB, MELA, MATID, 1, {len(samples)}",
        f"TBTEMP, {temperature}",
    ]
    lines.extend(format_row(s.first, s.second) for s in samples)

    logger.debug(f"Generated APDL script with {len(samples)} table points.")
    return HEADER + "\n".join(lines) + "\n"
