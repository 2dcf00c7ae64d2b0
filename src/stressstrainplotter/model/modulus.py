from __future__ import annotations

import logging
import math

from stressstrainplotter.model.errors import EmptyDatasetError, DivisionByZeroError, ModulusOverflowError
from stressstrainplotter.model.samples import SampleSequence
from stressstrainplotter.utils import percent_to_fraction

logger = logging.getLogger(__name__)


def estimate_modulus(samples: SampleSequence) -> float:
    """
    Estimate the elastic modulus as the secant through the origin and the first sample.

    The first field of the sample is strain in percent, the second is stress.

    Raises:
        EmptyDatasetError: No samples.
        DivisionByZeroError: The first sample has zero strain.
        ModulusOverflowError: The ratio overflows to infinity.
    """
    if not samples:
        raise EmptyDatasetError()

    first = samples[0]
    strain = percent_to_fraction(first.first)
    stress = first.second
    if strain == 0.0:
        raise DivisionByZeroError()

    modulus = stress / strain
    if not math.isfinite(modulus):
        raise ModulusOverflowError(stress, strain)
    logger.debug(f"Estimated modulus {modulus} from strain={strain}, stress={stress}.")
    return modulus
