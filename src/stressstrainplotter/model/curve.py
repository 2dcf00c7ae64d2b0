from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from stressstrainplotter.config import CURVE_TITLE_SUFFIX
from stressstrainplotter.model.samples import Sample, SampleSequence
from stressstrainplotter.utils import percent_to_fraction

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Curve:
    """A named stress-strain series, strain already converted to a fraction."""
    name: str
    points: tuple[Sample, ...]

    @property
    def title(self) -> str:
        return f"{self.name}{CURVE_TITLE_SUFFIX}"

    @property
    def x(self) -> npt.NDArray[np.float64]:
        return np.array([p.first for p in self.points], dtype=np.float64)

    @property
    def y(self) -> npt.NDArray[np.float64]:
        return np.array([p.second for p in self.points], dtype=np.float64)

    def __len__(self) -> int:
        return len(self.points)


def build_curve(samples: SampleSequence, name: str = "") -> Curve:
    """Scale the first field of every sample from percent to fraction and wrap it in a Curve."""
    points = tuple(Sample(percent_to_fraction(s.first), s.second) for s in samples)
    return Curve(name=name, points=points)
