"""
Material Parameters
===================
Defines the scalar parameters of a material definition script and the mesh
kind to element type mapping.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import math

from stressstrainplotter.config import DEFAULT_TEMPERATURE, DEFAULT_POISSON_RATIO, DEFAULT_MATERIAL_NAME
from stressstrainplotter.model.errors import InvalidParameterError


class MeshKind(StrEnum):
    TETRAHEDRA = "Tetrahedrons"
    HEXAHEDRA = "Hexahedrons"

    @property
    def element_type(self) -> str:
        return ELEMENT_TYPES[self]


# Must stay total over MeshKind
ELEMENT_TYPES: dict[MeshKind, str] = {
    MeshKind.TETRAHEDRA: "SOLID92",
    MeshKind.HEXAHEDRA: "SOLID95",
}


@dataclass(frozen=True)
class MaterialParameters:
    """
    User supplied parameters of one script generation request.

    ``material_name`` is only used for the chart title, the script
    refers to the material through the MATID placeholder.
    """
    temperature: float = DEFAULT_TEMPERATURE  # °C
    poisson_ratio: float = DEFAULT_POISSON_RATIO
    material_name: str = DEFAULT_MATERIAL_NAME
    mesh_kind: MeshKind = MeshKind.TETRAHEDRA

    def validate(self) -> None:
        """Raise InvalidParameterError when a numeric parameter is not finite."""
        if not math.isfinite(self.temperature):
            raise InvalidParameterError(f"Temperature must be a finite number, got {self.temperature}.")
        if not math.isfinite(self.poisson_ratio):
            raise InvalidParameterError(f"Poisson ratio must be a finite number, got {self.poisson_ratio}.")
