import math

import pytest

from stressstrainplotter.model.apdl import HEADER, format_row, format_strain, generate_script
from stressstrainplotter.model.errors import (
    EstimationFailedError, GenerationEmptyDatasetError, GenerationError, InvalidParameterError, DivisionByZeroError,
    ModulusOverflowError
)
from stressstrainplotter.model.materials import ELEMENT_TYPES, MaterialParameters, MeshKind
from stressstrainplotter.model.samples import Sample

SAMPLES = (Sample(1.0, 100.0), Sample(2.0, 180.0))

EXPECTED = HEADER + (
    "/prep7\n"
    "MPTEMP,,,,,,,,\n"
    "MPTEMP, 1, 22\n"
    "MPDATA, EX, MATID, , 10000\n"
    "MPDATA, PRXY, MATID, , 0.35\n"
    "ET, MATID, SOLID92\n"
    "TB, MELA, MATID, 1, 2\n"
    "TBTEMP, 22\n"
    "TBPT,,0.0100, 100\n"
    "TBPT,,0.0200, 180\n"
)


def test_default_script():
    assert generate_script(MaterialParameters(), SAMPLES) == EXPECTED


def test_header_comes_first():
    script = generate_script(MaterialParameters(), SAMPLES)
    assert script.startswith("! Commands inserted into this file")
    assert "more information.\n/prep7\n" in script


def test_row_count_matches_rows():
    samples = tuple(Sample(float(i), 10.0 * i) for i in range(1, 8))
    lines = generate_script(MaterialParameters(), samples).splitlines()
    rows = [line for line in lines if line.startswith("TBPT,,")]
    assert len(rows) == 7
    assert "TB, MELA, MATID, 1, 7" in lines


def test_rows_keep_input_order():
    samples = (Sample(3.0, 300.0), Sample(1.0, 100.0))
    lines = generate_script(MaterialParameters(), samples).splitlines()
    assert lines[-2:] == ["TBPT,,0.0300, 300", "TBPT,,0.0100, 100"]


def test_hexahedra_element_type():
    params = MaterialParameters(mesh_kind=MeshKind.HEXAHEDRA)
    assert "ET, MATID, SOLID95\n" in generate_script(params, SAMPLES)


def test_element_type_mapping_is_total_and_distinct():
    assert set(ELEMENT_TYPES) == set(MeshKind)
    assert len(set(ELEMENT_TYPES.values())) == len(MeshKind)
    assert MeshKind.TETRAHEDRA.element_type == "SOLID92"
    assert MeshKind.HEXAHEDRA.element_type == "SOLID95"


def test_custom_temperature_and_poisson():
    params = MaterialParameters(temperature=-40.5, poisson_ratio=0.3)
    script = generate_script(params, SAMPLES)
    assert "MPTEMP, 1, -40.5\n" in script
    assert "TBTEMP, -40.5\n" in script
    assert "MPDATA, PRXY, MATID, , 0.3\n" in script


def test_non_integral_stress_keeps_digits():
    assert format_row(0.12345, 235.5) == "TBPT,,0.0012, 235.5"


def test_output_is_deterministic():
    params = MaterialParameters(temperature=20, poisson_ratio=0.29, mesh_kind=MeshKind.HEXAHEDRA)
    assert generate_script(params, SAMPLES) == generate_script(params, SAMPLES)


@pytest.mark.parametrize("params", [MaterialParameters(), MaterialParameters(temperature=math.nan)])
def test_empty_dataset(params):
    with pytest.raises(GenerationEmptyDatasetError):
        generate_script(params, ())


def test_zero_strain_wraps_estimation_error():
    with pytest.raises(EstimationFailedError) as exc_info:
        generate_script(MaterialParameters(), (Sample(0.0, 50.0), Sample(1.0, 100.0)))
    assert isinstance(exc_info.value, GenerationError)
    assert isinstance(exc_info.value.__cause__, DivisionByZeroError)
    assert "zero" in exc_info.value.reason


def test_non_finite_parameter():
    with pytest.raises(InvalidParameterError):
        generate_script(MaterialParameters(poisson_ratio=math.inf), SAMPLES)


def test_overflowing_modulus_never_reaches_script():
    samples = (Sample(1e-300, 1e10), Sample(1.0, 100.0))
    with pytest.raises(EstimationFailedError) as exc_info:
        generate_script(MaterialParameters(), samples)
    assert isinstance(exc_info.value.__cause__, ModulusOverflowError)


@pytest.mark.parametrize("strain, expected", [
    (0.01, "0.0100"),
    (0.00015, "0.0002"),
    (0.00025, "0.0003"),
    (-0.00015, "-0.0002"),
    (1e-300, "0.0000"),
    (12.5, "12.5000"),
])
def test_strain_rounds_half_up(strain, expected):
    assert format_strain(strain) == expected
