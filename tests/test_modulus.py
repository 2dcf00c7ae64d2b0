import pytest

from stressstrainplotter.model.errors import DivisionByZeroError, EmptyDatasetError, EstimationError, ModulusOverflowError
from stressstrainplotter.model.modulus import estimate_modulus
from stressstrainplotter.model.samples import Sample


def test_modulus_from_first_sample():
    assert estimate_modulus([Sample(1.0, 100.0)]) == pytest.approx(10000.0)


def test_only_first_sample_is_used():
    assert estimate_modulus([Sample(0.1, 210.0), Sample(5.0, 400.0)]) == pytest.approx(210000.0)


def test_zero_strain():
    with pytest.raises(DivisionByZeroError):
        estimate_modulus([Sample(0.0, 50.0)])


def test_empty_dataset():
    with pytest.raises(EmptyDatasetError):
        estimate_modulus([])


def test_errors_share_base_class():
    with pytest.raises(EstimationError):
        estimate_modulus(())


def test_tiny_strain_overflow():
    with pytest.raises(ModulusOverflowError):
        estimate_modulus([Sample(1e-300, 1e10)])
