import numpy as np

from stressstrainplotter.model.curve import build_curve
from stressstrainplotter.model.samples import Sample


def test_build_curve_scales_first_field():
    curve = build_curve([Sample(1.0, 100.0), Sample(2.0, 180.0)], "S235")
    assert curve.name == "S235"
    assert curve.points == (Sample(0.01, 100.0), Sample(0.02, 180.0))


def test_curve_arrays_for_chart():
    curve = build_curve([Sample(50.0, 1.0), Sample(100.0, 2.0)])
    np.testing.assert_allclose(curve.x, [0.5, 1.0])
    np.testing.assert_allclose(curve.y, [1.0, 2.0])
    assert len(curve) == 2


def test_curve_title_and_default_name():
    assert build_curve([]).title == " --- Stress-Strain Curve"
    assert build_curve([], "Steel").title == "Steel --- Stress-Strain Curve"
    assert len(build_curve([])) == 0
