import warnings
import numpy as np
import pytest
from chromaspline.control_points import ColorSpacePoint, Tangent
from chromaspline.splines import SplineEvaluator
from chromaspline.errors import EmptyControlSet, DegenerateSegmentWarning, PolynomialModeWarning
from chromaspline.types.spline_types import SplineMode, HueMode
from chromaspline.utils import hue_distance

ALL_MODES = list(SplineMode)


def points(*specs):
    return [ColorSpacePoint(pos, hsv) for pos, hsv in specs]


RAINBOW = points(
    (0.0, (10.0, 0.9, 0.8)),
    (0.3, (80.0, 0.5, 1.0)),
    (0.55, (200.0, 0.7, 0.6)),
    (1.0, (330.0, 1.0, 0.9)),
)


def test_empty_set_raises():
    with pytest.raises(EmptyControlSet):
        SplineEvaluator([], SplineMode.LINEAR)


def test_single_point_is_constant():
    ev = SplineEvaluator(points((0.4, (50.0, 0.5, 0.5))), SplineMode.HERMITE)
    for t in (0.0, 0.4, 1.0):
        assert ev.evaluate(t).value == (50.0, 0.5, 0.5)


@pytest.mark.parametrize("mode", ALL_MODES)
def test_passes_through_control_points(mode):
    ev = SplineEvaluator(RAINBOW, mode)
    for p in RAINBOW:
        assert ev.evaluate(p.position).value == p.hsv


def test_linear_midpoint_clockwise_hue():
    ev = SplineEvaluator(points((0.0, (0.0, 1.0, 1.0)), (1.0, (240.0, 1.0, 1.0))), SplineMode.LINEAR, HueMode.CW)
    h, s, v = ev.evaluate(0.5).value
    assert h == pytest.approx(120.0)
    assert s == pytest.approx(1.0)
    assert v == pytest.approx(1.0)


def test_linear_midpoint_shortest_hue():
    ev = SplineEvaluator(points((0.0, (0.0, 1.0, 1.0)), (1.0, (240.0, 1.0, 1.0))), SplineMode.LINEAR)
    assert ev.evaluate(0.5).hue == pytest.approx(300.0)


@pytest.mark.parametrize("mode", ALL_MODES)
def test_hue_takes_short_way(mode):
    ev = SplineEvaluator(points((0.0, (350.0, 1.0, 1.0)), (1.0, (10.0, 1.0, 1.0))), mode)
    for t in np.linspace(0.0, 1.0, 11):
        assert hue_distance(ev.evaluate(t).hue, 0.0) <= 10.0 + 1e-9
    assert hue_distance(ev.evaluate(0.5).hue, 0.0) < 1e-6


@pytest.mark.parametrize("mode", ALL_MODES)
def test_continuity(mode):
    ev = SplineEvaluator(RAINBOW, mode)
    ts = np.linspace(0.0, 1.0, 2001)
    out = ev.evaluate_many(ts)
    hue_steps = hue_distance(out[1:, 0], out[:-1, 0])
    assert np.max(hue_steps) < 5.0
    assert np.max(np.abs(np.diff(out[:, 1:], axis=0))) < 0.05


@pytest.mark.parametrize("mode", ALL_MODES)
def test_output_in_range(mode):
    ev = SplineEvaluator(RAINBOW, mode)
    out = ev.evaluate_many(np.linspace(-0.5, 1.5, 301))
    assert np.all((out[:, 0] >= 0.0) & (out[:, 0] < 360.0))
    assert np.all((out[:, 1:] >= 0.0) & (out[:, 1:] <= 1.0))


def test_clamps_outside_point_range():
    pts = points((0.2, (30.0, 1.0, 1.0)), (0.8, (90.0, 1.0, 1.0)))
    ev = SplineEvaluator(pts, SplineMode.LINEAR)
    assert ev.evaluate(0.0).value == (30.0, 1.0, 1.0)
    assert ev.evaluate(-3.0).value == (30.0, 1.0, 1.0)
    assert ev.evaluate(1.0).value == (90.0, 1.0, 1.0)


def test_evaluate_matches_evaluate_many():
    ev = SplineEvaluator(RAINBOW, SplineMode.HERMITE_BEZIER)
    ts = np.linspace(0.0, 1.0, 17)
    many = ev.evaluate_many(ts)
    for t, row in zip(ts, many):
        assert ev.evaluate(t).value == tuple(row)


def test_untouched_bezier_equals_hermite():
    ts = np.linspace(0.0, 1.0, 101)
    hermite = SplineEvaluator(RAINBOW, SplineMode.HERMITE).evaluate_many(ts)
    bezier = SplineEvaluator(RAINBOW, SplineMode.HERMITE_BEZIER).evaluate_many(ts)
    assert np.allclose(hermite, bezier, atol=1e-7)


def test_hermite_uses_explicit_tangent():
    flat = [
        ColorSpacePoint(0.0, (100.0, 0.5, 0.5), tangent_out=Tangent(0.1, (0.0, 0.0, 0.0))),
        ColorSpacePoint(1.0, (100.0, 0.5, 0.9)),
    ]
    steep = [
        ColorSpacePoint(0.0, (100.0, 0.5, 0.5), tangent_out=Tangent(0.1, (0.0, 0.0, 0.2))),
        ColorSpacePoint(1.0, (100.0, 0.5, 0.9)),
    ]
    v_flat = SplineEvaluator(flat, SplineMode.HERMITE).evaluate(0.1).brightness
    v_steep = SplineEvaluator(steep, SplineMode.HERMITE).evaluate(0.1).brightness
    assert v_steep > v_flat


def test_bezier_handles_bend_curve():
    plain = points((0.0, (0.0, 0.2, 0.5)), (1.0, (0.0, 0.2, 0.5)))
    bent = [
        ColorSpacePoint(0.0, (0.0, 0.2, 0.5), tangent_out=Tangent(0.3, (0.0, 0.0, 0.4))),
        ColorSpacePoint(1.0, (0.0, 0.2, 0.5), tangent_in=Tangent(-0.3, (0.0, 0.0, 0.4))),
    ]
    assert SplineEvaluator(plain, SplineMode.HERMITE_BEZIER).evaluate(0.5).brightness == pytest.approx(0.5)
    assert SplineEvaluator(bent, SplineMode.HERMITE_BEZIER).evaluate(0.5).brightness == pytest.approx(0.8)


def test_polynomial_fits_quadratic():
    # v = 0.2 + 0.6 * t * t sampled at three points
    pts = points((0.0, (0.0, 0.0, 0.2)), (0.5, (0.0, 0.0, 0.35)), (1.0, (0.0, 0.0, 0.8)))
    ev = SplineEvaluator(pts, SplineMode.POLYNOMIAL)
    assert ev.evaluate(0.25).brightness == pytest.approx(0.2 + 0.6 * 0.0625)


def test_polynomial_warns_for_many_points():
    pts = [ColorSpacePoint(i / 9, (0.0, 0.5, 0.5)) for i in range(10)]
    with pytest.warns(PolynomialModeWarning):
        SplineEvaluator(pts, SplineMode.POLYNOMIAL)


def test_degenerate_segment():
    pts = points((0.0, (0.0, 1.0, 1.0)), (0.5, (60.0, 1.0, 1.0)), (0.5, (120.0, 1.0, 1.0)), (1.0, (180.0, 1.0, 1.0)))
    with pytest.warns(DegenerateSegmentWarning):
        ev = SplineEvaluator(pts, SplineMode.LINEAR)
    assert ev.evaluate(0.25).hue == pytest.approx(30.0)
    assert ev.evaluate(0.5).value == (120.0, 1.0, 1.0)
    assert ev.evaluate(0.75).hue == pytest.approx(150.0)


def test_no_warning_for_distinct_positions():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        SplineEvaluator(RAINBOW, SplineMode.HERMITE)
