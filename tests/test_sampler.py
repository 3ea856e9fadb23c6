import numpy as np
import pytest
from chromaspline.colors import UnitHSV, ColorRGBINT, ColorUnitRGB
from chromaspline.control_points import ControlPointSet
from chromaspline.sampler import GradientSampler, strip_positions
from chromaspline.errors import EmptyControlSet
from chromaspline.types.spline_types import SplineMode, HueMode


def make_set():
    s = ControlPointSet()
    s.insert(0.0, (0.0, 1.0, 1.0))
    s.insert(0.4, (90.0, 0.5, 0.8))
    s.insert(1.0, (240.0, 1.0, 1.0))
    return s


def test_strip_positions():
    assert strip_positions(1).tolist() == [0.0]
    ts = strip_positions(5)
    assert np.allclose(ts, [0.0, 0.25, 0.5, 0.75, 1.0])
    with pytest.raises(ValueError):
        strip_positions(0)


@pytest.mark.parametrize("mode", list(SplineMode))
def test_strip_endpoints_match_point_samples(mode):
    sampler = GradientSampler()
    s = make_set()
    strip = sampler.sample_strip(s, mode, 64)
    assert isinstance(strip, UnitHSV)
    assert strip.shape == (64, 3)
    assert tuple(strip.value[0]) == sampler.sample_point(s, mode, 0.0).value
    assert tuple(strip.value[-1]) == sampler.sample_point(s, mode, 1.0).value


def test_single_sample_strip_is_t_zero():
    sampler = GradientSampler()
    s = make_set()
    strip = sampler.sample_strip(s, SplineMode.LINEAR, 1)
    assert strip.shape == (1, 3)
    assert tuple(strip.value[0]) == (0.0, 1.0, 1.0)


def test_invalid_resolution():
    with pytest.raises(ValueError):
        GradientSampler().sample_strip(make_set(), SplineMode.LINEAR, 0)


def test_empty_set():
    with pytest.raises(EmptyControlSet):
        GradientSampler().sample_point(ControlPointSet(), SplineMode.LINEAR, 0.5)


def test_sampling_is_deterministic():
    sampler = GradientSampler()
    s = make_set()
    a = sampler.sample_strip(s, SplineMode.HERMITE, 100).value
    b = GradientSampler().sample_strip(s, SplineMode.HERMITE, 100).value
    assert np.array_equal(a, b)


def test_evaluator_cache_follows_revision():
    sampler = GradientSampler()
    s = make_set()
    first = sampler.evaluator(s, SplineMode.LINEAR)
    assert sampler.evaluator(s, SplineMode.LINEAR) is first
    assert sampler.evaluator(s, SplineMode.HERMITE) is not first

    s.set_color(1, (180.0, 1.0, 1.0))
    rebuilt = sampler.evaluator(s, SplineMode.LINEAR)
    assert rebuilt is not first
    assert sampler.sample_point(s, SplineMode.LINEAR, 0.4).value == (180.0, 1.0, 1.0)


def test_hue_mode_changes_path():
    s = ControlPointSet()
    s.insert(0.0, (0.0, 1.0, 1.0))
    s.insert(1.0, (240.0, 1.0, 1.0))
    assert GradientSampler().sample_point(s, SplineMode.LINEAR, 0.5).hue == pytest.approx(300.0)
    assert GradientSampler(HueMode.CW).sample_point(s, SplineMode.LINEAR, 0.5).hue == pytest.approx(120.0)


def test_strip_rgb():
    sampler = GradientSampler()
    s = make_set()
    rgb8 = sampler.sample_strip_rgb(s, SplineMode.LINEAR, 8, "int")
    assert isinstance(rgb8, ColorRGBINT)
    assert rgb8.value[0].tolist() == [255, 0, 0]
    assert rgb8.value[-1].tolist() == [0, 0, 255]

    rgbf = sampler.sample_strip_rgb(s, SplineMode.LINEAR, 8)
    assert isinstance(rgbf, ColorUnitRGB)
    assert np.allclose(rgbf.value[0], [1.0, 0.0, 0.0])


def test_control_point_colors():
    s = make_set()
    colors = GradientSampler().control_point_colors(s, SplineMode.HERMITE)
    assert np.allclose(colors.value, [p.hsv for p in s])


def test_cache_does_not_outlive_its_set():
    sampler = GradientSampler()
    for i in range(50):
        s = ControlPointSet()
        s.insert(0.0, (float(i), 1.0, 1.0))
        s.insert(1.0, (float(i), 1.0, 1.0))
        assert sampler.sample_point(s, SplineMode.LINEAR, 0.5).hue == pytest.approx(float(i))
        del s
    assert len(sampler._cache) == 0
