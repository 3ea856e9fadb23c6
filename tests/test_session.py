import numpy as np
import pytest
from chromaspline import EditingSession, SessionOptions, SplineMode, InsertDirection, HueMode
from chromaspline.control_points import PointDelta
from chromaspline.conversions import ColorStringFormat
from chromaspline.errors import InvalidPosition, IndexOutOfBounds


def make_session(**kwargs):
    session = EditingSession(**kwargs)
    session.insert_point(0.0, (0.0, 1.0, 1.0))
    session.insert_point(1.0, (240.0, 1.0, 1.0))
    return session


def test_basic_sampling():
    session = make_session(hue_mode=HueMode.CW)
    assert session.sample_point(0.5).hue == pytest.approx(120.0)
    strip = session.sample_strip(16)
    assert strip.shape == (16, 3)
    assert session.color_string(0.0) == "FF0000"
    assert session.color_string(1.0, ColorStringFormat.RGB) == "rgb(0, 0, 255)"


def test_set_mode():
    session = make_session()
    session.insert_point(0.5, (90.0, 0.2, 0.6))
    linear = session.sample_point(0.25).value
    session.set_mode(SplineMode.HERMITE)
    assert session.mode is SplineMode.HERMITE
    assert session.sample_point(0.25).value != linear


def test_failed_edit_leaves_session_unchanged():
    session = make_session(options=SessionOptions(auto_hue=True))
    before = session.points.snapshot()
    with pytest.raises(InvalidPosition):
        session.insert_point(2.0, (10.0, 1.0, 1.0))
    with pytest.raises(IndexOutOfBounds):
        session.remove_point(7)
    with pytest.raises(InvalidPosition):
        session.translate_point(1, 0.5)
    assert session.points.snapshot() == before


def test_auto_hue_runs_after_edits():
    session = make_session(options=SessionOptions(auto_hue=True))
    session.insert_point(0.5, (10.0, 1.0, 1.0))
    # shortest arc from 0 to 240 runs through 300
    assert session.points[1].hsv[0] == pytest.approx(300.0)
    session.move_point(1, 0.25)
    assert session.points[1].hsv[0] == pytest.approx(330.0)


def test_lock_option_moves_everything():
    session = make_session()
    session.insert_point(0.5, (90.0, 1.0, 1.0))
    session.set_options(lock=True, constrain=True)
    session.translate_point(1, PointDelta(dposition=-0.25))
    assert session.points.positions == pytest.approx([0.0, 0.25, 0.75])


def test_insert_direction_option():
    session = EditingSession(options=SessionOptions(insert_direction="before"))
    session.insert_point(0.5, (0.0, 1.0, 1.0))
    assert session.insert_point(0.5, (120.0, 1.0, 1.0)) == 0
    session.set_options(insert_direction=InsertDirection.AFTER)
    assert session.insert_point(0.5, (240.0, 1.0, 1.0)) == 2


def test_preset_round_trip_reproduces_strip():
    session = make_session()
    session.insert_point(0.3, (60.0, 0.4, 0.9))
    session.set_mode(SplineMode.HERMITE_BEZIER)
    preset = session.to_preset("warm")

    restored = EditingSession.from_preset(preset)
    assert restored.mode is SplineMode.HERMITE_BEZIER
    assert np.array_equal(restored.sample_strip(64).value, session.sample_strip(64).value)


def test_load_preset_replaces_points():
    session = make_session()
    other = EditingSession(SplineMode.POLYNOMIAL)
    other.insert_point(0.5, (42.0, 0.5, 0.5))
    session.load_preset(other.to_preset("single"))
    assert len(session) == 1
    assert session.mode is SplineMode.POLYNOMIAL
    assert session.sample_point(0.9).value == (42.0, 0.5, 0.5)


def test_options_validated():
    with pytest.raises(ValueError):
        SessionOptions(insert_direction="sideways")
    with pytest.raises(TypeError):
        SessionOptions(lock="yes")


def test_preset_keeps_hue_mode():
    session = make_session(hue_mode=HueMode.CW)
    restored = EditingSession.from_preset(session.to_preset("cw"))
    assert restored.hue_mode is HueMode.CW
    assert restored.sample_point(0.5).hue == pytest.approx(120.0)
    assert np.array_equal(restored.sample_strip(32).value, session.sample_strip(32).value)

    plain = make_session()
    plain.load_preset(session.to_preset("cw"))
    assert plain.hue_mode is HueMode.CW


def test_switching_presets_samples_each_one():
    presets = []
    for i in range(40):
        source = EditingSession()
        source.insert_point(0.0, (float(i), 1.0, 1.0))
        source.insert_point(1.0, (float(i), 1.0, 1.0))
        presets.append(source.to_preset(f"flat {i}"))
    del source

    session = EditingSession()
    for i, preset in enumerate(presets):
        session.load_preset(preset)
        assert session.sample_point(0.5).hue == pytest.approx(float(i))
