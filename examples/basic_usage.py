"""Basic chromaspline usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import logging

from chromaspline import (
    EditingSession,
    SessionOptions,
    SplineMode,
    HueMode,
    PresetData,
    Tangent,
    strip_to_image,
)
from chromaspline.conversions import ColorStringFormat


def demonstrate_editing() -> EditingSession:
    # Three points, hue sweeping clockwise from red through green to blue.
    session = EditingSession(SplineMode.HERMITE, hue_mode=HueMode.CW)
    session.insert_point(0.0, (0.0, 1.0, 1.0))
    session.insert_point(0.5, (120.0, 0.6, 0.9))
    session.insert_point(1.0, (240.0, 1.0, 1.0))

    for t in (0.0, 0.25, 0.5, 0.75, 1.0):
        print(f"t={t:.2f}", session.color_string(t, ColorStringFormat.HSV), session.color_string(t))

    # Drag the middle point and bend the curve leaving the first one.
    session.translate_point(1, 0.1)
    session.set_point_tangents(0, None, Tangent(0.2, (20.0, 0.0, -0.3)))
    session.set_mode(SplineMode.HERMITE_BEZIER)
    print("Bezier midpoint:", session.sample_point(0.5).value)
    return session


def demonstrate_auto_hue() -> None:
    session = EditingSession(options=SessionOptions(auto_hue=True), hue_span=300.0)
    for position in (0.0, 0.3, 0.6, 1.0):
        session.insert_point(position, (0.0, 0.8, 0.9))
    print("Auto hues:", [round(p.hsv[0], 1) for p in session.points])


def demonstrate_presets(session: EditingSession) -> None:
    text = session.to_preset("demo").to_json(indent=2)
    restored = EditingSession.from_preset(PresetData.from_json(text))
    print("Preset round trip matches:", (restored.sample_strip(32).value == session.sample_strip(32).value).all())

    image = strip_to_image(session.sample_strip(256), height=24)
    print("Strip image:", image.size, image.mode)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    session = demonstrate_editing()
    demonstrate_auto_hue()
    demonstrate_presets(session)
