import numpy as np
import pytest
from PIL import Image
from chromaspline import EditingSession, strip_to_pixels, strip_to_image


def make_strip(resolution=10):
    session = EditingSession()
    session.insert_point(0.0, (0.0, 1.0, 1.0))
    session.insert_point(1.0, (120.0, 1.0, 1.0))
    return session.sample_strip(resolution)


def test_strip_to_pixels_shape_and_dtype():
    pixels = strip_to_pixels(make_strip(10), 4)
    assert pixels.shape == (4, 10, 3)
    assert pixels.dtype == np.uint8
    assert pixels[0, 0].tolist() == [255, 0, 0]
    assert pixels[3, -1].tolist() == [0, 255, 0]
    assert np.array_equal(pixels[0], pixels[3])


def test_strip_to_pixels_accepts_raw_hsv_rows():
    rows = np.array([[240.0, 1.0, 1.0], [0.0, 0.0, 1.0]])
    pixels = strip_to_pixels(rows, 1)
    assert pixels[0].tolist() == [[0, 0, 255], [255, 255, 255]]


def test_strip_to_image():
    image = strip_to_image(make_strip(20), 8)
    assert isinstance(image, Image.Image)
    assert image.size == (20, 8)
    assert image.mode == "RGB"


def test_bad_height():
    with pytest.raises(ValueError):
        strip_to_pixels(make_strip(), 0)
