"""
Avatar rasterizer tests.
"""

import io
import random

import pytest
from PIL import Image, ImageColor

from blog.avatar import COLOR_SCHEME, first_letter, generate_avatar


def _open(png: bytes) -> Image.Image:
    return Image.open(io.BytesIO(png)).convert("RGBA")


@pytest.mark.parametrize(
    "username, expected",
    [
        ("sampleuser", "s"),
        ("Another", "A"),
        ("42hikers", "h"),
        ("__x", "x"),
        ("1234", "A"),
        ("", "A"),
    ],
)
def test_first_letter(username, expected):
    assert first_letter(username) == expected


def test_generate_avatar_is_png_of_default_size():
    png = generate_avatar("s")

    assert png.startswith(b"\x89PNG\r\n\x1a\n")
    image = Image.open(io.BytesIO(png))
    assert image.format == "PNG"
    assert image.size == (100, 100)


def test_generate_avatar_custom_size():
    image = _open(generate_avatar("q", width=64, height=48))

    assert image.size == (64, 48)


def test_background_uses_palette_color():
    expected = random.Random(7).choice(COLOR_SCHEME)

    image = _open(generate_avatar("m", rng=random.Random(7)))

    # Middle of the top edge: inside the rectangle, away from the glyph
    assert image.getpixel((50, 2)) == ImageColor.getrgb(expected) + (255,)


def test_rounded_corners_are_transparent():
    image = _open(generate_avatar("m", rng=random.Random(1)))

    assert image.getpixel((0, 0))[3] == 0
    assert image.getpixel((99, 99))[3] == 0


def test_letter_is_drawn_in_black():
    image = _open(generate_avatar("W", rng=random.Random(3)))

    pixels = [image.getpixel((x, y)) for x in range(25, 75) for y in range(25, 75)]
    assert (0, 0, 0, 255) in pixels


def test_same_seed_same_image():
    first = generate_avatar("k", rng=random.Random(11))
    second = generate_avatar("k", rng=random.Random(11))

    assert first == second


@pytest.mark.parametrize("width, height", [(0, 100), (100, -1), (10.5, 10), ("100", 100)])
def test_invalid_size_rejected(width, height):
    with pytest.raises(ValueError):
        generate_avatar("a", width=width, height=height)


def test_empty_letter_rejected():
    with pytest.raises(ValueError):
        generate_avatar("")
