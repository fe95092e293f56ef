import base64
import io

from PIL import Image

from translation_overlay import measure
from translation_overlay.config import OverlaySettings
from translation_overlay.measure import (
    ApproximateTextMeasurer,
    PillowTextMeasurer,
    build_measurer,
    load_font,
)
from translation_overlay.render import (
    BACKGROUND_FILL,
    encode_png_base64,
    render_instructions,
    render_overlay_png,
)


def test_fonts_are_cached():
    assert load_font(None, 20) is load_font(None, 20)


def test_pillow_measurer_grows_with_text():
    measurer = PillowTextMeasurer(load_font(None, 20))

    assert 0 < measurer.measure("abc") < measurer.measure("abcabc")
    assert measurer.measure("") == 0


def test_approximate_measurer():
    assert ApproximateTextMeasurer(font_size=20).measure("abcd") == 4 * 20 * 0.65


def test_build_measurer_uses_line_height_font():
    measurer = build_measurer(OverlaySettings(text_measure="font"))

    assert isinstance(measurer, PillowTextMeasurer)
    assert measurer.font is load_font(None, 56)


def test_build_measurer_can_estimate():
    measurer = build_measurer(OverlaySettings(text_measure="approximate", line_height=20))

    assert isinstance(measurer, ApproximateTextMeasurer)
    assert measurer.measure("abcd") == 4 * 20 * 0.65


def test_build_measurer_estimates_without_scalable_default(monkeypatch):
    monkeypatch.setattr(measure, "load_font", lambda path, size: object())

    measurer = build_measurer(OverlaySettings(text_measure="font"))

    assert isinstance(measurer, ApproximateTextMeasurer)
    assert measurer.font_size == 56


def test_background_rect_is_painted():
    instructions = [{"background_rect": {"x": 10, "y": 10, "w": 30, "h": 20}, "lines": []}]

    image = render_instructions(instructions, (100, 60), load_font(None, 20))

    assert image.mode == "RGBA"
    assert image.getpixel((20, 20)) == BACKGROUND_FILL
    assert image.getpixel((80, 50)) == (0, 0, 0, 0)


def test_negative_extents_are_normalized():
    instructions = [{"background_rect": {"x": 40, "y": 40, "w": -30, "h": -20}, "lines": []}]

    image = render_instructions(instructions, (100, 60), load_font(None, 20))

    assert image.getpixel((20, 30)) == BACKGROUND_FILL


def test_text_lines_are_drawn():
    instructions = [
        {
            "background_rect": None,
            "lines": [
                {
                    "text": "Hello",
                    "x": 30,
                    "y": 100,
                    "background": {"x": 10, "y": 20, "w": 0, "h": 0},
                }
            ],
        }
    ]

    image = render_instructions(instructions, (300, 140), load_font(None, 48))

    assert image.getbbox() is not None
    colors = image.getcolors(image.width * image.height)
    assert any(color[:3] == (0, 255, 255) for _, color in colors)


def test_png_round_trip():
    settings = OverlaySettings(output_width=64, output_height=40)

    encoded = render_overlay_png([], settings)

    with Image.open(io.BytesIO(base64.b64decode(encoded))) as im:
        assert im.size == (64, 40)
        assert im.format == "PNG"
    assert encode_png_base64(Image.new("RGBA", (1, 1)))
