from io import BytesIO

import pytest
from PIL import Image

from npc_customs.errors import ImageCompositionError
from npc_customs.services.compositor import CANVAS_SIZE, composite_layers

from conftest import BLUE, GREEN, RED, TRANSPARENT, YELLOW, make_layer


def decode(png: bytes) -> Image.Image:
    return Image.open(BytesIO(png))


class TestCompositeLayers:

    def test_output_is_canvas_sized_png(self):
        png = composite_layers([make_layer(RED)], make_layer(GREEN, (0, 0, 10, 10)))

        img = decode(png)
        assert img.format == "PNG"
        assert img.size == CANVAS_SIZE

    def test_base_sits_between_first_and_remaining_layers(self):
        background = make_layer(RED)
        base = make_layer(GREEN, (0, 0, 600, 600))
        top = make_layer(BLUE, (500, 500, 1000, 1000))

        img = decode(composite_layers([background, top], base)).convert("RGBA")

        assert img.getpixel((100, 100)) == GREEN   # base over background
        assert img.getpixel((550, 550)) == BLUE    # top layer over base
        assert img.getpixel((900, 100)) == RED     # background only

    def test_later_layers_paint_over_earlier_ones(self):
        layers = [
            make_layer(RED),
            make_layer(BLUE, (0, 0, 500, 500)),
            make_layer(YELLOW, (250, 250, 750, 750)),
        ]

        img = decode(composite_layers(layers, make_layer(TRANSPARENT))).convert("RGBA")

        assert img.getpixel((100, 100)) == BLUE
        assert img.getpixel((300, 300)) == YELLOW
        assert img.getpixel((900, 900)) == RED

    def test_single_layer_is_drawn_under_base(self):
        img = decode(composite_layers([make_layer(RED)], make_layer(GREEN, (0, 0, 100, 100)))).convert("RGBA")

        assert img.getpixel((50, 50)) == GREEN
        assert img.getpixel((500, 500)) == RED

    def test_semi_transparent_layer_blends(self):
        half_blue = (0, 0, 255, 128)

        img = decode(composite_layers(
            [make_layer((255, 255, 255, 255)), make_layer(half_blue)],
            make_layer(TRANSPARENT),
        )).convert("RGBA")

        r, g, b, a = img.getpixel((10, 10))
        assert a == 255
        assert b == 255
        assert 120 <= r <= 135

    def test_layers_are_not_scaled(self):
        small = Image.new("RGBA", (100, 100), BLUE)

        img = decode(composite_layers([make_layer(RED), small], make_layer(TRANSPARENT))).convert("RGBA")

        assert img.size == CANVAS_SIZE
        assert img.getpixel((50, 50)) == BLUE
        assert img.getpixel((150, 150)) == RED

    def test_inputs_are_not_modified(self):
        background = make_layer(RED)
        base = make_layer(GREEN, (0, 0, 100, 100))

        composite_layers([background], base)

        assert background.getpixel((50, 50)) == RED
        assert base.getpixel((500, 500)) == TRANSPARENT

    def test_empty_layer_list_fails(self):
        with pytest.raises(ImageCompositionError):
            composite_layers([], make_layer(GREEN))

    def test_same_inputs_give_same_pixels(self):
        layers = [make_layer(RED), make_layer(BLUE, (10, 10, 300, 300))]
        base = make_layer(GREEN, (100, 100, 200, 900))

        first = decode(composite_layers(layers, base))
        second = decode(composite_layers(layers, base))

        assert first.size == second.size
        assert first.tobytes() == second.tobytes()
