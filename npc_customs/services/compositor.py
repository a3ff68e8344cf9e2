"""Image compositor - stacks trait layers around the base template."""

from io import BytesIO

from PIL import Image

from ..errors import ImageCompositionError

CANVAS_SIZE = (1000, 1000)


def composite_layers(layers: list[Image.Image], base: Image.Image) -> bytes:
    """
    Composite trait layers into one PNG.

    Stacking order, bottom to top:
    1. First trait layer (the background)
    2. Base template
    3. Remaining trait layers, in order

    Layers are drawn at the origin without scaling (source-over).

    Raises:
        ImageCompositionError: No trait layers
    """
    if not layers:
        raise ImageCompositionError("No layers to composite")

    canvas = Image.new("RGBA", CANVAS_SIZE, (0, 0, 0, 0))
    for layer in [layers[0], base, *layers[1:]]:
        canvas = Image.alpha_composite(canvas, _fit_to_canvas(layer))

    output = BytesIO()
    canvas.save(output, format="PNG")
    return output.getvalue()


def _fit_to_canvas(layer: Image.Image) -> Image.Image:
    """Clip or pad a layer to the canvas, anchored at (0, 0)."""
    if layer.mode != "RGBA":
        layer = layer.convert("RGBA")
    if layer.size != CANVAS_SIZE:
        layer = layer.crop((0, 0) + CANVAS_SIZE)
    return layer
