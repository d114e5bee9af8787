"""Pillow compositing of render layers into a single RGBA sprite."""
from __future__ import annotations

from typing import Any, Callable, Iterable, Tuple

from PIL import Image

from character_creator.rendering.layers import LayeredLayer, RenderLayer, SingleLayer
from character_creator.state.palettes import hex_to_rgb

ImageLoader = Callable[[Any], Image.Image]


def tint_mask(mask: Image.Image, colour: str) -> Image.Image:
    """Solid ``colour`` shown only where ``mask`` is opaque (CSS mask-image equivalent)."""
    mask = mask.convert("RGBA")
    tinted = Image.new("RGBA", mask.size, (*hex_to_rgb(colour), 255))
    tinted.putalpha(mask.getchannel("A"))
    return tinted


def _fit(image: Image.Image, size: Tuple[int, int]) -> Image.Image:
    image = image.convert("RGBA")
    if image.size != size:
        # Nearest keeps pixel art edges hard.
        image = image.resize(size, Image.Resampling.NEAREST)
    return image


def render_character(
    layers: Iterable[RenderLayer],
    load_image: ImageLoader,
    size: Tuple[int, int],
) -> Image.Image:
    canvas = Image.new("RGBA", size, (0, 0, 0, 0))
    for layer in layers:
        match layer:
            case LayeredLayer(bg=bg, outline=outline, colour=colour):
                canvas.alpha_composite(tint_mask(_fit(load_image(bg), size), colour))
                canvas.alpha_composite(_fit(load_image(outline), size))
            case SingleLayer(src=src):
                canvas.alpha_composite(_fit(load_image(src), size))
            case _:
                raise TypeError(f"Unsupported render layer: {layer!r}")
    return canvas

