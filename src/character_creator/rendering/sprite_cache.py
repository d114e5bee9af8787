from __future__ import annotations

from pathlib import Path
from typing import Any

from PIL import Image


class SpriteCache:
    """Caches decoded asset images and the arcade sprite showing the composite."""

    def __init__(self):
        self._image_cache: dict[str, Image.Image] = {}
        self._preview_sprites: Any | None = None
        self._preview_sprite: Any | None = None
        self._preview_key: str | None = None

    # ------------------------------------------------------------------
    # Source images
    # ------------------------------------------------------------------
    def load_image(self, resource: Any) -> Image.Image:
        """Decode an asset once; the resource may be a path or an already decoded image."""
        if isinstance(resource, Image.Image):
            return resource
        key = str(resource)
        cached = self._image_cache.get(key)
        if cached is not None:
            return cached
        with Image.open(Path(resource)) as img:
            image = img.convert("RGBA")
        self._image_cache[key] = image
        return image

    def clear_images(self) -> None:
        self._image_cache.clear()

    # ------------------------------------------------------------------
    # Preview sprite (one composite at a time)
    # ------------------------------------------------------------------
    def ensure_preview_sprite(self, arcade_module, key: str, image: Image.Image):
        preview_list = self._preview_sprites
        if preview_list is None:
            preview_list = arcade_module.SpriteList()
            self._preview_sprites = preview_list
        if self._preview_sprite is not None and self._preview_key == key:
            return self._preview_sprite
        self.remove_preview_sprite()
        texture = arcade_module.Texture(image, hash=f"character:{key}")
        sprite = arcade_module.Sprite(texture)
        self._preview_sprite = sprite
        self._preview_key = key
        preview_list.append(sprite)
        return sprite

    def remove_preview_sprite(self) -> None:
        sprite = self._preview_sprite
        self._preview_sprite = None
        self._preview_key = None
        if sprite is not None:
            sprite.remove_from_sprite_lists()

    def draw_preview_sprites(self) -> None:
        if self._preview_sprites is not None:
            self._preview_sprites.draw(pixelated=True)

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------
    def update_sprite_visuals(self, sprite, center_x: float, center_y: float, scale: float) -> None:
        sprite.center_x = center_x
        sprite.center_y = center_y
        sprite.scale = scale
