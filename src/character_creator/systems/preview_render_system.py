"""Keeps the on-screen character preview in sync with the config store."""
from __future__ import annotations

import logging

from esper import World
from PIL import Image

from character_creator.constants import PIXEL_SCALE, PREVIEW_LEFT_MARGIN, PREVIEW_SIZE
from character_creator.events.bus import EVENT_CHARACTER_CONFIG_CHANGED, EventBus
from character_creator.rendering.compositor import render_character
from character_creator.rendering.layers import build_character_layers
from character_creator.rendering.sprite_cache import SpriteCache
from character_creator.state.character_config import serialize_config
from character_creator.world import get_session

log = logging.getLogger(__name__)


class PreviewRenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window, sprite_cache: SpriteCache | None = None):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.sprite_cache = sprite_cache or SpriteCache()
        self.event_bus.subscribe(EVENT_CHARACTER_CONFIG_CHANGED, self.on_config_changed)
        self._dirty = True
        self._composite: Image.Image | None = None
        self._composite_key: str | None = None

    @property
    def composite(self) -> Image.Image | None:
        return self._composite

    @property
    def dirty(self) -> bool:
        return self._dirty

    def on_config_changed(self, sender, **kwargs):
        self._dirty = True

    def rebuild(self) -> Image.Image:
        """Recompose the preview image from the current config snapshot."""
        session = get_session(self.world)
        config = session.store.config
        layers = build_character_layers(config, session.assets)
        self._composite = render_character(layers, self.sprite_cache.load_image, (PREVIEW_SIZE, PREVIEW_SIZE))
        self._composite_key = serialize_config(config)
        self._dirty = False
        log.debug("Preview rebuilt with %d layers", len(layers))
        return self._composite

    def preview_center(self) -> tuple[float, float]:
        half = PREVIEW_SIZE * PIXEL_SCALE / 2
        return PREVIEW_LEFT_MARGIN + half, self.window.height / 2

    def process(self) -> None:
        # Local import keeps tests headless without creating a window.
        import arcade

        self.render(arcade)

    def render(self, arcade_module) -> None:
        composite = self._composite
        if self._dirty or composite is None or self._composite_key is None:
            composite = self.rebuild()
        sprite = self.sprite_cache.ensure_preview_sprite(arcade_module, self._composite_key, composite)
        center_x, center_y = self.preview_center()
        self.sprite_cache.update_sprite_visuals(sprite, center_x, center_y, PIXEL_SCALE)
        self.sprite_cache.draw_preview_sprites()
