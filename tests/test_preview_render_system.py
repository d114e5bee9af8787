import random
from types import SimpleNamespace

import pytest

from character_creator.assets.character_assets import load_character_assets_from_dir
from character_creator.constants import PIXEL_SCALE, PREVIEW_LEFT_MARGIN, PREVIEW_SIZE
from character_creator.events.bus import EventBus
from character_creator.rendering.sprite_cache import SpriteCache
from character_creator.state.palettes import HAIR_COLOURS, hex_to_rgb
from character_creator.systems.preview_render_system import PreviewRenderSystem
from character_creator.world import create_world, get_config_store

from helpers import write_png

CLEAR = (0, 0, 0, 0)
OPAQUE = (255, 255, 255, 255)


class _StubSprite:
    def __init__(self, texture):
        self.texture = texture
        self.center_x = 0.0
        self.center_y = 0.0
        self.scale = 1.0
        self.removed = False

    def remove_from_sprite_lists(self):
        self.removed = True


class _StubSpriteList(list):
    def __init__(self):
        super().__init__()
        self.draw_calls = []

    def draw(self, *, pixelated=False):
        self.draw_calls.append(pixelated)


class _StubTexture:
    def __init__(self, image, hash=None):
        self.image = image
        self.hash = hash


def _headless_arcade():
    return SimpleNamespace(Sprite=_StubSprite, SpriteList=_StubSpriteList, Texture=_StubTexture)


@pytest.fixture
def preview(tmp_path):
    asset_dir = tmp_path / "assets" / "character"
    # Only the hair bg is opaque, so the centre pixel shows the hair colour.
    for name in ("hair_0_0_bg.png", "hair_1_0_bg.png"):
        write_png(asset_dir / "hair" / name, OPAQUE, (8, 8))
    for name in ("hair_0_0_outline.png", "hair_1_0_outline.png"):
        write_png(asset_dir / "hair" / name, CLEAR, (8, 8))
    write_png(asset_dir / "eyes" / "eyes0.png", CLEAR, (8, 8))
    write_png(asset_dir / "mouth" / "mouth0.png", CLEAR, (8, 8))

    bus = EventBus()
    assets = load_character_assets_from_dir(asset_dir, report=False)
    world = create_world(bus, assets, rng=random.Random(3))
    window = SimpleNamespace(width=800, height=600)
    system = PreviewRenderSystem(world, bus, window, SpriteCache())
    return system, world


def _centre(image):
    return image.getpixel((PREVIEW_SIZE // 2, PREVIEW_SIZE // 2))


def test_preview_renders_composite_at_pixel_scale(preview):
    system, _ = preview
    arcade = _headless_arcade()

    system.render(arcade)

    assert system.composite.size == (PREVIEW_SIZE, PREVIEW_SIZE)
    assert _centre(system.composite) == (*hex_to_rgb(HAIR_COLOURS[0]), 255)
    sprite = system.sprite_cache.ensure_preview_sprite(arcade, system._composite_key, system.composite)
    assert sprite.scale == PIXEL_SCALE
    assert sprite.center_x == PREVIEW_LEFT_MARGIN + PREVIEW_SIZE * PIXEL_SCALE / 2
    assert sprite.center_y == 300
    assert sprite.texture.image is system.composite


def test_preview_reuses_sprite_until_config_changes(preview):
    system, world = preview
    arcade = _headless_arcade()

    system.render(arcade)
    first = system.composite
    system.render(arcade)
    assert system.composite is first
    assert not system.dirty

    get_config_store(world).next_colour("hair")
    assert system.dirty
    system.render(arcade)

    assert system.composite is not first
    assert _centre(system.composite) == (*hex_to_rgb(HAIR_COLOURS[1]), 255)


def test_preview_replaces_old_sprite(preview):
    system, world = preview
    arcade = _headless_arcade()

    system.render(arcade)
    old_sprite = system.sprite_cache.ensure_preview_sprite(arcade, system._composite_key, system.composite)

    get_config_store(world).next_part("hair")
    system.render(arcade)

    assert old_sprite.removed
    assert system.sprite_cache._preview_sprites.draw_calls == [True, True]


def test_sprite_cache_decodes_each_path_once(tmp_path):
    path = write_png(tmp_path / "eyes0.png", OPAQUE)
    cache = SpriteCache()

    first = cache.load_image(path)
    second = cache.load_image(path)

    assert first is second
    assert first.mode == "RGBA"
    cache.clear_images()
    assert cache.load_image(path) is not first


def test_render_uses_composite_from_explicit_rebuild(preview):
    system, _ = preview
    arcade = _headless_arcade()

    rebuilt = system.rebuild()
    system.render(arcade)

    assert system.composite is rebuilt
    sprite = system.sprite_cache.ensure_preview_sprite(arcade, system._composite_key, rebuilt)
    assert sprite.texture.image is rebuilt
