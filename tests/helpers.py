from __future__ import annotations

import random
from pathlib import Path
from typing import Iterable, Sequence

from esper import World
from PIL import Image

from character_creator.assets.character_assets import BodyFrames, CharacterAssets
from character_creator.components.character import CharacterOption, LayeredAsset
from character_creator.events.bus import EventBus
from character_creator.state.storage import KeyValueStorage
from character_creator.world import create_world

ROOT = "/project/assets/character"


def asset_path(folder: str, name: str, root: str = ROOT) -> str:
    return f"{root}/{folder}/{name}"


def files_for(folder: str, names: Iterable[str], root: str = ROOT) -> dict[str, str]:
    """Inventory mapping where each resource is just its own path."""
    return {asset_path(folder, name, root): asset_path(folder, name, root) for name in names}


def solid_image(colour: tuple[int, int, int, int], size: tuple[int, int] = (4, 4)) -> Image.Image:
    return Image.new("RGBA", size, colour)


def write_png(path: Path, colour: tuple[int, int, int, int] = (255, 255, 255, 255), size: tuple[int, int] = (4, 4)) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    solid_image(colour, size).save(path)
    return path


def layered_option(option_id: str, *, outline=None, bg=None) -> CharacterOption[LayeredAsset]:
    return CharacterOption(
        id=option_id,
        value=LayeredAsset(
            outline=outline if outline is not None else f"{option_id}_outline",
            bg=bg if bg is not None else f"{option_id}_bg",
        ),
    )


def make_assets(
    hair: Sequence[str] = ("hair_0_0", "hair_1_0"),
    eyes: Sequence[str] = ("eyes0", "eyes1"),
    mouth: Sequence[str] = ("mouth0", "mouth1"),
    *,
    with_body: bool = True,
) -> CharacterAssets:
    """Catalog with string resources; enough for config and layer tests."""
    body_idle = BodyFrames()
    head: tuple = ()
    if with_body:
        body_idle = BodyFrames(
            arms=(layered_option("body_idle_arms_0"),),
            legs=(layered_option("body_idle_legs_0"),),
            top=(layered_option("body_idle_top_0"),),
            bottom=(layered_option("body_idle_bottom_0"),),
        )
        head = (layered_option("head_base_0"),)
    return CharacterAssets(
        head=head,
        hair=tuple(layered_option(option_id) for option_id in hair),
        body=body_idle.arms + body_idle.legs + body_idle.top + body_idle.bottom,
        eyes=tuple(CharacterOption(id=option_id, value=f"{option_id}.png") for option_id in eyes),
        mouth=tuple(CharacterOption(id=option_id, value=f"{option_id}.png") for option_id in mouth),
        body_idle=body_idle,
    )


def build_session_world(
    assets: CharacterAssets | None = None,
    *,
    storage: KeyValueStorage | None = None,
    seed: int = 1234,
) -> tuple[World, EventBus]:
    bus = EventBus()
    world = create_world(bus, assets or make_assets(), storage=storage, rng=random.Random(seed))
    return world, bus
