"""Turn a character config into the ordered stack of layers to draw."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Literal, Mapping, Sequence, TypeVar, Union

from character_creator.assets.character_assets import CharacterAssets
from character_creator.components.character import CharacterConfig, CharacterOption, LayeredAsset
from character_creator.state.outcome import Outcome
from character_creator.state.palettes import PALETTES

log = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class LayeredLayer:
    """Bg recoloured through its own alpha mask, outline drawn on top."""
    key: str
    bg: Any
    outline: Any
    colour: str
    alt_prefix: str
    kind: Literal["layered"] = "layered"


@dataclass(frozen=True, slots=True)
class SingleLayer:
    """Image drawn verbatim."""
    key: str
    src: Any
    alt: str
    kind: Literal["single"] = "single"


RenderLayer = Union[LayeredLayer, SingleLayer]


def pick_by_id(options: Sequence[CharacterOption[T]], option_id: str) -> Outcome[CharacterOption[T] | None]:
    """Option matching ``option_id``, else the first option; never raises on stale ids."""
    for option in options:
        if option.id == option_id:
            return Outcome(option)
    if not options:
        return Outcome(None, (f"no options to pick {option_id!r} from",))
    return Outcome(options[0], (f"unknown id {option_id!r}, using {options[0].id!r}",))


def _palette_colour(palette: Sequence[str], index: int) -> str:
    if not palette:
        return "#000000"
    return palette[index] if 0 <= index < len(palette) else palette[0]


def _layered(key: str, option: CharacterOption[LayeredAsset] | None, colour: str) -> LayeredLayer | None:
    if option is None:
        log.debug("No %s asset available; layer omitted", key)
        return None
    return LayeredLayer(key=key, bg=option.value.bg, outline=option.value.outline, colour=colour, alt_prefix=key)


def _single(key: str, option: CharacterOption[Any] | None) -> SingleLayer | None:
    if option is None:
        log.debug("No %s asset available; layer omitted", key)
        return None
    return SingleLayer(key=key, src=option.value, alt=key)


def build_character_layers(
    config: CharacterConfig,
    assets: CharacterAssets,
    palettes: Mapping[str, Sequence[str]] = PALETTES,
) -> List[RenderLayer]:
    """Layers back to front: legs, bottom, top, arms, head, eyes, mouth, hair.

    Body parts and head use the first idle frame. Slots whose catalog is empty are
    left out.
    """
    skin = _palette_colour(palettes["skin"], config.colour("skin"))
    hair_colour = _palette_colour(palettes["hair"], config.colour("hair"))
    top_colour = _palette_colour(palettes["top"], config.colour("top"))
    bottom_colour = _palette_colour(palettes["bottom"], config.colour("bottom"))

    def first_frame(frames: Sequence[CharacterOption[LayeredAsset]]) -> CharacterOption[LayeredAsset] | None:
        return frames[0] if frames else None

    idle = assets.body_idle
    layers = [
        _layered("legs", first_frame(idle.legs), skin),
        _layered("bottom", first_frame(idle.bottom), bottom_colour),
        _layered("top", first_frame(idle.top), top_colour),
        _layered("arms", first_frame(idle.arms), skin),
        _layered("head", first_frame(assets.head), skin),
        _single("eyes", pick_by_id(assets.eyes, config.part("eyes")).value),
        _single("mouth", pick_by_id(assets.mouth, config.part("mouth")).value),
        _layered("hair", pick_by_id(assets.hair, config.part("hair")).value, hair_colour),
    ]
    return [layer for layer in layers if layer is not None]
