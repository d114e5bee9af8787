"""Pure state transitions for the character config."""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, ClassVar, Union

from character_creator.components.character import (
    CHARACTER_PARTS,
    COLOUR_PARTS,
    DEFAULT_CHARACTER_CONFIG,
    CharacterColourPart,
    CharacterConfig,
    CharacterPart,
)
from character_creator.state.character_config import (
    AvailablePartIds,
    Palettes,
    clamp_config_to_available_options,
    clamp_parts_only,
)
from character_creator.state.palettes import PALETTES
from character_creator.state.selector_utils import cycle_id, random_from, random_index, wrap_index


@dataclass(frozen=True, slots=True)
class SetPart:
    type: ClassVar[str] = "part/set"
    part: CharacterPart
    id: str


@dataclass(frozen=True, slots=True)
class CyclePart:
    type: ClassVar[str] = "part/cycle"
    part: CharacterPart
    dir: int  # +1 or -1


@dataclass(frozen=True, slots=True)
class SetColour:
    type: ClassVar[str] = "colour/set"
    part: CharacterColourPart
    index: int


@dataclass(frozen=True, slots=True)
class CycleColour:
    type: ClassVar[str] = "colour/cycle"
    part: CharacterColourPart
    dir: int


@dataclass(frozen=True, slots=True)
class RandomizeConfig:
    type: ClassVar[str] = "config/randomize"


@dataclass(frozen=True, slots=True)
class RandomizeParts:
    type: ClassVar[str] = "parts/randomize"


@dataclass(frozen=True, slots=True)
class ResetConfig:
    type: ClassVar[str] = "config/reset"


CharacterAction = Union[SetPart, CyclePart, SetColour, CycleColour, RandomizeConfig, RandomizeParts, ResetConfig]
CharacterReducer = Callable[[CharacterConfig, CharacterAction], CharacterConfig]


def randomize_parts(state: CharacterConfig, available: AvailablePartIds, rng: random.Random) -> CharacterConfig:
    """Pick a random id for every part with options; parts without options keep their id."""
    next_state = state
    for part in CHARACTER_PARTS:
        choice = random_from(available.get(part) or (), rng)
        if choice is not None:
            next_state = next_state.with_part(part, choice)
    return next_state


def randomize_colours(state: CharacterConfig, palettes: Palettes, rng: random.Random) -> CharacterConfig:
    next_state = state
    for part in COLOUR_PARTS:
        index = random_index(len(palettes.get(part, ())), rng)
        if index is not None:
            next_state = next_state.with_colour(part, index)
    return next_state


def create_character_reducer(
    available: AvailablePartIds,
    *,
    palettes: Palettes = PALETTES,
    rng: random.Random | None = None,
) -> CharacterReducer:
    """Build a reducer bound to the current catalog ids and palettes.

    Every result passes through a part-only clamp, so transitions never leave a part
    id the catalog does not know about (unless that catalog is empty).
    """
    rng = rng or random.Random()

    def reducer(state: CharacterConfig, action: CharacterAction) -> CharacterConfig:
        match action:
            case SetPart(part=part, id=option_id):
                next_state = state.with_part(part, option_id)
            case CyclePart(part=part, dir=direction):
                ids = available.get(part) or []
                next_state = state.with_part(part, cycle_id(ids, state.part(part), direction))
            case SetColour(part=part, index=index):
                length = len(palettes.get(part, ()))
                safe = 0 if length <= 0 else max(0, min(index, length - 1))
                next_state = state.with_colour(part, safe)
            case CycleColour(part=part, dir=direction):
                length = len(palettes.get(part, ()))
                next_state = state.with_colour(part, wrap_index(state.colour(part) + direction, length))
            case RandomizeConfig():
                next_state = randomize_colours(randomize_parts(state, available, rng), palettes, rng)
            case RandomizeParts():
                next_state = randomize_parts(state, available, rng)
            case ResetConfig():
                next_state = clamp_config_to_available_options(DEFAULT_CHARACTER_CONFIG, available, palettes)
            case _:
                next_state = state
        # Saved ids must stay valid even if assets changed between sessions.
        return clamp_parts_only(next_state, available)

    return reducer
