from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Generic, Literal, TypeVar

T = TypeVar("T")

CharacterPart = Literal["hair", "eyes", "mouth"]
CharacterColourPart = Literal["skin", "hair", "top", "bottom"]

CHARACTER_PARTS: tuple[CharacterPart, ...] = ("hair", "eyes", "mouth")
COLOUR_PARTS: tuple[CharacterColourPart, ...] = ("skin", "hair", "top", "bottom")


@dataclass(frozen=True, slots=True)
class LayeredAsset:
    """Both halves of one paired visual element: tintable bg mask plus fixed outline."""
    outline: Any
    bg: Any


@dataclass(frozen=True, slots=True)
class CharacterOption(Generic[T]):
    """Catalog entry keeping the stable id beside its renderable payload."""
    id: str
    value: T


@dataclass(frozen=True, slots=True)
class CharacterParts:
    hair: str
    eyes: str
    mouth: str


@dataclass(frozen=True, slots=True)
class CharacterColours:
    skin: int = 0
    hair: int = 0
    top: int = 0  # shirt
    bottom: int = 0  # shorts


@dataclass(frozen=True, slots=True)
class CharacterConfig:
    """Persisted character selections.

    Part ids are stable asset keys so saves survive catalog reordering. Colours are
    palette indices. Instances are never mutated; ``with_part``/``with_colour`` return
    a new snapshot.
    """
    parts: CharacterParts
    colours: CharacterColours = field(default_factory=CharacterColours)

    def part(self, part: CharacterPart) -> str:
        return getattr(self.parts, part)

    def colour(self, part: CharacterColourPart) -> int:
        return getattr(self.colours, part)

    def with_part(self, part: CharacterPart, option_id: str) -> "CharacterConfig":
        return replace(self, parts=replace(self.parts, **{part: option_id}))

    def with_colour(self, part: CharacterColourPart, index: int) -> "CharacterConfig":
        return replace(self, colours=replace(self.colours, **{part: index}))

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {
            "parts": {name: self.part(name) for name in CHARACTER_PARTS},
            "colours": {name: self.colour(name) for name in COLOUR_PARTS},
        }


DEFAULT_CHARACTER_CONFIG = CharacterConfig(
    parts=CharacterParts(hair="hair_0_0", eyes="eyes0", mouth="mouth0"),
    colours=CharacterColours(skin=0, hair=0, top=0, bottom=0),
)
