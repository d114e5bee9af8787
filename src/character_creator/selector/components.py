"""Components used by the character selector panel."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Literal


class SelectorAction(Enum):
    """Actions that a selector button can trigger."""
    PREV = auto()
    NEXT = auto()
    RANDOMIZE = auto()
    RESET = auto()


SelectorTargetKind = Literal["part", "colour", "config"]


@dataclass
class SelectorButton:
    """Clickable button; ``x``/``y`` are the button centre."""
    label: str
    action: SelectorAction
    target_kind: SelectorTargetKind
    target: str
    x: float
    y: float
    width: float = 70.0
    height: float = 34.0


@dataclass
class SelectorRow:
    """Row caption with the store target it edits."""
    label: str
    target_kind: SelectorTargetKind
    target: str
    x: float
    y: float


@dataclass
class SelectorTag:
    """Marker component so selector entities can be cleaned up together."""
    pass
