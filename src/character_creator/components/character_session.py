from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from character_creator.assets.character_assets import CharacterAssets
    from character_creator.state.config_store import CharacterConfigStore


@dataclass(slots=True)
class CharacterSession:
    """Singleton component owning the live character config store and asset catalog.

    Exactly one session entity exists per world; renderers and selector systems read
    the store through it instead of through module-level state.
    """
    store: "CharacterConfigStore"
    assets: "CharacterAssets"
