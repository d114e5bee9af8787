from __future__ import annotations

import logging
import random

from character_creator.components.character import (
    CharacterColourPart,
    CharacterConfig,
    CharacterPart,
)
from character_creator.events.bus import EVENT_CHARACTER_CONFIG_CHANGED, EventBus
from character_creator.state.character_config import (
    AvailablePartIds,
    Palettes,
    parse_stored_config,
    serialize_config,
)
from character_creator.state.outcome import Outcome
from character_creator.state.palettes import PALETTES
from character_creator.state.reducer import (
    CharacterAction,
    CycleColour,
    CyclePart,
    RandomizeConfig,
    RandomizeParts,
    ResetConfig,
    SetColour,
    SetPart,
    create_character_reducer,
)
from character_creator.state.storage import LoadFn, SaveFn

log = logging.getLogger(__name__)


class CharacterConfigStore:
    """Single owner of the live character config for one session.

    Loads and clamps the persisted config on construction, applies reducer actions,
    writes every new snapshot through ``save`` and announces it on the event bus.
    Snapshots are immutable, so readers never observe a half-applied change.
    """

    def __init__(
        self,
        available: AvailablePartIds,
        *,
        load: LoadFn,
        save: SaveFn,
        event_bus: EventBus | None = None,
        palettes: Palettes = PALETTES,
        rng: random.Random | None = None,
    ) -> None:
        self._available = available
        self._save = save
        self._event_bus = event_bus
        self._reducer = create_character_reducer(available, palettes=palettes, rng=rng)
        self._load_outcome: Outcome[CharacterConfig] = parse_stored_config(self._read(load), available, palettes)
        self._config = self._load_outcome.value
        self._persist()

    @property
    def config(self) -> CharacterConfig:
        return self._config

    @property
    def available(self) -> AvailablePartIds:
        return self._available

    @property
    def load_outcome(self) -> Outcome[CharacterConfig]:
        """How the initial config was obtained (issues list any fallback taken)."""
        return self._load_outcome

    def dispatch(self, action: CharacterAction) -> CharacterConfig:
        next_config = self._reducer(self._config, action)
        self._config = next_config
        self._persist()
        if self._event_bus is not None:
            self._event_bus.emit(EVENT_CHARACTER_CONFIG_CHANGED, config=next_config, action=action)
        return next_config

    # Consumer API ----------------------------------------------------------

    def set_part_id(self, part: CharacterPart, option_id: str) -> CharacterConfig:
        return self.dispatch(SetPart(part=part, id=option_id))

    def next_part(self, part: CharacterPart) -> CharacterConfig:
        return self.dispatch(CyclePart(part=part, dir=1))

    def prev_part(self, part: CharacterPart) -> CharacterConfig:
        return self.dispatch(CyclePart(part=part, dir=-1))

    def set_colour_index(self, part: CharacterColourPart, index: int) -> CharacterConfig:
        return self.dispatch(SetColour(part=part, index=index))

    def next_colour(self, part: CharacterColourPart) -> CharacterConfig:
        return self.dispatch(CycleColour(part=part, dir=1))

    def prev_colour(self, part: CharacterColourPart) -> CharacterConfig:
        return self.dispatch(CycleColour(part=part, dir=-1))

    def randomize_config(self) -> CharacterConfig:
        return self.dispatch(RandomizeConfig())

    def randomize_parts(self) -> CharacterConfig:
        return self.dispatch(RandomizeParts())

    def reset(self) -> CharacterConfig:
        return self.dispatch(ResetConfig())

    # Persistence -----------------------------------------------------------

    @staticmethod
    def _read(load: LoadFn) -> str | None:
        try:
            return load()
        except OSError as exc:
            log.warning("Could not read saved character config: %s", exc)
            return None

    def _persist(self) -> None:
        try:
            self._save(serialize_config(self._config))
        except OSError as exc:
            # Write-through is best effort; the in-memory snapshot stays authoritative.
            log.warning("Could not persist character config: %s", exc)
