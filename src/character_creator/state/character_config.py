"""Character config validation, clamping and (de)serialization."""
from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Sequence

from character_creator.components.character import (
    CHARACTER_PARTS,
    COLOUR_PARTS,
    DEFAULT_CHARACTER_CONFIG,
    CharacterColours,
    CharacterConfig,
    CharacterParts,
)
from character_creator.state.outcome import Outcome
from character_creator.state.palettes import PALETTES

log = logging.getLogger(__name__)

AvailablePartIds = Mapping[str, Sequence[str]]
Palettes = Mapping[str, Sequence[str]]


def safe_part_id(available: AvailablePartIds, part: str, option_id: str) -> str:
    ids = available.get(part)
    # Nothing to validate against: trust the stored id.
    if not ids:
        return option_id
    return option_id if option_id in ids else ids[0]


def safe_colour_index(index: int, length: int) -> int:
    if length <= 0:
        return 0
    return index if 0 <= index < length else 0


def clamp_parts_only(config: CharacterConfig, available: AvailablePartIds) -> CharacterConfig:
    parts = CharacterParts(**{
        part: safe_part_id(available, part, config.part(part)) for part in CHARACTER_PARTS
    })
    if parts == config.parts:
        return config
    return CharacterConfig(parts=parts, colours=config.colours)


def clamp_config_with_report(
    config: CharacterConfig,
    available: AvailablePartIds,
    palettes: Palettes = PALETTES,
) -> Outcome[CharacterConfig]:
    """Repair stale part ids and out-of-range colour indices.

    Each repaired field is listed in the outcome's issues. Reapplying to the result
    changes nothing.
    """
    issues: list[str] = []
    parts: dict[str, str] = {}
    for part in CHARACTER_PARTS:
        current = config.part(part)
        parts[part] = safe_part_id(available, part, current)
        if parts[part] != current:
            issues.append(f"part {part}: {current!r} -> {parts[part]!r}")

    colours: dict[str, int] = {}
    for part in COLOUR_PARTS:
        current = config.colour(part)
        colours[part] = safe_colour_index(current, len(palettes.get(part, ())))
        if colours[part] != current:
            issues.append(f"colour {part}: {current} -> {colours[part]}")

    if not issues:
        return Outcome(config)
    clamped = CharacterConfig(parts=CharacterParts(**parts), colours=CharacterColours(**colours))
    return Outcome(clamped, tuple(issues))


def clamp_config_to_available_options(
    config: CharacterConfig,
    available: AvailablePartIds,
    palettes: Palettes = PALETTES,
) -> CharacterConfig:
    return clamp_config_with_report(config, available, palettes).value


def config_from_dict(payload: Any) -> CharacterConfig:
    """Build a config from decoded JSON, filling absent fields from the defaults.

    Raises ``ValueError`` when the payload has the wrong shape or types.
    """
    if not isinstance(payload, Mapping):
        raise ValueError("config payload must be an object")
    raw_parts = payload.get("parts", {})
    raw_colours = payload.get("colours", {})
    if not isinstance(raw_parts, Mapping) or not isinstance(raw_colours, Mapping):
        raise ValueError("'parts' and 'colours' must be objects")

    parts: dict[str, str] = {}
    for part in CHARACTER_PARTS:
        value = raw_parts.get(part, DEFAULT_CHARACTER_CONFIG.part(part))
        if not isinstance(value, str):
            raise ValueError(f"part {part!r} must be a string id")
        parts[part] = value

    colours: dict[str, int] = {}
    for part in COLOUR_PARTS:
        value = raw_colours.get(part, DEFAULT_CHARACTER_CONFIG.colour(part))
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"colour {part!r} must be an integer index")
        colours[part] = value

    return CharacterConfig(parts=CharacterParts(**parts), colours=CharacterColours(**colours))


def serialize_config(config: CharacterConfig) -> str:
    return json.dumps(config.to_dict())


def parse_stored_config(
    raw: str | None,
    available: AvailablePartIds,
    palettes: Palettes = PALETTES,
) -> Outcome[CharacterConfig]:
    """Turn a persisted blob into a usable config.

    Absent or malformed data falls back to the defaults; valid data is clamped
    against the current catalog. Nothing here raises.
    """
    if not raw:
        return Outcome(DEFAULT_CHARACTER_CONFIG, ("no saved config",))
    try:
        config = config_from_dict(json.loads(raw))
    except (ValueError, RecursionError) as exc:  # JSONDecodeError included
        log.debug("Discarding malformed saved character config: %s", exc)
        return Outcome(DEFAULT_CHARACTER_CONFIG, (f"malformed saved config: {exc}",))
    return clamp_config_with_report(config, available, palettes)
