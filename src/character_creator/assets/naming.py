"""Filename conventions for character asset fragments."""
from __future__ import annotations

import re

# "<category>_<variant>_<frame>_(outline|bg)<extra>.png"
#   category: no underscores (hair, body, head)
#   variant:  may contain underscores (idle_arms, run_bottom)
#   frame:    digits
LAYERED_NAME_RE = re.compile(
    r"^(?P<category>[a-z0-9]+)_(?P<variant>[a-z0-9_]+)_(?P<frame>\d+)_(?:outline|bg).*\.png$",
    re.IGNORECASE,
)
_PNG_SUFFIX_RE = re.compile(r"\.png$", re.IGNORECASE)
_NATURAL_SPLIT_RE = re.compile(r"(\d+)")


def filename_from_path(path: str) -> str | None:
    """Last path component, accepting both separators; None for a trailing slash."""
    name = re.split(r"[\\/]", path)[-1]
    return name or None


def key_from_path(path: str) -> str | None:
    """Pairing key for a layered fragment.

    ``.../hair_3_0_outline.png`` -> ``hair_3_0``
    ``.../body_idle_arms_1_bg.png`` -> ``body_idle_arms_1``
    """
    name = filename_from_path(path)
    if name is None:
        return None
    match = LAYERED_NAME_RE.match(name)
    if match is None:
        return None
    return f"{match['category']}_{match['variant']}_{match['frame']}"


def id_from_path(path: str) -> str | None:
    """Stable id for a single-layer fragment: ``.../eyes/eyes_2.png`` -> ``eyes_2``."""
    name = filename_from_path(path)
    if name is None or not name.lower().endswith(".png"):
        return None
    return _PNG_SUFFIX_RE.sub("", name) or None


def natural_sort_key(value: str) -> tuple[tuple, str]:
    """Numeric-aware ordering key so ``frame_2`` sorts before ``frame_10``."""
    chunks = _NATURAL_SPLIT_RE.split(value)
    parts = tuple(int(chunk) if index % 2 else chunk.casefold() for index, chunk in enumerate(chunks))
    return parts, value
