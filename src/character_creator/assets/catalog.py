"""Group raw inventory entries by folder and key, tracking duplicates and bad names."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from character_creator.assets.diagnostics import (
    DuplicateEntry,
    PairingDiagnostics,
    SingleLayerDiagnostics,
)
from character_creator.assets.naming import id_from_path, key_from_path


@dataclass(frozen=True, slots=True)
class AssetEntry:
    """Resolved resource plus the inventory path it came from (kept for diagnostics)."""
    resource: Any
    path: str


def folder_needle(folder: str, root: str) -> str:
    return f"/{root.strip('/')}/{folder}/"


def set_with_duplicate_tracking(
    entries: Dict[str, AssetEntry],
    key: str,
    entry: AssetEntry,
    duplicates: list[DuplicateEntry],
) -> None:
    """Insert ``entry`` under ``key``; last write wins and the collision is recorded."""
    existing = entries.get(key)
    if existing is not None:
        duplicates.append(DuplicateEntry(key=key, existing_path=existing.path, new_path=entry.path))
    entries[key] = entry


def build_entries_by_key(
    files: Mapping[str, Any],
    needle: str,
    diagnostics: PairingDiagnostics,
) -> Dict[str, AssetEntry]:
    """Key -> entry lookup for one folder of paired fragments.

    Files outside the folder are ignored before parsing, so keys from sibling folders
    can never collide. Names that fail the layered convention land in
    ``diagnostics.unrecognized``.
    """
    entries: Dict[str, AssetEntry] = {}
    for path, resource in files.items():
        if needle not in path:
            continue
        key = key_from_path(path)
        if key is None:
            diagnostics.unrecognized.append(path)
            continue
        set_with_duplicate_tracking(entries, key, AssetEntry(resource=resource, path=path), diagnostics.duplicates)
    return entries


def build_entries_by_id(
    files: Mapping[str, Any],
    needle: str,
    diagnostics: SingleLayerDiagnostics,
) -> Dict[str, AssetEntry]:
    entries: Dict[str, AssetEntry] = {}
    for path, resource in files.items():
        if needle not in path:
            continue
        option_id = id_from_path(path)
        if option_id is None:
            diagnostics.skipped.append(path)
            continue
        set_with_duplicate_tracking(entries, option_id, AssetEntry(resource=resource, path=path), diagnostics.duplicates)
    return entries
