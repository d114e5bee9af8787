from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

from character_creator.constants import SINGLE_LAYER_FOLDERS


@dataclass(slots=True)
class AssetInventory:
    """Raw file listing handed to the catalog builders (absolute path -> resource)."""
    outline_files: Dict[str, Path] = field(default_factory=dict)
    bg_files: Dict[str, Path] = field(default_factory=dict)
    single_layer_files: Dict[str, Path] = field(default_factory=dict)


def scan_inventory(asset_dir: Path) -> AssetInventory:
    """List every png under ``asset_dir`` and split it by naming convention.

    Paths are sorted before insertion so "last write wins" on duplicate keys is
    reproducible between runs. A missing directory yields an empty inventory.
    """
    inventory = AssetInventory()
    asset_dir = Path(asset_dir)
    if not asset_dir.is_dir():
        return inventory

    files = sorted(
        path for path in asset_dir.rglob("*")
        if path.is_file() and path.suffix.lower() == ".png"
    )
    for path in files:
        key = path.resolve().as_posix()
        name = path.name
        if "_outline" in name:
            inventory.outline_files[key] = path
        if "_bg" in name:
            inventory.bg_files[key] = path
        if path.parent.name in SINGLE_LAYER_FOLDERS and path.parent.parent == asset_dir:
            inventory.single_layer_files[key] = path
    return inventory
