"""Composition root for the character asset catalogs.

Pairs raw inventory files into per-folder option lists, reports development
diagnostics once per build, and exposes the selectable id lists used for config
validation and cycling.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

from character_creator.assets.diagnostics import (
    report_layered_asset_diagnostics,
    report_single_layer_asset_diagnostics,
)
from character_creator.assets.inventory import AssetInventory, scan_inventory
from character_creator.assets.pairing import build_single_layer_assets, pair_layered_assets
from character_creator.components.character import CharacterOption, LayeredAsset
from character_creator.constants import ASSET_ROOT, LAYERED_FOLDERS, SINGLE_LAYER_FOLDERS

log = logging.getLogger(__name__)

LayeredCatalog = Tuple[CharacterOption[LayeredAsset], ...]
SingleLayerCatalog = Tuple[CharacterOption[Any], ...]

BODY_PARTS = ("arms", "legs", "top", "bottom")


@dataclass(frozen=True, slots=True)
class BodyFrames:
    """Animation frames for each tintable body part, ordered by frame number."""
    arms: LayeredCatalog = ()
    legs: LayeredCatalog = ()
    top: LayeredCatalog = ()
    bottom: LayeredCatalog = ()

    def frames(self, part: str) -> LayeredCatalog:
        return getattr(self, part)


@dataclass(frozen=True, slots=True)
class CharacterAssets:
    head: LayeredCatalog = ()
    hair: LayeredCatalog = ()
    body: LayeredCatalog = ()
    eyes: SingleLayerCatalog = ()
    mouth: SingleLayerCatalog = ()
    body_idle: BodyFrames = field(default_factory=BodyFrames)
    body_run: BodyFrames = field(default_factory=BodyFrames)

    def available_part_ids(self) -> Dict[str, List[str]]:
        return {
            "hair": [option.id for option in self.hair],
            "eyes": [option.id for option in self.eyes],
            "mouth": [option.id for option in self.mouth],
        }


def get_layered_assets_for(
    inventory: AssetInventory,
    folder: str,
    *,
    root: str = ASSET_ROOT,
    report: bool = True,
) -> LayeredCatalog:
    result = pair_layered_assets(inventory.outline_files, inventory.bg_files, folder, root=root)
    if report:
        report_layered_asset_diagnostics(result.diagnostics)
    return tuple(result.paired)


def get_single_layer_assets_for(
    inventory: AssetInventory,
    folder: str,
    *,
    root: str = ASSET_ROOT,
    report: bool = True,
) -> SingleLayerCatalog:
    result = build_single_layer_assets(inventory.single_layer_files, folder, root=root)
    if report:
        report_single_layer_asset_diagnostics(folder, result.diagnostics)
    return tuple(result.options)


def body_frames(body: LayeredCatalog, anim: str) -> BodyFrames:
    """Split the body catalog into per-part frame lists for one animation."""
    # The body catalog is already numerically sorted, so filtering keeps frame order.
    parts = {
        part: tuple(option for option in body if option.id.startswith(f"body_{anim}_{part}_"))
        for part in BODY_PARTS
    }
    return BodyFrames(**parts)


def load_character_assets(
    inventory: AssetInventory,
    *,
    root: str = ASSET_ROOT,
    report: bool = True,
) -> CharacterAssets:
    layered = {folder: get_layered_assets_for(inventory, folder, root=root, report=report) for folder in LAYERED_FOLDERS}
    single = {folder: get_single_layer_assets_for(inventory, folder, root=root, report=report) for folder in SINGLE_LAYER_FOLDERS}
    assets = CharacterAssets(
        **layered,
        **single,
        body_idle=body_frames(layered["body"], "idle"),
        body_run=body_frames(layered["body"], "run"),
    )
    log.debug(
        "Loaded character assets: head=%d hair=%d body=%d eyes=%d mouth=%d",
        len(assets.head), len(assets.hair), len(assets.body), len(assets.eyes), len(assets.mouth),
    )
    return assets


def load_character_assets_from_dir(asset_dir: Path, *, report: bool = True) -> CharacterAssets:
    # Scanned paths are absolute, so the directory itself becomes the folder root.
    root = Path(asset_dir).resolve().as_posix()
    return load_character_assets(scan_inventory(asset_dir), root=root, report=report)
