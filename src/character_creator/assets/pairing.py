from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from character_creator.assets.catalog import (
    AssetEntry,
    build_entries_by_id,
    build_entries_by_key,
    folder_needle,
)
from character_creator.assets.diagnostics import PairingDiagnostics, SingleLayerDiagnostics
from character_creator.assets.naming import natural_sort_key
from character_creator.components.character import CharacterOption, LayeredAsset
from character_creator.constants import ASSET_ROOT


@dataclass(slots=True)
class PairingResult:
    paired: List[CharacterOption[LayeredAsset]]
    diagnostics: PairingDiagnostics = field(default_factory=PairingDiagnostics)


@dataclass(slots=True)
class SingleLayerResult:
    options: List[CharacterOption[Any]]
    diagnostics: SingleLayerDiagnostics = field(default_factory=SingleLayerDiagnostics)


def collect_missing_pairs(
    outlines: Dict[str, AssetEntry],
    bgs: Dict[str, AssetEntry],
    diagnostics: PairingDiagnostics,
) -> None:
    """Record keys where one half exists without its partner."""
    for key in outlines:
        if key not in bgs:
            diagnostics.missing_bg.append(key)
    for key in bgs:
        if key not in outlines:
            diagnostics.missing_outline.append(key)


def pair_layered_assets(
    outline_files: Mapping[str, Any],
    bg_files: Mapping[str, Any],
    folder: str,
    *,
    root: str = ASSET_ROOT,
) -> PairingResult:
    """Match outline and bg fragments of one folder into layered catalog options.

    Only keys present on both sides are emitted; the rest are reported through the
    returned diagnostics. No logging happens here.
    """
    needle = folder_needle(folder, root)
    diagnostics = PairingDiagnostics()

    outlines_by_key = build_entries_by_key(outline_files, needle, diagnostics)
    bgs_by_key = build_entries_by_key(bg_files, needle, diagnostics)

    collect_missing_pairs(outlines_by_key, bgs_by_key, diagnostics)

    keys = sorted((key for key in outlines_by_key if key in bgs_by_key), key=natural_sort_key)
    paired = [
        CharacterOption(
            id=key,
            value=LayeredAsset(outline=outlines_by_key[key].resource, bg=bgs_by_key[key].resource),
        )
        for key in keys
    ]
    return PairingResult(paired=paired, diagnostics=diagnostics)


def build_single_layer_assets(
    files: Mapping[str, Any],
    folder: str,
    *,
    root: str = ASSET_ROOT,
) -> SingleLayerResult:
    diagnostics = SingleLayerDiagnostics()
    by_id = build_entries_by_id(files, folder_needle(folder, root), diagnostics)
    options = [
        CharacterOption(id=option_id, value=by_id[option_id].resource)
        for option_id in sorted(by_id, key=natural_sort_key)
    ]
    return SingleLayerResult(options=options, diagnostics=diagnostics)
