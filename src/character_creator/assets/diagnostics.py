"""Development-only reporting for asset catalog problems.

Kept apart from the pairing code so catalog builds stay pure transforms: tests can
inspect the diagnostics objects directly and nothing is logged in optimized runs.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from character_creator.constants import DEV_MODE

log = logging.getLogger(__name__)

LOG_PREFIX = "[character assets]"


@dataclass(frozen=True, slots=True)
class DuplicateEntry:
    """Two inventory paths that produced the same key; the later one won."""
    key: str
    existing_path: str
    new_path: str


@dataclass(slots=True)
class PairingDiagnostics:
    missing_bg: List[str] = field(default_factory=list)
    missing_outline: List[str] = field(default_factory=list)
    unrecognized: List[str] = field(default_factory=list)
    duplicates: List[DuplicateEntry] = field(default_factory=list)

    def is_clean(self) -> bool:
        return not (self.missing_bg or self.missing_outline or self.unrecognized or self.duplicates)


@dataclass(slots=True)
class SingleLayerDiagnostics:
    duplicates: List[DuplicateEntry] = field(default_factory=list)
    # Rejected names are kept for inspection but never reported.
    skipped: List[str] = field(default_factory=list)


def _format_duplicates(duplicates: List[DuplicateEntry]) -> str:
    return "\n".join(
        f'- "{dup.key}"\n  Existing: {dup.existing_path}\n  New: {dup.new_path}'
        for dup in duplicates
    )


def report_layered_asset_diagnostics(diagnostics: PairingDiagnostics, *, enabled: bool = DEV_MODE) -> None:
    """Emit one warning per non-empty diagnostic category."""
    if not enabled:
        return

    if diagnostics.unrecognized:
        log.warning("%s Unrecognized filenames:\n%s", LOG_PREFIX, "\n".join(diagnostics.unrecognized))

    if diagnostics.duplicates:
        log.warning("%s Duplicate keys:\n%s", LOG_PREFIX, _format_duplicates(diagnostics.duplicates))

    if diagnostics.missing_bg:
        log.warning("%s Missing bg layer for: %s", LOG_PREFIX, ", ".join(diagnostics.missing_bg))

    if diagnostics.missing_outline:
        log.warning("%s Missing outline layer for: %s", LOG_PREFIX, ", ".join(diagnostics.missing_outline))


def report_single_layer_asset_diagnostics(
    folder: str,
    diagnostics: SingleLayerDiagnostics,
    *,
    enabled: bool = DEV_MODE,
) -> None:
    if not enabled:
        return

    if diagnostics.duplicates:
        log.warning("%s Duplicate %s ids:\n%s", LOG_PREFIX, folder, _format_duplicates(diagnostics.duplicates))
