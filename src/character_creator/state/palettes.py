from typing import Dict, Tuple

SKIN_COLOURS: Tuple[str, ...] = (
    "#F6D7B0",  # porcelain
    "#EDC29B",
    "#D9A066",
    "#B9794A",
    "#8D5524",
    "#5C3A21",
)

HAIR_COLOURS: Tuple[str, ...] = (
    "#2B1B12",  # near black
    "#5A3825",
    "#8B5A2B",
    "#D9A441",
    "#FFD86B",
    "#B33A3A",
    "#E8E8E8",
    "#6A4FB3",
)

TOP_COLOURS: Tuple[str, ...] = (
    "#3F7F3B",
    "#B3122A",
    "#2F5DA8",
    "#D89B26",
    "#7B3E85",
    "#F0F0F0",
)

BOTTOM_COLOURS: Tuple[str, ...] = (
    "#2F3A56",
    "#5B4636",
    "#3F7F3B",
    "#1E1E1E",
    "#A58BEA",
)

PALETTES: Dict[str, Tuple[str, ...]] = {
    "skin": SKIN_COLOURS,
    "hair": HAIR_COLOURS,
    "top": TOP_COLOURS,
    "bottom": BOTTOM_COLOURS,
}


def hex_to_rgb(value: str) -> Tuple[int, int, int]:
    """``"#FFD86B"`` -> ``(255, 216, 107)``."""
    digits = value.lstrip("#")
    if len(digits) != 6:
        raise ValueError(f"Expected a #RRGGBB colour, got {value!r}")
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
