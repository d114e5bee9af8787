import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Character Creator"

# Source sprites are authored at this native resolution.
PREVIEW_SIZE = 256
# Integer upscale keeps pixel edges crisp.
PIXEL_SCALE = 2
PREVIEW_LEFT_MARGIN = 40

# Every inventory path is filtered against "/<ASSET_ROOT>/<folder>/".
ASSET_ROOT = "assets/character"
LAYERED_FOLDERS = ("body", "head", "hair")
SINGLE_LAYER_FOLDERS = ("eyes", "mouth")

ASSET_DIR = Path(os.environ.get("CHARACTER_ASSET_DIR", PROJECT_ROOT / ASSET_ROOT))
SAVE_PATH = Path(os.environ.get("CHARACTER_SAVE_PATH", PROJECT_ROOT / "data" / "character_config.json"))

# Versioned so older persisted shapes can be dropped by bumping the suffix.
STORAGE_KEY = "character_config_v1"

# Asset diagnostics are only emitted in development runs (python without -O).
DEV_MODE = __debug__

# Selector panel geometry
SELECTOR_ROW_HEIGHT = 48
SELECTOR_LABEL_WIDTH = 150
SELECTOR_BUTTON_WIDTH = 70
SELECTOR_BUTTON_HEIGHT = 34
SELECTOR_BUTTON_GAP = 10
SELECTOR_ACTION_BUTTON_WIDTH = 120
