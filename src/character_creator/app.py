"""Arcade window wiring the character creator together."""
from __future__ import annotations

import logging
from argparse import ArgumentParser
from pathlib import Path
from typing import Sequence

from arcade import Window, color, run

from character_creator.assets.character_assets import load_character_assets_from_dir
from character_creator.constants import ASSET_DIR, SAVE_PATH, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from character_creator.events.bus import EVENT_KEY_PRESS, EVENT_MOUSE_PRESS, EventBus
from character_creator.selector.factory import spawn_character_selector
from character_creator.selector.input_system import SelectorInputSystem
from character_creator.selector.render_system import SelectorRenderSystem
from character_creator.state.storage import JsonFileStorage
from character_creator.systems.preview_render_system import PreviewRenderSystem
from character_creator.world import create_world, get_config_store

log = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="[%(levelname).1s] %(name)s: %(message)s" if debug else "%(message)s",
    )


class CharacterCreatorWindow(Window):
    def __init__(self, asset_dir: Path = ASSET_DIR, save_path: Path = SAVE_PATH):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.event_bus = EventBus()
        assets = load_character_assets_from_dir(asset_dir)
        self.world = create_world(self.event_bus, assets, storage=JsonFileStorage(save_path))

        load_outcome = get_config_store(self.world).load_outcome
        for issue in load_outcome.issues:
            log.info("Character config: %s", issue)

        spawn_character_selector(self.world, self.width, self.height)
        self.selector_input_system = SelectorInputSystem(self.world, self.event_bus)
        self.selector_render_system = SelectorRenderSystem(self.world, self)
        self.preview_render_system = PreviewRenderSystem(self.world, self.event_bus, self)

        self.background_color = color.DARK_SLATE_GRAY

    def on_draw(self):
        self.clear()
        self.preview_render_system.process()
        self.selector_render_system.process()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)


def parse_args(argv: Sequence[str] | None = None):
    parser = ArgumentParser(description="Layered pixel-art character creator")
    parser.add_argument("-a", "--asset-directory", type=Path, default=ASSET_DIR,
                        help="Folder holding body/, head/, hair/, eyes/ and mouth/")
    parser.add_argument("-s", "--save-path", type=Path, default=SAVE_PATH,
                        help="JSON file the character config is persisted to")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None):
    args = parse_args(argv)
    setup_logging(args.debug)
    log.info("Loading character assets from %s", args.asset_directory)
    CharacterCreatorWindow(args.asset_directory, args.save_path)
    run()
