"""Input handling for the character selector panel."""
from __future__ import annotations

import logging

from esper import World

from character_creator.events.bus import EVENT_KEY_PRESS, EVENT_MOUSE_PRESS, EventBus
from character_creator.selector.components import SelectorAction, SelectorButton
from character_creator.world import get_config_store

log = logging.getLogger(__name__)

# arcade.key.R and arcade.key.MOD_SHIFT; kept as literals to avoid importing arcade here.
KEY_R = 114
MOD_SHIFT = 1
MOUSE_BUTTON_LEFT = 1


class SelectorInputSystem:
    """Turns clicks on selector buttons (and the R shortcut) into config store calls."""

    def __init__(self, world: World, event_bus: EventBus | None = None) -> None:
        self.world = world
        self._event_bus = event_bus
        if event_bus is not None:
            event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
            event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_mouse_press(self, sender, **payload) -> None:
        x = payload.get("x")
        y = payload.get("y")
        button = payload.get("button")
        if x is None or y is None or button is None:
            return
        self.handle_mouse_press(float(x), float(y), int(button))

    def on_key_press(self, sender, **payload) -> None:
        symbol = payload.get("symbol")
        if symbol is None:
            return
        self.handle_key_press(int(symbol), int(payload.get("modifiers") or 0))

    def handle_mouse_press(self, x: float, y: float, button: int) -> bool:
        """Activate the button under the cursor; returns whether one was hit."""
        if button != MOUSE_BUTTON_LEFT:
            return False
        for _, selector_button in self.world.get_component(SelectorButton):
            if self._point_inside_button(x, y, selector_button):
                self._activate(selector_button)
                return True
        return False

    def handle_key_press(self, symbol: int, modifiers: int) -> bool:
        if symbol != KEY_R:
            return False
        store = get_config_store(self.world)
        if modifiers & MOD_SHIFT:
            store.randomize_parts()
        else:
            store.randomize_config()
        return True

    def _activate(self, button: SelectorButton) -> None:
        store = get_config_store(self.world)
        log.debug("Selector %s on %s %s", button.action.name, button.target_kind, button.target)
        match (button.action, button.target_kind):
            case (SelectorAction.RANDOMIZE, _):
                store.randomize_config()
            case (SelectorAction.RESET, _):
                store.reset()
            case (SelectorAction.PREV, "part"):
                store.prev_part(button.target)
            case (SelectorAction.NEXT, "part"):
                store.next_part(button.target)
            case (SelectorAction.PREV, "colour"):
                store.prev_colour(button.target)
            case (SelectorAction.NEXT, "colour"):
                store.next_colour(button.target)
            case _:
                log.debug("Selector button %r has no handler", button.label)

    @staticmethod
    def _point_inside_button(x: float, y: float, button: SelectorButton) -> bool:
        half_w = button.width / 2
        half_h = button.height / 2
        return (
            button.x - half_w <= x <= button.x + half_w
            and button.y - half_h <= y <= button.y + half_h
        )
