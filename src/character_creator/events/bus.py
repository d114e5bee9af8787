from typing import Callable, Dict

from blinker import Signal

Handler = Callable[..., None]


class EventBus:
    """Named blinker signals shared by the window, the config store and the systems."""

    def __init__(self) -> None:
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn: Handler) -> None:
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references: systems are often kept alive only by their handlers.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload) -> None:
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"              # payload: x, y, button
EVENT_KEY_PRESS = "key_press"                  # payload: symbol, modifiers


# ============================================================================
# CHARACTER CONFIGURATION
# ============================================================================
EVENT_CHARACTER_CONFIG_CHANGED = "character_config_changed"  # payload: config=CharacterConfig, action=CharacterAction|None
