"""Keyboard mapping from blessed keystrokes to intents."""

from blessed.keyboard import Keystroke

from ..game.types import Intent

_KEY_NAMES = {
    "KEY_UP": Intent.MOVE_UP,
    "KEY_DOWN": Intent.MOVE_DOWN,
    "KEY_LEFT": Intent.MOVE_LEFT,
    "KEY_RIGHT": Intent.MOVE_RIGHT,
    "KEY_ESCAPE": Intent.EXIT,
}

_CHARS = {
    # WASD
    "w": Intent.MOVE_UP,
    "s": Intent.MOVE_DOWN,
    "a": Intent.MOVE_LEFT,
    "d": Intent.MOVE_RIGHT,
    # vi keys
    "k": Intent.MOVE_UP,
    "j": Intent.MOVE_DOWN,
    "h": Intent.MOVE_LEFT,
    "l": Intent.MOVE_RIGHT,
    "q": Intent.EXIT,
}


def get_intent(key: Keystroke) -> Intent:
    """Translate a keystroke into an intent; unknown keys map to Intent.NONE."""
    if key.is_sequence:
        return _KEY_NAMES.get(key.name or "", Intent.NONE)
    return _CHARS.get(str(key).lower(), Intent.NONE)
