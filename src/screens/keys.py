"""
Translating Textual key names into session input events.
"""
from typing import Optional

from core.domain import (
    Abort, Character, Erase, InputEvent, NavigateNext, NavigatePrevious, Submit,
)

KEY_EVENTS = {
    "enter": Submit(),
    "escape": Abort(),
    "backspace": Erase(),
    "up": NavigatePrevious(),
    "down": NavigateNext(),
}

# vim-style movement, only while the verb table is showing
SELECTING_KEYS = {
    "k": NavigatePrevious(),
    "j": NavigateNext(),
}


def key_to_event(key: str, character: Optional[str], selecting: bool = False) -> Optional[InputEvent]:
    """
    Map one key press to an input event, or None when the key means nothing.

    `character` should only be passed for printable keys.
    """
    if key in KEY_EVENTS:
        return KEY_EVENTS[key]
    if selecting and key in SELECTING_KEYS:
        return SELECTING_KEYS[key]
    if character:
        return Character(character)
    return None
