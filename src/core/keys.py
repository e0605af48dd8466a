"""Key / button name tables for pynput.

Maps the names used in ``constants.py`` (``TOGGLE_KEY``, ``CLICK_BUTTON``)
to pynput objects, and pynput keys back to display names for the banner.
"""
from __future__ import annotations

from typing import Any, Optional

from pynput import mouse, keyboard

# ---------------------------------------------------------------------------
# Key-name → pynput Key
# ---------------------------------------------------------------------------

SPECIAL_KEYS: dict[str, Any] = {
    "ESC":         keyboard.Key.esc,
    "ESCAPE":      keyboard.Key.esc,
    "INSERT":      keyboard.Key.insert,
    "HOME":        keyboard.Key.home,
    "END":         keyboard.Key.end,
    "PAGEUP":      keyboard.Key.page_up,
    "PAGEDOWN":    keyboard.Key.page_down,
    "CAPSLOCK":    keyboard.Key.caps_lock,
    "SCROLLLOCK":  keyboard.Key.scroll_lock,
    "PAUSE":       keyboard.Key.pause,
    **{f"F{n}": getattr(keyboard.Key, f"f{n}") for n in range(1, 13)},
}

BUTTON_MAP: dict[str, mouse.Button] = {
    "LEFT":   mouse.Button.left,
    "RIGHT":  mouse.Button.right,
    "MIDDLE": mouse.Button.middle,
}

# pynput Key → display name (inverse of SPECIAL_KEYS, first alias wins)
KEY_NAMES: dict = {}
for _name, _key in SPECIAL_KEYS.items():
    KEY_NAMES.setdefault(_key, _name)
del _name, _key


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def parse_key(name: str) -> Optional[Any]:
    """Resolve a hotkey name: a SPECIAL_KEYS entry ('F8') or one character ('x')."""
    name = name.strip()
    special = SPECIAL_KEYS.get(name.upper())
    if special is not None:
        return special
    return keyboard.KeyCode.from_char(name.lower()) if len(name) == 1 else None


def parse_button(name: str) -> Optional[mouse.Button]:
    return BUTTON_MAP.get(name.strip().upper())


def key_name(key) -> Optional[str]:
    """Banner name for a hotkey; None for keys with no name (bare virtual-key codes)."""
    return KEY_NAMES.get(key) or getattr(key, "char", None) or None
