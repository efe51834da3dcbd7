"""Translate GDK key events into keymap tokens."""

from __future__ import annotations

import gi

gi.require_version("Gdk", "4.0")
from gi.repository import Gdk  # type: ignore[import-not-found, attr-defined]

from keymap import make_token


_SPECIAL_KEYVAL_TO_NAME: dict[int, str] = {
    Gdk.KEY_Escape: "Esc",
    Gdk.KEY_Return: "CR",
    Gdk.KEY_KP_Enter: "CR",
    Gdk.KEY_Tab: "Tab",
    Gdk.KEY_BackSpace: "BS",
    Gdk.KEY_Up: "Up",
    Gdk.KEY_Down: "Down",
    Gdk.KEY_Left: "Left",
    Gdk.KEY_Right: "Right",
    Gdk.KEY_Home: "Home",
    Gdk.KEY_End: "End",
    Gdk.KEY_Page_Up: "PageUp",
    Gdk.KEY_Page_Down: "PageDown",
}


def event_to_token(keyval: int, state: int) -> str | None:
    primary_mask = Gdk.ModifierType.CONTROL_MASK | Gdk.ModifierType.META_MASK | Gdk.ModifierType.SUPER_MASK
    primary = bool(state & primary_mask)
    alt = bool(state & Gdk.ModifierType.ALT_MASK)
    shift = bool(state & Gdk.ModifierType.SHIFT_MASK)
    if keyval in _SPECIAL_KEYVAL_TO_NAME:
        name = _SPECIAL_KEYVAL_TO_NAME[keyval]
    elif 32 <= keyval <= 126:
        name = chr(keyval)
    else:
        return None
    if name == "<":
        return None if primary or alt else name
    return make_token(name, primary=primary, alt=alt, shift=shift)
