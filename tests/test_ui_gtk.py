from __future__ import annotations

import pytest

try:
    import gi

    gi.require_version("Gdk", "4.0")
    from gi.repository import Gdk, GLib  # type: ignore[import-not-found, attr-defined]
except (ImportError, ValueError):
    pytest.skip("PyGObject with GDK 4 is not available", allow_module_level=True)

from ui_deferred import glib_schedule
from ui_key_input import event_to_token


NO_MODS = Gdk.ModifierType(0)


def test_event_to_token_special_keys() -> None:
    assert event_to_token(Gdk.KEY_Return, NO_MODS) == "<CR>"
    assert event_to_token(Gdk.KEY_KP_Enter, NO_MODS) == "<CR>"
    assert event_to_token(Gdk.KEY_BackSpace, NO_MODS) == "<BS>"
    assert event_to_token(Gdk.KEY_Up, NO_MODS) == "<Up>"


def test_event_to_token_treats_ctrl_and_meta_alike() -> None:
    assert event_to_token(Gdk.KEY_Up, Gdk.ModifierType.CONTROL_MASK) == "<C-Up>"
    assert event_to_token(Gdk.KEY_Down, Gdk.ModifierType.META_MASK) == "<C-Down>"
    assert event_to_token(Gdk.KEY_Up, Gdk.ModifierType.SUPER_MASK) == "<C-Up>"


def test_event_to_token_shift_enter_is_distinct() -> None:
    assert event_to_token(Gdk.KEY_Return, Gdk.ModifierType.SHIFT_MASK) == "<S-CR>"


def test_event_to_token_printable_and_unknown() -> None:
    assert event_to_token(ord("a"), NO_MODS) == "a"
    assert event_to_token(Gdk.KEY_F5, NO_MODS) is None


def test_glib_schedule_runs_on_idle() -> None:
    ran: list[str] = []
    glib_schedule(lambda: ran.append("focus"))
    assert ran == []
    context = GLib.MainContext.default()
    for _ in range(10):
        if ran:
            break
        context.iteration(False)
    assert ran == ["focus"]
