"""Deferred tasks on the GLib main loop."""

from __future__ import annotations

from gi.repository import GLib

from deferred import Task


def glib_schedule(task: Task) -> None:
    """Run ``task`` once the main loop is idle, after pending redraws are queued."""

    def _run() -> bool:
        task()
        return False

    GLib.idle_add(_run)
