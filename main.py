"""GTK application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk  # type: ignore[import-not-found, attr-defined]

import config
import keymap
from _version import __version__
from editor import BlockEditor
from ui_block_view import BlockEditorView
from ui_deferred import glib_schedule


APP_ID = "com.blockpad.editor"

logger = logging.getLogger(__name__)


class BlockApp(Gtk.Application):
    def __init__(self, page_id: str) -> None:
        super().__init__(application_id=APP_ID)
        self._page_id = page_id
        self._editor: BlockEditor | None = None
        self._view: BlockEditorView | None = None

    def do_activate(self) -> None:
        logger.info("GTK activate; page=%s", self._page_id)
        window = Gtk.ApplicationWindow(application=self)
        window.set_default_size(960, 720)

        if self._editor is None:
            self._editor = BlockEditor(
                self._page_id,
                scheduler=glib_schedule,
                bindings=keymap.load_keymap(),
            )
        window.set_title(self._editor.get_title() or "Untitled")
        self._editor.add_listener(lambda store: window.set_title(store.title or "Untitled"))
        self._view = BlockEditorView(self._editor)

        window.set_child(self._view)
        window.present()
        self._view.focus_block(self._editor.get_blocks()[0].id)


def configure_logging(level: str | None = None) -> None:
    name = (level or config.get_log_level()).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def parse_args(argv: Sequence[str]) -> tuple[argparse.Namespace, list[str]]:
    parser = argparse.ArgumentParser(description="Block-structured GTK4 document editor")
    parser.add_argument("-v", "--version", action="store_true", help="Show version")
    parser.add_argument("-p", "--page", default="welcome", help="Page identifier to open")
    parser.add_argument("--log-level", help="Logging level (overrides config)")
    if hasattr(parser, "parse_known_intermixed_args"):
        args, gtk_args = parser.parse_known_intermixed_args(argv)
    else:
        args, gtk_args = parser.parse_known_args(argv)
    return args, gtk_args


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    options, gtk_args = parse_args(args)
    if options.version:
        print(__version__)
        return 0
    configure_logging(options.log_level)
    app = BlockApp(options.page)
    return app.run([sys.argv[0], *gtk_args])


if __name__ == "__main__":
    raise SystemExit(main())
