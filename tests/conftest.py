from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from block_model import Block, Document
from editor import BlockEditor
import keymap


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Keep tests away from the real ~/.config/blockpad."""
    config_home = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    yield config_home / "blockpad"


class RecordingSurface:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str | None]] = []
        self.accept = True

    def focus_block(self, block_id: str, caret: str | None = None) -> bool:
        self.calls.append((block_id, caret))
        return self.accept


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


def make_editor(
    *blocks: Block, title: str = "Test page", bindings: keymap.Keymap | None = None
) -> BlockEditor:
    editor = BlockEditor("", bindings=bindings or keymap.default_keymap())
    editor.load(Document(title, tuple(blocks)))
    return editor


def ids(editor: BlockEditor) -> list[str]:
    return [block.id for block in editor.get_blocks()]
