"""Transient interaction state: focus, drag and open menus."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
from collections.abc import Callable


CARET_START = "start"
CARET_END = "end"


@dataclass(frozen=True)
class FocusRequest:
    block_id: str
    caret: Optional[str] = None


@dataclass
class InteractionState:
    """Per-document state that is never saved and may be reset at any time."""

    focused_block_id: Optional[str] = None
    dragged_block_id: Optional[str] = None
    insert_menu_block_id: Optional[str] = None
    slash_menu_block_id: Optional[str] = None
    slash_query: str = ""
    pending_focus: Optional[FocusRequest] = None
    _listeners: list[Callable[["InteractionState"], None]] = field(default_factory=list, init=False, repr=False)

    def add_listener(self, listener: Callable[["InteractionState"], None]) -> None:
        self._listeners.append(listener)

    def set_focused(self, block_id: Optional[str]) -> None:
        if self.focused_block_id == block_id:
            return
        self.focused_block_id = block_id
        self._notify()

    def set_dragged(self, block_id: Optional[str]) -> None:
        if self.dragged_block_id == block_id:
            return
        self.dragged_block_id = block_id
        self._notify()

    def set_insert_menu(self, block_id: Optional[str]) -> None:
        if self.insert_menu_block_id == block_id:
            return
        self.insert_menu_block_id = block_id
        self._notify()

    def set_slash_menu(self, block_id: Optional[str]) -> None:
        if self.slash_menu_block_id == block_id:
            return
        self.slash_menu_block_id = block_id
        self._notify()

    def set_slash_query(self, query: str) -> None:
        if self.slash_query == query:
            return
        self.slash_query = query
        self._notify()

    def set_pending_focus(self, request: Optional[FocusRequest]) -> None:
        if self.pending_focus == request:
            return
        self.pending_focus = request
        self._notify()

    def reset(self) -> None:
        self.focused_block_id = None
        self.dragged_block_id = None
        self.insert_menu_block_id = None
        self.slash_menu_block_id = None
        self.slash_query = ""
        self.pending_focus = None
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
