"""Key routing and drag and drop for the block sequence."""
from __future__ import annotations

import logging
from collections.abc import Callable

import keymap
from block_store import DOWN, UP, BlockStore
from editor_state import CARET_END, CARET_START, InteractionState
from focus_controller import FocusController


logger = logging.getLogger(__name__)


class NavigationController:
    def __init__(
        self,
        state: InteractionState,
        store: BlockStore,
        focus: FocusController,
        bindings: keymap.Keymap,
        on_insert: Callable[[str], object],
        on_delete: Callable[[str], object],
        on_move: Callable[[str, str], object],
        on_reorder: Callable[[str, str], object],
    ) -> None:
        self._state = state
        self._store = store
        self._focus = focus
        self._keymap = bindings
        self._on_insert = on_insert
        self._on_delete = on_delete
        self._on_move = on_move
        self._on_reorder = on_reorder

    def set_store(self, store: BlockStore) -> None:
        self._store = store

    def handle_key(self, block_id: str, token: str | None) -> bool:
        """Route a key press inside a block input.

        Returns True when the press was consumed and the input's default
        handling must be suppressed.
        """
        action = self._keymap.match(token)
        if action is None:
            return False
        index = self._store.index_of(block_id)
        if action == keymap.INSERT_BLOCK:
            self._on_insert(block_id)
            return True
        if action == keymap.DELETE_EMPTY_BLOCK:
            if self._store.get(block_id).content != "":
                return False
            self._on_delete(block_id)
            return True
        if action == keymap.MOVE_BLOCK_UP:
            self._on_move(block_id, UP)
            return True
        if action == keymap.MOVE_BLOCK_DOWN:
            self._on_move(block_id, DOWN)
            return True
        blocks = self._store.blocks
        if action == keymap.FOCUS_PREVIOUS:
            if index == 0:
                return False
            return self._focus.focus_now(blocks[index - 1].id, CARET_END)
        if action == keymap.FOCUS_NEXT:
            if index >= len(blocks) - 1:
                return False
            return self._focus.focus_now(blocks[index + 1].id, CARET_START)
        logger.debug("no handler for action %s", action)
        return False

    def drag_start(self, block_id: str) -> None:
        self._store.index_of(block_id)
        self._state.set_dragged(block_id)

    def drag_over(self, block_id: str) -> bool:
        return True

    def drop(self, target_id: str) -> bool:
        source_id = self._state.dragged_block_id
        try:
            if source_id is None or source_id == target_id:
                return False
            return bool(self._on_reorder(source_id, target_id))
        finally:
            self._state.set_dragged(None)

    def drag_end(self) -> None:
        self._state.set_dragged(None)
