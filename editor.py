"""Block editor session: one open document plus its interaction controllers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

import config
import keymap
from block_menus import MenuEntry, MenuSection
from block_model import PARAGRAPH, Block, Document
from block_store import BlockStore
from deferred import DeferredQueue, Scheduler
from document_templates import open_document as seed_document
from editor_state import InteractionState
from focus_controller import FocusController, FocusSurface
from menu_controller import MenuController
from navigation_controller import NavigationController


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlockActions:
    can_move_up: bool
    can_move_down: bool
    can_delete: bool


class BlockEditor:
    def __init__(
        self,
        page_id: str = "",
        scheduler: Scheduler | None = None,
        bindings: keymap.Keymap | None = None,
        image_url: str | None = None,
    ) -> None:
        if scheduler is None:
            scheduler = DeferredQueue()
        self._queue = scheduler if isinstance(scheduler, DeferredQueue) else None
        self._scheduler: Scheduler = scheduler
        self._image_url = image_url or config.get_placeholder_image_url()
        self._listeners: list[Callable[[BlockStore], None]] = []
        self.state = InteractionState()
        self.store = self._make_store(seed_document(page_id))
        self.page_id = page_id
        self._focus = FocusController(self.state, self.store, self._scheduler)
        self._menus = MenuController(
            self.state, on_insert=self.insert_after, on_retype=self.retype
        )
        self._navigation = NavigationController(
            self.state,
            self.store,
            self._focus,
            bindings or keymap.load_keymap(),
            on_insert=self.insert_after,
            on_delete=self.delete,
            on_move=self.move,
            on_reorder=self.reorder,
        )

    def add_listener(self, listener: Callable[[BlockStore], None]) -> None:
        self._listeners.append(listener)

    def attach_surface(self, surface: FocusSurface | None) -> None:
        self._focus.attach_surface(surface)

    def open_document(self, page_id: str) -> Document:
        document = seed_document(page_id)
        self.page_id = page_id
        self.load(document)
        logger.info("opened page %r with %d blocks", page_id, len(document.blocks))
        return document

    def load(self, document: Document) -> None:
        """Replace the open document, e.g. with one restored by a storage layer."""
        self.store = self._make_store(document)
        self._focus.set_store(self.store)
        self._navigation.set_store(self.store)
        self.state.reset()
        self._notify()

    def get_blocks(self) -> tuple[Block, ...]:
        return self.store.blocks

    def get_title(self) -> str:
        return self.store.title

    def set_title(self, title: str) -> None:
        self.store.set_title(title)

    def insert_after(self, anchor_id: str, block_type: str = PARAGRAPH) -> Block:
        block = self.store.insert_after(anchor_id, block_type)
        self._menus.close_menus()
        self._focus.request_focus(block.id)
        return block

    def append_block(self, block_type: str = PARAGRAPH) -> Block:
        return self.insert_after(self.store.blocks[-1].id, block_type)

    def update(self, block_id: str, content: str) -> bool:
        changed = self.store.update(block_id, content)
        self._menus.content_changed(block_id, content)
        return changed

    def delete(self, block_id: str) -> tuple[Block, ...]:
        """Remove a block and return the blocks that remain."""
        target_id = self.store.delete(block_id)
        if target_id is None:
            return self.store.blocks
        self._menus.forget_block(block_id)
        if self.state.dragged_block_id == block_id:
            self.state.set_dragged(None)
        if self.state.focused_block_id == block_id:
            self.state.set_focused(None)
        self._focus.request_focus(target_id)
        return self.store.blocks

    def duplicate(self, block_id: str) -> Block:
        return self.store.duplicate(block_id)

    def move(self, block_id: str, direction: str) -> bool:
        moved = self.store.move(block_id, direction)
        if moved and self.state.focused_block_id == block_id:
            self._focus.request_focus(block_id)
        return moved

    def retype(self, block_id: str, block_type: str) -> Block:
        block = self.store.retype(block_id, block_type)
        self._menus.close_slash_menu()
        self._focus.request_focus(block_id)
        return block

    def toggle_checked(self, block_id: str) -> bool:
        return self.store.toggle_checked(block_id)

    def reorder(self, source_id: str, target_id: str) -> bool:
        if source_id == target_id or self.state.dragged_block_id != source_id:
            return False
        return self.store.reorder(source_id, target_id)

    def block_actions(self, block_id: str) -> BlockActions:
        index = self.store.index_of(block_id)
        count = len(self.store)
        return BlockActions(
            can_move_up=index > 0,
            can_move_down=index < count - 1,
            can_delete=count > 1,
        )

    def handle_key(self, block_id: str, token: str | None) -> bool:
        return self._navigation.handle_key(block_id, token)

    def drag_start(self, block_id: str) -> None:
        self._navigation.drag_start(block_id)

    def drag_over(self, block_id: str) -> bool:
        return self._navigation.drag_over(block_id)

    def drop(self, target_id: str) -> bool:
        return self._navigation.drop(target_id)

    def drag_end(self) -> None:
        self._navigation.drag_end()

    def focus_entered(self, block_id: str) -> None:
        self._focus.focus_entered(block_id)

    def focus_left(self, block_id: str) -> None:
        self._focus.focus_left(block_id)

    def toggle_insert_menu(self, block_id: str) -> bool:
        self.store.index_of(block_id)
        return self._menus.toggle_insert_menu(block_id)

    def select_insert_entry(self, block_type: str) -> Block | None:
        return self._menus.select_insert_entry(block_type)

    def select_slash_entry(self, block_type: str) -> Block | None:
        return self._menus.select_slash_entry(block_type)

    def close_menus(self) -> None:
        self._menus.close_menus()

    def insert_menu_entries(self) -> tuple[MenuSection, ...]:
        return self._menus.insert_menu_entries()

    def slash_menu_entries(self) -> list[MenuEntry]:
        return self._menus.slash_menu_entries()

    def flush(self) -> int:
        """Run focus placement queued behind the last rendered commit."""
        if self._queue is None:
            return 0
        return self._queue.run_pending()

    def _make_store(self, document: Document) -> BlockStore:
        store = BlockStore.from_document(document, image_url=self._image_url)
        store.add_listener(self._on_store_commit)
        return store

    def _on_store_commit(self, store: BlockStore) -> None:
        if store is self.store:
            self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self.store)
