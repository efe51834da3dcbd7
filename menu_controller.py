"""Insert menu and slash menu state."""
from __future__ import annotations

from collections.abc import Callable

from block_menus import INSERT_MENU_SECTIONS, MenuEntry, MenuSection, filter_slash_entries
from block_model import Block
from editor_state import InteractionState


SLASH = "/"


class MenuController:
    def __init__(
        self,
        state: InteractionState,
        on_insert: Callable[[str, str], Block],
        on_retype: Callable[[str, str], Block],
    ) -> None:
        self._state = state
        self._on_insert = on_insert
        self._on_retype = on_retype

    @property
    def insert_menu_block_id(self) -> str | None:
        return self._state.insert_menu_block_id

    @property
    def slash_menu_block_id(self) -> str | None:
        return self._state.slash_menu_block_id

    def toggle_insert_menu(self, block_id: str) -> bool:
        """Open the insert menu for a block, or close it if it is open there."""
        if self._state.insert_menu_block_id == block_id:
            self._state.set_insert_menu(None)
            return False
        self._state.set_insert_menu(block_id)
        return True

    def content_changed(self, block_id: str, content: str) -> None:
        if content == SLASH:
            self._state.set_slash_query("")
            self._state.set_slash_menu(block_id)
            return
        if self._state.slash_menu_block_id != block_id:
            return
        if content.startswith(SLASH) and filter_slash_entries(content[1:]):
            self._state.set_slash_query(content[1:])
            return
        self.close_slash_menu()

    def insert_menu_entries(self) -> tuple[MenuSection, ...]:
        return INSERT_MENU_SECTIONS

    def slash_menu_entries(self) -> list[MenuEntry]:
        if self._state.slash_menu_block_id is None:
            return []
        return filter_slash_entries(self._state.slash_query)

    def select_insert_entry(self, block_type: str) -> Block | None:
        block_id = self._state.insert_menu_block_id
        if block_id is None:
            return None
        self.close_menus()
        return self._on_insert(block_id, block_type)

    def select_slash_entry(self, block_type: str) -> Block | None:
        block_id = self._state.slash_menu_block_id
        if block_id is None:
            return None
        self.close_slash_menu()
        return self._on_retype(block_id, block_type)

    def close_slash_menu(self) -> None:
        self._state.set_slash_menu(None)
        self._state.set_slash_query("")

    def close_menus(self) -> None:
        self._state.set_insert_menu(None)
        self.close_slash_menu()

    def forget_block(self, block_id: str) -> None:
        if self._state.insert_menu_block_id == block_id:
            self._state.set_insert_menu(None)
        if self._state.slash_menu_block_id == block_id:
            self.close_slash_menu()
