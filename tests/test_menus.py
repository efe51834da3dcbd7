from __future__ import annotations

from block_menus import INSERT_MENU_SECTIONS, SLASH_MENU_ENTRIES, filter_slash_entries, insert_menu_types
from block_model import BLOCK_TYPES, CHECKLIST, DIVIDER, HEADING1, LIST, PARAGRAPH, Block

from conftest import ids, make_editor


def test_slash_opens_menu_for_block() -> None:
    editor = make_editor(Block("A"), Block("B"))
    editor.update("B", "/")
    assert editor.state.slash_menu_block_id == "B"
    assert [entry.block_type for entry in editor.slash_menu_entries()] == [
        HEADING1,
        "heading2",
        LIST,
        CHECKLIST,
    ]


def test_slash_followed_by_unmatched_text_closes_menu() -> None:
    editor = make_editor(Block("A"))
    editor.update("A", "/")
    editor.update("A", "/x")
    assert editor.state.slash_menu_block_id is None


def test_clearing_content_closes_slash_menu() -> None:
    editor = make_editor(Block("A"))
    editor.update("A", "/")
    editor.update("A", "")
    assert editor.state.slash_menu_block_id is None


def test_slash_query_filters_entries() -> None:
    editor = make_editor(Block("A"))
    editor.update("A", "/")
    editor.update("A", "/to")
    assert editor.state.slash_menu_block_id == "A"
    assert [entry.block_type for entry in editor.slash_menu_entries()] == [CHECKLIST]
    editor.update("A", "/head")
    assert [entry.label for entry in editor.slash_menu_entries()] == ["Heading 1", "Heading 2"]


def test_slash_query_change_notifies_state_listeners() -> None:
    editor = make_editor(Block("A"))
    editor.update("A", "/")
    queries: list[str] = []
    editor.state.add_listener(lambda state: queries.append(state.slash_query))
    editor.update("A", "/to")
    assert queries == ["to"]
    editor.update("A", "/to")
    assert queries == ["to"]
    editor.update("A", "")
    assert editor.state.slash_query == ""
    assert editor.state.slash_menu_block_id is None


def test_slash_menu_moves_to_latest_block() -> None:
    editor = make_editor(Block("A"), Block("B"))
    editor.update("A", "/")
    editor.update("B", "/")
    assert editor.state.slash_menu_block_id == "B"
    editor.update("A", "text")
    assert editor.state.slash_menu_block_id == "B"


def test_slash_text_typed_later_does_not_open_menu() -> None:
    editor = make_editor(Block("A"))
    editor.update("A", "a/b")
    editor.update("A", "/b")
    assert editor.state.slash_menu_block_id is None


def test_selecting_slash_entry_retypes_block() -> None:
    editor = make_editor(Block("A"), Block("B"))
    editor.update("B", "/")
    block = editor.select_slash_entry(CHECKLIST)
    assert block is not None
    assert (block.id, block.type, block.content, block.checked) == ("B", CHECKLIST, "", False)
    assert editor.state.slash_menu_block_id is None


def test_selecting_slash_entry_without_menu_is_ignored() -> None:
    editor = make_editor(Block("A", content="x"))
    assert editor.select_slash_entry(HEADING1) is None
    assert editor.get_blocks()[0].type == PARAGRAPH


def test_insert_menu_toggles_per_block() -> None:
    editor = make_editor(Block("A"), Block("B"))
    assert editor.toggle_insert_menu("A") is True
    assert editor.state.insert_menu_block_id == "A"
    assert editor.toggle_insert_menu("B") is True
    assert editor.state.insert_menu_block_id == "B"
    assert editor.toggle_insert_menu("B") is False
    assert editor.state.insert_menu_block_id is None


def test_selecting_insert_entry_inserts_after_target_and_closes_menus() -> None:
    editor = make_editor(Block("A"), Block("B"))
    editor.update("A", "/")
    editor.toggle_insert_menu("A")
    block = editor.select_insert_entry(DIVIDER)
    assert block is not None
    assert ids(editor) == ["A", block.id, "B"]
    assert block.type == DIVIDER
    assert editor.state.insert_menu_block_id is None
    assert editor.state.slash_menu_block_id is None


def test_selecting_insert_entry_without_menu_is_ignored() -> None:
    editor = make_editor(Block("A"))
    assert editor.select_insert_entry(HEADING1) is None
    assert len(editor.get_blocks()) == 1


def test_both_menus_can_target_different_blocks() -> None:
    editor = make_editor(Block("A"), Block("B"))
    editor.toggle_insert_menu("A")
    editor.update("B", "/")
    assert editor.state.insert_menu_block_id == "A"
    assert editor.state.slash_menu_block_id == "B"
    editor.close_menus()
    assert editor.state.insert_menu_block_id is None
    assert editor.state.slash_menu_block_id is None


def test_insert_menu_catalog_covers_every_block_type() -> None:
    assert sorted(insert_menu_types()) == sorted(BLOCK_TYPES)
    assert [section.title for section in INSERT_MENU_SECTIONS] == ["BASIC BLOCKS", "LISTS", "MEDIA"]


def test_filter_slash_entries_matches_type_names_and_labels() -> None:
    assert filter_slash_entries("") == list(SLASH_MENU_ENTRIES)
    assert [entry.block_type for entry in filter_slash_entries("bullet")] == [LIST]
    assert [entry.block_type for entry in filter_slash_entries("check")] == [CHECKLIST]
    assert filter_slash_entries("zzz") == []
