"""Entry catalogs for the insert menu and the slash menu."""

from __future__ import annotations

from dataclasses import dataclass

from block_model import (
    CHECKLIST,
    CODE,
    DIVIDER,
    HEADING1,
    HEADING2,
    HEADING3,
    IMAGE,
    LIST,
    PARAGRAPH,
    QUOTE,
)


@dataclass(frozen=True)
class MenuEntry:
    block_type: str
    label: str
    description: str = ""


@dataclass(frozen=True)
class MenuSection:
    title: str
    entries: tuple[MenuEntry, ...]


INSERT_MENU_SECTIONS: tuple[MenuSection, ...] = (
    MenuSection(
        "BASIC BLOCKS",
        (
            MenuEntry(PARAGRAPH, "Text", "Just start writing with plain text."),
            MenuEntry(HEADING1, "Heading 1", "Big section heading."),
            MenuEntry(HEADING2, "Heading 2", "Medium section heading."),
            MenuEntry(HEADING3, "Heading 3", "Small section heading."),
        ),
    ),
    MenuSection(
        "LISTS",
        (
            MenuEntry(LIST, "Bulleted list", "Create a simple bulleted list."),
            MenuEntry(CHECKLIST, "To-do list", "Track tasks with a to-do list."),
        ),
    ),
    MenuSection(
        "MEDIA",
        (
            MenuEntry(IMAGE, "Image", "Upload or embed with a link."),
            MenuEntry(QUOTE, "Quote", "Capture a quote."),
            MenuEntry(CODE, "Code", "Capture a code snippet."),
            MenuEntry(DIVIDER, "Divider", "Visually divide blocks."),
        ),
    ),
)

SLASH_MENU_ENTRIES: tuple[MenuEntry, ...] = (
    MenuEntry(HEADING1, "Heading 1"),
    MenuEntry(HEADING2, "Heading 2"),
    MenuEntry(LIST, "Bullet List"),
    MenuEntry(CHECKLIST, "To-do"),
)


def _matches(entry: MenuEntry, query: str) -> bool:
    if not query:
        return True
    if entry.block_type.startswith(query):
        return True
    words = entry.label.lower().replace("-", " ").split()
    label = entry.label.lower()
    return label.startswith(query) or any(word.startswith(query) for word in words)


def filter_slash_entries(query: str) -> list[MenuEntry]:
    """Slash entries whose type or label starts with the typed query."""
    normalized = query.strip().lower()
    return [entry for entry in SLASH_MENU_ENTRIES if _matches(entry, normalized)]


def insert_menu_types() -> list[str]:
    return [entry.block_type for section in INSERT_MENU_SECTIONS for entry in section.entries]
