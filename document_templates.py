"""Built-in page templates."""

from __future__ import annotations

from typing import List

from block_model import (
    HEADING1,
    HEADING2,
    LIST,
    PARAGRAPH,
    Block,
    Document,
    make_block,
)


DEFAULT_TITLE = "Untitled"


def welcome_document() -> Document:
    blocks: List[Block] = [
        make_block(HEADING1, "Welcome to Your Workspace"),
        make_block(
            PARAGRAPH,
            "This is your personal workspace where you can create pages, "
            "manage databases, and organize your thoughts.",
        ),
        make_block(HEADING2, "Getting Started"),
        make_block(LIST, "Create your first page"),
        make_block(LIST, "Set up a database"),
        make_block(LIST, "Invite team members"),
    ]
    return Document("Welcome to Your Workspace", tuple(blocks))


def getting_started_document() -> Document:
    blocks: List[Block] = [
        make_block(HEADING1, "Getting Started Guide"),
        make_block(PARAGRAPH, "Learn how to use this workspace effectively."),
    ]
    return Document("Getting Started Guide", tuple(blocks))


def blank_document() -> Document:
    return Document(DEFAULT_TITLE, (make_block(PARAGRAPH),))


_TEMPLATES = {
    "welcome": welcome_document,
    "getting-started": getting_started_document,
}


def template_ids() -> list[str]:
    return list(_TEMPLATES)


def open_document(page_id: str) -> Document:
    """Seed a document for a page; unknown pages get one empty paragraph."""
    factory = _TEMPLATES.get(page_id, blank_document)
    return factory()
