from __future__ import annotations

from block_model import HEADING1, HEADING2, LIST, PARAGRAPH
from document_templates import open_document, template_ids


def test_welcome_template() -> None:
    document = open_document("welcome")
    assert document.title == "Welcome to Your Workspace"
    assert [block.type for block in document.blocks] == [
        HEADING1,
        PARAGRAPH,
        HEADING2,
        LIST,
        LIST,
        LIST,
    ]
    assert document.blocks[3].content == "Create your first page"


def test_getting_started_template() -> None:
    document = open_document("getting-started")
    assert document.title == "Getting Started Guide"
    assert [(block.type, block.content) for block in document.blocks] == [
        (HEADING1, "Getting Started Guide"),
        (PARAGRAPH, "Learn how to use this workspace effectively."),
    ]


def test_unknown_page_is_blank() -> None:
    document = open_document("some-new-page")
    assert document.title == "Untitled"
    assert len(document.blocks) == 1
    assert (document.blocks[0].type, document.blocks[0].content) == (PARAGRAPH, "")


def test_templates_get_fresh_unique_ids() -> None:
    first = open_document("welcome")
    second = open_document("welcome")
    first_ids = {block.id for block in first.blocks}
    second_ids = {block.id for block in second.blocks}
    assert len(first_ids) == len(first.blocks)
    assert first_ids.isdisjoint(second_ids)
    assert template_ids() == ["welcome", "getting-started"]
