from __future__ import annotations

import uuid
from dataclasses import dataclass, replace


HEADING1 = "heading1"
HEADING2 = "heading2"
HEADING3 = "heading3"
PARAGRAPH = "paragraph"
LIST = "list"
CHECKLIST = "checklist"
QUOTE = "quote"
CODE = "code"
DIVIDER = "divider"
IMAGE = "image"

BLOCK_TYPES: tuple[str, ...] = (
    HEADING1,
    HEADING2,
    HEADING3,
    PARAGRAPH,
    LIST,
    CHECKLIST,
    QUOTE,
    CODE,
    DIVIDER,
    IMAGE,
)

DEFAULT_IMAGE_URL = "/placeholder-image.png"


@dataclass(frozen=True)
class Block:
    id: str
    type: str = PARAGRAPH
    content: str = ""
    checked: bool | None = None
    image_url: str | None = None


@dataclass(frozen=True)
class Document:
    title: str
    blocks: tuple[Block, ...]


def new_block_id() -> str:
    return uuid.uuid4().hex


def validate_block_type(block_type: str) -> str:
    if block_type not in BLOCK_TYPES:
        raise ValueError(f"unknown block type: {block_type!r}")
    return block_type


def make_block(
    block_type: str = PARAGRAPH,
    content: str = "",
    block_id: str | None = None,
    image_url: str = DEFAULT_IMAGE_URL,
) -> Block:
    """Build a block with the fields its type needs.

    Checklists start unchecked, images point at the placeholder URL.
    """
    validate_block_type(block_type)
    return Block(
        id=block_id or new_block_id(),
        type=block_type,
        content=content,
        checked=False if block_type == CHECKLIST else None,
        image_url=image_url if block_type == IMAGE else None,
    )


def retyped(block: Block, block_type: str, image_url: str = DEFAULT_IMAGE_URL) -> Block:
    validate_block_type(block_type)
    if block_type == IMAGE:
        url: str | None = block.image_url or image_url
    else:
        url = None
    return replace(
        block,
        type=block_type,
        content="",
        checked=False if block_type == CHECKLIST else None,
        image_url=url,
    )


def with_content(block: Block, content: str) -> Block:
    return replace(block, content=content)


def copy_block(block: Block) -> Block:
    return replace(block, id=new_block_id())
