"""Ordered block sequence for the open document."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from typing import List, Sequence

from block_model import (
    CHECKLIST,
    DEFAULT_IMAGE_URL,
    PARAGRAPH,
    Block,
    Document,
    copy_block,
    make_block,
    retyped,
    with_content,
)


logger = logging.getLogger(__name__)

UP = "up"
DOWN = "down"


class StaleBlockError(LookupError):
    """Raised when an operation names a block id that is not in the sequence."""

    def __init__(self, block_id: str) -> None:
        super().__init__(f"block {block_id!r} is not in the document")
        self.block_id = block_id


class BlockStore:
    def __init__(
        self,
        blocks: Sequence[Block],
        title: str = "Untitled",
        image_url: str = DEFAULT_IMAGE_URL,
    ) -> None:
        if not blocks:
            raise ValueError("a document needs at least one block")
        ids = [block.id for block in blocks]
        if len(set(ids)) != len(ids):
            raise ValueError("block ids must be unique")
        self._blocks: List[Block] = list(blocks)
        self._title = title
        self._image_url = image_url
        self._dirty = False
        self._listeners: list[Callable[["BlockStore"], None]] = []

    @classmethod
    def from_document(
        cls, document: Document, image_url: str = DEFAULT_IMAGE_URL
    ) -> "BlockStore":
        return cls(document.blocks, title=document.title, image_url=image_url)

    def add_listener(self, listener: Callable[["BlockStore"], None]) -> None:
        self._listeners.append(listener)

    @property
    def blocks(self) -> tuple[Block, ...]:
        return tuple(self._blocks)

    @property
    def title(self) -> str:
        return self._title

    def set_title(self, title: str) -> None:
        if title == self._title:
            return
        self._title = title
        self._commit()

    def snapshot(self) -> Document:
        return Document(title=self._title, blocks=self.blocks)

    @property
    def dirty(self) -> bool:
        return self._dirty

    def clear_dirty(self) -> None:
        self._dirty = False

    def __len__(self) -> int:
        return len(self._blocks)

    def contains(self, block_id: str) -> bool:
        return any(block.id == block_id for block in self._blocks)

    def index_of(self, block_id: str) -> int:
        for index, block in enumerate(self._blocks):
            if block.id == block_id:
                return index
        raise StaleBlockError(block_id)

    def get(self, block_id: str) -> Block:
        return self._blocks[self.index_of(block_id)]

    def insert_after(self, anchor_id: str, block_type: str = PARAGRAPH) -> Block:
        """Insert a fresh block after the anchor.

        An unknown anchor raises ``StaleBlockError`` and leaves the sequence as is.
        """
        index = self.index_of(anchor_id)
        block = make_block(block_type, image_url=self._image_url)
        self._blocks.insert(index + 1, block)
        logger.debug("inserted %s block %s after %s", block_type, block.id, anchor_id)
        self._commit()
        return block

    def append(self, block_type: str = PARAGRAPH) -> Block:
        return self.insert_after(self._blocks[-1].id, block_type)

    def update(self, block_id: str, content: str) -> bool:
        index = self.index_of(block_id)
        block = self._blocks[index]
        if block.content == content:
            return False
        self._blocks[index] = with_content(block, content)
        self._commit()
        return True

    def delete(self, block_id: str) -> str | None:
        """Remove a block and return the id that should receive focus.

        The last remaining block is never removed; that case returns None.
        """
        index = self.index_of(block_id)
        if len(self._blocks) == 1:
            return None
        self._blocks.pop(index)
        target = self._blocks[index - 1] if index > 0 else self._blocks[0]
        logger.debug("deleted block %s, focus moves to %s", block_id, target.id)
        self._commit()
        return target.id

    def duplicate(self, block_id: str) -> Block:
        index = self.index_of(block_id)
        block = copy_block(self._blocks[index])
        self._blocks.insert(index + 1, block)
        logger.debug("duplicated block %s as %s", block_id, block.id)
        self._commit()
        return block

    def move(self, block_id: str, direction: str) -> bool:
        if direction not in (UP, DOWN):
            raise ValueError(f"unknown direction: {direction!r}")
        index = self.index_of(block_id)
        target = index - 1 if direction == UP else index + 1
        if target < 0 or target >= len(self._blocks):
            return False
        first = self._blocks[index]
        second = self._blocks[target]
        self._blocks[index] = second
        self._blocks[target] = first
        self._commit()
        return True

    def retype(self, block_id: str, block_type: str) -> Block:
        index = self.index_of(block_id)
        block = retyped(self._blocks[index], block_type, image_url=self._image_url)
        self._blocks[index] = block
        logger.debug("retyped block %s to %s", block_id, block_type)
        self._commit()
        return block

    def toggle_checked(self, block_id: str) -> bool:
        index = self.index_of(block_id)
        block = self._blocks[index]
        if block.type != CHECKLIST:
            return False
        self._blocks[index] = replace(block, checked=not block.checked)
        self._commit()
        return True

    def reorder(self, source_id: str, target_id: str) -> bool:
        """Move the source block into the slot the target occupies now."""
        source_index = self.index_of(source_id)
        target_index = self.index_of(target_id)
        if source_index == target_index:
            return False
        block = self._blocks.pop(source_index)
        self._blocks.insert(target_index, block)
        logger.debug("reordered block %s to index %d", source_id, target_index)
        self._commit()
        return True

    def _commit(self) -> None:
        self._dirty = True
        for listener in list(self._listeners):
            listener(self)
