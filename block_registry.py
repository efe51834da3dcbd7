"""Block editing affordance registry."""

from __future__ import annotations

import logging
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


logger = logging.getLogger(__name__)

SINGLE_LINE = "single-line"
MULTI_LINE = "multi-line"
NO_INPUT = "none"

NO_CONTROLS = "none"
CHECKBOX = "checkbox"
CAPTIONED_IMAGE = "captioned-image"


@dataclass(frozen=True)
class BlockAffordance:
    input_shape: str
    extra_controls: str
    placeholder: str
    rows: int = 1

    @property
    def editable(self) -> bool:
        return self.input_shape != NO_INPUT


_BLOCK_AFFORDANCES: dict[str, BlockAffordance] = {
    HEADING1: BlockAffordance(SINGLE_LINE, NO_CONTROLS, "Heading 1"),
    HEADING2: BlockAffordance(SINGLE_LINE, NO_CONTROLS, "Heading 2"),
    HEADING3: BlockAffordance(SINGLE_LINE, NO_CONTROLS, "Heading 3"),
    PARAGRAPH: BlockAffordance(MULTI_LINE, NO_CONTROLS, "Type '/' for commands"),
    LIST: BlockAffordance(SINGLE_LINE, NO_CONTROLS, "List item"),
    CHECKLIST: BlockAffordance(SINGLE_LINE, CHECKBOX, "To-do"),
    QUOTE: BlockAffordance(MULTI_LINE, NO_CONTROLS, "Quote"),
    CODE: BlockAffordance(MULTI_LINE, NO_CONTROLS, "Code", rows=3),
    DIVIDER: BlockAffordance(NO_INPUT, NO_CONTROLS, "", rows=0),
    IMAGE: BlockAffordance(SINGLE_LINE, CAPTIONED_IMAGE, "Add a caption..."),
}


def get_block_affordance(block_type: str) -> BlockAffordance:
    affordance = _BLOCK_AFFORDANCES.get(block_type)
    if affordance is None:
        logger.warning("no affordance for block type %r, using paragraph", block_type)
        return _BLOCK_AFFORDANCES[PARAGRAPH]
    return affordance
