from __future__ import annotations

import logging

import pytest

from block_model import BLOCK_TYPES, CODE, DIVIDER, IMAGE, PARAGRAPH
from block_registry import (
    CAPTIONED_IMAGE,
    CHECKBOX,
    MULTI_LINE,
    NO_CONTROLS,
    NO_INPUT,
    SINGLE_LINE,
    get_block_affordance,
)


@pytest.mark.parametrize("block_type", BLOCK_TYPES)
def test_every_block_type_has_an_affordance(block_type: str, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        affordance = get_block_affordance(block_type)
    assert affordance.input_shape in {SINGLE_LINE, MULTI_LINE, NO_INPUT}
    assert caplog.records == []


@pytest.mark.parametrize(
    ("block_type", "shape", "extra", "placeholder"),
    [
        ("heading1", SINGLE_LINE, NO_CONTROLS, "Heading 1"),
        ("heading3", SINGLE_LINE, NO_CONTROLS, "Heading 3"),
        ("paragraph", MULTI_LINE, NO_CONTROLS, "Type '/' for commands"),
        ("list", SINGLE_LINE, NO_CONTROLS, "List item"),
        ("checklist", SINGLE_LINE, CHECKBOX, "To-do"),
        ("quote", MULTI_LINE, NO_CONTROLS, "Quote"),
        ("image", SINGLE_LINE, CAPTIONED_IMAGE, "Add a caption..."),
    ],
)
def test_affordance_table(block_type: str, shape: str, extra: str, placeholder: str) -> None:
    affordance = get_block_affordance(block_type)
    assert affordance.input_shape == shape
    assert affordance.extra_controls == extra
    assert affordance.placeholder == placeholder


def test_code_blocks_get_three_rows() -> None:
    assert get_block_affordance(CODE).rows == 3


def test_divider_is_not_editable() -> None:
    affordance = get_block_affordance(DIVIDER)
    assert affordance.editable is False
    assert get_block_affordance(IMAGE).editable is True


def test_unknown_type_falls_back_to_paragraph(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="block_registry"):
        affordance = get_block_affordance("table")
    assert affordance == get_block_affordance(PARAGRAPH)
    assert "table" in caplog.text
