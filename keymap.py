"""Keymap configuration and matching for block editing."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import config


logger = logging.getLogger(__name__)

INSERT_BLOCK = "insert_block"
DELETE_EMPTY_BLOCK = "delete_empty_block"
MOVE_BLOCK_UP = "move_block_up"
MOVE_BLOCK_DOWN = "move_block_down"
FOCUS_PREVIOUS = "focus_previous"
FOCUS_NEXT = "focus_next"

DEFAULT_BLOCK_KEYMAP: dict[str, str] = {
    INSERT_BLOCK: "<CR>",
    DELETE_EMPTY_BLOCK: "<BS>",
    MOVE_BLOCK_UP: "<C-Up>",
    MOVE_BLOCK_DOWN: "<C-Down>",
    FOCUS_PREVIOUS: "<Up>",
    FOCUS_NEXT: "<Down>",
}

SPECIAL_TOKENS = {
    "<Esc>",
    "<CR>",
    "<Tab>",
    "<BS>",
    "<Up>",
    "<Down>",
    "<Left>",
    "<Right>",
    "<Home>",
    "<End>",
    "<PageUp>",
    "<PageDown>",
}

_MODIFIERS = {"C", "A", "S"}


def _is_printable_ascii(value: str) -> bool:
    return all(32 <= ord(ch) <= 126 for ch in value)


def _normalize_special(name: str) -> str | None:
    lookup = {
        "esc": "<Esc>",
        "escape": "<Esc>",
        "cr": "<CR>",
        "enter": "<CR>",
        "return": "<CR>",
        "tab": "<Tab>",
        "bs": "<BS>",
        "backspace": "<BS>",
        "up": "<Up>",
        "down": "<Down>",
        "left": "<Left>",
        "right": "<Right>",
        "home": "<Home>",
        "end": "<End>",
        "pageup": "<PageUp>",
        "pagedown": "<PageDown>",
    }
    return lookup.get(name.lower())


def normalize_token(value: str) -> str | None:
    """Normalize a user-written key such as ``ctrl-up`` or ``<C-Up>``.

    Returns None when the value cannot be bound to a single key press.
    """
    if not isinstance(value, str) or not value:
        return None
    raw = value
    if raw.startswith("<") and raw.endswith(">") and len(raw) > 2:
        raw = raw[1:-1]
    elif len(raw) == 1:
        return raw if _is_printable_ascii(raw) else None
    special = _normalize_special(raw)
    if special:
        return special
    lowered = raw.lower()
    for prefix, modifier in (("ctrl-", "C"), ("meta-", "C"), ("alt-", "A"), ("shift-", "S")):
        if lowered.startswith(prefix):
            raw = f"{modifier}-{raw[len(prefix):]}"
            break
    if len(raw) > 2 and raw[1] == "-" and raw[0].upper() in _MODIFIERS:
        modifier = raw[0].upper()
        base = raw[2:]
        if len(base) == 1 and _is_printable_ascii(base):
            return f"<{modifier}-{base.lower()}>"
        base_special = _normalize_special(base)
        if base_special is not None:
            return f"<{modifier}-{base_special.strip('<>')}>"
    return None


def make_token(key: str, primary: bool = False, alt: bool = False, shift: bool = False) -> str | None:
    """Build a token from a key name and modifier flags.

    ``primary`` covers both Ctrl and Meta, so one binding serves every platform.
    """
    base = normalize_token(key)
    if base is None:
        return None
    if base.startswith("<") and base[1:3] in {"C-", "A-", "S-"}:
        return base
    if primary and alt:
        return None
    name = base.strip("<>") if base in SPECIAL_TOKENS else base
    if primary or alt:
        if len(name) == 1 and name.isalpha():
            name = name.lower()
        return f"<{'C' if primary else 'A'}-{name}>"
    if shift and base in SPECIAL_TOKENS:
        return f"<S-{name}>"
    return base


@dataclass
class Keymap:
    sequences: dict[str, str]

    def __post_init__(self) -> None:
        self._actions: dict[str, str] = {}
        for action, token in self.sequences.items():
            if token in self._actions:
                logger.warning(
                    "key %s is bound to both %s and %s; keeping %s",
                    token,
                    self._actions[token],
                    action,
                    self._actions[token],
                )
                continue
            self._actions[token] = action

    def match(self, token: str | None) -> str | None:
        if token is None:
            return None
        return self._actions.get(token)

    def get_sequence(self, action: str) -> str | None:
        return self.sequences.get(action)


def default_keymap() -> Keymap:
    return Keymap(sequences=dict(DEFAULT_BLOCK_KEYMAP))


def build_keymap(overrides: dict[str, str]) -> Keymap:
    sequences: dict[str, str] = {}
    for action, default in DEFAULT_BLOCK_KEYMAP.items():
        sequence = default
        if action in overrides:
            normalized = normalize_token(overrides[action])
            if normalized is None:
                logger.warning(
                    "ignoring invalid key %r for %s, using %s",
                    overrides[action],
                    action,
                    default,
                )
            else:
                sequence = normalized
        sequences[action] = sequence
    for action in overrides:
        if action not in DEFAULT_BLOCK_KEYMAP:
            logger.warning("ignoring unknown keymap action %r", action)
    return Keymap(sequences=sequences)


def load_keymap() -> Keymap:
    return build_keymap(config.get_keymap_overrides())
