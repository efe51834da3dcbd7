"""Focus placement for block inputs."""
from __future__ import annotations

import logging
from typing import Optional, Protocol

from block_store import BlockStore
from deferred import Scheduler
from editor_state import FocusRequest, InteractionState


logger = logging.getLogger(__name__)


class FocusSurface(Protocol):
    def focus_block(self, block_id: str, caret: Optional[str] = None) -> bool:
        """Give keyboard focus to a mounted block input, optionally moving the caret."""
        ...


class FocusController:
    def __init__(
        self,
        state: InteractionState,
        store: BlockStore,
        scheduler: Scheduler,
        surface: FocusSurface | None = None,
    ) -> None:
        self._state = state
        self._store = store
        self._schedule = scheduler
        self._surface = surface

    def attach_surface(self, surface: FocusSurface | None) -> None:
        self._surface = surface

    def set_store(self, store: BlockStore) -> None:
        self._store = store

    def request_focus(self, block_id: str, caret: Optional[str] = None) -> None:
        """Focus a block once the current mutation has been rendered."""
        request = FocusRequest(block_id, caret)
        self._state.set_pending_focus(request)
        self._schedule(lambda: self._apply(request))

    def focus_now(self, block_id: str, caret: Optional[str] = None) -> bool:
        if self._surface is not None and not self._surface.focus_block(block_id, caret):
            logger.debug("surface could not focus block %s", block_id)
            return False
        self._state.set_focused(block_id)
        return True

    def focus_entered(self, block_id: str) -> None:
        self._state.set_focused(block_id)

    def focus_left(self, block_id: str) -> None:
        if self._state.focused_block_id == block_id:
            self._state.set_focused(None)

    def _apply(self, request: FocusRequest) -> None:
        if self._state.pending_focus == request:
            self._state.set_pending_focus(None)
        if not self._store.contains(request.block_id):
            logger.debug("dropping focus request for removed block %s", request.block_id)
            return
        self.focus_now(request.block_id, request.caret)
