"""Qt bridge to run move selection in a worker thread."""

from __future__ import annotations

import logging
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from loa.core.interfaces import Position
from loa.engine.search import IEngine, SearchLimits
from loa.engine.selector import MoveSelector

logger = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    A search cannot be interrupted; ``cancel`` marks the running request so
    its result is dropped and ``search_cancelled`` is emitted instead.
    """

    best_move_ready = pyqtSignal(int, object, object, int, int)
    search_cancelled = pyqtSignal(int)
    search_no_move = pyqtSignal(int, object, int, int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_engine", "_limits")

    def __init__(self, *, max_depth: int = 3, engine: IEngine | None = None) -> None:
        super().__init__()
        self._engine: IEngine = engine or MoveSelector()
        self._limits = SearchLimits(max_depth=max_depth)
        self._cancel_event = threading.Event()

    @pyqtSlot(object, int)
    def request_move(self, position_obj: object, request_id: int) -> None:
        """Search for the best move in *position_obj* and emit result."""
        if not isinstance(position_obj, Position):
            self.search_error.emit(request_id, "Engine received invalid position")
            return

        self._cancel_event.clear()
        try:
            result = self._engine.search(position_obj, self._limits)
        except Exception as exc:
            logger.exception("Search failed for request %d", request_id)
            self.search_error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.search_cancelled.emit(request_id)
            return

        if result.best_move is None:
            self.search_no_move.emit(
                request_id,
                result.score,
                result.depth,
                result.nodes,
            )
            return

        self.best_move_ready.emit(
            request_id,
            result.best_move,
            result.score,
            result.depth,
            result.nodes,
        )

    @pyqtSlot()
    def cancel(self) -> None:
        """Request cancellation of the current search."""
        self._cancel_event.set()

    @pyqtSlot(int)
    def set_depth(self, max_depth: int) -> None:
        """Update search depth (takes effect on the next search)."""
        self._limits = SearchLimits(max_depth=max_depth)
