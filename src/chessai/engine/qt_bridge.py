"""Qt bridge to run engine search in a worker thread."""

from __future__ import annotations

import logging
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessai.core.position import Position
from chessai.engine.negamax_search import NegamaxEngine
from chessai.engine.search import IEngine, LegalMoveSource, SearchLimits

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    The search itself cannot be interrupted; ``cancel`` only drops the
    result of the request that is currently running.
    """

    best_move_ready = pyqtSignal(int, object, int, object)
    search_cancelled = pyqtSignal(int)
    search_no_move = pyqtSignal(int, int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_engine", "_limits")

    def __init__(
        self,
        *,
        max_depth: int = 3,
        legal_moves: LegalMoveSource | None = None,
    ) -> None:
        super().__init__()
        self._engine: IEngine = NegamaxEngine(legal_moves)
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
            _LOGGER.exception("Engine search %d failed", request_id)
            self.search_error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.search_cancelled.emit(request_id)
            return

        if result.best_move is None:
            self.search_no_move.emit(request_id, result.score)
            return

        self.best_move_ready.emit(
            request_id,
            result.best_move,
            result.score,
            result.analysis,
        )

    @pyqtSlot()
    def cancel(self) -> None:
        """Discard the result of the current search."""
        self._cancel_event.set()

    @pyqtSlot(int)
    def set_limits(self, max_depth: int) -> None:
        """Update search depth (takes effect on the next search)."""
        try:
            self._limits = SearchLimits(max_depth=max_depth)
        except ValueError as exc:
            _LOGGER.warning("Ignoring engine limits: %s", exc)
