"""Public entry point: pick a move for the side to move."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from loa.core.enums import POSITIVE_SIDE, Side
from loa.engine.alpha_beta import AlphaBetaSearcher
from loa.engine.evaluator import RegionEvaluator
from loa.engine.search import (
    INFTY,
    IEngine,
    NoMoveAvailableError,
    SearchLimits,
    SearchResult,
)

if TYPE_CHECKING:
    from loa.config import EngineConfig
    from loa.core.interfaces import Move, Position
    from loa.engine.evaluator import IEvaluator

logger = logging.getLogger(__name__)


class MoveSelector(IEngine):
    """Fixed-depth alpha-beta move selection.

    The caller's position is never touched: every search starts from a
    fresh snapshot, and the chosen move is returned rather than stored, so
    one selector can be reused for any number of moves.
    """

    __slots__ = ("_limits", "_searcher")

    def __init__(
        self,
        evaluator: IEvaluator | None = None,
        limits: SearchLimits | None = None,
    ) -> None:
        self._limits = limits or SearchLimits()
        self._searcher = AlphaBetaSearcher(evaluator or RegionEvaluator())

    @classmethod
    def from_config(cls, config: EngineConfig) -> MoveSelector:
        return cls(RegionEvaluator.from_config(config), config.limits())

    @property
    def limits(self) -> SearchLimits:
        return self._limits

    def choose_move(self, position: Position, side: Side | None = None) -> Move:
        """Return the best move found for *side* (default: side to move).

        Raises:
            NoMoveAvailableError: The game is over or there is no legal move.
            ValueError: *side* is not the side to move.
        """
        result = self.search(position, side=side)
        if result.best_move is None:
            logger.warning("No move available for %s", position.side_to_move)
            raise NoMoveAvailableError(
                f"No move available for {position.side_to_move}: game over or no legal moves"
            )
        return result.best_move

    def search(
        self,
        position: Position,
        limits: SearchLimits | None = None,
        side: Side | None = None,
    ) -> SearchResult:
        limits = limits or self._limits
        if limits.max_depth <= 0:
            raise ValueError("Search depth must be >= 1")

        side_to_move = position.side_to_move
        if side is not None and side != side_to_move:
            raise ValueError(f"Cannot search for {side}: {side_to_move} is to move")

        work = position.copy()
        sense = 1 if side_to_move == POSITIVE_SIDE else -1

        self._searcher.reset()
        score, move = self._searcher.find_move(
            work, limits.max_depth, True, sense, -INFTY, INFTY
        )
        nodes = self._searcher.nodes

        logger.debug(
            "search side=%s depth=%d score=%s move=%s nodes=%d",
            side_to_move,
            limits.max_depth,
            score,
            move,
            nodes,
        )
        return SearchResult(best_move=move, score=score, depth=limits.max_depth, nodes=nodes)
