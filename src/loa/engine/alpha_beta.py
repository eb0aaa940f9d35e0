"""Depth-limited minimax with alpha-beta pruning."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loa.core.enums import POSITIVE_SIDE
from loa.engine.search import INFTY, Score

if TYPE_CHECKING:
    from loa.core.interfaces import Move, Position
    from loa.engine.evaluator import IEvaluator


class AlphaBetaSearcher:
    """Minimax searcher using the ``sense`` convention.

    ``sense == 1`` marks a node where the side associated with positive
    scores moves (maximizing), ``sense == -1`` a minimizing node.  Every
    recursive call works on its own copy of the position.
    """

    __slots__ = ("_evaluator", "nodes")

    def __init__(self, evaluator: IEvaluator) -> None:
        self._evaluator = evaluator
        self.nodes = 0

    def reset(self) -> None:
        self.nodes = 0

    def find_move(
        self,
        position: Position,
        depth: int,
        save_move: bool,
        sense: int,
        alpha: Score = -INFTY,
        beta: Score = INFTY,
    ) -> tuple[Score, Move | None]:
        """Search *position* to *depth* plies and return ``(score, move)``.

        The move is only reported when *save_move* is set, the depth is
        positive, the game is not over and at least one legal move exists.
        On a cutoff the score of the refuting child is returned: it already
        proves the bound to the caller.
        """
        self.nodes += 1
        if depth == 0 or position.is_game_over():
            return self._evaluator.evaluate(position, POSITIVE_SIDE), None

        best: Score = INFTY if sense == -1 else -INFTY
        found: Move | None = None

        for move in position.legal_moves():
            child = position.copy()
            child.make_move(move)
            score, _ = self.find_move(child, depth - 1, False, -sense, alpha, beta)

            if sense * score > sense * best:
                best = score
                if save_move:
                    found = move

            if sense == 1:
                alpha = max(alpha, score)
            else:
                beta = min(beta, score)
            if alpha >= beta:
                return score, found

        return best, found
