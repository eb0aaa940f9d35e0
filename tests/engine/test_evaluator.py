"""Tests for the region heuristic."""

import pytest
from fakes import Node, TreePosition

from loa.config import EngineConfig
from loa.core.enums import Side
from loa.engine.evaluator import RegionEvaluator
from loa.engine.search import WINNING_VALUE


def _position(white: tuple[int, ...], black: tuple[int, ...], winner: Side | None = None) -> TreePosition:
    node = Node(
        regions={Side.WHITE: white, Side.BLACK: black},
        children={} if winner is not None else {"m0": Node()},
        winner=winner,
    )
    return TreePosition(node)


class TestRegionEvaluator:
    def test_weighted_differentials(self) -> None:
        pos = _position(white=(5, 2), black=(3, 1, 1, 1))
        evaluator = RegionEvaluator()

        # 0.5 * (5 - 3) + 1.2 * (4 - 2)
        assert evaluator.evaluate(pos, Side.WHITE) == pytest.approx(3.4)

    def test_score_is_antisymmetric_in_side(self) -> None:
        pos = _position(white=(5, 2), black=(3, 1, 1, 1))
        evaluator = RegionEvaluator()

        assert evaluator.evaluate(pos, Side.BLACK) == pytest.approx(
            -evaluator.evaluate(pos, Side.WHITE)
        )

    def test_balanced_position_scores_zero(self) -> None:
        pos = _position(white=(4, 4), black=(4, 4))
        assert RegionEvaluator().evaluate(pos, Side.WHITE) == 0

    def test_side_without_pieces_counts_as_empty_region(self) -> None:
        pos = _position(white=(3,), black=())
        # 0.5 * (3 - 0) + 1.2 * (0 - 1)
        assert RegionEvaluator().evaluate(pos, Side.WHITE) == pytest.approx(0.3)

    def test_custom_weights(self) -> None:
        pos = _position(white=(6,), black=(2, 2))
        evaluator = RegionEvaluator(region_size_weight=1.0, region_count_weight=0.0)

        assert evaluator.evaluate(pos, Side.WHITE) == pytest.approx(4.0)

    def test_from_config(self) -> None:
        evaluator = RegionEvaluator.from_config(
            EngineConfig(region_size_weight=2.0, region_count_weight=3.0)
        )
        assert evaluator.region_size_weight == 2.0
        assert evaluator.region_count_weight == 3.0

    def test_won_position_scores_winning_value_for_winner(self) -> None:
        pos = _position(white=(1, 1, 1), black=(9,), winner=Side.WHITE)
        evaluator = RegionEvaluator()

        assert evaluator.evaluate(pos, Side.WHITE) == WINNING_VALUE
        assert evaluator.evaluate(pos, Side.BLACK) == -WINNING_VALUE

    def test_does_not_mutate_position(self) -> None:
        pos = _position(white=(2, 1), black=(3,))
        before = (pos.path, pos.side_to_move, pos.node)

        RegionEvaluator().evaluate(pos, Side.BLACK)

        assert (pos.path, pos.side_to_move, pos.node) == before
