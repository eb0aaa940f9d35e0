"""Static evaluation of Lines of Action positions.

Fewer and larger connected regions approximate progress toward the
connectivity win condition, so the heuristic rewards consolidation and
penalizes fragmentation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from loa.core.enums import Side
from loa.engine.search import WINNING_VALUE, Score

if TYPE_CHECKING:
    from loa.config import EngineConfig
    from loa.core.interfaces import Position

DEFAULT_REGION_SIZE_WEIGHT = 0.5
DEFAULT_REGION_COUNT_WEIGHT = 1.2


class IEvaluator(Protocol):
    """Scores *position* from the point of view of *side*."""

    def evaluate(self, position: Position, side: Side) -> Score: ...


class RegionEvaluator(IEvaluator):
    """Weighted differential of region sizes and region counts.

    Args:
        region_size_weight: Weight of ``maxRegion(side) - maxRegion(opp)``.
        region_count_weight: Weight of ``regions(opp) - regions(side)``.
    """

    __slots__ = ("region_size_weight", "region_count_weight")

    def __init__(
        self,
        region_size_weight: float = DEFAULT_REGION_SIZE_WEIGHT,
        region_count_weight: float = DEFAULT_REGION_COUNT_WEIGHT,
    ) -> None:
        self.region_size_weight = region_size_weight
        self.region_count_weight = region_count_weight

    @classmethod
    def from_config(cls, config: EngineConfig) -> RegionEvaluator:
        return cls(config.region_size_weight, config.region_count_weight)

    def evaluate(self, position: Position, side: Side) -> Score:
        if position.is_game_over():
            winner = position.winner()
            if winner is not None:
                return WINNING_VALUE if winner == side else -WINNING_VALUE

        own = position.region_sizes(side)
        other = position.region_sizes(side.opposite)

        size_diff = max(own, default=0) - max(other, default=0)
        count_diff = len(other) - len(own)
        return self.region_size_weight * size_diff + self.region_count_weight * count_diff
