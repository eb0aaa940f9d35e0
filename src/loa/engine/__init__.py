"""Engine package: evaluation, alpha-beta search and Qt worker bridge."""

from loa.engine.alpha_beta import AlphaBetaSearcher
from loa.engine.evaluator import IEvaluator, RegionEvaluator
from loa.engine.qt_bridge import EngineWorker
from loa.engine.search import (
    INFTY,
    WINNING_VALUE,
    IEngine,
    NoMoveAvailableError,
    SearchLimits,
    SearchResult,
)
from loa.engine.selector import MoveSelector

__all__ = [
    "INFTY",
    "WINNING_VALUE",
    "AlphaBetaSearcher",
    "EngineWorker",
    "IEngine",
    "IEvaluator",
    "MoveSelector",
    "NoMoveAvailableError",
    "RegionEvaluator",
    "SearchLimits",
    "SearchResult",
]
