"""Shared engine search models and protocol."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from loa.core.interfaces import Move, Position

# A magnitude greater than any reachable score.
INFTY = sys.maxsize
# A score magnitude indicating a win (for white if positive, black if
# negative).  Kept below INFTY so negation and comparison stay ordered.
WINNING_VALUE = INFTY - 20

Score = int | float


class NoMoveAvailableError(RuntimeError):
    """Raised when a move is requested for a finished or move-less position."""


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation."""

    max_depth: int = 3


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search."""

    best_move: Move | None
    score: Score
    depth: int
    nodes: int


class IEngine(Protocol):
    """Protocol for engines used by the player/game layer."""

    def search(
        self,
        position: Position,
        limits: SearchLimits | None = None,
    ) -> SearchResult: ...
