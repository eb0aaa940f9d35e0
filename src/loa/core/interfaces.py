"""Structural contract the engine expects from the surrounding game.

The engine never builds boards or generates moves itself.  Any object that
satisfies :class:`Position` (a board, a test double, a network proxy) can
be searched.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from loa.core.enums import Side


@runtime_checkable
class Move(Protocol):
    """Opaque, immutable move.  ``str(move)`` is what gets reported."""

    def __str__(self) -> str: ...


@runtime_checkable
class Position(Protocol):
    """Mutable game state: side to move, legal moves, region analysis."""

    @property
    def side_to_move(self) -> Side: ...

    def is_game_over(self) -> bool: ...

    def legal_moves(self) -> Sequence[Move]:
        """Legal moves in a deterministic order."""
        ...

    def copy(self) -> Position:
        """Deep, independent copy."""
        ...

    def make_move(self, move: Move) -> None: ...

    def region_sizes(self, side: Side) -> Sequence[int]:
        """Sizes of every maximal connected group of *side*'s pieces."""
        ...

    def winner(self) -> Side | None:
        """Winning side of a finished game, ``None`` otherwise."""
        ...
