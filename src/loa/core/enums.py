"""Core enumerations for the Lines of Action domain."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """Side (piece color) of a player."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


# Heuristic scores are positive when they favor this side.
POSITIVE_SIDE = Side.WHITE
