"""Abstract interfaces for the game layer.

The game driver depends on :class:`IPlayer`, not on concrete players, so
manual and automated participants are interchangeable.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from loa.core.enums import Side

if TYPE_CHECKING:
    from loa.core.interfaces import Position


class IPlayer(ABC):
    """Interface for a game participant."""

    @property
    @abstractmethod
    def side(self) -> Side: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_manual(self) -> bool: ...

    @abstractmethod
    def create(self, side: Side) -> IPlayer:
        """Return a player of the same kind playing *side*."""

    @abstractmethod
    def get_move(self, position: Position) -> str:
        """Return the next move for *position* in its textual form."""
