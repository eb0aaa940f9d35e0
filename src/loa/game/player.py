"""Concrete player implementations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from loa.core.enums import Side
from loa.engine.selector import MoveSelector
from loa.game.interfaces import IPlayer

if TYPE_CHECKING:
    from loa.core.interfaces import Move, Position

logger = logging.getLogger(__name__)


class MachinePlayer(IPlayer):
    """An automated participant backed by a :class:`MoveSelector`.

    Args:
        side: Side the machine plays.
        selector: Engine used to choose moves; a default one is built if
            omitted.
        name: Display name.
        on_move: ``(Move) -> None`` — called with every chosen move so the
            game can record it.
    """

    __slots__ = ("_side", "_name", "_selector", "_on_move")

    def __init__(
        self,
        side: Side,
        selector: MoveSelector | None = None,
        name: str = "LOA Engine",
        on_move: Callable[[Move], None] | None = None,
    ) -> None:
        self._side = side
        self._selector = selector or MoveSelector()
        self._name = name
        self._on_move = on_move

    @property
    def side(self) -> Side:
        return self._side

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_manual(self) -> bool:
        return False

    @property
    def selector(self) -> MoveSelector:
        return self._selector

    def create(self, side: Side) -> MachinePlayer:
        return MachinePlayer(side, self._selector, self._name, self._on_move)

    def get_move(self, position: Position) -> str:
        if position.side_to_move != self._side:
            raise ValueError(
                f"{self._name} plays {self._side} but {position.side_to_move} is to move"
            )
        move = self._selector.choose_move(position, self._side)
        logger.info("%s (%s) plays %s", self._name, self._side, move)
        if self._on_move is not None:
            self._on_move(move)
        return str(move)
