"""Core domain layer — side enum and the position contract.

Quick start::

    from loa.core import Position, Side

    def describe(pos: Position) -> str:
        return f"{pos.side_to_move} to move, {len(pos.legal_moves())} moves"
"""

from loa.core.enums import POSITIVE_SIDE, Side
from loa.core.interfaces import Move, Position

__all__ = [
    "POSITIVE_SIDE",
    "Move",
    "Position",
    "Side",
]
