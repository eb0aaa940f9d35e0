"""Game layer — player interface and the automated player.

Quick start::

    from loa.game import MachinePlayer

    white = MachinePlayer(Side.WHITE, on_move=game.report_move)
    game.apply(white.get_move(game.position))
"""

from loa.game.interfaces import IPlayer
from loa.game.player import MachinePlayer

__all__ = [
    "IPlayer",
    "MachinePlayer",
]
