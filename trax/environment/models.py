"""
Pydantic models for the environment layer.

The game itself lives in game.py; this module holds the records it keeps
and the configuration loaded by the CLI.
"""

from typing import List, Literal, Tuple

from pydantic import BaseModel, Field

from ..engine.models import ForcedFill, GameConfig
from ..engine.tiles import Piece, Player, Tile


EndReason = Literal["", "connection", "loop", "stalemate"]


class MoveRecord(BaseModel):
    """A committed move and everything it placed."""
    player: Player
    move: str
    cell: Tuple[int, int]
    piece: Piece
    tile: Tile
    forced: List[ForcedFill] = Field(default_factory=list)

    @property
    def placed(self) -> List[Tuple[int, int, Tile]]:
        """All tiles this move put on the board, in placement order."""
        return [(self.cell[0], self.cell[1], self.tile)] + [
            (f.cell[0], f.cell[1], f.tile) for f in self.forced
        ]


class ReplayConfig(BaseModel):
    """A game to replay: rule configuration plus a move list."""
    game: GameConfig = Field(default_factory=GameConfig)
    moves: List[str] = Field(default_factory=list)
