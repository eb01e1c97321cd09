"""Data models for the Trax rule engine."""

import re
from typing import List, Literal, NamedTuple, Optional, Set, Tuple

from pydantic import BaseModel, Field

from .tiles import Piece, Player, Tile


ErrorKind = Literal["MalformedNotation", "IllegalPlacement", "IllegalCascade", "EmptyBoard"]


class InvariantViolation(RuntimeError):
    """Raised when a caller breaks an engine invariant. Always a bug."""


class EmptyBoardError(ValueError):
    """A coordinate conversion was attempted on a board with no tiles."""
    kind: ErrorKind = "EmptyBoard"

    def __init__(self, message: str = "The board is empty"):
        super().__init__(message)


class Extents(NamedTuple):
    """Bounding box of the occupied cells."""
    min_x: int
    max_x: int
    min_y: int
    max_y: int


class GameConfig(BaseModel):
    """Rule configuration fixed at construction time."""
    max_extent: Optional[int] = Field(None, ge=1)
    loop_variant: bool = False
    min_connection_extent: int = Field(8, ge=1)

    @classmethod
    def from_variants(cls, variants: List[str]) -> "GameConfig":
        """Build a config from variant ids such as "size-8" or "loop"."""
        max_extent = None
        for variant in variants:
            if "size" in variant:
                match = re.search(r"\d+", variant)
                if match is None:
                    raise ValueError(f"Could not determine the board size from variant '{variant}'")
                max_extent = int(match.group(0))
                break
        return cls(max_extent=max_extent, loop_variant="loop" in variants)


class ForcedFill(BaseModel):
    """A cell filled as a consequence of another placement."""
    cell: Tuple[int, int]
    tile: Tile


class CascadeResult(BaseModel):
    """Outcome of forced-fill propagation from one placement."""
    forced: List[ForcedFill] = Field(default_factory=list)
    contradiction: Optional[Tuple[int, int]] = None

    @property
    def is_contradiction(self) -> bool:
        return self.contradiction is not None

    def cells(self) -> Set[Tuple[int, int, Tile]]:
        """Forced fills as a set of (x, y, tile) triples."""
        return {(f.cell[0], f.cell[1], f.tile) for f in self.forced}


class LegalMove(BaseModel):
    """A legal placement with the fills it would force."""
    notation: str
    cell: Tuple[int, int]
    piece: Piece
    tile: Tile
    forced: List[ForcedFill] = Field(default_factory=list)

    @property
    def move(self) -> str:
        return self.notation + self.piece.value


class ValidationError(BaseModel):
    """A single reason a move was rejected."""
    kind: ErrorKind
    code: str
    message: str
    cell: Optional[Tuple[int, int]] = None


class MoveValidation(BaseModel):
    """Result of validating a move string against the current game."""
    move: str
    valid: bool
    complete: bool = False
    error: Optional[ValidationError] = None
    cell: Optional[Tuple[int, int]] = None
    piece: Optional[Piece] = None
    tile: Optional[Tile] = None
    forced: List[ForcedFill] = Field(default_factory=list)


class WinningLine(BaseModel):
    """A connection path or closed loop, as ordered absolute cells."""
    player: Player
    kind: Literal["connection", "loop"]
    cells: List[Tuple[int, int]]


class WinResult(BaseModel):
    """All wins found in one evaluation of the board."""
    lines: List[WinningLine] = Field(default_factory=list)

    @property
    def winners(self) -> List[int]:
        return sorted({line.player for line in self.lines})

    @property
    def is_win(self) -> bool:
        return len(self.lines) > 0
