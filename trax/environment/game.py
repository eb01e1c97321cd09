import logging
from typing import Iterable, List, Optional, Tuple

from pydantic import BaseModel, Field, ConfigDict

from ..engine.board import Board
from ..engine.cascade import solve_cascade
from ..engine.connectivity import evaluate
from ..engine.models import (
    EmptyBoardError,
    ErrorKind,
    ForcedFill,
    GameConfig,
    InvariantViolation,
    LegalMove,
    MoveValidation,
    ValidationError,
    WinResult,
)
from ..engine.moves import ORIGIN, ORIGIN_NOTATION, can_expand, has_any_legal_move, legal_moves
from ..engine.neighbours import first_move_tile, piece_to_tile, placeable_orientations
from ..engine.parsing import is_well_formed, normalize_move, split_move
from ..engine.tiles import Piece, Player, Tile
from .models import EndReason, MoveRecord


logger = logging.getLogger(__name__)


class TraxGame(BaseModel):
    """
    Manages a game of Trax.

    Moves are validated against a clone of the board; only a placement
    whose cascade is free of contradictions is written to the live board.
    Win state is recomputed from scratch after every committed move.

    Attributes:
        config: Rule configuration (maximum extent, loop variant)
        board: The live board
        current_player: Player to move
        history: Committed moves in order
        result: Wins found after the last move
        gameover: Whether the game has ended
        winners: Sorted winning players
        end_reason: Why the game ended
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GameConfig = Field(default_factory=GameConfig)
    board: Board = Field(default_factory=Board)
    current_player: Player = 1
    history: List[MoveRecord] = Field(default_factory=list)
    result: WinResult = Field(default_factory=WinResult)
    gameover: bool = False
    winners: List[int] = Field(default_factory=list)
    end_reason: EndReason = ""

    @classmethod
    def create(cls, config: Optional[GameConfig] = None) -> "TraxGame":
        return cls(config=config or GameConfig())

    @classmethod
    def from_placements(
        cls,
        placements: Iterable[Tuple[int, int, Tile]],
        config: Optional[GameConfig] = None,
        current_player: Player = 1,
    ) -> "TraxGame":
        """
        Rebuild a game from (x, y, tile) triples in placement order.

        Win state is evaluated on the rebuilt board.
        """
        game = cls(
            config=config or GameConfig(),
            board=Board.from_placements(placements),
            current_player=current_player,
        )
        game._check_end()
        return game

    @property
    def is_first_move(self) -> bool:
        return self.board.is_empty

    # Queries

    def legal_moves(self) -> List[LegalMove]:
        if self.gameover:
            return []
        return legal_moves(self.board, self.config)

    def has_moves(self) -> bool:
        if self.gameover:
            return False
        return has_any_legal_move(self.board, self.config)

    def preview(self, move: str) -> List[ForcedFill]:
        """Fills a move would force, or an empty list if it is not a legal complete move."""
        validation = self.validate_move(move)
        if not (validation.valid and validation.complete):
            return []
        return validation.forced

    def snapshot(self) -> Board:
        return self.board.clone()

    # Validation

    def validate_move(self, move: str) -> MoveValidation:
        """
        Validate a move string without touching the board.

        Rejections are returned, never raised. A bare orientation symbol
        after the first move is valid but incomplete.
        """
        m = normalize_move(move)

        if self.gameover:
            return self._reject(m, "IllegalPlacement", "GAME_OVER", "The game is already over")

        if not is_well_formed(m):
            return self._reject(m, "MalformedNotation", "INVALID_NOTATION", f"'{m}' is not valid move notation")

        cell, piece = split_move(m)

        if self.is_first_move:
            if piece == Piece.BACK or cell not in (None, ORIGIN_NOTATION):
                return self._reject(
                    m, "IllegalPlacement", "FIRST_PIECE_POSITION",
                    f"The first move must be '+' or '/' at {ORIGIN_NOTATION}",
                )
            return MoveValidation(
                move=ORIGIN_NOTATION + piece.value,
                valid=True,
                complete=True,
                cell=ORIGIN,
                piece=piece,
                tile=first_move_tile(piece),
            )

        if cell is None:
            return MoveValidation(move=m, valid=True, complete=False, piece=piece)

        try:
            x, y = self.board.notation_to_abs(cell)
        except EmptyBoardError as e:
            return self._reject(m, "EmptyBoard", "EMPTY_BOARD", str(e))

        return self._check_placement(m, x, y, piece)

    def _check_placement(self, m: str, x: int, y: int, piece: Piece) -> MoveValidation:
        where = (x, y)
        if self.board.has(x, y):
            return self._reject(m, "IllegalPlacement", "OCCUPIED", f"Cell {where} is already occupied", where)

        neighbours = self.board.neighbours(x, y)
        if not neighbours:
            return self._reject(m, "IllegalPlacement", "NO_NEIGHBOURS", f"Cell {where} has no neighbouring tiles", where)

        expand_x, expand_y = can_expand(self.board, self.config)
        if not expand_x and self.board.expands_x(x):
            return self._reject(
                m, "IllegalPlacement", "NO_EXPAND_X",
                f"The board cannot grow wider than {self.config.max_extent}", where,
            )
        if not expand_y and self.board.expands_y(y):
            return self._reject(
                m, "IllegalPlacement", "NO_EXPAND_Y",
                f"The board cannot grow taller than {self.config.max_extent}", where,
            )

        if piece not in placeable_orientations(neighbours):
            return self._reject(
                m, "IllegalPlacement", "CANNOT_PLACE_PIECE",
                f"'{piece.value}' cannot be placed at {where}", where,
            )

        tile = piece_to_tile(piece, neighbours)
        cascade = solve_cascade(self.board, x, y, tile)
        if cascade.is_contradiction:
            return self._reject(
                m, "IllegalCascade", "INVALID_FOLLOWUP",
                f"Placing '{piece.value}' at {where} forces an impossible tile at {cascade.contradiction}",
                cascade.contradiction,
            )

        return MoveValidation(
            move=m,
            valid=True,
            complete=True,
            cell=where,
            piece=piece,
            tile=tile,
            forced=cascade.forced,
        )

    @staticmethod
    def _reject(
        move: str,
        kind: ErrorKind,
        code: str,
        message: str,
        cell: Optional[Tuple[int, int]] = None,
    ) -> MoveValidation:
        logger.debug("Rejected move '%s': %s", move, code)
        return MoveValidation(
            move=move,
            valid=False,
            error=ValidationError(kind=kind, code=code, message=message, cell=cell),
        )

    # Commands

    def play(self, move: str) -> MoveValidation:
        """Validate a move string and commit it if it is legal and complete."""
        validation = self.validate_move(move)
        if validation.valid and validation.complete:
            self._apply(validation)
        return validation

    def commit(self, x: int, y: int, piece: Piece) -> MoveRecord:
        """
        Commit a placement given in absolute coordinates.

        Raises:
            InvariantViolation: if the placement is not legal; callers are
                expected to have validated it first
        """
        piece = Piece(piece)
        if self.gameover:
            raise InvariantViolation("Cannot commit a move after the game is over")
        if self.is_first_move:
            if (x, y) != ORIGIN:
                raise InvariantViolation(f"The first move must be at {ORIGIN}, got {(x, y)}")
            validation = self.validate_move(piece.value)
        else:
            m = self.board.abs_to_notation(x, y) + piece.value
            validation = self._check_placement(m, x, y, piece)
        if not (validation.valid and validation.complete):
            raise InvariantViolation(f"Unvalidated placement committed: {validation.error.message}")
        return self._apply(validation)

    def _apply(self, validation: MoveValidation) -> MoveRecord:
        x, y = validation.cell
        self.board.set(x, y, validation.tile)
        for fill in validation.forced:
            self.board.set(fill.cell[0], fill.cell[1], fill.tile)

        record = MoveRecord(
            player=self.current_player,
            move=validation.move,
            cell=validation.cell,
            piece=validation.piece,
            tile=validation.tile,
            forced=validation.forced,
        )
        self.history.append(record)
        logger.info(
            "Player %d played %s (%d forced)", record.player, record.move, len(record.forced)
        )

        self.current_player = 2 if self.current_player == 1 else 1
        self._check_end()
        return record

    def _check_end(self) -> None:
        self.result = evaluate(self.board, self.config)
        if self.result.is_win:
            self.gameover = True
            self.winners = self.result.winners
            self.end_reason = self.result.lines[0].kind
        elif self.config.max_extent is not None and not has_any_legal_move(self.board, self.config):
            # No move left on a bounded board: the player to move is declared winner
            self.gameover = True
            self.winners = [self.current_player]
            self.end_reason = "stalemate"
        if self.gameover:
            logger.info("Game over (%s), winners: %s", self.end_reason, self.winners)
