"""Move notation parsing."""

import re
from typing import Optional, Tuple

from .tiles import Piece


MOVE_PATTERN = re.compile(r'^((@|[a-z]+)\d+)?[+/\\]$')


def normalize_move(move: str) -> str:
    """Lowercase the move and strip all whitespace."""
    return re.sub(r'\s+', '', move.lower())


def is_well_formed(move: str) -> bool:
    return MOVE_PATTERN.match(move) is not None


def split_move(move: str) -> Tuple[Optional[str], Piece]:
    """
    Split a well-formed move into its cell and piece.

    The cell is None when the move is a bare orientation symbol.
    """
    if not is_well_formed(move):
        raise ValueError(f"Malformed move: '{move}'")
    cell = move[:-1] or None
    return cell, Piece(move[-1])
