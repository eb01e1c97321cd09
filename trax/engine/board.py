"""
Sparse growable board for Trax.

Tiles are stored by absolute (x, y) coordinates with y growing downward.
Two derived coordinate spaces sit on top of the absolute one:

- render-relative: shifted so (0, 0) is one cell outside the top-left
  occupied cell, giving a frame of (width + 2) x (height + 2) cells
- notation: a column ("@" for the left frame column, then a, b, ..., z,
  aa, ab, ...) followed by a row number growing upward, with the bottom
  frame row labelled 0
"""

import re
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .models import EmptyBoardError, Extents, InvariantViolation
from .tiles import ALL_DIRECTIONS, Cell, Direction, Tile


ORIGIN_COLUMN = "@"

_NOTATION_PATTERN = re.compile(r'^(@|[a-z]+)(-?\d+)$')


def column_label(index: int) -> str:
    """Letters for a zero-based column index: 0 -> a, 25 -> z, 26 -> aa."""
    if index < 0:
        raise ValueError(f"Column index must be non-negative, got {index}")
    label = ""
    index += 1
    while index > 0:
        index, rem = divmod(index - 1, 26)
        label = chr(ord('a') + rem) + label
    return label


def column_index(label: str) -> int:
    """Inverse of column_label."""
    index = 0
    for char in label:
        index = index * 26 + (ord(char) - ord('a') + 1)
    return index - 1


class Board:
    """
    Mapping from absolute (x, y) to Tile with tracked extents.

    Placement is monotonic: a cell, once set, is never changed.
    """

    def __init__(self) -> None:
        self._tiles: Dict[Cell, Tile] = {}
        self._extents: Optional[Extents] = None

    @classmethod
    def from_placements(cls, placements: Iterable[Tuple[int, int, Tile]]) -> "Board":
        """Rebuild a board from (x, y, tile) triples in placement order."""
        board = cls()
        for x, y, tile in placements:
            board.set(x, y, tile)
        return board

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tuple[int, int, Tile]]:
        for (x, y), tile in self._tiles.items():
            yield x, y, tile

    def __contains__(self, cell: Cell) -> bool:
        return cell in self._tiles

    @property
    def is_empty(self) -> bool:
        return not self._tiles

    def get(self, x: int, y: int) -> Optional[Tile]:
        return self._tiles.get((x, y))

    def has(self, x: int, y: int) -> bool:
        return (x, y) in self._tiles

    def set(self, x: int, y: int, tile: Tile) -> None:
        if (x, y) in self._tiles:
            raise InvariantViolation(f"Cell ({x}, {y}) is already occupied by {self._tiles[(x, y)].value}")
        self._tiles[(x, y)] = Tile(tile)
        if self._extents is None:
            self._extents = Extents(x, x, y, y)
        else:
            e = self._extents
            self._extents = Extents(min(e.min_x, x), max(e.max_x, x), min(e.min_y, y), max(e.max_y, y))

    def positions(self) -> List[Cell]:
        """Occupied cells in placement order."""
        return list(self._tiles)

    def placements(self) -> List[Tuple[int, int, Tile]]:
        """Occupied cells with their tiles, in placement order."""
        return [(x, y, tile) for (x, y), tile in self._tiles.items()]

    def clone(self) -> "Board":
        board = Board()
        board._tiles = dict(self._tiles)
        board._extents = self._extents
        return board

    # Extents

    def extents(self) -> Extents:
        if self._extents is None:
            raise EmptyBoardError()
        return self._extents

    @property
    def width(self) -> int:
        if self._extents is None:
            return 0
        return self._extents.max_x - self._extents.min_x + 1

    @property
    def height(self) -> int:
        if self._extents is None:
            return 0
        return self._extents.max_y - self._extents.min_y + 1

    def expands_x(self, x: int) -> bool:
        """True if placing in column x would widen the board."""
        if self._extents is None:
            return True
        return x < self._extents.min_x or x > self._extents.max_x

    def expands_y(self, y: int) -> bool:
        """True if placing in row y would make the board taller."""
        if self._extents is None:
            return True
        return y < self._extents.min_y or y > self._extents.max_y

    # Neighbourhood

    def neighbours(self, x: int, y: int) -> List[Tuple[Direction, Tile]]:
        """Occupied 4-neighbours of (x, y) as (direction, tile) pairs."""
        found: List[Tuple[Direction, Tile]] = []
        for direction in ALL_DIRECTIONS:
            tile = self._tiles.get(direction.step(x, y))
            if tile is not None:
                found.append((direction, tile))
        return found

    def empty_neighbours(self, x: int, y: int) -> List[Cell]:
        found: List[Cell] = []
        for direction in ALL_DIRECTIONS:
            cell = direction.step(x, y)
            if cell not in self._tiles:
                found.append(cell)
        return found

    def frame_cells(self) -> List[Cell]:
        """Absolute cells of the render frame, row by row from the top."""
        if self._extents is None:
            return []
        e = self._extents
        return [
            (x, y)
            for y in range(e.min_y - 1, e.max_y + 2)
            for x in range(e.min_x - 1, e.max_x + 2)
        ]

    # Coordinate conversions

    def abs_to_rel(self, x: int, y: int) -> Cell:
        e = self.extents()
        return x - e.min_x + 1, y - e.min_y + 1

    def rel_to_abs(self, rel_x: int, rel_y: int) -> Cell:
        e = self.extents()
        return rel_x + e.min_x - 1, rel_y + e.min_y - 1

    def abs_to_notation(self, x: int, y: int) -> str:
        rel_x, rel_y = self.abs_to_rel(x, y)
        if rel_x < 0:
            raise ValueError(f"Cell ({x}, {y}) lies left of the board frame and has no notation")
        column = ORIGIN_COLUMN if rel_x == 0 else column_label(rel_x - 1)
        row = self.height + 1 - rel_y
        return f"{column}{row}"

    def notation_to_abs(self, cell: str) -> Cell:
        match = _NOTATION_PATTERN.match(cell)
        if not match:
            raise ValueError(f"Invalid cell notation: '{cell}'")
        if self.is_empty:
            raise EmptyBoardError()
        column, row = match.group(1), int(match.group(2))
        rel_x = 0 if column == ORIGIN_COLUMN else column_index(column) + 1
        rel_y = self.height + 1 - row
        return self.rel_to_abs(rel_x, rel_y)
