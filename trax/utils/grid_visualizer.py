"""Plain-text rendering of a Trax board."""

from typing import Iterable, Optional, Set, Tuple

from ..engine.board import Board, ORIGIN_COLUMN, column_label


def render_board(board: Board, highlight: Optional[Iterable[Tuple[int, int]]] = None) -> str:
    """
    Render the board's frame with notation labels.

    Empty cells are drawn as '.', tiles by their letter. Cells in
    `highlight` (e.g. a winning path) are drawn in lowercase.
    """
    if board.is_empty:
        return ""

    marked: Set[Tuple[int, int]] = set(highlight or ())
    ext = board.extents()
    columns = [ORIGIN_COLUMN] + [column_label(i) for i in range(board.width + 1)]
    label_width = len(str(board.height + 1))
    cell_width = max(len(c) for c in columns)

    lines = []
    for y in range(ext.min_y - 1, ext.max_y + 2):
        row = board.abs_to_notation(ext.min_x - 1, y)[1:]
        cells = []
        for x in range(ext.min_x - 1, ext.max_x + 2):
            tile = board.get(x, y)
            if tile is None:
                symbol = '.'
            elif (x, y) in marked:
                symbol = tile.value.lower()
            else:
                symbol = tile.value
            cells.append(symbol.rjust(cell_width))
        lines.append(f"{row.rjust(label_width)} {' '.join(cells)}")

    header = ' ' * label_width + ' ' + ' '.join(c.rjust(cell_width) for c in columns)
    lines.append(header)
    return '\n'.join(lines)
