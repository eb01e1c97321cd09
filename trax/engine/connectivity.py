"""
Win detection.

Each player's line network is rebuilt from the committed tiles as an
undirected graph over occupied cells. A connection win is a path in that
graph between two opposite board edges where the line leaves the board on
both ends; a loop win is a closed cycle.
"""

from collections import deque
from typing import Dict, List, Optional, Set

from .board import Board
from .models import GameConfig, WinningLine, WinResult
from .neighbours import facing_player
from .tiles import Cell, Direction, Player


class UndirectedGraph:
    """Adjacency sets keyed by cell."""

    def __init__(self) -> None:
        self._adjacency: Dict[Cell, Set[Cell]] = {}

    def add_node(self, node: Cell) -> None:
        self._adjacency.setdefault(node, set())

    def add_edge(self, a: Cell, b: Cell) -> None:
        self.add_node(a)
        self.add_node(b)
        self._adjacency[a].add(b)
        self._adjacency[b].add(a)

    def has_node(self, node: Cell) -> bool:
        return node in self._adjacency

    def has_edge(self, a: Cell, b: Cell) -> bool:
        return b in self._adjacency.get(a, ())

    def nodes(self) -> List[Cell]:
        return list(self._adjacency)

    def neighbours(self, node: Cell) -> List[Cell]:
        return sorted(self._adjacency.get(node, ()))

    def degree(self, node: Cell) -> int:
        return len(self._adjacency.get(node, ()))

    def shortest_path(self, source: Cell, target: Cell) -> Optional[List[Cell]]:
        """Unweighted shortest path from source to target, inclusive, or None."""
        if source not in self._adjacency or target not in self._adjacency:
            return None
        parents: Dict[Cell, Optional[Cell]] = {source: None}
        queue = deque([source])
        while queue:
            node = queue.popleft()
            if node == target:
                path = [node]
                while parents[path[-1]] is not None:
                    path.append(parents[path[-1]])
                return path[::-1]
            for n in self.neighbours(node):
                if n not in parents:
                    parents[n] = node
                    queue.append(n)
        return None


def build_graph(board: Board, player: Player) -> UndirectedGraph:
    """Graph of `player`'s line: cells joined where both tiles route it across the shared edge."""
    graph = UndirectedGraph()
    for x, y, tile in board:
        graph.add_node((x, y))
        for direction in (Direction.E, Direction.S):
            nx, ny = direction.step(x, y)
            other = board.get(nx, ny)
            if other is None:
                continue
            if tile.player_at(direction) == player and facing_player(direction, other) == player:
                graph.add_edge((x, y), (nx, ny))
    return graph


def _edge_path(
    board: Board,
    graph: UndirectedGraph,
    player: Player,
    sources: List[Cell],
    source_exit: Direction,
    targets: List[Cell],
    target_exit: Direction,
) -> Optional[List[Cell]]:
    sources = [c for c in sources if board.get(*c).player_at(source_exit) == player]
    targets = [c for c in targets if board.get(*c).player_at(target_exit) == player]
    for source in sources:
        for target in targets:
            path = graph.shortest_path(source, target)
            if path is not None:
                return path
    return None


def find_connections(
    board: Board,
    player: Player,
    min_extent: int = 8,
    graph: Optional[UndirectedGraph] = None,
) -> List[WinningLine]:
    """
    Edge-to-edge paths of `player`'s line, at most one per axis.

    An axis is only checked once the board spans at least `min_extent`
    cells along it.
    """
    if board.is_empty:
        return []
    if graph is None:
        graph = build_graph(board, player)
    ext = board.extents()
    positions = sorted(board.positions())
    lines: List[WinningLine] = []

    if board.width >= min_extent:
        west = sorted((c for c in positions if c[0] == ext.min_x), key=lambda c: c[1])
        east = sorted((c for c in positions if c[0] == ext.max_x), key=lambda c: c[1])
        path = _edge_path(board, graph, player, west, Direction.W, east, Direction.E)
        if path is not None:
            lines.append(WinningLine(player=player, kind="connection", cells=path))

    if board.height >= min_extent:
        north = [c for c in positions if c[1] == ext.min_y]
        south = [c for c in positions if c[1] == ext.max_y]
        path = _edge_path(board, graph, player, north, Direction.N, south, Direction.S)
        if path is not None:
            lines.append(WinningLine(player=player, kind="connection", cells=path))

    return lines


def find_loops(board: Board, player: Player, graph: Optional[UndirectedGraph] = None) -> List[WinningLine]:
    """
    Closed cycles of `player`'s line.

    Every cell of a line has degree at most 2, so walking away from the
    previous cell either returns to the start (a loop) or stops at a line
    end. Cells are visited at most once across the whole scan.
    """
    if graph is None:
        graph = build_graph(board, player)
    loops: List[WinningLine] = []
    seen: Set[Cell] = set()

    for start in board.positions():
        if start in seen:
            continue
        walk: List[Cell] = []
        last: Optional[Cell] = None
        curr = start
        closed = False
        while True:
            if curr == start and last is not None:
                closed = True
                break
            if curr in seen:
                break
            walk.append(curr)
            seen.add(curr)
            neighbours = graph.neighbours(curr)
            if len(neighbours) != 2:
                break
            nxt = neighbours[0] if neighbours[0] != last else neighbours[1]
            last, curr = curr, nxt
        if closed:
            loops.append(WinningLine(player=player, kind="loop", cells=walk))

    return loops


def evaluate(board: Board, config: GameConfig) -> WinResult:
    """All connection and loop wins for both players on `board`."""
    lines: List[WinningLine] = []
    for player in (1, 2):
        graph = build_graph(board, player)
        if not config.loop_variant:
            lines.extend(find_connections(board, player, config.min_connection_extent, graph))
        lines.extend(find_loops(board, player, graph))
    return WinResult(lines=lines)
