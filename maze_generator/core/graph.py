from typing import Iterator, List, Set

import networkx as nx

from maze_generator.core.coordinates import Coordinate, Direction


class MazeGraph:
    """
    Undirected graph over every cell of a width x height grid. An edge means an
    open passage between two cells.

    Edges are only ever added between cardinal neighbours; that is up to the
    generators, add_passage does not check it.
    """

    __slots__ = ('width', 'height', '_graph')

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._graph = nx.Graph()
        # Every cell is a vertex, even before it gets its first passage
        self._graph.add_nodes_from(
            Coordinate(x, y) for y in range(height) for x in range(width)
        )

    def contains(self, coord: Coordinate) -> bool:
        return 0 <= coord.x < self.width and 0 <= coord.y < self.height

    def add_passage(self, a: Coordinate, b: Coordinate):
        if nx.is_frozen(self._graph):
            raise TypeError("Maze graph is read-only once handed to a Maze")
        self._graph.add_edge(a, b)

    def freeze(self):
        """Forbid further passages. copy() returns a mutable graph again."""
        nx.freeze(self._graph)

    @property
    def frozen(self) -> bool:
        return nx.is_frozen(self._graph)

    def has_passage(self, a: Coordinate, b: Coordinate) -> bool:
        return self._graph.has_edge(a, b)

    def open_directions(self, coord: Coordinate) -> int:
        """Bitmask of the directions in which coord has a passage."""
        mask = 0
        for direction in Direction.all():
            if self._graph.has_edge(coord, coord.next(direction)):
                mask |= direction.value
        return mask

    def neighbors(self, coord: Coordinate) -> Iterator[Coordinate]:
        """Cells connected to coord by a passage, in insertion order."""
        if coord not in self._graph:
            return iter(())
        return iter(self._graph.neighbors(coord))

    def degree(self, coord: Coordinate) -> int:
        if coord not in self._graph:
            return 0
        return self._graph.degree(coord)

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def edges(self) -> Iterator[tuple]:
        return iter(self._graph.edges())

    def connected_components(self) -> List[Set[Coordinate]]:
        return [set(c) for c in nx.connected_components(self._graph)]

    def has_path(self, a: Coordinate, b: Coordinate) -> bool:
        if a not in self._graph or b not in self._graph:
            return False
        return nx.has_path(self._graph, a, b)

    def shortest_path(self, a: Coordinate, b: Coordinate) -> List[Coordinate]:
        """Cells from a to b inclusive. Empty list if b is unreachable."""
        try:
            return nx.shortest_path(self._graph, a, b)
        except (nx.NetworkXNoPath, nx.NodeNotFound):
            return []

    def is_isomorphic(self, other: "MazeGraph") -> bool:
        if (self.width, self.height) != (other.width, other.height):
            return False
        if self.edge_count() != other.edge_count():
            return False
        # Identical edge sets are trivially isomorphic; skip VF2 for the common case
        if all(other.has_passage(a, b) for a, b in self._graph.edges()):
            return True
        return nx.is_isomorphic(self._graph, other._graph)

    def copy(self) -> "MazeGraph":
        clone = MazeGraph.__new__(MazeGraph)
        clone.width = self.width
        clone.height = self.height
        clone._graph = self._graph.copy()
        return clone
