from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

import numpy as np

from maze_generator.core.coordinates import ALL_WALLS, Coordinate, Direction
from maze_generator.core.graph import MazeGraph


class FieldType(Enum):
    START = "start"
    GOAL = "goal"
    NORMAL = "normal"


@dataclass(frozen=True)
class Field:
    """
    View of a single cell, built fresh by Maze.get_field. `passages` is a
    4-bit mask of Direction values.
    """
    coordinates: Coordinate
    field_type: FieldType
    passages: int

    def has_passage(self, direction: Direction) -> bool:
        return (self.passages & direction.value) != 0

    def has_wall(self, direction: Direction) -> bool:
        return not self.has_passage(direction)

    def open_directions(self) -> List[Direction]:
        return [d for d in Direction.all() if self.has_passage(d)]


class Maze:
    """
    Finished maze: a MazeGraph plus size, start and goal. Read-only once a
    generator has handed it over.

    Equality compares start, goal, size and whether the two graphs are
    isomorphic, so differently labelled but equivalent structures compare
    equal. Isomorphism checks are far more expensive than comparing edge sets.
    """

    __slots__ = ('_graph', '_start', '_goal')

    def __init__(self, graph: MazeGraph, start: Coordinate, goal: Coordinate):
        if graph.width <= 0 or graph.height <= 0:
            raise ValueError(f"Maze size must be positive, got {graph.width}x{graph.height}")
        start = Coordinate(*start)
        goal = Coordinate(*goal)
        if not graph.contains(start):
            raise ValueError(f"Start {start} outside of {graph.width}x{graph.height} maze")
        if not graph.contains(goal):
            raise ValueError(f"Goal {goal} outside of {graph.width}x{graph.height} maze")
        graph.freeze()
        self._graph = graph
        self._start = start
        self._goal = goal

    @property
    def size(self) -> Tuple[int, int]:
        return (self._graph.width, self._graph.height)

    @property
    def width(self) -> int:
        return self._graph.width

    @property
    def height(self) -> int:
        return self._graph.height

    @property
    def start(self) -> Coordinate:
        return self._start

    @property
    def goal(self) -> Coordinate:
        return self._goal

    @property
    def graph(self) -> MazeGraph:
        """The connectivity graph, frozen: add_passage raises TypeError."""
        return self._graph

    def are_coordinates_inside(self, coord) -> bool:
        return self._graph.contains(Coordinate(*coord))

    def get_field(self, coord) -> Optional[Field]:
        """Field at coord, or None if coord lies outside the maze."""
        coord = Coordinate(*coord)
        if not self._graph.contains(coord):
            return None

        if coord == self._start:
            field_type = FieldType.START
        elif coord == self._goal:
            field_type = FieldType.GOAL
        else:
            field_type = FieldType.NORMAL

        return Field(coord, field_type, self._graph.open_directions(coord))

    def fields(self) -> Iterator[Field]:
        """Row-major iteration over every field."""
        for y in range(self.height):
            for x in range(self.width):
                yield self.get_field(Coordinate(x, y))

    def has_passage(self, coord, direction: Direction) -> bool:
        coord = Coordinate(*coord)
        return self._graph.has_passage(coord, coord.next(direction))

    def solution(self) -> List[Coordinate]:
        """Shortest path from start to goal, both inclusive."""
        return self._graph.shortest_path(self._start, self._goal)

    def to_bitmask(self) -> np.ndarray:
        """
        (height, width) uint8 array of wall bits per cell (N=1, E=2, S=4, W=8).
        A cell with no passages holds 15.
        """
        cells = np.full((self.height, self.width), ALL_WALLS, dtype=np.uint8)
        for a, b in self._graph.edges():
            direction = a.direction_to(b)
            cells[a.y, a.x] &= ~np.uint8(direction.value)
            cells[b.y, b.x] &= ~np.uint8(direction.opposite().value)
        return cells

    def __eq__(self, other) -> bool:
        if not isinstance(other, Maze):
            return NotImplemented
        return (
            self._start == other._start
            and self._goal == other._goal
            and self.size == other.size
            and self._graph.is_isomorphic(other._graph)
        )

    __hash__ = None

    def __str__(self) -> str:
        from maze_generator.render.text import render_text
        return render_text(self)

    def __repr__(self) -> str:
        return f"Maze(size={self.size}, start={self._start}, goal={self._goal})"
