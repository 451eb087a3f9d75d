"""
Eller's algorithm.

Builds the maze one row at a time, so only the sets of the current and the
next row are ever kept in memory:

1. Every cell of the first row starts in its own set.
2. Randomly join adjacent cells of the row, but only if they are in different
   sets. Joining merges the two sets.
3. Every set carves at least one passage down into the next row. The cells
   below join the set of the cell above them.
4. Cells of the next row without a set get a vacated set slot of their own.
5. Repeat from 2. until the last row is reached.
6. In the last row, join every pair of adjacent cells that still belong to
   different sets.

Never joining two cells of the same set keeps the result a spanning tree.
"""
import logging
from typing import Dict, Iterator, List, Optional, Set

from maze_generator.algo.base import Generator
from maze_generator.core.coordinates import Coordinate, Direction
from maze_generator.core.errors import InternalGeneratorError
from maze_generator.core.graph import MazeGraph

logger = logging.getLogger(__name__)

HORIZONTAL_JOIN_CHANCE = 0.5


class EllersGenerator(Generator):

    def __init__(self, seed: Optional[bytes] = None):
        super().__init__(seed)
        # Arena of sets addressed by stable integer handles, only populated
        # while run() is active. An empty set is a vacated slot that
        # flesh-out may reuse.
        self._sets: List[Set[Coordinate]] = []
        self._set_of: Dict[Coordinate, int] = {}

    def run(self, graph: MazeGraph) -> Iterator[str]:
        width, height = graph.width, graph.height
        self._sets = []
        self._set_of = {}

        try:
            self._init_first_row(width)
            for y in range(height - 1):
                self._randomly_join_fields(graph, y)
                self._create_downward_connections(graph, y)
                self._retire_row(y)
                self._flesh_out_next_row(width, y)
                self.step_count += 1

                if self.step_count % 100 == 0:
                    yield f"Row {y + 1}/{height}"

            self._join_last_row(graph, height - 1)
            yield "Done"
        finally:
            self._sets = []
            self._set_of = {}

    def _init_first_row(self, width: int):
        for x in range(width):
            coord = Coordinate(x, 0)
            self._sets.append({coord})
            self._set_of[coord] = x

    def _lookup(self, coord: Coordinate) -> int:
        try:
            return self._set_of[coord]
        except KeyError:
            logger.error(f"Eller's: {coord} is not in any set")
            raise InternalGeneratorError(f"Expected to find coordinates {coord} in a set") from None

    def _join_sets_of_fields(self, graph: MazeGraph, a: Coordinate, b: Coordinate):
        """Merge the sets of two adjacent cells and open the passage between them.
        Does nothing if they already share a set."""
        handle_a = self._lookup(a)
        handle_b = self._lookup(b)
        if handle_a == handle_b:
            return

        merged = self._sets[handle_b]
        for coord in merged:
            self._set_of[coord] = handle_a
        self._sets[handle_a] |= merged
        self._sets[handle_b] = set()
        graph.add_passage(a, b)

    def _randomly_join_fields(self, graph: MazeGraph, y: int):
        # One draw per adjacent pair, left to right
        for x in range(graph.width - 1):
            if self.rng.random() < HORIZONTAL_JOIN_CHANCE:
                self._join_sets_of_fields(graph, Coordinate(x, y), Coordinate(x + 1, y))

    def _create_downward_connections(self, graph: MazeGraph, y: int):
        for handle, members in enumerate(self._sets):
            row_members = sorted((c for c in members if c.y == y), key=lambda c: c.x)
            if not row_members:
                continue

            # At least one, or the set is cut off from every later row
            count = self.rng.randint(1, len(row_members))
            for coord in self.rng.sample(row_members, count):
                below = coord.next(Direction.SOUTH)
                members.add(below)
                self._set_of[below] = handle
                graph.add_passage(coord, below)

    def _retire_row(self, y: int):
        for members in self._sets:
            done = [c for c in members if c.y == y]
            for coord in done:
                members.discard(coord)
                del self._set_of[coord]

    def _flesh_out_next_row(self, width: int, y: int):
        free_slots = [h for h, members in enumerate(self._sets) if not members]
        free_slots.reverse()

        for x in range(width):
            coord = Coordinate(x, y + 1)
            if coord in self._set_of:
                continue
            if not free_slots:
                logger.error(f"Eller's: no vacated set left for {coord}")
                raise InternalGeneratorError(f"No empty set found for {coord}")
            handle = free_slots.pop()
            self._sets[handle].add(coord)
            self._set_of[coord] = handle

    def _join_last_row(self, graph: MazeGraph, y: int):
        for x in range(graph.width - 1):
            self._join_sets_of_fields(graph, Coordinate(x, y), Coordinate(x + 1, y))
