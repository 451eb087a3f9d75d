import logging
from typing import Iterator, List, Optional, Set

from maze_generator.algo.base import START, Generator
from maze_generator.core.coordinates import Coordinate, Direction
from maze_generator.core.errors import InternalGeneratorError
from maze_generator.core.graph import MazeGraph

logger = logging.getLogger(__name__)


class PrimsAlgorithm(Generator):
    """
    Randomized Prim's: grow the maze from (0, 0) by repeatedly picking a random
    frontier cell and connecting it to a random already-visited neighbour.
    """

    def __init__(self, seed: Optional[bytes] = None):
        super().__init__(seed)
        # Working state, only populated while run() is active
        self.frontier: List[Coordinate] = []
        self.frontier_set: Set[Coordinate] = set()
        self.visited: Set[Coordinate] = set()

    def run(self, graph: MazeGraph) -> Iterator[str]:
        # Frontier = cells adjacent to the maze but not in it yet.
        # The list is for random choice, the set for O(1) membership.
        self.frontier = []
        self.frontier_set = set()
        self.visited = set()

        try:
            self._mark_cell(graph, START)

            while self.frontier:
                # Pick random cell from frontier
                idx = self.rng.randrange(len(self.frontier))
                cell = self.frontier[idx]

                # Carve to one random visited neighbour
                neighbors = self._find_visited_neighbors(graph, cell)
                if not neighbors:
                    # Cells only enter the frontier next to a visited cell
                    logger.error(f"Prim's: frontier cell {cell} has no visited neighbours")
                    raise InternalGeneratorError(f"Frontier cell {cell} has no visited neighbours")
                graph.add_passage(cell, self.rng.choice(neighbors))

                self._mark_cell(graph, cell, idx)
                self.step_count += 1

                if self.step_count % 100 == 0:
                    yield f"Frontier: {len(self.frontier)}"

            yield "Done"
        finally:
            self.frontier = []
            self.frontier_set = set()
            self.visited = set()

    def _mark_cell(self, graph: MazeGraph, cell: Coordinate, frontier_idx: Optional[int] = None):
        """
        Mark cell as part of the maze, take it out of the frontier (it sits at
        frontier_idx) and add its unvisited neighbours to the frontier.
        """
        if frontier_idx is not None:
            # Swap remove for O(1)
            self.frontier[frontier_idx] = self.frontier[-1]
            self.frontier.pop()
            self.frontier_set.discard(cell)
        self.visited.add(cell)

        for direction in Direction.all():
            neighbor = cell.next(direction)
            if (graph.contains(neighbor)
                    and neighbor not in self.visited
                    and neighbor not in self.frontier_set):
                self.frontier_set.add(neighbor)
                self.frontier.append(neighbor)

    def _find_visited_neighbors(self, graph: MazeGraph, cell: Coordinate) -> List[Coordinate]:
        return [
            cell.next(d) for d in Direction.all()
            if graph.contains(cell.next(d)) and cell.next(d) in self.visited
        ]
