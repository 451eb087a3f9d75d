from typing import Iterator, List, Optional, Tuple

from maze_generator.algo.base import START, Generator
from maze_generator.core.coordinates import Coordinate, Direction
from maze_generator.core.graph import MazeGraph


class RecursiveBacktracker(Generator):
    """
    Depth-first carve from (0, 0). Each cell tries the four directions in a
    freshly shuffled order and descends into any in-bounds neighbour that has
    no passages yet.

    compute_goal: pick the goal by BFS from the start; when False the goal
    stays at (0, 0).
    """

    def __init__(self, seed: Optional[bytes] = None, compute_goal: bool = True):
        super().__init__(seed)
        self.compute_goal = compute_goal

    def run(self, graph: MazeGraph) -> Iterator[str]:
        # Stack of (cell, shuffled directions, next direction index).
        # Same visiting order as the recursive formulation, without its depth limit.
        stack: List[Tuple[Coordinate, List[Direction], int]] = [
            (START, Direction.random_order(self.rng), 0)
        ]

        while stack:
            current, directions, i = stack[-1]

            if i == len(directions):
                # Backtrack
                stack.pop()
                continue

            stack[-1] = (current, directions, i + 1)
            neighbor = current.next(directions[i])

            if graph.contains(neighbor) and graph.degree(neighbor) == 0:
                graph.add_passage(current, neighbor)
                stack.append((neighbor, Direction.random_order(self.rng), 0))
                self.step_count += 1

                # Yield every N steps to keep callers responsive without spamming
                if self.step_count % 100 == 0:
                    yield f"Carving... Stack: {len(stack)}"

        yield "Done"

    def find_goal(self, graph: MazeGraph, start: Coordinate) -> Coordinate:
        if not self.compute_goal:
            return start
        return super().find_goal(graph, start)
