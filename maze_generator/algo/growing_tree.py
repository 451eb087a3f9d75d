from collections import deque
from enum import Enum
from typing import Iterator, Optional, Set

from maze_generator.algo.base import START, Generator
from maze_generator.core.coordinates import Coordinate, Direction
from maze_generator.core.graph import MazeGraph


class SelectionMethod(Enum):
    """Which active cell the growing tree continues from after a dead end."""
    FIRST = "first"              # oldest cell
    MOST_RECENT = "most-recent"  # newest cell, behaves like the recursive backtracker
    RANDOM = "random"            # any cell, behaves like Prim's


class GrowingTreeGenerator(Generator):
    """
    Keeps a list of active cells. The current cell carves into a random
    unvisited neighbour, which becomes active and current; when the current
    cell has no unvisited neighbours it is retired and the next current cell
    is taken from the active list per `selection_method`.

    The goal is the cell reached when the active list was at its longest. This
    is a cheap stand-in for "far from the start" and is not guaranteed to be
    the farthest cell of the maze.
    """

    def __init__(self, seed: Optional[bytes] = None,
                 selection_method: SelectionMethod = SelectionMethod.FIRST):
        super().__init__(seed)
        self.selection_method = SelectionMethod(selection_method)
        self.goal = START

    def run(self, graph: MazeGraph) -> Iterator[str]:
        # FIRST retires from the head, so it needs O(1) removal at both ends
        if self.selection_method is SelectionMethod.FIRST:
            cell_stack = deque([START])
        else:
            cell_stack = [START]
        visited: Set[Coordinate] = {START}
        current = START
        current_idx = 0
        self.goal = START
        max_len = 0

        while cell_stack:
            neighbors = [
                current.next(d) for d in Direction.all()
                if graph.contains(current.next(d)) and current.next(d) not in visited
            ]

            if not neighbors:
                # Dead end - retire the current cell
                self._retire(cell_stack, current_idx)
                if not cell_stack:
                    break
                current_idx = self._select(cell_stack)
                current = cell_stack[current_idx]
                continue

            nxt = neighbors[self.rng.randrange(len(neighbors))]
            graph.add_passage(current, nxt)
            cell_stack.append(nxt)
            visited.add(nxt)
            current = nxt
            current_idx = len(cell_stack) - 1
            self.step_count += 1

            # The goal sits at the end of the longest active list
            if len(cell_stack) > max_len:
                max_len = len(cell_stack)
                self.goal = current

            if self.step_count % 100 == 0:
                yield f"Active cells: {len(cell_stack)}"

        yield "Done"

    def _retire(self, cell_stack, idx: int):
        if idx == len(cell_stack) - 1:
            cell_stack.pop()
        elif idx == 0 and isinstance(cell_stack, deque):
            cell_stack.popleft()
        elif self.selection_method is SelectionMethod.RANDOM:
            # Order is irrelevant for random selection; swap remove for O(1)
            cell_stack[idx] = cell_stack[-1]
            cell_stack.pop()
        else:
            del cell_stack[idx]

    def _select(self, cell_stack) -> int:
        """Index of the next current cell."""
        # The selected cell stays active until it is found to be a dead end.
        # Dropping it on selection would strand its other unvisited neighbours.
        if self.selection_method is SelectionMethod.MOST_RECENT:
            return len(cell_stack) - 1
        if self.selection_method is SelectionMethod.RANDOM:
            return self.rng.randrange(len(cell_stack))
        return 0

    def find_goal(self, graph: MazeGraph, start: Coordinate) -> Coordinate:
        return self.goal
