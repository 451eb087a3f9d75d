from collections import deque

from maze_generator.core.coordinates import Coordinate
from maze_generator.core.graph import MazeGraph


def find_farthest_cell(graph: MazeGraph, start: Coordinate) -> Coordinate:
    """
    Breadth-first traversal from `start`, returning the last cell dequeued.

    The generators only call this on spanning trees, where the last cell in
    BFS order from the root is a deepest cell of the tree. Ties between
    equally deep cells are broken by the graph's neighbour order.
    """
    visited = {start}
    queue = deque([start])
    last = start

    while queue:
        current = queue.popleft()
        last = current
        for neighbor in graph.neighbors(current):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    return last
