from typing import Any, Dict

import numpy as np

from maze_generator.core.maze import Maze


def count_walls(cells: np.ndarray) -> np.ndarray:
    """Per-cell number of wall bits (0-4) of a to_bitmask() array."""
    walls = cells & 0b1111
    return (
        (walls & 0b0001).astype(np.int32)
        + ((walls >> 1) & 1)
        + ((walls >> 2) & 1)
        + ((walls >> 3) & 1)
    )


def calculate_stats(maze: Maze) -> Dict[str, Any]:
    """
    Dead ends have 3 walls, corridors 2, junctions at most 1. A 1x1 maze's
    single cell has 4 walls and is counted in none of them.
    """
    walls = count_walls(maze.to_bitmask())
    total = maze.width * maze.height

    dead_ends = int(np.count_nonzero(walls == 3))
    corridors = int(np.count_nonzero(walls == 2))
    junctions = int(np.count_nonzero(walls <= 1))

    return {
        "dead_ends": dead_ends,
        "corridors": corridors,
        "junctions": junctions,
        "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0,
        "passages": maze.graph.edge_count(),
        "solution_length": len(maze.solution()),
    }
