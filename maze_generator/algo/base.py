import logging
import random
from abc import ABC, abstractmethod
from typing import Iterator, Optional

from maze_generator.algo.goal import find_farthest_cell
from maze_generator.core.coordinates import Coordinate
from maze_generator.core.errors import InvalidSeedError, InvalidSizeError
from maze_generator.core.graph import MazeGraph
from maze_generator.core.maze import Maze

logger = logging.getLogger(__name__)

SEED_LENGTH = 32
START = Coordinate(0, 0)


def seed_from_int(value: int) -> bytes:
    """Encode a (CLI) integer seed as the 32-byte seed generators expect."""
    return (value % (1 << (8 * SEED_LENGTH))).to_bytes(SEED_LENGTH, "little")


class Generator(ABC):
    """
    Owns a private random source and carves one maze per generate() call.

    seed: None for entropy, or exactly 32 bytes for reproducible output.
    """

    def __init__(self, seed: Optional[bytes] = None):
        if seed is not None:
            if not isinstance(seed, (bytes, bytearray)) or len(seed) != SEED_LENGTH:
                raise InvalidSeedError(f"Seed must be {SEED_LENGTH} bytes, got {seed!r}")
            seed = bytes(seed)
        self.seed = seed
        # Random(None) seeds from os.urandom
        self.rng = random.Random(seed)
        self.step_count = 0

    @abstractmethod
    def run(self, graph: MazeGraph) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The passages are carved in-place into `graph`, starting from START.
        """
        pass

    def find_goal(self, graph: MazeGraph, start: Coordinate) -> Coordinate:
        return find_farthest_cell(graph, start)

    def generate(self, width: int, height: int) -> Maze:
        if not isinstance(width, int) or isinstance(width, bool) or width <= 0:
            raise InvalidSizeError(f"Width must be a positive integer, got {width!r}")
        if not isinstance(height, int) or isinstance(height, bool) or height <= 0:
            raise InvalidSizeError(f"Height must be a positive integer, got {height!r}")

        logger.debug(f"{type(self).__name__}: generating {width}x{height}")
        graph = MazeGraph(width, height)
        self.step_count = 0
        for _ in self.run(graph):
            pass

        goal = self.find_goal(graph, START)
        logger.debug(f"{type(self).__name__}: {graph.edge_count()} passages, goal {goal}")
        return Maze(graph, START, goal)
