import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_generator.algo.goal import find_farthest_cell
from maze_generator.core.coordinates import Coordinate
from maze_generator.core.graph import MazeGraph

class TestFarthestCell(unittest.TestCase):
    def test_single_cell(self):
        graph = MazeGraph(1, 1)
        self.assertEqual(find_farthest_cell(graph, Coordinate(0, 0)), Coordinate(0, 0))

    def test_corridor(self):
        graph = MazeGraph(5, 1)
        for x in range(4):
            graph.add_passage(Coordinate(x, 0), Coordinate(x + 1, 0))
        self.assertEqual(find_farthest_cell(graph, Coordinate(0, 0)), Coordinate(4, 0))
        self.assertEqual(find_farthest_cell(graph, Coordinate(4, 0)), Coordinate(0, 0))

    def test_deepest_branch_of_tree(self):
        # 3x3 tree:
        #   (0,0)-(1,0)-(2,0)
        #     |
        #   (0,1)-(1,1)-(2,1)
        #                 |
        #               (2,2)-(1,2)-(0,2)
        graph = MazeGraph(3, 3)
        edges = [
            ((0, 0), (1, 0)), ((1, 0), (2, 0)),
            ((0, 0), (0, 1)), ((0, 1), (1, 1)), ((1, 1), (2, 1)),
            ((2, 1), (2, 2)), ((2, 2), (1, 2)), ((1, 2), (0, 2)),
        ]
        for a, b in edges:
            graph.add_passage(Coordinate(*a), Coordinate(*b))

        self.assertEqual(find_farthest_cell(graph, Coordinate(0, 0)), Coordinate(0, 2))

    def test_ignores_unreachable_cells(self):
        graph = MazeGraph(3, 1)
        graph.add_passage(Coordinate(0, 0), Coordinate(1, 0))
        self.assertEqual(find_farthest_cell(graph, Coordinate(0, 0)), Coordinate(1, 0))

if __name__ == '__main__':
    unittest.main()
