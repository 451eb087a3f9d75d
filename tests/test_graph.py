import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_generator.core.coordinates import Coordinate, Direction
from maze_generator.core.graph import MazeGraph

class TestMazeGraph(unittest.TestCase):
    def test_initialization(self):
        graph = MazeGraph(4, 3)
        self.assertEqual(graph.edge_count(), 0)
        # Every cell is its own component before carving
        self.assertEqual(len(graph.connected_components()), 12)

    def test_contains(self):
        graph = MazeGraph(5, 5)
        self.assertTrue(graph.contains(Coordinate(0, 0)))
        self.assertTrue(graph.contains(Coordinate(4, 4)))
        self.assertFalse(graph.contains(Coordinate(-1, 0)))
        self.assertFalse(graph.contains(Coordinate(0, 5)))

    def test_passages_are_undirected(self):
        graph = MazeGraph(2, 2)
        a, b = Coordinate(0, 0), Coordinate(1, 0)
        graph.add_passage(a, b)
        self.assertTrue(graph.has_passage(a, b))
        self.assertTrue(graph.has_passage(b, a))
        self.assertEqual(graph.degree(a), 1)
        self.assertEqual(graph.degree(Coordinate(1, 1)), 0)
        self.assertEqual(list(graph.neighbors(b)), [a])

    def test_open_directions(self):
        graph = MazeGraph(3, 3)
        center = Coordinate(1, 1)
        graph.add_passage(center, Coordinate(1, 0))
        graph.add_passage(center, Coordinate(2, 1))
        self.assertEqual(graph.open_directions(center), Direction.NORTH.value | Direction.EAST.value)

    def test_paths(self):
        graph = MazeGraph(3, 1)
        graph.add_passage(Coordinate(0, 0), Coordinate(1, 0))
        self.assertTrue(graph.has_path(Coordinate(0, 0), Coordinate(1, 0)))
        self.assertFalse(graph.has_path(Coordinate(0, 0), Coordinate(2, 0)))
        self.assertEqual(graph.shortest_path(Coordinate(0, 0), Coordinate(2, 0)), [])

        graph.add_passage(Coordinate(1, 0), Coordinate(2, 0))
        self.assertEqual(
            graph.shortest_path(Coordinate(0, 0), Coordinate(2, 0)),
            [Coordinate(0, 0), Coordinate(1, 0), Coordinate(2, 0)],
        )
        self.assertEqual(len(graph.connected_components()), 1)

    def test_isomorphism(self):
        # Two different 4-cell paths through a 2x2 grid
        g1 = MazeGraph(2, 2)
        g1.add_passage(Coordinate(0, 0), Coordinate(1, 0))
        g1.add_passage(Coordinate(1, 0), Coordinate(1, 1))
        g1.add_passage(Coordinate(1, 1), Coordinate(0, 1))

        g2 = MazeGraph(2, 2)
        g2.add_passage(Coordinate(0, 0), Coordinate(0, 1))
        g2.add_passage(Coordinate(0, 1), Coordinate(1, 1))
        g2.add_passage(Coordinate(1, 1), Coordinate(1, 0))

        self.assertTrue(g1.is_isomorphic(g2))
        self.assertTrue(g1.is_isomorphic(g1.copy()))

        g3 = MazeGraph(2, 2)
        g3.add_passage(Coordinate(0, 0), Coordinate(0, 1))
        self.assertFalse(g1.is_isomorphic(g3))
        self.assertFalse(g1.is_isomorphic(MazeGraph(4, 1)))

    def test_copy_is_independent(self):
        g1 = MazeGraph(2, 1)
        g2 = g1.copy()
        g2.add_passage(Coordinate(0, 0), Coordinate(1, 0))
        self.assertEqual(g1.edge_count(), 0)
        self.assertEqual(g2.edge_count(), 1)

if __name__ == '__main__':
    unittest.main()
