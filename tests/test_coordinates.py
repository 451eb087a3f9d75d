import unittest
import random
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_generator.core.coordinates import Coordinate, Direction, ALL_WALLS

class TestDirection(unittest.TestCase):
    def test_opposite(self):
        self.assertEqual(Direction.NORTH.opposite(), Direction.SOUTH)
        self.assertEqual(Direction.SOUTH.opposite(), Direction.NORTH)
        self.assertEqual(Direction.EAST.opposite(), Direction.WEST)
        self.assertEqual(Direction.WEST.opposite(), Direction.EAST)
        for d in Direction.all():
            self.assertEqual(d.opposite().opposite(), d)

    def test_all_fixed_order(self):
        self.assertEqual(Direction.all(), [Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST])

    def test_bits(self):
        self.assertEqual(ALL_WALLS, 15)
        values = [d.value for d in Direction.all()]
        self.assertEqual(len(set(values)), 4)

    def test_random_order_is_permutation(self):
        rng = random.Random(7)
        for _ in range(20):
            order = Direction.random_order(rng)
            self.assertEqual(sorted(order, key=lambda d: d.value), Direction.all())

    def test_random_order_deterministic(self):
        a = [Direction.random_order(random.Random(b"x" * 32)) for _ in range(3)]
        b = [Direction.random_order(random.Random(b"x" * 32)) for _ in range(3)]
        self.assertEqual(a, b)


class TestCoordinate(unittest.TestCase):
    def test_next(self):
        c = Coordinate(3, 3)
        self.assertEqual(c.next(Direction.NORTH), Coordinate(3, 2))
        self.assertEqual(c.next(Direction.SOUTH), Coordinate(3, 4))
        self.assertEqual(c.next(Direction.EAST), Coordinate(4, 3))
        self.assertEqual(c.next(Direction.WEST), Coordinate(2, 3))

    def test_value_semantics(self):
        self.assertEqual(Coordinate(1, 2), (1, 2))
        self.assertEqual(len({Coordinate(1, 2), Coordinate(1, 2), Coordinate(2, 1)}), 2)
        self.assertLess(Coordinate(0, 5), Coordinate(1, 0))

    def test_direction_to(self):
        c = Coordinate(0, 0)
        self.assertEqual(c.direction_to(Coordinate(1, 0)), Direction.EAST)
        self.assertEqual(c.direction_to(Coordinate(0, -1)), Direction.NORTH)
        with self.assertRaises(ValueError):
            c.direction_to(Coordinate(1, 1))

if __name__ == '__main__':
    unittest.main()
