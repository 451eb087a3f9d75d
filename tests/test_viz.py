import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_generator.algo.base import seed_from_int
from maze_generator.algo.prim import PrimsAlgorithm
from maze_generator.viz.renderer import Renderer

class TestRendererCamera(unittest.TestCase):
    """Camera maths only; no window is opened."""

    def setUp(self):
        self.maze = PrimsAlgorithm(seed_from_int(3)).generate(20, 10)
        self.renderer = Renderer(self.maze, width=880, height=480)

    def test_bitmask_loaded(self):
        self.assertEqual(self.renderer.cells.shape, (10, 20))

    def test_fit_to_screen(self):
        self.renderer.fit_to_screen()
        # min((880-80)/20, (480-80)/10) = 40
        self.assertEqual(self.renderer.cell_size, 40.0)
        self.assertEqual(self.renderer.offset_x, 40.0)
        self.assertEqual(self.renderer.offset_y, 40.0)
        self.assertEqual(self.renderer.visible_range(), (0, 0, 20, 10))

    def test_world_screen_round_trip(self):
        self.renderer.fit_to_screen()
        sx, sy = self.renderer.world_to_screen(3, 4)
        self.assertEqual(self.renderer.screen_to_world(sx + 1, sy + 1), (3, 4))

    def test_zoom_keeps_point_under_cursor(self):
        self.renderer.fit_to_screen()
        before = self.renderer.screen_to_world(310, 215)
        self.renderer.zoom_at(310, 215, zoom_in=True)
        self.assertGreater(self.renderer.cell_size, 40.0)
        self.assertEqual(self.renderer.screen_to_world(310, 215), before)

if __name__ == '__main__':
    unittest.main()
