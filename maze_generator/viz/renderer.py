import pygame

from maze_generator.core.coordinates import Direction
from maze_generator.core.maze import Maze


class Renderer:
    """Interactive window over a finished maze. Drag to pan, wheel to zoom,
    S toggles the start-goal solution, F refits the view."""

    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_START = (220, 40, 40)
    COLOR_GOAL = (40, 80, 220)
    COLOR_SOLUTION = (255, 215, 0)# Gold

    def __init__(self, maze: Maze, width=1280, height=720):
        self.maze = maze
        self.cells = maze.to_bitmask()
        self.screen_width = width
        self.screen_height = height

        # Camera
        self.cell_size = 20.0  # Pixels per cell
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.zoom_speed = 1.1

        self.show_solution = False
        self.solution = None

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire maze on screen with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        zoom_x = available_w / self.maze.width
        zoom_y = available_h / self.maze.height

        # Taking minimum zoom to fit both dimensions
        self.cell_size = min(zoom_x, zoom_y)

        # Center
        total_maze_w = self.maze.width * self.cell_size
        total_maze_h = self.maze.height * self.cell_size

        self.offset_x = (self.screen_width - total_maze_w) / 2
        self.offset_y = (self.screen_height - total_maze_h) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Maze - {self.maze.width}x{self.maze.height}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

        # Initial fit
        self.fit_to_screen()

    def world_to_screen(self, wx, wy):
        sx = wx * self.cell_size + self.offset_x
        sy = wy * self.cell_size + self.offset_y
        return sx, sy

    def screen_to_world(self, sx, sy):
        wx = (sx - self.offset_x) / self.cell_size
        wy = (sy - self.offset_y) / self.cell_size
        return int(wx), int(wy)

    def visible_range(self):
        """(start_x, start_y, end_x, end_y) of the cells on screen, clamped to the maze."""
        start_x = int((-self.offset_x) / self.cell_size)
        start_y = int((-self.offset_y) / self.cell_size)
        end_x = int((self.screen_width - self.offset_x) / self.cell_size) + 1
        end_y = int((self.screen_height - self.offset_y) / self.cell_size) + 1

        return (
            max(0, start_x),
            max(0, start_y),
            min(self.maze.width, end_x),
            min(self.maze.height, end_y),
        )

    def zoom_at(self, mx, my, zoom_in: bool):
        # World coord before zoom
        wx = (mx - self.offset_x) / self.cell_size
        wy = (my - self.offset_y) / self.cell_size

        if zoom_in:
            self.cell_size *= self.zoom_speed
        else:
            self.cell_size /= self.zoom_speed

        # Clamp zoom
        self.cell_size = max(0.001, min(100.0, self.cell_size))

        # Adjust offset to keep mouse at same world coord
        self.offset_x = mx - wx * self.cell_size
        self.offset_y = my - wy * self.cell_size

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h

            elif event.type == pygame.MOUSEWHEEL:
                mx, my = pygame.mouse.get_pos()
                self.zoom_at(mx, my, event.y > 0)

            elif event.type == pygame.MOUSEMOTION:
                if pygame.mouse.get_pressed()[0] or pygame.mouse.get_pressed()[2]: # Left or Right drag
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_s:
                    self.show_solution = not self.show_solution
                    if self.show_solution and self.solution is None:
                        self.solution = self.maze.solution()
                elif event.key == pygame.K_f:
                    self.fit_to_screen()
                elif event.key in (pygame.K_ESCAPE, pygame.K_q):
                    self.running = False

    def draw_maze(self):
        self.surface.fill(self.COLOR_BG)
        start_x, start_y, end_x, end_y = self.visible_range()
        size = int(self.cell_size) + 1

        if self.show_solution and self.solution:
            for (px, py) in self.solution:
                if start_x <= px < end_x and start_y <= py < end_y:
                    sx, sy = self.world_to_screen(px, py)
                    pygame.draw.rect(self.surface, self.COLOR_SOLUTION, (sx, sy, size, size))

        for coord, color in ((self.maze.start, self.COLOR_START), (self.maze.goal, self.COLOR_GOAL)):
            sx, sy = self.world_to_screen(coord.x, coord.y)
            pygame.draw.rect(self.surface, color, (sx, sy, size, size))

        if self.cell_size <= 4.0:
            return

        north, east = Direction.NORTH.value, Direction.EAST.value
        south, west = Direction.SOUTH.value, Direction.WEST.value
        wall_color = self.COLOR_WALL
        for y in range(start_y, end_y):
            for x in range(start_x, end_x):
                cell = self.cells[y, x]
                px = int(x * self.cell_size + self.offset_x)
                py = int(y * self.cell_size + self.offset_y)

                if cell & south:
                    pygame.draw.line(self.surface, wall_color, (px, py + size), (px + size, py + size), 1)
                if cell & east:
                    pygame.draw.line(self.surface, wall_color, (px + size, py), (px + size, py + size), 1)

                if y == 0 and (cell & north):
                    pygame.draw.line(self.surface, wall_color, (px, py), (px + size, py), 1)
                if x == 0 and (cell & west):
                    pygame.draw.line(self.surface, wall_color, (px, py), (px, py + size), 1)

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        cells = self.maze.width * self.maze.height
        info = [
            f"FPS: {fps}",
            f"Size: {self.maze.width}x{self.maze.height} ({cells:,})",
            f"Zoom: {self.cell_size:.2f}",
            f"Start: {self.maze.start}  Goal: {self.maze.goal}",
        ]

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def run_loop(self):
        while self.running:
            self.handle_input()
            self.draw_maze()
            self.draw_hud()
            pygame.display.flip()
            self.clock.tick(60)

        pygame.quit()
