from dataclasses import dataclass
from html import escape
from typing import List, Optional, TextIO

from maze_generator.core.coordinates import Coordinate, Direction
from maze_generator.core.errors import RenderError
from maze_generator.core.maze import Maze

# Pixels per cell when no explicit height is requested
DEFAULT_CELL_SIZE = 20


@dataclass
class SvgOptions:
    """
    padding: space around the maze, in pixels.
    height: drawing height in pixels; None derives it from the number of rows.
        The width follows from the maze's aspect ratio.
    markersize: start/goal marker radius in tenths of a cell.
    startcol, goalcol, strokecol: named colours ("red") or hex strings ("#FF0000").
    strokewidth: wall thickness in pixels.
    """
    padding: int = 10
    height: Optional[int] = None
    markersize: int = 2
    startcol: str = "red"
    goalcol: str = "blue"
    strokewidth: int = 4
    strokecol: str = "#000000"

    def validate(self):
        if self.height is not None and self.height <= 0:
            raise RenderError(f"SVG height must be positive, got {self.height}")
        if self.padding < 0:
            raise RenderError(f"SVG padding must not be negative, got {self.padding}")
        if self.markersize < 0:
            raise RenderError(f"Marker size must not be negative, got {self.markersize}")
        if self.strokewidth < 0:
            raise RenderError(f"Stroke width must not be negative, got {self.strokewidth}")
        if self.height is not None and self.height <= 2 * self.padding:
            raise RenderError(f"SVG height {self.height} leaves no room inside padding {self.padding}")


def _num(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def render_svg(maze: Maze, options: Optional[SvgOptions] = None) -> str:
    """
    Self-contained SVG document: one <line> per closed wall plus circle
    markers at the centres of the start and goal cells.
    """
    if options is None:
        options = SvgOptions()
    options.validate()

    cols, rows = maze.size
    pad = options.padding
    if options.height is None:
        total_h = 2 * pad + rows * DEFAULT_CELL_SIZE
    else:
        total_h = options.height
    cell = (total_h - 2 * pad) / rows
    total_w = 2 * pad + cell * cols

    def line(x1, y1, x2, y2) -> str:
        return (f'<line x1="{_num(x1)}" y1="{_num(y1)}" '
                f'x2="{_num(x2)}" y2="{_num(y2)}"/>')

    walls: List[str] = []
    for y in range(rows):
        for x in range(cols):
            field = maze.get_field(Coordinate(x, y))
            left = pad + x * cell
            top = pad + y * cell
            # Interior east/south walls are drawn as the neighbour's west/north wall
            if not field.has_passage(Direction.NORTH):
                walls.append(line(left, top, left + cell, top))
            if not field.has_passage(Direction.WEST):
                walls.append(line(left, top, left, top + cell))
            if x == cols - 1 and not field.has_passage(Direction.EAST):
                walls.append(line(left + cell, top, left + cell, top + cell))
            if y == rows - 1 and not field.has_passage(Direction.SOUTH):
                walls.append(line(left, top + cell, left + cell, top + cell))

    radius = cell * options.markersize / 10

    def marker(coord: Coordinate, colour: str) -> str:
        cx = pad + (coord.x + 0.5) * cell
        cy = pad + (coord.y + 0.5) * cell
        return (f'<circle cx="{_num(cx)}" cy="{_num(cy)}" r="{_num(radius)}" '
                f'fill="{escape(colour, quote=True)}"/>')

    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{_num(total_w)}" '
        f'height="{_num(total_h)}" viewBox="0 0 {_num(total_w)} {_num(total_h)}">',
        f'<g stroke="{escape(options.strokecol, quote=True)}" '
        f'stroke-width="{options.strokewidth}" stroke-linecap="square">',
        *walls,
        '</g>',
        marker(maze.start, options.startcol),
        marker(maze.goal, options.goalcol),
        '</svg>',
    ]
    return "\n".join(parts) + "\n"


def write_svg(maze: Maze, stream: TextIO, options: Optional[SvgOptions] = None):
    document = render_svg(maze, options)
    try:
        stream.write(document)
    except (OSError, ValueError) as e:
        raise RenderError(f"Could not write SVG: {e}") from e
