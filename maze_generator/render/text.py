from typing import List, TextIO

from maze_generator.core.coordinates import Coordinate, Direction
from maze_generator.core.errors import RenderError
from maze_generator.core.maze import FieldType, Maze

CORNER = "·"
H_WALL = "-"
V_WALL = "|"
MARKERS = {FieldType.START: "S", FieldType.GOAL: "G", FieldType.NORMAL: " "}


def render_text(maze: Maze) -> str:
    """
    Debug view of a maze:

        ·-·-·
        |S  |
        · ·-·
        |  G|
        ·-·-·
    """
    width, height = maze.size
    lines: List[str] = []

    for y in range(height):
        ceiling = []
        body = []
        for x in range(width):
            field = maze.get_field(Coordinate(x, y))
            ceiling.append(CORNER)
            ceiling.append(" " if field.has_passage(Direction.NORTH) else H_WALL)
            body.append(" " if field.has_passage(Direction.WEST) else V_WALL)
            body.append(MARKERS[field.field_type])
        lines.append("".join(ceiling) + CORNER)
        lines.append("".join(body) + V_WALL)

    lines.append(CORNER + (H_WALL + CORNER) * width)
    return "\n".join(lines) + "\n"


def write_text(maze: Maze, stream: TextIO):
    text = render_text(maze)
    try:
        stream.write(text)
    except (OSError, ValueError) as e:
        raise RenderError(f"Could not write text maze: {e}") from e
