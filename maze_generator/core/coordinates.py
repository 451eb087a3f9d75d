import random
from enum import Enum
from typing import List, NamedTuple


class Direction(Enum):
    # Bitmask values, one bit per side of a cell
    NORTH = 0b0001
    EAST  = 0b0010
    SOUTH = 0b0100
    WEST  = 0b1000

    @property
    def dx(self) -> int:
        return _DX[self]

    @property
    def dy(self) -> int:
        return _DY[self]

    def opposite(self) -> "Direction":
        return _OPPOSITE[self]

    @classmethod
    def all(cls) -> List["Direction"]:
        """Fixed order: N, E, S, W."""
        return [cls.NORTH, cls.EAST, cls.SOUTH, cls.WEST]

    @classmethod
    def random_order(cls, rng: random.Random) -> List["Direction"]:
        """All four directions shuffled (Fisher-Yates) with the caller's rng."""
        directions = cls.all()
        rng.shuffle(directions)
        return directions


_DX = {Direction.NORTH: 0, Direction.SOUTH: 0, Direction.EAST: 1, Direction.WEST: -1}
_DY = {Direction.NORTH: -1, Direction.SOUTH: 1, Direction.EAST: 0, Direction.WEST: 0}
_OPPOSITE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

ALL_WALLS = Direction.NORTH.value | Direction.EAST.value | Direction.SOUTH.value | Direction.WEST.value


class Coordinate(NamedTuple):
    """
    Immutable (x, y) cell address. Ordered x first, then y (plain tuple order),
    which is all the sets and dicts of the generators need.
    """
    x: int
    y: int

    def next(self, direction: Direction) -> "Coordinate":
        return Coordinate(self.x + direction.dx, self.y + direction.dy)

    def direction_to(self, other: "Coordinate") -> Direction:
        """Direction of an adjacent cell. Raises ValueError if not a cardinal neighbour."""
        for direction in Direction.all():
            if self.next(direction) == other:
                return direction
        raise ValueError(f"{other} is not adjacent to {self}")

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
