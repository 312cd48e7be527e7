from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

__all__ = [
    "Dims",
    "DEFAULT_DIMS",
    "Coord",
    "Direction",
    "ALL_DIRECTIONS",
]


@dataclass(frozen=True, slots=True)
class Coord:
    """Grid position. x grows to the right, y grows downwards."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"negative coordinate: ({self.x}, {self.y})")

    def take_step(self, direction: "Direction", dims: "Dims") -> Optional["Coord"]:
        """Neighbour in `direction`, or None when the step leaves the grid."""
        nx = self.x + direction.dx
        ny = self.y + direction.dy
        if not dims.contains(nx, ny):
            return None
        return Coord(nx, ny)


@dataclass(frozen=True, slots=True)
class Dims:
    """
    Fixed grid configuration shared by boards, sets and the search.

    Cell indexing: idx = y*width + x.
    word_bits: size of one storage block of a CoordSet.
    """

    width: int = 16
    height: int = 8
    word_bits: int = 64

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"bad grid size: {self.width}x{self.height}")
        if self.word_bits <= 0:
            raise ValueError(f"bad word size: {self.word_bits}")

    @property
    def cells(self) -> int:
        return self.width * self.height

    @property
    def n_words(self) -> int:
        return -(-self.cells // self.word_bits)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def coord(self, x: int, y: int) -> Coord:
        if not self.contains(x, y):
            raise ValueError(f"coordinate ({x}, {y}) outside {self.width}x{self.height} grid")
        return Coord(x, y)

    def index(self, c: Coord) -> int:
        if not self.contains(c.x, c.y):
            raise ValueError(f"coordinate ({c.x}, {c.y}) outside {self.width}x{self.height} grid")
        return c.y * self.width + c.x

    def coord_of(self, idx: int) -> Coord:
        return self.coord(idx % self.width, idx // self.width)


DEFAULT_DIMS = Dims()


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def __str__(self) -> str:
        return self.name.capitalize()


# expansion order of the search
ALL_DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)
