from dataclasses import dataclass
from typing import Optional

from .coordset import CoordSet
from .grid import Coord, Dims

__all__ = [
    "Board",
    "State",
]


@dataclass(frozen=True, slots=True)
class Board:
    """
    Static level geometry, built once per level and shared by the search.

    hazard_odd / hazard_even: cells that are hazardous after an odd / even
    number of moves. Both are None outside the hazard mode.
    """

    dims: Dims
    walls: CoordSet
    goal: Coord
    key: Optional[Coord] = None
    lock: Optional[Coord] = None
    hazard_odd: Optional[CoordSet] = None
    hazard_even: Optional[CoordSet] = None

    @property
    def has_hazards(self) -> bool:
        return self.hazard_odd is not None or self.hazard_even is not None

    def is_wall(self, c: Coord) -> bool:
        return self.walls.contains(c)

    def hazard_at(self, c: Coord, parity: bool) -> bool:
        """Is `c` hazardous for a state whose move_parity is `parity`."""
        cells = self.hazard_odd if parity else self.hazard_even
        return cells is not None and cells.contains(c)


@dataclass(frozen=True, slots=True)
class State:
    """
    Movable part of the world, one value per node of the search graph.

    Equality/hash covers every field: the same layout with or without the
    key (or with another parity) is a different node.
    fragile: destructible obstacles, None when the level has none.
    """

    obstacles: CoordSet
    player: Coord
    has_key: bool = False
    move_parity: bool = False
    fragile: Optional[CoordSet] = None

    def has_obstacle(self, c: Coord) -> bool:
        return self.obstacles.contains(c)

    def has_fragile(self, c: Coord) -> bool:
        return self.fragile is not None and self.fragile.contains(c)

