from __future__ import annotations
from typing import Iterable, Iterator, List, Tuple

from .grid import Coord, Dims, DEFAULT_DIMS

__all__ = [
    "CoordSet",
    "bit",
    "has_bit",
    "set_bit",
    "clear_bit",
]


# Bit helpers
def bit(idx: int) -> int:
    return 1 << idx

def has_bit(mask: int, idx: int) -> bool:
    return (mask >> idx) & 1 == 1

def set_bit(mask: int, idx: int) -> int:
    return mask | bit(idx)

def clear_bit(mask: int, idx: int) -> int:
    return mask & ~bit(idx)


class CoordSet:
    """
    Fixed-capacity bitset with one bit per grid cell.

    Bit i is cell (i % width, i // width); bits are packed into
    dims.n_words blocks of dims.word_bits bits each.
    Equality and hash are over the bit pattern.
    """

    __slots__ = ("dims", "_words")

    def __init__(self, dims: Dims = DEFAULT_DIMS) -> None:
        self.dims = dims
        self._words: List[int] = [0] * dims.n_words

    @classmethod
    def from_coords(cls, coords: Iterable[Coord], dims: Dims = DEFAULT_DIMS) -> "CoordSet":
        s = cls(dims)
        for c in coords:
            s.insert(c)
        return s

    def _major_minor(self, c: Coord) -> Tuple[int, int]:
        return divmod(self.dims.index(c), self.dims.word_bits)

    def contains(self, c: Coord) -> bool:
        major, minor = self._major_minor(c)
        return has_bit(self._words[major], minor)

    def insert(self, c: Coord) -> None:
        major, minor = self._major_minor(c)
        self._words[major] = set_bit(self._words[major], minor)

    def remove(self, c: Coord) -> None:
        major, minor = self._major_minor(c)
        self._words[major] = clear_bit(self._words[major], minor)

    def copy(self) -> "CoordSet":
        s = CoordSet(self.dims)
        s._words = list(self._words)
        return s

    @property
    def words(self) -> Tuple[int, ...]:
        return tuple(self._words)

    def __contains__(self, c: Coord) -> bool:
        return self.contains(c)

    def __iter__(self) -> Iterator[Coord]:
        """Set cells in bit order (row by row)."""
        wb = self.dims.word_bits
        for major, w in enumerate(self._words):
            minor = 0
            while w:
                if w & 1:
                    yield self.dims.coord_of(major * wb + minor)
                w >>= 1
                minor += 1

    def __len__(self) -> int:
        return sum(bin(w).count("1") for w in self._words)

    def __bool__(self) -> bool:
        return any(self._words)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CoordSet):
            return NotImplemented
        return self.dims == other.dims and self._words == other._words

    def __hash__(self) -> int:
        return hash((self.dims, tuple(self._words)))

    def __repr__(self) -> str:
        cells = ", ".join(f"({c.x}, {c.y})" for c in self)
        return f"CoordSet({{{cells}}})"
