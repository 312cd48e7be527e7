from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Tuple
import os

from kick_core.board import Board, State
from kick_core.grid import Dims, DEFAULT_DIMS
from kick_core.parser import parse_level_str

@dataclass
class LevelRef:
    path: str
    index: int  # index of the level inside the file (if there are multiple levels)

    @property
    def level_id(self) -> str:
        return f"{self.path}#{self.index}"


def split_on_blank_lines(text: str) -> List[str]:
    """Level blocks are separated by empty lines (rows of spaces are floor, not separators)."""
    blocks: List[str] = []
    cur: List[str] = []
    for line in text.splitlines():
        if line == "":
            if cur:
                blocks.append("\n".join(cur))
                cur = []
        else:
            cur.append(line)
    if cur:
        blocks.append("\n".join(cur))
    return blocks


def iterate_level_strings(root_dir: str, rel_dirs: List[str]) -> Iterator[Tuple[LevelRef, str]]:
    """Iterate over all .txt in the given subfolders and return (level reference, level string)."""
    for rel in rel_dirs:
        abs_dir = os.path.join(root_dir, rel)
        if not os.path.isdir(abs_dir):
            continue
        for fname in sorted(os.listdir(abs_dir)):
            if not fname.endswith(".txt"):
                continue
            fpath = os.path.join(abs_dir, fname)
            with open(fpath, "r", encoding="utf-8") as f:
                content = f.read()
            for i, block in enumerate(split_on_blank_lines(content)):
                yield LevelRef(path=fpath, index=i), block


def parse_level_id(level_id: str) -> Tuple[str, int]:
    """Parses a string of the form "path/to/file.txt#3" into (path, index)."""
    if "#" not in level_id:
        return level_id, 0
    path, idx = level_id.rsplit("#", 1)
    try:
        k = int(idx)
    except ValueError:
        # a '#' inside the file name, not an index
        return level_id, 0
    return path, k


def load_level_by_id(level_id: str, dims: Dims = DEFAULT_DIMS) -> Tuple[Board, State]:
    """Loads level file#idx; the file may contain several levels."""
    path, wanted = parse_level_id(level_id)
    with open(path, "r", encoding="utf-8") as f:
        blocks = split_on_blank_lines(f.read())
    if not (0 <= wanted < len(blocks)):
        raise IndexError(f"{path} has {len(blocks)} levels, no level #{wanted}")
    return parse_level_str(blocks[wanted], dims)
