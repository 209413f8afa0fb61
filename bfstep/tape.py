"""
Sparse cell memory.

Cells hold 0-255 and wrap around on increment/decrement. Indices are plain
ints and may go negative; an unvisited cell reads as 0 and only occupies
space once it has been written.
"""

from typing import Dict, Iterator, Tuple

import numpy as np

CELL_MODULUS = 256


class Tape:
    def __init__(self):
        self._cells: Dict[int, int] = {}

    def __getitem__(self, index: int) -> int:
        return self._cells.get(index, 0)

    def __setitem__(self, index: int, value: int) -> None:
        self._cells[index] = value % CELL_MODULUS

    def __len__(self) -> int:
        """Number of cells that have been written."""
        return len(self._cells)

    def __contains__(self, index: int) -> bool:
        return index in self._cells

    def items(self) -> Iterator[Tuple[int, int]]:
        return iter(sorted(self._cells.items()))

    def increment(self, index: int) -> int:
        self[index] = self[index] + 1
        return self._cells[index]

    def decrement(self, index: int) -> int:
        self[index] = self[index] - 1
        return self._cells[index]

    def clear(self) -> None:
        self._cells.clear()

    def window(self, start: int, end: int) -> np.ndarray:
        """Return cells [start, end) as a uint8 array, unvisited cells as 0."""
        if end < start:
            raise ValueError(f"window end {end} is before start {start}")
        view = np.zeros(end - start, dtype=np.uint8)
        for index, value in self._cells.items():
            if start <= index < end:
                view[index - start] = value
        return view

    def __repr__(self) -> str:
        return f"Tape({dict(self.items())!r})"
