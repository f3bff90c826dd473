# board.py
from dataclasses import dataclass
from typing import AbstractSet, Optional, Tuple
import random

from .config import GRID_N

Cell = Tuple[int, int]


@dataclass(frozen=True)
class Board:
    size: int = GRID_N

    @property
    def n_cells(self) -> int:
        return self.size * self.size

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.size and 0 <= y < self.size

    def random_free_cell(self, occupied: AbstractSet[Cell], rng: random.Random) -> Optional[Cell]:
        """
        Uniformly pick a cell not in `occupied` by rejection sampling.
        Returns None when every cell is taken (nothing left to sample).
        """
        if len(occupied) >= self.n_cells:
            return None
        while True:
            cell = (rng.randrange(self.size), rng.randrange(self.size))
            if cell not in occupied:
                return cell


BOARD = Board()
