# --- File: puzzlegen/backends/base.py ---
# The boolean constraint model of a Star Battle board and the backend interface.
from abc import ABC, abstractmethod
from collections import defaultdict
from dataclasses import dataclass
from typing import List, Optional

from puzzlegen.constants import UNASSIGNED
from puzzlegen.utils import SURROUNDING_OFFSETS

Grid = List[List[int]]


class StarBattleModel:
    """
    One boolean per cell. Each row, column and region must sum to `stars`,
    and no two true cells may touch, diagonals included.
    """
    def __init__(self, region_grid, stars):
        self.region_grid = region_grid
        self.dim = len(region_grid)
        self.stars = stars

        self.regions = defaultdict(list)
        for r in range(self.dim):
            for c in range(self.dim):
                region_id = region_grid[r][c]
                if region_id is UNASSIGNED:
                    raise ValueError(f"cell ({r}, {c}) has no region")
                self.regions[region_id].append((r, c))

    def adjacent_pairs(self):
        """Every unordered pair of touching cells, each listed once."""
        pairs = []
        for r in range(self.dim):
            for c in range(self.dim):
                for dr, dc in SURROUNDING_OFFSETS:
                    nr, nc = r + dr, c + dc
                    if (nr, nc) > (r, c) and 0 <= nr < self.dim and 0 <= nc < self.dim:
                        pairs.append(((r, c), (nr, nc)))
        return pairs

    def is_solution(self, grid):
        """Checks a 0/1 grid against every constraint of the model."""
        if len(grid) != self.dim or any(len(row) != self.dim for row in grid):
            return False
        for i in range(self.dim):
            if sum(grid[i]) != self.stars or sum(grid[r][i] for r in range(self.dim)) != self.stars:
                return False
        for cells in self.regions.values():
            if sum(grid[r][c] for r, c in cells) != self.stars:
                return False
        return not any(grid[a[0]][a[1]] and grid[b[0]][b[1]] for a, b in self.adjacent_pairs())


@dataclass
class SolveResult:
    model: Optional[Grid] = None

    @property
    def satisfiable(self):
        return self.model is not None


UNSAT = SolveResult()


class ConstraintBackend(ABC):
    """
    Incremental solving boundary used by the verifier.

    A backend is loaded with one model, solved, and then narrowed by blocking
    clauses; each blocking clause forbids exactly one previously found grid.
    """
    name = "abstract"

    @abstractmethod
    def load(self, model: StarBattleModel) -> None:
        """Replaces any previous state with the constraints of `model`."""

    @abstractmethod
    def solve(self) -> SolveResult:
        """Finds a grid satisfying the model and every blocking clause so far."""

    @abstractmethod
    def add_blocking_clause(self, solution: Grid) -> None:
        """Forbids `solution` from being returned again."""

    def resolve(self) -> SolveResult:
        """Solves again after blocking clauses were added."""
        return self.solve()
