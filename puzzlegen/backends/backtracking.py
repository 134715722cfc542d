# --- File: puzzlegen/backends/backtracking.py ---
# Exhaustive backtracking backend, no external solver needed.
import logging
import time
from collections import defaultdict

from puzzlegen.backends.base import UNSAT, ConstraintBackend, SolveResult
from puzzlegen.utils import format_duration, surrounding_cells

logger = logging.getLogger(__name__)


class BacktrackingBackend(ConstraintBackend):
    """
    Cell-by-cell search over the board in row-major order.

    Blocking clauses are kept as a set of star layouts; the search skips any
    complete grid found in that set and keeps going, so `resolve` explores the
    whole remaining space before reporting unsatisfiable.
    """
    name = "backtracking"

    def __init__(self):
        self.model = None
        self.blocked = set()

    def load(self, model):
        self.model = model
        self.dim = model.dim
        self.stars = model.stars
        self.region_of = {cell: region_id for region_id, cells in model.regions.items() for cell in cells}
        # index of the last cell of each region in row-major order; the region is final once we pass it
        self.region_last = {region_id: max(r * self.dim + c for r, c in cells)
                            for region_id, cells in model.regions.items()}
        self.blocked = set()

    def solve(self):
        if self.model is None:
            raise RuntimeError("no model loaded")
        self.board = [[0] * self.dim for _ in range(self.dim)]
        self.row_counts = [0] * self.dim
        self.col_counts = [0] * self.dim
        self.region_counts = defaultdict(int)
        self.found = None

        start_time = time.monotonic()
        self._backtrack(0, 0)
        logger.debug(f"Backtracking solve time: {format_duration(time.monotonic() - start_time)}")
        return SolveResult(self.found) if self.found is not None else UNSAT

    def add_blocking_clause(self, solution):
        self.blocked.add(self._key(solution))

    @staticmethod
    def _key(grid):
        return tuple((r, c) for r, row in enumerate(grid) for c, value in enumerate(row) if value)

    def _is_valid_placement(self, r, c):
        if self.row_counts[r] >= self.stars: return False
        if self.col_counts[c] >= self.stars: return False
        if self.region_counts[self.region_of[(r, c)]] >= self.stars: return False
        return all(self.board[nr][nc] == 0 for nr, nc in surrounding_cells(r, c, self.dim))

    def _set(self, r, c, value):
        delta = 1 if value else -1
        self.board[r][c] = value
        self.row_counts[r] += delta
        self.col_counts[c] += delta
        self.region_counts[self.region_of[(r, c)]] += delta

    def _cell_closed(self, r, c):
        """Checks the counts that become final once (r, c) is decided."""
        index = r * self.dim + c
        region_id = self.region_of[(r, c)]
        if self.region_last[region_id] == index and self.region_counts[region_id] != self.stars:
            return False
        if c == self.dim - 1:
            if self.row_counts[r] != self.stars:
                return False
            # stars in one column need a gap row between them
            capacity = (self.dim - r) // 2
            if any(self.stars - count > capacity for count in self.col_counts):
                return False
        return True

    def _backtrack(self, r, c):
        if self.found is not None:
            return True

        if r == self.dim:
            if self._key(self.board) in self.blocked:
                return False
            self.found = [row[:] for row in self.board]
            return True

        next_r, next_c = (r, c + 1) if c + 1 < self.dim else (r + 1, 0)

        # --- Try placing a star at (r, c) ---
        if self._is_valid_placement(r, c):
            self._set(r, c, 1)
            if self._cell_closed(r, c) and self._backtrack(next_r, next_c):
                return True
            self._set(r, c, 0)

        # --- Try leaving (r, c) empty ---
        stars_needed_in_row = self.stars - self.row_counts[r]
        remaining_cells_in_row = self.dim - (c + 1)
        if stars_needed_in_row <= remaining_cells_in_row and self._cell_closed(r, c):
            if self._backtrack(next_r, next_c):
                return True

        return False
