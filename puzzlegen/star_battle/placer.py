# --- File: puzzlegen/star_battle/placer.py ---
# Random star solutions for Star Battle, ignoring regions.
import logging

from puzzlegen.constants import STATE_EMPTY, STATE_STAR
from puzzlegen.errors import GenerationFailure
from puzzlegen.utils import empty_grid, make_rng, shuffle, surrounding_cells

logger = logging.getLogger(__name__)


class StarsPlacer:
    """
    Finds a random placement of `stars` stars per row and column on a
    size x size board, with no two stars touching (diagonals included).
    """
    def __init__(self, size, stars, rng=None):
        if size < 1 or stars < 1:
            raise ValueError(f"size and stars must be positive, got {size} and {stars}")
        self.size = size
        self.stars = stars
        self.rng = make_rng(rng)
        self.board = []
        self.row_counts, self.col_counts = [], []

    def generate(self, shorten=False):
        """
        Runs the randomized backtracking search from an empty board.

        Args:
            shorten (bool): Return only the star coordinates instead of the full grid.

        Returns:
            list: The 0/1 solution grid, or a list of (row, col) star coordinates.

        Raises:
            GenerationFailure: No placement exists for this size and star count.
        """
        self.board = empty_grid(self.size, STATE_EMPTY)
        self.row_counts, self.col_counts = [0] * self.size, [0] * self.size

        if not self._backtrack(0, 0):
            raise GenerationFailure(f"no {self.stars}-star placement exists on a {self.size}x{self.size} board")

        solution = [row[:] for row in self.board]
        logger.debug(f"Placed {self.size * self.stars} stars on a {self.size}x{self.size} board")
        if shorten:
            return [(r, c) for r in range(self.size) for c in range(self.size) if solution[r][c] == STATE_STAR]
        return solution

    def _is_valid(self, r, c):
        if self.board[r][c] != STATE_EMPTY or self.col_counts[c] >= self.stars:
            return False
        return all(self.board[nr][nc] != STATE_STAR for nr, nc in surrounding_cells(r, c, self.size))

    def _columns_reachable(self, row):
        # after `row` is complete, each column can still take at most one star every other row
        rows_left = self.size - row - 1
        capacity = (rows_left + 1) // 2
        return all(self.stars - count <= capacity for count in self.col_counts)

    def _place(self, r, c, value):
        delta = 1 if value == STATE_STAR else -1
        self.board[r][c] = value
        self.row_counts[r] += delta
        self.col_counts[c] += delta

    def _backtrack(self, row, start_col):
        if row == self.size:
            return True

        if self.row_counts[row] == self.stars:
            return self._columns_reachable(row) and self._backtrack(row + 1, 0)

        candidates = [c for c in range(start_col, self.size) if self._is_valid(row, c)]
        shuffle(candidates, self.rng)

        for c in candidates:
            self._place(row, c, STATE_STAR)
            if self._backtrack(row, c + 2):
                return True
            self._place(row, c, STATE_EMPTY)
        return False
