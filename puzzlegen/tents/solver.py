# --- File: puzzlegen/tents/solver.py ---
# Exhaustive Tents solver, usable on its own or to certify generated boards.
import logging

from puzzlegen.constants import TENTS_EMPTY, TENTS_TENT, TENTS_TREE
from puzzlegen.tents.placer import has_adjacent_tent
from puzzlegen.utils import orthogonal_neighbors

logger = logging.getLogger(__name__)


class TentsSolver:
    """
    Finds every solution of a Tents puzzle.

    Args:
        board (list[list[int]]): The puzzle grid. Only trees are read; any tents
                                 on the input are ignored.
        row_hints (list[int]): Tents required in each row.
        col_hints (list[int]): Tents required in each column.
    """
    def __init__(self, board, row_hints, col_hints):
        self.dim = len(board)
        if len(row_hints) != self.dim or len(col_hints) != self.dim:
            raise ValueError(f"expected {self.dim} row and column hints, got {len(row_hints)} and {len(col_hints)}")
        # work on a tree-only copy
        self.board = [[TENTS_TREE if cell == TENTS_TREE else TENTS_EMPTY for cell in row] for row in board]
        self.row_hints = list(row_hints)
        self.col_hints = list(col_hints)
        self.row_counts = [0] * self.dim
        self.col_counts = [0] * self.dim

        self.tree_coords = [(r, c) for r in range(self.dim) for c in range(self.dim) if self.board[r][c] == TENTS_TREE]
        self.solutions = []

    def solve(self):
        """
        Returns:
            list[list[tuple]]: Every solution as a sorted list of tent coordinates.
        """
        self.solutions = []
        self._backtrack(0)
        logger.debug(f"Found {len(self.solutions)} tents solution(s) for {len(self.tree_coords)} trees")
        return self.solutions

    def valid_tent_placements(self, row, col):
        """Tent cells for the tree at (row, col) that break no rule right now."""
        return [(r, c) for r, c in orthogonal_neighbors(row, col, self.dim) if self._valid_tent_placement(r, c)]

    def _valid_tent_placement(self, r, c):
        return (self.board[r][c] == TENTS_EMPTY
                and not has_adjacent_tent(self.board, r, c)
                and self.row_counts[r] < self.row_hints[r]
                and self.col_counts[c] < self.col_hints[c])

    def _set_tent(self, r, c, present):
        delta = 1 if present else -1
        self.board[r][c] = TENTS_TENT if present else TENTS_EMPTY
        self.row_counts[r] += delta
        self.col_counts[c] += delta

    def _backtrack(self, idx):
        if idx == len(self.tree_coords):
            # hints that don't add up to the tree count can leave rows short
            if self.row_counts == self.row_hints and self.col_counts == self.col_hints:
                self.solutions.append(self._current_tents())
            return

        row, col = self.tree_coords[idx]
        for r, c in self.valid_tent_placements(row, col):
            self._set_tent(r, c, True)
            self._backtrack(idx + 1)
            self._set_tent(r, c, False)

    def _current_tents(self):
        return [(r, c) for r in range(self.dim) for c in range(self.dim) if self.board[r][c] == TENTS_TENT]


def solve_tents(board, row_hints, col_hints):
    """Convenience wrapper around TentsSolver."""
    return TentsSolver(board, row_hints, col_hints).solve()
