# --- File: puzzlegen/tents/placer.py ---
# Places tree/tent pairs in small contiguous clusters.
import logging
from collections import deque

from puzzlegen.constants import TENT_RETRY_BUDGET, TENTS_EMPTY, TENTS_TENT, TENTS_TREE
from puzzlegen.errors import GenerationFailure
from puzzlegen.utils import empty_grid, make_rng, orthogonal_neighbors, rand_int_inclusive, random_pick, surrounding_cells

logger = logging.getLogger(__name__)


def derive_hints(board):
    """Counts tents per row and per column."""
    dim = len(board)
    row_hints = [sum(1 for cell in row if cell == TENTS_TENT) for row in board]
    col_hints = [sum(1 for r in range(dim) if board[r][c] == TENTS_TENT) for c in range(dim)]
    return row_hints, col_hints


def has_adjacent_tent(board, r, c):
    return any(board[nr][nc] == TENTS_TENT for nr, nc in surrounding_cells(r, c, len(board)))


def orthogonal_count(board, r, c, value):
    return sum(1 for nr, nc in orthogonal_neighbors(r, c, len(board)) if board[nr][nc] == value)


class TentPlacer:
    """
    Fills an empty board with `num_trees` trees, each paired with an
    orthogonally adjacent tent, no two tents touching. Every tree touches
    exactly one tent and every tent exactly one tree.

    Pairs are laid down in clusters of up to `cluster_max_size` trees that grow
    out of a random seed cell. A cluster that runs out of room is abandoned;
    pairs it already committed stay on the board.
    """
    def __init__(self, size, num_trees, cluster_max_size, rng=None, retry_budget=TENT_RETRY_BUDGET):
        self.size = size
        self.num_trees = num_trees
        self.cluster_max_size = cluster_max_size
        self.retry_budget = retry_budget
        self.rng = make_rng(rng)
        self.board = []
        self.pairs = []

    def place(self):
        """
        Returns:
            tuple: (board, pairs) where pairs lists ((tree_r, tree_c), (tent_r, tent_c)).

        Raises:
            GenerationFailure: The retry budget ran out before every tree was placed.
        """
        self.board = empty_grid(self.size, TENTS_EMPTY)
        self.pairs = []
        failures = 0

        while len(self.pairs) < self.num_trees:
            if failures >= self.retry_budget:
                logger.warning(f"Placed only {len(self.pairs)}/{self.num_trees} trees after {failures} abandoned clusters")
                raise GenerationFailure(f"tent placement exhausted its retry budget of {self.retry_budget}")
            if not self._place_cluster():
                failures += 1

        logger.debug(f"Placed {self.num_trees} tree/tent pairs ({failures} clusters abandoned)")
        return [row[:] for row in self.board], list(self.pairs)

    def _place_cluster(self):
        """Places one cluster; False when it had to be abandoned."""
        remaining = self.num_trees - len(self.pairs)
        cluster_size = min(rand_int_inclusive(1, self.cluster_max_size, self.rng), remaining)

        free_cells = [(r, c) for r in range(self.size) for c in range(self.size) if self._can_hold_tree(r, c)]
        if not free_cells:
            return False
        candidates = deque([random_pick(free_cells, self.rng)])

        for _ in range(cluster_size):
            tree = self._next_candidate(candidates)
            if tree is None:
                return False

            r, c = tree
            self.board[r][c] = TENTS_TREE
            # the tent may only touch its own tree
            spots = [(nr, nc) for nr, nc in orthogonal_neighbors(r, c, self.size)
                     if self.board[nr][nc] == TENTS_EMPTY and not has_adjacent_tent(self.board, nr, nc)
                     and orthogonal_count(self.board, nr, nc, TENTS_TREE) == 1]
            if not spots:
                self.board[r][c] = TENTS_EMPTY
                return False

            tent = random_pick(spots, self.rng)
            self.board[tent[0]][tent[1]] = TENTS_TENT
            self.pairs.append((tree, tent))
            candidates.extend((nr, nc) for nr, nc in orthogonal_neighbors(r, c, self.size)
                              if self.board[nr][nc] == TENTS_EMPTY)
        return True

    def _can_hold_tree(self, r, c):
        return self.board[r][c] == TENTS_EMPTY and orthogonal_count(self.board, r, c, TENTS_TENT) == 0

    def _next_candidate(self, candidates):
        # earlier candidates may have been filled, or gained a tent, since they were queued
        while candidates:
            r, c = candidates.popleft()
            if self._can_hold_tree(r, c):
                return r, c
        return None
