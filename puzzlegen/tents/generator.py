# --- File: puzzlegen/tents/generator.py ---
# Generates Tents puzzles and certifies their uniqueness with the exhaustive solver.
import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

from puzzlegen.constants import TENT_RETRY_BUDGET, TENTS_EMPTY, TENTS_MAX_ATTEMPTS, TENTS_TENT, TENTS_TREE
from puzzlegen.errors import ConfigurationError, GenerationFailure
from puzzlegen.presets import get_tents_preset
from puzzlegen.tents.placer import TentPlacer, derive_hints
from puzzlegen.tents.solver import TentsSolver
from puzzlegen.utils import format_duration, make_rng

logger = logging.getLogger(__name__)


@dataclass
class TentsPuzzle:
    size: int
    board: List[List[int]]  # trees and tents
    row_hints: List[int]
    col_hints: List[int]
    tents: List[Tuple[int, int]]
    unique: Optional[bool]  # None until the solver has run
    attempts: int

    def puzzle_board(self):
        """The board as given to a player: trees only."""
        return [[TENTS_TREE if cell == TENTS_TREE else TENTS_EMPTY for cell in row] for row in self.board]


class TentsGenerator:
    def __init__(self, rng=None, max_attempts=TENTS_MAX_ATTEMPTS, retry_budget=TENT_RETRY_BUDGET):
        if max_attempts < 1 or retry_budget < 1:
            raise ConfigurationError("attempt budgets must be at least 1")
        self.rng = make_rng(rng)
        self.max_attempts = max_attempts
        self.retry_budget = retry_budget

    def generate(self, size):
        """
        Places trees and tents for one board without checking uniqueness.

        Raises:
            UnsupportedPreset: No preset for this size.
            GenerationFailure: The tent placer ran out of retries.
        """
        preset = get_tents_preset(size)
        placer = TentPlacer(size, preset['num_trees'], preset['cluster_max_size'],
                            rng=self.rng, retry_budget=self.retry_budget)
        board, _ = placer.place()
        row_hints, col_hints = derive_hints(board)
        tents = [(r, c) for r in range(size) for c in range(size) if board[r][c] == TENTS_TENT]
        return TentsPuzzle(size, board, row_hints, col_hints, tents, unique=None, attempts=1)

    def generate_unique(self, size, require_unique=True):
        """
        Generates boards until the solver finds exactly one solution.

        Returns:
            TentsPuzzle: A puzzle whose only solution is its tent layout.

        Raises:
            UnsupportedPreset: No preset for this size.
            GenerationFailure: No unique board within `max_attempts`.
        """
        get_tents_preset(size)
        logger.info(f"Attempting to generate a {size}x{size} tents puzzle...")
        start_time = time.monotonic()

        for attempt in range(1, self.max_attempts + 1):
            try:
                puzzle = self.generate(size)
            except GenerationFailure as e:
                logger.debug(f"Attempt #{attempt}: tent placement failed ({e})")
                continue

            solutions = TentsSolver(puzzle.board, puzzle.row_hints, puzzle.col_hints).solve()
            puzzle.unique = len(solutions) == 1
            puzzle.attempts = attempt
            if not puzzle.unique and require_unique:
                logger.debug(f"Attempt #{attempt}: discarding board, found {len(solutions)} solutions")
                continue

            logger.info(f"Generated a {'unique' if puzzle.unique else 'non-unique'} tents puzzle after {attempt} "
                        f"attempts in {format_duration(time.monotonic() - start_time)}")
            return puzzle

        logger.warning(f"Could not generate a unique {size}x{size} tents puzzle after {self.max_attempts} attempts")
        raise GenerationFailure(f"no unique {size}x{size} tents puzzle after {self.max_attempts} attempts")
