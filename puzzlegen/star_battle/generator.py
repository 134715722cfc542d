# --- File: puzzlegen/star_battle/generator.py ---
#
# Generates Star Battle puzzles with a unique solution.
#
# A star solution is drawn first with a randomized backtracking search, the
# board is then partitioned into regions grown around the stars, and each
# layout is checked for uniqueness by the constraint verifier. Layouts that
# fail to grow, have no solution or have several are thrown away and the
# attempt starts over, up to a fixed number of attempts.
import logging
import time
from dataclasses import dataclass
from typing import List

from puzzlegen.constants import ATTEMPTS_PER_SOLUTION, DEFAULT_BACKEND, REGION_SEED_ATTEMPTS, STAR_BATTLE_MAX_ATTEMPTS
from puzzlegen.errors import ConfigurationError, GenerationFailure
from puzzlegen.presets import get_star_battle_preset
from puzzlegen.star_battle.placer import StarsPlacer
from puzzlegen.star_battle.regions import RegionGrower
from puzzlegen.star_battle.verifier import StarBattleVerifier, VerificationReport
from puzzlegen.utils import format_duration, make_rng

logger = logging.getLogger(__name__)


@dataclass
class StarBattlePuzzle:
    size: int
    stars: int
    regions: List[List[int]]
    solution: List[List[int]]
    report: VerificationReport
    attempts: int

    @property
    def unique(self):
        return self.report.unique


class StarBattleGenerator:
    def __init__(self, backend=DEFAULT_BACKEND, rng=None, max_attempts=STAR_BATTLE_MAX_ATTEMPTS,
                 attempts_per_solution=ATTEMPTS_PER_SOLUTION, seed_attempts=REGION_SEED_ATTEMPTS):
        if min(max_attempts, attempts_per_solution, seed_attempts) < 1:
            raise ConfigurationError("attempt budgets must be at least 1")
        self.verifier = StarBattleVerifier(backend)
        self.rng = make_rng(rng)
        self.max_attempts = max_attempts
        self.attempts_per_solution = attempts_per_solution
        self.seed_attempts = seed_attempts

    def generate_solution(self, size, stars):
        return StarsPlacer(size, stars, rng=self.rng).generate()

    def generate_regions(self, solution, stars, min_region_area):
        return RegionGrower(solution, stars, min_region_area, rng=self.rng, seed_attempts=self.seed_attempts).generate()

    def generate_board(self, size, stars, solution=None):
        """
        Builds one region layout without checking uniqueness.

        Returns:
            tuple: (region grid, star solution grid).

        Raises:
            UnsupportedPreset: (size, stars) is not a known preset.
            GenerationFailure: Region growth ran out of seeds.
        """
        preset = get_star_battle_preset(size, stars)
        if solution is None:
            solution = self.generate_solution(size, stars)
        regions = self.generate_regions(solution, stars, preset['min_region_area'])
        return regions, solution

    def generate_unique(self, size, stars, require_unique=True):
        """
        Generates a Star Battle puzzle whose region layout has exactly one solution.

        Args:
            size (int): Board dimension.
            stars (int): Stars per row, column and region.
            require_unique (bool): When False the first solvable layout is returned
                                   even if it has several solutions.

        Returns:
            StarBattlePuzzle: The finished puzzle and its verification report.

        Raises:
            UnsupportedPreset: (size, stars) is not a known preset.
            GenerationFailure: No acceptable layout within `max_attempts`.
        """
        preset = get_star_battle_preset(size, stars)
        logger.info(f"Attempting to generate a {size}x{size} puzzle with {stars} stars...")
        start_time = time.monotonic()

        solution = None
        for attempt in range(1, self.max_attempts + 1):
            if solution is None or (attempt - 1) % self.attempts_per_solution == 0:
                if solution is not None:
                    logger.info(f"No unique layout after {self.attempts_per_solution} attempts, drawing a new solution")
                solution = self.generate_solution(size, stars)

            try:
                regions = self.generate_regions(solution, stars, preset['min_region_area'])
            except GenerationFailure as e:
                logger.debug(f"Attempt #{attempt}: region growth failed ({e})")
                continue

            report = self.verifier.verify(regions, stars)
            if not report.satisfiable:
                logger.debug(f"Attempt #{attempt}: discarding layout, it has no solution")
                continue
            if not report.unique and require_unique:
                logger.debug(f"Attempt #{attempt}: discarding layout, found at least 2 solutions")
                continue

            logger.info(f"Generated a {'unique' if report.unique else 'non-unique'} puzzle after {attempt} attempts "
                        f"in {format_duration(time.monotonic() - start_time)}")
            # the drawn solution satisfies every region by construction
            return StarBattlePuzzle(size, stars, regions, solution, report, attempt)

        logger.warning(f"Could not generate a unique {size}x{size} puzzle after {self.max_attempts} attempts")
        raise GenerationFailure(f"no unique {size}x{size} {stars}-star puzzle after {self.max_attempts} attempts")
