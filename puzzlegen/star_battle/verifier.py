# --- File: puzzlegen/star_battle/verifier.py ---
# Satisfiability and uniqueness checks for Star Battle region layouts.
import logging
from dataclasses import dataclass
from typing import List, Optional

from puzzlegen.backends import StarBattleModel, get_backend
from puzzlegen.constants import DEFAULT_BACKEND
from puzzlegen.errors import NotUnique, Unsatisfiable

logger = logging.getLogger(__name__)


@dataclass
class VerificationReport:
    satisfiable: bool
    unique: bool
    solution: Optional[List[List[int]]] = None
    alternate: Optional[List[List[int]]] = None


class StarBattleVerifier:
    """
    Decides whether a region layout has exactly one star assignment.

    The first model found is blocked and the backend is asked again: a second
    model means the puzzle is ambiguous, none means the first one is unique.
    """
    def __init__(self, backend=DEFAULT_BACKEND):
        self.backend = get_backend(backend)

    def verify(self, region_grid, stars):
        """
        Runs the find, block and re-solve protocol on one board.

        Args:
            region_grid (list[list[int]]): Region id of every cell.
            stars (int): Stars required per row, column and region.

        Returns:
            VerificationReport: Satisfiability, uniqueness and the models found.
        """
        self.backend.load(StarBattleModel(region_grid, stars))

        first = self.backend.solve()
        if not first.satisfiable:
            logger.debug("Region layout has no solution")
            return VerificationReport(satisfiable=False, unique=False)

        self.backend.add_blocking_clause(first.model)
        second = self.backend.resolve()
        if second.satisfiable:
            logger.debug("Region layout has at least two solutions")
            return VerificationReport(satisfiable=True, unique=False, solution=first.model, alternate=second.model)
        return VerificationReport(satisfiable=True, unique=True, solution=first.model)

    def check_unique(self, region_grid, stars):
        """Returns the unique solution, raising Unsatisfiable or NotUnique otherwise."""
        report = self.verify(region_grid, stars)
        if not report.satisfiable:
            raise Unsatisfiable("region layout admits no star assignment")
        if not report.unique:
            raise NotUnique(report.solution, report.alternate)
        return report.solution
