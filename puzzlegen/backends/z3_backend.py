# --- File: puzzlegen/backends/z3_backend.py ---
# Z3 SMT backend for Star Battle constraint models.
import logging
import time

from z3 import And, Bool, Implies, Not, Or, PbEq, Solver, sat

from puzzlegen.backends.base import UNSAT, ConstraintBackend, SolveResult
from puzzlegen.utils import format_duration

logger = logging.getLogger(__name__)


class Z3Backend(ConstraintBackend):
    """Solves Star Battle models with the Z3 SMT solver."""
    name = "z3"

    def __init__(self):
        self.solver = None
        self.X = []
        self.dim = 0

    def load(self, model):
        self.dim = model.dim
        self.solver = Solver()
        # X[r][c] is "there is a star at row r, column c"
        self.X = [[Bool(f"star_{r}_{c}") for c in range(self.dim)] for r in range(self.dim)]

        # Rule 1 and 2: N stars per row and column
        for i in range(self.dim):
            self.solver.add(PbEq([(self.X[i][c], 1) for c in range(self.dim)], model.stars))
            self.solver.add(PbEq([(self.X[r][i], 1) for r in range(self.dim)], model.stars))

        # Rule 3: N stars per region
        for cells in model.regions.values():
            self.solver.add(PbEq([(self.X[r][c], 1) for r, c in cells], model.stars))

        # Rule 4: a star forbids stars on all touching cells
        neighbors = {}
        for a, b in model.adjacent_pairs():
            neighbors.setdefault(a, []).append(b)
            neighbors.setdefault(b, []).append(a)
        for (r, c), cells in neighbors.items():
            self.solver.add(Implies(self.X[r][c], And([Not(self.X[nr][nc]) for nr, nc in cells])))

    def solve(self):
        if self.solver is None:
            raise RuntimeError("no model loaded")
        start_time = time.monotonic()
        result = self.solver.check()
        logger.debug(f"Z3 solve time: {format_duration(time.monotonic() - start_time)}")
        if result != sat:
            return UNSAT
        model = self.solver.model()
        grid = [[(1 if model.evaluate(self.X[r][c], model_completion=True) else 0) for c in range(self.dim)]
                for r in range(self.dim)]
        return SolveResult(grid)

    def add_blocking_clause(self, solution):
        # at least one cell must differ from `solution`
        self.solver.add(Or([
            Not(cell) if solution[r][c] else cell
            for r, row in enumerate(self.X)
            for c, cell in enumerate(row)
        ]))
