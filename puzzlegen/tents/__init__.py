from puzzlegen.tents.generator import TentsGenerator, TentsPuzzle
from puzzlegen.tents.placer import TentPlacer, derive_hints
from puzzlegen.tents.solver import TentsSolver, solve_tents

__all__ = [
    'TentPlacer',
    'TentsGenerator',
    'TentsPuzzle',
    'TentsSolver',
    'derive_hints',
    'solve_tents',
]
