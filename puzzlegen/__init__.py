"""
puzzlegen

Generators for Star Battle and Tents puzzles that only hand out boards with
exactly one solution, plus the solvers used to prove it.
"""

from .errors import ConfigurationError, GenerationFailure, NotUnique, PuzzleError, Unsatisfiable, UnsupportedPreset
from .star_battle import StarBattleGenerator, StarBattlePuzzle, StarBattleVerifier, VerificationReport
from .tents import TentsGenerator, TentsPuzzle, TentsSolver

__version__ = "1.0.0"
__all__ = [
    'ConfigurationError',
    'GenerationFailure',
    'NotUnique',
    'PuzzleError',
    'StarBattleGenerator',
    'StarBattlePuzzle',
    'StarBattleVerifier',
    'TentsGenerator',
    'TentsPuzzle',
    'TentsSolver',
    'Unsatisfiable',
    'UnsupportedPreset',
    'VerificationReport',
]
