"""
Exceptions raised by the puzzle generators and verifiers.

Every error here is recoverable: generation can always be retried with fresh
randomness. Generators catch the per-attempt failures themselves and only let
a GenerationFailure escape once their attempt budget is spent.
"""


class PuzzleError(Exception):
    """Base class for all puzzlegen errors."""


class ConfigurationError(PuzzleError):
    """A preset or backend setting is malformed or unknown."""


class UnsupportedPreset(ConfigurationError):
    """The requested size/star combination has no entry in the preset table."""

    def __init__(self, puzzle, key):
        self.puzzle = puzzle
        self.key = key
        super().__init__(f"{puzzle} preset {key!r} is not supported")


class GenerationFailure(PuzzleError):
    """A search step ran out of its retry budget; the board must be discarded."""


class Unsatisfiable(GenerationFailure):
    """The generated region layout admits no valid star assignment."""


class NotUnique(PuzzleError):
    """The board is valid but has more than one solution."""

    def __init__(self, solution, alternate):
        self.solution = solution
        self.alternate = alternate
        super().__init__("puzzle has more than one solution")
