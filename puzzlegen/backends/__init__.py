"""
Constraint-solving backends for Star Battle verification.

Use `get_backend("z3")` or `get_backend("backtracking")`; both implement
ConstraintBackend and can be swapped freely.
"""
from puzzlegen.backends.backtracking import BacktrackingBackend
from puzzlegen.backends.base import UNSAT, ConstraintBackend, SolveResult, StarBattleModel
from puzzlegen.backends.z3_backend import Z3Backend
from puzzlegen.errors import ConfigurationError

BACKENDS = {
    Z3Backend.name: Z3Backend,
    BacktrackingBackend.name: BacktrackingBackend,
}


def get_backend(name_or_backend):
    """Returns a fresh backend instance for a name; instances pass through unchanged."""
    if isinstance(name_or_backend, ConstraintBackend):
        return name_or_backend
    try:
        return BACKENDS[name_or_backend]()
    except KeyError:
        raise ConfigurationError(f"unknown constraint backend {name_or_backend!r}; "
                                 f"choose from {', '.join(sorted(BACKENDS))}") from None


__all__ = [
    'BACKENDS',
    'BacktrackingBackend',
    'ConstraintBackend',
    'SolveResult',
    'StarBattleModel',
    'UNSAT',
    'Z3Backend',
    'get_backend',
]
