# --- File: puzzlegen/utils.py ---
# Shared helpers: random primitives, grid neighbourhoods and timing.
import random

ORTHOGONAL_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))
SURROUNDING_OFFSETS = tuple((dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if not (dr == 0 and dc == 0))


def make_rng(seed_or_rng=None):
    """Returns a random.Random, building one from a seed when needed."""
    if isinstance(seed_or_rng, random.Random):
        return seed_or_rng
    return random.Random(seed_or_rng)


def random_pick(seq, rng=random):
    """Picks one element uniformly. Empty input is a caller error."""
    if not seq:
        raise ValueError("cannot pick from an empty sequence")
    return seq[rng.randrange(len(seq))]


def shuffle(seq, rng=random):
    """Shuffles a list in place."""
    rng.shuffle(seq)


def rand_int_inclusive(lo, hi, rng=random):
    return rng.randint(lo, hi)


def orthogonal_neighbors(r, c, dim):
    return [(r + dr, c + dc) for dr, dc in ORTHOGONAL_OFFSETS if 0 <= r + dr < dim and 0 <= c + dc < dim]


def surrounding_cells(r, c, dim):
    """All in-bounds cells touching (r, c), diagonals included."""
    return [(r + dr, c + dc) for dr, dc in SURROUNDING_OFFSETS if 0 <= r + dr < dim and 0 <= c + dc < dim]


def empty_grid(dim, fill=0):
    return [[fill] * dim for _ in range(dim)]


def format_duration(seconds):
    if seconds >= 60: return f"{int(seconds//60)} min {seconds%60:.2f} s"
    if seconds >= 1: return f"{seconds:.3f} s"
    return f"{seconds*1000:.2f} ms"
