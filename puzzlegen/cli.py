# ==================================================================================================
#
#   puzzlegen command-line interface
#
# --------------------------------------------------------------------------------------------------
#
#   Usage:
#
#   Generate one unique 10x10, 2-star Star Battle puzzle:
#   puzzlegen star-battle 10 2
#
#   Generate 20 puzzles with the built-in backtracking verifier, reproducibly:
#   puzzlegen star-battle 6 1 --count 20 --backend backtracking --seed 7
#
#   Generate a unique 6x6 Tents puzzle:
#   puzzlegen tents 6
#
#   Exit codes: 0 on success, 1 when generation gives up, 2 for unsupported
#   presets or bad settings.
#
# ==================================================================================================

import argparse
import logging
import sys

from tqdm import tqdm

from puzzlegen.constants import BACKEND_NAMES, DEFAULT_BACKEND, STAR_BATTLE_MAX_ATTEMPTS, TENTS_MAX_ATTEMPTS
from puzzlegen.errors import ConfigurationError, GenerationFailure
from puzzlegen.export import encode_to_sbn, format_region_grid, format_tents_board, to_web_task
from puzzlegen.star_battle import StarBattleGenerator
from puzzlegen.tents import TentsGenerator
from puzzlegen.utils import make_rng

logger = logging.getLogger(__name__)


def _progress(count):
    """Range wrapped in a progress bar for batch runs."""
    return tqdm(range(count), desc="Generating", unit="puzzle") if count > 1 else range(count)


def run_star_battle(args):
    generator = StarBattleGenerator(backend=args.backend, rng=make_rng(args.seed), max_attempts=args.max_attempts)
    for _ in _progress(args.count):
        puzzle = generator.generate_unique(args.size, args.stars, require_unique=not args.allow_non_unique)
        print(f"\n--- {'Unique' if puzzle.unique else 'Non-unique'} puzzle ({puzzle.attempts} attempts) ---")
        print(format_region_grid(puzzle.regions, color=not args.no_color))
        if args.show_solution:
            print("\n--- Solution ---")
            print(format_region_grid(puzzle.regions, puzzle.solution, color=not args.no_color))
        print(f"Web Task String: {to_web_task(puzzle.regions)}")
        print(f"SBN String:      {encode_to_sbn(puzzle.regions, puzzle.stars) or 'N/A'}")


def run_tents(args):
    generator = TentsGenerator(rng=make_rng(args.seed), max_attempts=args.max_attempts)
    for _ in _progress(args.count):
        puzzle = generator.generate_unique(args.size, require_unique=not args.allow_non_unique)
        print(f"\n--- {'Unique' if puzzle.unique else 'Non-unique'} tents puzzle ({puzzle.attempts} attempts) ---")
        print(format_tents_board(puzzle.board, puzzle.row_hints, puzzle.col_hints, show_tents=args.show_solution))


def build_parser():
    parser = argparse.ArgumentParser(prog="puzzlegen", description="Generate Star Battle and Tents puzzles with a unique solution.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--count", type=int, default=1, help="Number of puzzles to generate (default: 1).")
    common.add_argument("--seed", type=int, help="Random seed for reproducible output.")
    common.add_argument("--allow-non-unique", action="store_true", help="Accept boards with more than one solution.")
    common.add_argument("--show-solution", action="store_true", help="Print the solution under each puzzle.")

    p_star = subparsers.add_parser("star-battle", parents=[common], help="Generate Star Battle puzzles.")
    p_star.add_argument("size", type=int, help="Board dimension.")
    p_star.add_argument("stars", type=int, help="Stars per row, column and region.")
    p_star.add_argument("--backend", choices=BACKEND_NAMES, default=DEFAULT_BACKEND, help="Constraint backend used to check uniqueness.")
    p_star.add_argument("--max-attempts", type=int, default=STAR_BATTLE_MAX_ATTEMPTS, help="Region layouts to try before giving up. A 10x10, 2-star board usually needs a few hundred.")
    p_star.add_argument("--no-color", action="store_true", help="Print regions without ANSI colors.")
    p_star.set_defaults(func=run_star_battle)

    p_tents = subparsers.add_parser("tents", parents=[common], help="Generate Tents puzzles.")
    p_tents.add_argument("size", type=int, help="Board dimension.")
    p_tents.add_argument("--max-attempts", type=int, default=TENTS_MAX_ATTEMPTS, help="Boards to try before giving up.")
    p_tents.set_defaults(func=run_tents)
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')
    try:
        args.func(args)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 2
    except GenerationFailure as e:
        logger.error(f"Generation failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
