import pytest

from helpers import assert_valid_star_battle
from puzzlegen.backends import StarBattleModel
from puzzlegen.errors import ConfigurationError, GenerationFailure, UnsupportedPreset
from puzzlegen.star_battle import StarBattleGenerator, StarBattleVerifier
from puzzlegen.tents import TentPlacer, TentsGenerator


@pytest.mark.parametrize("size", [5, 6])
def test_generate_unique_small_boards(size):
    puzzle = StarBattleGenerator(backend="backtracking", rng=size).generate_unique(size, 1)
    assert puzzle.unique
    assert 1 <= puzzle.attempts <= 500
    assert_valid_star_battle(puzzle.regions, puzzle.solution, 1, 2)
    # an independent check with the other backend agrees
    assert StarBattleVerifier("z3").check_unique(puzzle.regions, 1) == puzzle.solution


def test_non_unique_mode_returns_first_solvable_layout():
    puzzle = StarBattleGenerator(rng=9).generate_unique(6, 1, require_unique=False)
    assert puzzle.report.satisfiable
    assert StarBattleModel(puzzle.regions, 1).is_solution(puzzle.solution)


def test_same_seed_same_puzzle():
    first = StarBattleGenerator(backend="backtracking", rng=77).generate_unique(5, 1)
    second = StarBattleGenerator(backend="backtracking", rng=77).generate_unique(5, 1)
    assert first.regions == second.regions


def test_unsupported_preset():
    generator = StarBattleGenerator()
    with pytest.raises(UnsupportedPreset):
        generator.generate_unique(8, 3)
    with pytest.raises(UnsupportedPreset):
        generator.generate_board(7, 1)


def test_exhausted_attempts_raise_generation_failure(monkeypatch):
    def never_grows(self, solution, stars, min_region_area):
        raise GenerationFailure("region growth ran out of seeds")

    monkeypatch.setattr(StarBattleGenerator, "generate_regions", never_grows)
    generator = StarBattleGenerator(backend="backtracking", rng=1, max_attempts=5, attempts_per_solution=2)
    with pytest.raises(GenerationFailure, match="after 5 attempts"):
        generator.generate_unique(5, 1)


def test_tents_generator_gives_up_after_max_attempts(monkeypatch):
    def never_places(self):
        raise GenerationFailure("tent placement exhausted its retry budget")

    monkeypatch.setattr(TentPlacer, "place", never_places)
    with pytest.raises(GenerationFailure, match="after 3 attempts"):
        TentsGenerator(rng=1, max_attempts=3).generate_unique(6)


def test_budgets_must_be_positive():
    with pytest.raises(ConfigurationError):
        StarBattleGenerator(max_attempts=0)
