import random

import pytest

from puzzlegen.constants import TENTS_EMPTY, TENTS_TENT, TENTS_TREE
from puzzlegen.errors import GenerationFailure, UnsupportedPreset
from puzzlegen.tents import TentPlacer, TentsGenerator, TentsSolver, derive_hints, solve_tents
from puzzlegen.utils import orthogonal_neighbors, surrounding_cells


def cells_of(board, value):
    return [(r, c) for r, row in enumerate(board) for c, cell in enumerate(row) if cell == value]


def assert_valid_tents_board(board, pairs, num_trees):
    dim = len(board)
    trees, tents = cells_of(board, TENTS_TREE), cells_of(board, TENTS_TENT)
    assert len(trees) == len(tents) == num_trees
    # pairing is one to one and every tent sits next to its tree
    assert sorted(tree for tree, _ in pairs) == trees
    assert sorted(tent for _, tent in pairs) == tents
    for tree, tent in pairs:
        assert tent in orthogonal_neighbors(*tree, dim)
    for r, c in tents:
        assert all(board[nr][nc] != TENTS_TENT for nr, nc in surrounding_cells(r, c, dim))
    assert_one_to_one_adjacency(board)


def assert_one_to_one_adjacency(board):
    dim = len(board)
    for r, c in cells_of(board, TENTS_TREE):
        assert sum(board[nr][nc] == TENTS_TENT for nr, nc in orthogonal_neighbors(r, c, dim)) == 1, (r, c)
    for r, c in cells_of(board, TENTS_TENT):
        assert sum(board[nr][nc] == TENTS_TREE for nr, nc in orthogonal_neighbors(r, c, dim)) == 1, (r, c)


def test_placer_builds_valid_boards():
    rng = random.Random(6)
    built = 0
    for _ in range(200):
        try:
            board, pairs = TentPlacer(6, 8, 2, rng=rng, retry_budget=200).place()
        except GenerationFailure:
            continue
        built += 1
        assert_valid_tents_board(board, pairs, 8)
        row_hints, col_hints = derive_hints(board)
        assert sum(row_hints) == sum(col_hints) == 8
    assert built > 0


def test_placer_keeps_trees_away_from_other_tents():
    placer = TentPlacer(4, 2, 2, rng=0)
    placer.board = [
        [TENTS_TREE, TENTS_TENT, TENTS_EMPTY, TENTS_EMPTY],
        [TENTS_EMPTY, TENTS_EMPTY, TENTS_EMPTY, TENTS_EMPTY],
        [TENTS_EMPTY, TENTS_EMPTY, TENTS_EMPTY, TENTS_EMPTY],
        [TENTS_EMPTY, TENTS_EMPTY, TENTS_EMPTY, TENTS_EMPTY],
    ]
    placer.pairs = [((0, 0), (0, 1))]
    assert not placer._can_hold_tree(1, 1)
    assert not placer._can_hold_tree(0, 2)
    assert placer._can_hold_tree(2, 2)
    for _ in range(50):
        if placer._place_cluster():
            break
    assert len(placer.pairs) == 2
    assert_valid_tents_board(placer.board, placer.pairs, 2)


def test_placer_gives_up_when_board_is_too_small():
    # two tents on a 2x2 board always touch
    with pytest.raises(GenerationFailure):
        TentPlacer(2, 2, 2, rng=0, retry_budget=50).place()


def test_derive_hints():
    board = [
        [TENTS_TREE, TENTS_TENT, TENTS_EMPTY],
        [TENTS_EMPTY, TENTS_EMPTY, TENTS_EMPTY],
        [TENTS_TENT, TENTS_TREE, TENTS_EMPTY],
    ]
    assert derive_hints(board) == ([1, 0, 1], [1, 1, 0])


def test_solver_single_solution():
    board = [[0, 0, 0], [0, TENTS_TREE, 0], [0, 0, 0]]
    assert TentsSolver(board, [1, 0, 0], [0, 1, 0]).solve() == [[(0, 1)]]


def test_solver_lists_every_solution():
    board = [[0, 0, 0], [0, TENTS_TREE, 0], [0, 0, 0]]
    assert solve_tents(board, [0, 1, 0], [1, 0, 1]) == [[(1, 0)], [(1, 2)]]


def test_solver_rejects_placements_short_of_the_hints():
    board = [[0, 0, 0], [0, TENTS_TREE, 0], [0, 0, 0]]
    assert solve_tents(board, [1, 1, 0], [0, 1, 1]) == []


def test_solver_ignores_tents_on_the_input():
    board = [[0, TENTS_TENT, 0], [0, TENTS_TREE, 0], [0, 0, 0]]
    assert solve_tents(board, [0, 0, 1], [0, 1, 0]) == [[(2, 1)]]


def test_solver_checks_hint_lengths():
    with pytest.raises(ValueError):
        TentsSolver([[0, 0], [0, 0]], [0], [0, 0])


def test_solver_finds_the_generated_layout():
    generator = TentsGenerator(rng=12, retry_budget=200)
    checked = 0
    for _ in range(20):
        try:
            puzzle = generator.generate(6)
        except GenerationFailure:
            continue
        assert puzzle.unique is None
        assert_one_to_one_adjacency(puzzle.board)
        solutions = TentsSolver(puzzle.puzzle_board(), puzzle.row_hints, puzzle.col_hints).solve()
        assert puzzle.tents in solutions
        checked += 1
    assert checked > 0


def test_scenario_c_unique_tents_puzzle():
    puzzle = TentsGenerator(rng=3).generate_unique(6)
    assert puzzle.unique is True
    assert len(puzzle.tents) == 8
    assert_one_to_one_adjacency(puzzle.board)
    assert (puzzle.row_hints, puzzle.col_hints) == derive_hints(puzzle.board)
    solutions = TentsSolver(puzzle.puzzle_board(), puzzle.row_hints, puzzle.col_hints).solve()
    assert solutions == [puzzle.tents]


def test_unsupported_tents_size():
    with pytest.raises(UnsupportedPreset):
        TentsGenerator().generate_unique(9)
