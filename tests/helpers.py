from collections import deque

from puzzlegen.backends import StarBattleModel
from puzzlegen.utils import orthogonal_neighbors, surrounding_cells


def stars_touch(grid):
    dim = len(grid)
    return any(grid[r][c] and grid[nr][nc]
               for r in range(dim) for c in range(dim)
               for nr, nc in surrounding_cells(r, c, dim))


def region_cells(region_grid):
    regions = {}
    for r, row in enumerate(region_grid):
        for c, region_id in enumerate(row):
            regions.setdefault(region_id, []).append((r, c))
    return regions


def is_connected(cells):
    cells = set(cells)
    start = next(iter(cells))
    seen, queue = {start}, deque([start])
    dim = max(max(r, c) for r, c in cells) + 2
    while queue:
        r, c = queue.popleft()
        for nb in orthogonal_neighbors(r, c, dim):
            if nb in cells and nb not in seen:
                seen.add(nb)
                queue.append(nb)
    return seen == cells


def assert_valid_star_battle(regions, solution, stars, min_region_area):
    size = len(regions)
    assert all(region_id is not None for row in regions for region_id in row)
    layout = region_cells(regions)
    assert sorted(layout) == list(range(size))
    for cells in layout.values():
        assert len(cells) >= min_region_area
        assert sum(solution[r][c] for r, c in cells) == stars
        assert is_connected(cells)
    assert StarBattleModel(regions, stars).is_solution(solution)


# 5x5, one star: the three single-cell regions force the only solution
# (0,0) (1,2) (2,4) (3,1) (4,3)
UNIQUE_5X5 = [
    [0, 3, 3, 3, 3],
    [3, 3, 3, 3, 3],
    [4, 4, 4, 4, 1],
    [4, 4, 4, 4, 4],
    [4, 4, 4, 2, 4],
]
UNIQUE_5X5_SOLUTION = [
    [1, 0, 0, 0, 0],
    [0, 0, 1, 0, 0],
    [0, 0, 0, 0, 1],
    [0, 1, 0, 0, 0],
    [0, 0, 0, 1, 0],
]

# 4x4, one star, rows as regions: the two mirrored placements both fit
ROWS_4X4 = [[r] * 4 for r in range(4)]

# 5x5, one star: single-cell regions at (0,0) and (1,1) touch
UNSAT_5X5 = [
    [0, 2, 2, 2, 2],
    [3, 1, 2, 2, 2],
    [3, 3, 3, 3, 3],
    [4, 4, 4, 4, 4],
    [4, 4, 4, 4, 4],
]
