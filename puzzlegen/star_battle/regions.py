# --- File: puzzlegen/star_battle/regions.py ---
# Partitions a star solution into regions by randomized flood fill.
import logging
from collections import deque

from puzzlegen.constants import REGION_SEED_ATTEMPTS, STATE_STAR, UNASSIGNED
from puzzlegen.errors import GenerationFailure
from puzzlegen.utils import empty_grid, make_rng, orthogonal_neighbors, random_pick, shuffle

logger = logging.getLogger(__name__)


class RegionGrower:
    """
    Grows `size` contiguous regions around a star solution so that every region
    holds exactly `stars` stars and at least `min_region_area` cells.

    Region ids are 0..size-1; cells without a region hold UNASSIGNED.
    """
    def __init__(self, solution, stars, min_region_area, rng=None, seed_attempts=REGION_SEED_ATTEMPTS):
        self.solution = solution
        self.size = len(solution)
        self.stars = stars
        self.min_region_area = min_region_area
        self.seed_attempts = seed_attempts
        self.rng = make_rng(rng)
        self.board = empty_grid(self.size, UNASSIGNED)

    def generate(self):
        """
        Builds a fresh region grid.

        Returns:
            list[list[int]]: The region id of every cell.

        Raises:
            GenerationFailure: Some region could not be grown from any of its seeds.
        """
        self.board = empty_grid(self.size, UNASSIGNED)

        for region_id in range(self.size):
            for attempt in range(self.seed_attempts):
                seed = self._random_unassigned_cell()
                if self._grow_region(seed, region_id):
                    break
                logger.debug(f"Region {region_id}: seed {seed} failed (attempt {attempt + 1}/{self.seed_attempts})")
            else:
                raise GenerationFailure(f"could not grow region {region_id} after {self.seed_attempts} seeds")

        self._assign_remaining_cells()
        return [row[:] for row in self.board]

    def _grow_region(self, seed, region_id):
        queue = [seed]
        assigned = []  # undo log for this seed
        area = stars = 0

        while area < self.min_region_area or stars < self.stars:
            if not queue:
                for r, c in assigned:
                    self.board[r][c] = UNASSIGNED
                return False

            r, c = queue.pop(0)
            if self.board[r][c] is not UNASSIGNED:
                continue
            is_star = self.solution[r][c] == STATE_STAR
            if is_star and stars == self.stars:
                continue

            self.board[r][c] = region_id
            assigned.append((r, c))
            area += 1
            if is_star:
                stars += 1

            queue.extend(orthogonal_neighbors(r, c, self.size))
            shuffle(queue, self.rng)

        return True

    def _assign_remaining_cells(self):
        queue = deque((r, c) for r in range(self.size) for c in range(self.size)
                      if self.board[r][c] is UNASSIGNED)
        stalled = 0
        while queue:
            # a full lap without progress means no unassigned cell touches a region
            if stalled > len(queue):
                raise GenerationFailure(f"{len(queue)} cells are cut off from every region")
            r, c = queue.popleft()
            neighbor_regions = self._neighbor_regions(r, c)
            if not neighbor_regions:
                queue.append((r, c))
                stalled += 1
                continue
            self.board[r][c] = random_pick(neighbor_regions, self.rng)
            stalled = 0

    def _neighbor_regions(self, r, c):
        regions = []
        for nr, nc in orthogonal_neighbors(r, c, self.size):
            region_id = self.board[nr][nc]
            if region_id is not UNASSIGNED and region_id not in regions:
                regions.append(region_id)
        return regions

    def _random_unassigned_cell(self):
        cells = [(r, c) for r in range(self.size) for c in range(self.size) if self.board[r][c] is UNASSIGNED]
        if not cells:
            raise GenerationFailure("no unassigned cell left to seed a region")
        return random_pick(cells, self.rng)
