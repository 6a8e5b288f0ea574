import logging
from typing import Iterator, List
from gridmaze.core.grid import (
    Grid, Point, DIRECTIONS, count_square_neighbors, count_committed_neighbors,
)
from gridmaze.algo.base import Generator

logger = logging.getLogger(__name__)

class WilsonsGenerator(Generator):
    """
    Maze growth by random walks that attach to a committed tree.

    Cells in the tree are marked IN_PROGRESS. Each walk starts from an
    "unused" cell (a wall with no committed neighbour) and wanders, marking
    its path OPEN, until it touches the tree through exactly one cell. The
    whole walk is then committed. A walk that reaches a cell touching the
    tree on two or more sides, traps itself, or runs out of steps is erased
    back to walls in full. Note this erases the entire walk rather than only
    its looped suffix as textbook loop-erasure would.

    A step is only taken into a cell with fewer than 2 open neighbours, so a
    walk can never run alongside itself.
    """
    MAX_ITERATIONS = 5000
    MAX_WALK_STEPS = 5000

    def __init__(self, grid, rng):
        super().__init__(grid, rng)
        self.walks_committed = 0
        self.walks_erased = 0

    def run(self) -> Iterator[str]:
        rng = self.rng
        w, h = self.grid.width, self.grid.height
        maze = Grid(w, h, padded=True)

        start = Point(rng.randrange(1, w + 1), rng.randrange(1, h + 1))
        maze.set(start.x, start.y, Grid.IN_PROGRESS)

        unused = self._unused_cells(maze)

        while len(unused) > 1 and self.step_count < self.MAX_ITERATIONS:
            self.step_count += 1

            walk = self._random_walk(maze, rng.choice(unused))
            if walk:
                self.walks_committed += 1
                # Committed cells never revert, so a commit only removes cells
                claimed = set(walk)
                claimed.update(Point(p.x + d.x, p.y + d.y) for p in walk for d in DIRECTIONS)
                unused = [p for p in unused if p not in claimed]
            else:
                self.walks_erased += 1

            if self.step_count % self.REPORT_EVERY == 0:
                yield f"Unused: {len(unused)} Committed walks: {self.walks_committed}"

        if len(unused) > 1:
            logger.warning(
                f"Wilson's hit the {self.MAX_ITERATIONS} iteration cap with {len(unused)} unused cells left")
        logger.debug(f"Wilson's walks: {self.walks_committed} committed, {self.walks_erased} erased")

        maze.replace(Grid.IN_PROGRESS, Grid.OPEN)
        self.grid.copy_interior_from(maze)
        yield "Done"

    @staticmethod
    def _unused_cells(maze: Grid) -> List[Point]:
        cells = maze.cells
        unused = []
        for p in maze.interior_points():
            if cells[p.y * maze.stride + p.x] == Grid.WALL and count_committed_neighbors(maze, p.x, p.y) == 0:
                unused.append(p)
        return unused

    def _random_walk(self, maze: Grid, current: Point) -> List[Point]:
        """
        Walks from `current` until it joins the tree. Returns the committed
        cells, or an empty list if the walk was erased.
        """
        rng = self.rng
        walk: List[Point] = []

        for _ in range(self.MAX_WALK_STEPS):
            maze.set(current.x, current.y, Grid.OPEN)
            walk.append(current)

            touching = count_committed_neighbors(maze, current.x, current.y)
            if touching == 1:
                for p in walk:
                    maze.set(p.x, p.y, Grid.IN_PROGRESS)
                return walk
            if touching > 1:
                break

            d = rng.choice(DIRECTIONS)
            candidate = Point(current.x + d.x, current.y + d.y)
            if count_square_neighbors(maze, candidate.x, candidate.y) < 2:
                current = candidate
            elif not self._can_move(maze, current):
                # Trapped: the walk could only spin until the step cap
                break

        for p in walk:
            maze.set(p.x, p.y, Grid.WALL)
        return []

    @staticmethod
    def _can_move(maze: Grid, cell: Point) -> bool:
        return any(count_square_neighbors(maze, cell.x + d.x, cell.y + d.y) < 2 for d in DIRECTIONS)
