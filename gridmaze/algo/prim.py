import logging
from typing import Iterator, List
from gridmaze.core.grid import Grid, Point, count_square_neighbors
from gridmaze.algo.base import Generator

logger = logging.getLogger(__name__)

class PrimsGenerator(Generator):
    """
    Randomized frontier growth from padded cell (1, 1).

    A frontier cell joins the maze only if exactly one of its neighbours is
    already open, so the result is a single tree. Popped cells that fail the
    check are dropped, not revisited.
    """
    MAX_ITERATIONS = 5000

    def run(self) -> Iterator[str]:
        rng = self.rng
        maze = Grid(self.grid.width, self.grid.height, padded=True)

        maze.set(1, 1, Grid.OPEN)
        frontier: List[Point] = self._around(1, 1)

        while frontier and self.step_count < self.MAX_ITERATIONS:
            self.step_count += 1

            cx, cy = frontier.pop(rng.randrange(len(frontier)))

            # Padding ring reports BLOCKED, so border entries fall out here
            if count_square_neighbors(maze, cx, cy) == 1:
                maze.set(cx, cy, Grid.OPEN)
                frontier.extend(self._around(cx, cy))

            if self.step_count % self.REPORT_EVERY == 0:
                yield f"Frontier: {len(frontier)}"

        if frontier:
            logger.debug(f"Prim's stopped at iteration cap with {len(frontier)} frontier cells left")

        self.grid.copy_interior_from(maze)
        yield "Done"

    @staticmethod
    def _around(x: int, y: int) -> List[Point]:
        return [Point(x + 1, y), Point(x - 1, y), Point(x, y - 1), Point(x, y + 1)]
