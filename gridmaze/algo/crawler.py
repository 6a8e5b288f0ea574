import random
from typing import Iterator
from gridmaze.core.grid import Grid
from gridmaze.algo.base import Generator

class CrawlerGenerator(Generator):
    """
    Random walkers that drift across the grid until they fall off an edge.
    Vertical crawls start on row 0 and move down, horizontal crawls start on
    column 0 and move right. Each step either drifts sideways by -1/0/+1 or
    moves forward by 0/+1.
    """

    def __init__(self, grid: Grid, rng: random.Random, vertical_crawls: int = 5, horizontal_crawls: int = 5):
        super().__init__(grid, rng)
        self.vertical_crawls = vertical_crawls
        self.horizontal_crawls = horizontal_crawls

    def run(self) -> Iterator[str]:
        remaining_v = self.vertical_crawls
        remaining_h = self.horizontal_crawls

        # Interleave one vertical and one horizontal crawl per pass
        while remaining_v > 0 or remaining_h > 0:
            if remaining_v > 0:
                remaining_v -= 1
                self._crawl_vertically()
                yield f"Vertical crawls left: {remaining_v}"
            if remaining_h > 0:
                remaining_h -= 1
                self._crawl_horizontally()
                yield f"Horizontal crawls left: {remaining_h}"

        yield "Done"

    def _crawl_vertically(self):
        x = self.rng.randrange(self.grid.width)
        self._crawl(x, (-1, 2), 0, (0, 2))

    def _crawl_horizontally(self):
        y = self.rng.randrange(self.grid.height)
        self._crawl(0, (0, 2), y, (-1, 2))

    def _crawl(self, x: int, x_move, y: int, y_move):
        # x_move / y_move are half-open randrange bounds
        grid = self.grid
        rng = self.rng
        while True:
            grid.cells[y * grid.stride + x] = Grid.OPEN
            self.step_count += 1

            if rng.randrange(2) == 0:
                x += rng.randrange(*x_move)
            else:
                y += rng.randrange(*y_move)

            if x < 0 or x > grid.width - 1 or y < 0 or y > grid.height - 1:
                break
