from typing import Iterator
from gridmaze.algo.base import Generator

class RandomGenerator(Generator):
    """Coin flip per cell. No adjacency logic, no connectivity guarantee."""

    def run(self) -> Iterator[str]:
        rng = self.rng
        cells = self.grid.cells
        for i in range(len(cells)):
            cells[i] = rng.randrange(2)
            self.step_count += 1
            if self.step_count % self.REPORT_EVERY == 0:
                yield f"Filled {self.step_count}/{len(cells)}"
        yield "Done"
