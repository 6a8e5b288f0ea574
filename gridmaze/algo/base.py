import random
from abc import ABC, abstractmethod
from typing import Iterator
from gridmaze.core.grid import Grid

class Generator(ABC):
    # Yield a progress string every N steps
    REPORT_EVERY = 100

    def __init__(self, grid: Grid, rng: random.Random):
        if grid.padded:
            raise ValueError("Generators write to an unpadded output grid")
        self.grid = grid
        self.rng = rng
        self.step_count = 0
        
    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
