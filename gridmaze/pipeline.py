import logging
import random
from typing import Optional
from gridmaze.core.config import GenerationConfig, GenerationType
from gridmaze.core.grid import Grid
from gridmaze.core.postprocess import MazePostProcessor
from gridmaze.algo.base import Generator
from gridmaze.algo.random_fill import RandomGenerator
from gridmaze.algo.crawler import CrawlerGenerator
from gridmaze.algo.recursive import RecursiveGenerator
from gridmaze.algo.wilson import WilsonsGenerator
from gridmaze.algo.prim import PrimsGenerator
from gridmaze.io.output import MazeSnapshot, Renderer

logger = logging.getLogger(__name__)


def create_generator(config: GenerationConfig, grid: Grid, rng: random.Random) -> Generator:
    gen_type = config.generation_type
    if gen_type == GenerationType.CRAWLER:
        return CrawlerGenerator(grid, rng,
                                vertical_crawls=config.vertical_crawl_count,
                                horizontal_crawls=config.horizontal_crawl_count)
    elif gen_type == GenerationType.RECURSIVE:
        return RecursiveGenerator(grid, rng)
    elif gen_type == GenerationType.WILSONS:
        return WilsonsGenerator(grid, rng)
    elif gen_type == GenerationType.PRIMS:
        return PrimsGenerator(grid, rng)
    return RandomGenerator(grid, rng)


def generate(config: GenerationConfig, rng: Optional[random.Random] = None) -> MazeSnapshot:
    """
    One full generation run: fresh all-wall grid, selected strategy,
    room carving, read-only snapshot. A None seed draws from system entropy.
    """
    if rng is None:
        rng = random.Random(config.seed)
        source = f"seed={config.seed}"
    else:
        source = "injected rng, config seed ignored"

    grid = Grid(config.width, config.height)
    generator = create_generator(config, grid, rng)

    logger.info(f"Generating {config.width}x{config.height} maze with {config.generation_type.name} ({source})")
    generator.run_all()
    logger.debug(f"{type(generator).__name__} finished after {generator.step_count} steps")

    if config.number_of_rooms > 0:
        rooms = MazePostProcessor.carve_rooms(grid, config, rng)
        logger.debug(f"Carved {len(rooms)} rooms: {rooms}")

    return MazeSnapshot(grid, has_border=config.has_border)


class MazeSession:
    """Owns the current maze and the renderer showing it."""

    def __init__(self, config: GenerationConfig, renderer: Optional[Renderer] = None):
        self.config = config
        self.renderer = renderer
        self.snapshot: Optional[MazeSnapshot] = None
        self.generation = 0

    def regenerate(self, config: Optional[GenerationConfig] = None) -> MazeSnapshot:
        """Drops the previous maze and everything rendered for it, then builds a new one."""
        if config is not None:
            self.config = config

        if self.renderer is not None:
            self.renderer.clear()
        self.snapshot = None

        self.snapshot = generate(self.config)
        self.generation += 1

        if self.renderer is not None:
            self.renderer.draw(self.snapshot)
        return self.snapshot
