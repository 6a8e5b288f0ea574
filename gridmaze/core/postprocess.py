import random
from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple
from gridmaze.core.grid import Grid
from gridmaze.core.config import GenerationConfig


@dataclass(frozen=True)
class Room:
    x: int
    y: int
    w: int
    h: int

    def cells(self) -> Iterator[Tuple[int, int]]:
        for iy in range(self.y, self.y + self.h):
            for ix in range(self.x, self.x + self.w):
                yield ix, iy


class MazePostProcessor:
    @staticmethod
    def carve_rooms(grid: Grid, config: GenerationConfig, rng: random.Random) -> List[Room]:
        """
        Stamps config.number_of_rooms open rectangles onto the grid.
        Rooms may overlap each other and overwrite whatever was generated;
        each one is clipped so it stays room_distance_from_wall away from
        the far edges. Returns the rectangles as actually carved.
        """
        margin = config.room_distance_from_wall
        max_x = grid.width - margin
        max_y = grid.height - margin

        rooms = []
        for _ in range(config.number_of_rooms):
            start_x = rng.randrange(margin, max_x)
            start_y = rng.randrange(margin, max_y)
            room_w = rng.randrange(config.min_room_size, config.max_room_size)
            room_h = rng.randrange(config.min_room_size, config.max_room_size)

            room = Room(start_x, start_y, min(room_w, max_x - start_x), min(room_h, max_y - start_y))
            for x, y in room.cells():
                grid.set(x, y, Grid.OPEN)
            rooms.append(room)

        return rooms

    @staticmethod
    def calculate_stats(grid: Grid) -> Dict[str, float]:
        if grid.padded:
            grid = grid.interior()

        w, h = grid.width, grid.height
        cells = grid.cells
        open_cells = 0
        dead_ends = 0  # 1 open neighbour
        junctions = 0  # 3+ open neighbours

        for y in range(h):
            for x in range(w):
                if cells[y * w + x] != Grid.OPEN:
                    continue
                open_cells += 1
                links = 0
                if x > 0 and cells[y * w + x - 1] == Grid.OPEN: links += 1
                if x < w - 1 and cells[y * w + x + 1] == Grid.OPEN: links += 1
                if y > 0 and cells[(y - 1) * w + x] == Grid.OPEN: links += 1
                if y < h - 1 and cells[(y + 1) * w + x] == Grid.OPEN: links += 1
                if links == 1: dead_ends += 1
                elif links >= 3: junctions += 1

        total = w * h
        return {
            "open": open_cells,
            "walls": total - open_cells,
            "dead_ends": dead_ends,
            "junctions": junctions,
            "open_percent": (open_cells / total) * 100 if total > 0 else 0
        }
