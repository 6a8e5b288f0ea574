import sys
from array import array
from abc import ABC, abstractmethod
from typing import List, Optional, TextIO
import numpy as np
from gridmaze.core.grid import Grid


class MazeSnapshot:
    """
    Read-only view of a finished maze handed to renderers.
    Padding is already stripped; if has_border is set the renderer is
    expected to draw one extra ring of walls around it.
    """
    __slots__ = ('_width', '_height', '_has_border', '_cells')

    def __init__(self, grid: Grid, has_border: bool = False):
        if grid.padded:
            grid = grid.interior()
        self._width = grid.width
        self._height = grid.height
        self._has_border = has_border
        self._cells = grid.cells.tobytes()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def has_border(self) -> bool:
        return self._has_border

    @property
    def cells(self) -> bytes:
        return self._cells

    def cell(self, x: int, y: int) -> int:
        if 0 <= x < self._width and 0 <= y < self._height:
            return self._cells[y * self._width + x]
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def is_open(self, x: int, y: int) -> bool:
        return self.cell(x, y) == Grid.OPEN

    def rows(self) -> List[bytes]:
        w = self._width
        return [self._cells[y * w:(y + 1) * w] for y in range(self._height)]

    def to_grid(self) -> Grid:
        """Mutable copy for post-processing or analysis."""
        grid = Grid(self._width, self._height)
        grid.cells = array('B', self._cells)
        return grid

    def open_count(self) -> int:
        return self._cells.count(Grid.OPEN)

    def to_numpy(self, include_border: bool = False) -> np.ndarray:
        """uint8 array shaped (height, width), optionally wrapped in a wall ring."""
        arr = np.frombuffer(self._cells, dtype=np.uint8).reshape(self._height, self._width).copy()
        if include_border:
            arr = np.pad(arr, 1, mode="constant", constant_values=Grid.WALL)
        return arr

    def to_text(self, wall: str = "#", path: str = ".", include_border: Optional[bool] = None) -> str:
        if include_border is None:
            include_border = self._has_border
        arr = self.to_numpy(include_border=include_border)
        return "\n".join("".join(wall if v == Grid.WALL else path for v in row) for row in arr)

    def __eq__(self, other):
        if not isinstance(other, MazeSnapshot):
            return NotImplemented
        return (self._width, self._height, self._has_border, self._cells) == \
            (other._width, other._height, other._has_border, other._cells)

    def __hash__(self):
        return hash((self._width, self._height, self._has_border, self._cells))

    def __repr__(self):
        return f"MazeSnapshot({self._width}x{self._height}, open={self.open_count()}, border={self._has_border})"


class Renderer(ABC):
    """Downstream consumer of finished mazes."""

    @abstractmethod
    def clear(self):
        """Discards everything drawn for the previous maze."""
        pass

    @abstractmethod
    def draw(self, snapshot: MazeSnapshot):
        pass


class TextRenderer(Renderer):
    def __init__(self, stream: Optional[TextIO] = None, wall: str = "#", path: str = "."):
        self.stream = stream if stream is not None else sys.stdout
        self.wall = wall
        self.path = path
        self.frames_drawn = 0
        self.current: Optional[MazeSnapshot] = None

    def clear(self):
        self.current = None

    def draw(self, snapshot: MazeSnapshot):
        self.current = snapshot
        self.stream.write(snapshot.to_text(wall=self.wall, path=self.path) + "\n")
        self.frames_drawn += 1
