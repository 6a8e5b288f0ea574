from array import array
from typing import Iterator, NamedTuple


class Point(NamedTuple):
    x: int
    y: int


# Orthogonal unit offsets
DIRECTIONS = (Point(1, 0), Point(-1, 0), Point(0, 1), Point(0, -1))

# Returned for queries on or past the padding border (> any real count)
BLOCKED = 5


class Grid:
    # Cell states
    OPEN = 0
    WALL = 1
    IN_PROGRESS = 2  # Wilson's committed cells, never in finished output

    __slots__ = ('width', 'height', 'padded', 'stride', 'cells')

    def __init__(self, width: int, height: int, padded: bool = False, fill: int = WALL):
        self.width = width
        self.height = height
        self.padded = padded
        # Padded grids keep a 1-cell wall ring, interior lives in [1, width] x [1, height]
        pad = 2 if padded else 0
        self.stride = width + pad
        # 'B' (unsigned char) -> 1 byte per cell
        self.cells = array('B', [fill] * ((width + pad) * (height + pad)))

    @property
    def storage_height(self) -> int:
        return self.height + (2 if self.padded else 0)

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.stride and 0 <= y < self.storage_height:
            return y * self.stride + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def get(self, x: int, y: int) -> int:
        return self.cells[self.get_index(x, y)]

    def set(self, x: int, y: int, value: int):
        self.cells[self.get_index(x, y)] = value

    def is_open(self, x: int, y: int) -> bool:
        return self.cells[self.get_index(x, y)] == self.OPEN

    def fill(self, value: int):
        for i in range(len(self.cells)):
            self.cells[i] = value

    def replace(self, old: int, new: int) -> int:
        """Rewrites every cell holding `old` to `new`. Returns how many changed."""
        changed = 0
        cells = self.cells
        for i in range(len(cells)):
            if cells[i] == old:
                cells[i] = new
                changed += 1
        return changed

    def count(self, value: int) -> int:
        return self.cells.count(value)

    def interior_points(self) -> Iterator[Point]:
        """Yields every non-border coordinate in storage space, row-major."""
        offset = 1 if self.padded else 0
        for y in range(offset, self.height + offset):
            for x in range(offset, self.width + offset):
                yield Point(x, y)

    def interior(self) -> 'Grid':
        """Unpadded copy of this grid's interior."""
        out = Grid(self.width, self.height)
        out.copy_interior_from(self)
        return out

    def copy_interior_from(self, other: 'Grid'):
        if other.width != self.width or other.height != self.height:
            raise ValueError(
                f"Size mismatch: {other.width}x{other.height} into {self.width}x{self.height}")
        src_off = 1 if other.padded else 0
        dst_off = 1 if self.padded else 0
        for y in range(self.height):
            src = (y + src_off) * other.stride + src_off
            dst = (y + dst_off) * self.stride + dst_off
            self.cells[dst:dst + self.width] = other.cells[src:src + self.width]


def count_square_neighbors(grid: Grid, x: int, y: int) -> int:
    """
    Counts OPEN cells among the 4 orthogonal neighbors of (x, y) on a padded grid.
    Points on or beyond the padding ring return BLOCKED, so callers can reject
    moves toward the border without a separate bounds check.
    """
    if not grid.padded:
        raise ValueError("count_square_neighbors needs a padded grid")
    if x <= 0 or x >= grid.width + 1 or y <= 0 or y >= grid.height + 1:
        return BLOCKED

    cells = grid.cells
    idx = y * grid.stride + x
    count = 0
    if cells[idx - 1] == Grid.OPEN: count += 1
    if cells[idx + 1] == Grid.OPEN: count += 1
    if cells[idx - grid.stride] == Grid.OPEN: count += 1
    if cells[idx + grid.stride] == Grid.OPEN: count += 1
    return count


def count_committed_neighbors(grid: Grid, x: int, y: int) -> int:
    """Like count_square_neighbors but counts IN_PROGRESS cells (Wilson's tree)."""
    if not grid.padded:
        raise ValueError("count_committed_neighbors needs a padded grid")
    if x <= 0 or x >= grid.width + 1 or y <= 0 or y >= grid.height + 1:
        return BLOCKED

    cells = grid.cells
    idx = y * grid.stride + x
    count = 0
    for n in (idx - 1, idx + 1, idx - grid.stride, idx + grid.stride):
        if cells[n] == Grid.IN_PROGRESS:
            count += 1
    return count
