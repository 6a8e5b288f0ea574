from typing import Iterator, List, Tuple
from gridmaze.core.grid import Grid, Point, DIRECTIONS, count_square_neighbors
from gridmaze.algo.base import Generator

class RecursiveGenerator(Generator):
    """
    Randomized depth-first flood fill on a padded grid.

    A cell is opened only while it touches at most one open cell, which keeps
    the carved region free of loops. The visit order is the same as the
    recursive formulation (each visit re-checks the rule, then walks its
    four neighbours in a freshly shuffled order) but runs on an explicit
    stack so large grids can't exhaust the interpreter's recursion limit.
    """

    def run(self) -> Iterator[str]:
        rng = self.rng
        w, h = self.grid.width, self.grid.height
        maze = Grid(w, h, padded=True)

        start = Point(rng.randrange(1, w + 1), rng.randrange(1, h + 1))

        # Stack of (cell, remaining shuffled directions)
        stack: List[Tuple[Point, Iterator[Point]]] = []
        frame = self._visit(maze, start)
        if frame:
            stack.append(frame)

        while stack:
            cell, directions = stack[-1]
            d = next(directions, None)
            if d is None:
                stack.pop()
                continue

            frame = self._visit(maze, Point(cell.x + d.x, cell.y + d.y))
            if frame:
                stack.append(frame)
                if self.step_count % self.REPORT_EVERY == 0:
                    yield f"Carving... Stack: {len(stack)}"

        self.grid.copy_interior_from(maze)
        yield "Done"

    def _visit(self, maze: Grid, cell: Point):
        if count_square_neighbors(maze, cell.x, cell.y) > 1:
            return None
        maze.set(cell.x, cell.y, Grid.OPEN)
        self.step_count += 1

        directions = list(DIRECTIONS)
        self.rng.shuffle(directions)
        return cell, iter(directions)
