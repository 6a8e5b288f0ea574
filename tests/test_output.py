import unittest
import io
from contextlib import redirect_stdout
import sys
import os
import numpy as np

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from gridmaze.core.grid import Grid
from gridmaze.io.output import MazeSnapshot, TextRenderer

class TestMazeSnapshot(unittest.TestCase):
    def make_grid(self):
        # 4x2:
        # . # # .
        # # . # #
        grid = Grid(4, 2)
        grid.set(0, 0, Grid.OPEN)
        grid.set(3, 0, Grid.OPEN)
        grid.set(1, 1, Grid.OPEN)
        return grid

    def test_cells(self):
        snap = MazeSnapshot(self.make_grid())
        self.assertEqual((snap.width, snap.height), (4, 2))
        self.assertEqual(snap.cell(3, 0), Grid.OPEN)
        self.assertEqual(snap.cell(2, 1), Grid.WALL)
        self.assertEqual(snap.open_count(), 3)
        self.assertEqual(snap.rows(), [bytes([0, 1, 1, 0]), bytes([1, 0, 1, 1])])
        with self.assertRaises(IndexError):
            snap.cell(4, 0)

    def test_snapshot_is_detached(self):
        grid = self.make_grid()
        snap = MazeSnapshot(grid)
        grid.set(2, 1, Grid.OPEN)
        self.assertEqual(snap.cell(2, 1), Grid.WALL)
        with self.assertRaises(AttributeError):
            snap.width = 10

    def test_padding_stripped(self):
        padded = Grid(3, 3, padded=True)
        padded.set(2, 2, Grid.OPEN)
        snap = MazeSnapshot(padded)
        self.assertEqual(len(snap.cells), 9)
        self.assertTrue(snap.is_open(1, 1))

    def test_numpy_export(self):
        snap = MazeSnapshot(self.make_grid(), has_border=True)
        arr = snap.to_numpy()
        self.assertEqual(arr.shape, (2, 4))
        self.assertEqual(arr.dtype, np.uint8)
        self.assertEqual(arr[1, 1], Grid.OPEN)

        ringed = snap.to_numpy(include_border=True)
        self.assertEqual(ringed.shape, (4, 6))
        self.assertTrue(np.all(ringed[0, :] == Grid.WALL))
        self.assertTrue(np.all(ringed[-1, :] == Grid.WALL))
        self.assertTrue(np.all(ringed[:, 0] == Grid.WALL))
        self.assertTrue(np.all(ringed[:, -1] == Grid.WALL))
        np.testing.assert_array_equal(ringed[1:-1, 1:-1], arr)

    def test_text(self):
        snap = MazeSnapshot(self.make_grid(), has_border=False)
        self.assertEqual(snap.to_text(), ".##.\n#.##")
        bordered = MazeSnapshot(self.make_grid(), has_border=True)
        self.assertEqual(bordered.to_text().splitlines(), ["######", "#.##.#", "##.###", "######"])

    def test_to_grid_round_trip(self):
        grid = self.make_grid()
        copy = MazeSnapshot(grid).to_grid()
        self.assertEqual(copy.cells.tobytes(), grid.cells.tobytes())
        copy.set(0, 0, Grid.WALL)
        self.assertTrue(grid.is_open(0, 0))

    def test_equality(self):
        self.assertEqual(MazeSnapshot(self.make_grid()), MazeSnapshot(self.make_grid()))
        self.assertNotEqual(MazeSnapshot(self.make_grid()), MazeSnapshot(Grid(4, 2)))


class TestTextRenderer(unittest.TestCase):
    def test_draw_and_clear(self):
        out = io.StringIO()
        renderer = TextRenderer(out, wall="X", path=" ")
        grid = Grid(2, 1)
        grid.set(1, 0, Grid.OPEN)
        snap = MazeSnapshot(grid)

        renderer.draw(snap)
        self.assertEqual(out.getvalue(), "X \n")
        self.assertIs(renderer.current, snap)
        self.assertEqual(renderer.frames_drawn, 1)

        renderer.clear()
        self.assertIsNone(renderer.current)

    def test_defaults_to_stdout(self):
        out = io.StringIO()
        with redirect_stdout(out):
            renderer = TextRenderer()
            renderer.draw(MazeSnapshot(Grid(3, 1)))
        self.assertEqual(out.getvalue(), "###\n")

if __name__ == '__main__':
    unittest.main()
