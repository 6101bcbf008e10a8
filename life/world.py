"""
Dense toroidal Game of Life world (B3/S23).

Cells are stored row-major in a flat list: index = row * width + col.
"""
from enum import IntEnum
from numbers import Integral

import numpy as np

from .row import Row

_rng = np.random.default_rng()


def random_bool():
    """Unbiased coin flip drawn from the shared numpy generator."""
    return bool(_rng.integers(0, 2))


class Cell(IntEnum):
    DEAD = 0
    ALIVE = 1

    def is_alive(self):
        return self is Cell.ALIVE

    def next_state(self, n):
        """Apply the Life rule given `n` live neighbours."""
        if self is Cell.ALIVE and n in (2, 3):
            return Cell.ALIVE
        if self is Cell.DEAD and n == 3:
            return Cell.ALIVE
        return Cell.DEAD


def _check_dims(width, height):
    for name, v in (('width', width), ('height', height)):
        if not isinstance(v, Integral) or isinstance(v, bool):
            raise TypeError(f"{name} must be an int, got {type(v).__name__}")
        if v <= 0:
            raise ValueError(f"{name} must be positive, got {v}")


class World:
    def __init__(self, width, height, random_bool=random_bool):
        """
        Args:
            width (int): number of columns, > 0
            height (int): number of rows, > 0
            random_bool (callable): zero-arg source of independent booleans,
                called once per cell in row-major order
        """
        _check_dims(width, height)
        self._width = width
        self._height = height
        self._cells = [Cell.ALIVE if random_bool() else Cell.DEAD
                       for _ in range(width * height)]

    @classmethod
    def from_cells(cls, cells, width, height):
        _check_dims(width, height)
        cells = [Cell(c) for c in cells]
        if len(cells) != width * height:
            raise ValueError(f"expected {width * height} cells for a {width}x{height} world, got {len(cells)}")
        world = cls.__new__(cls)
        world._width = width
        world._height = height
        world._cells = cells
        return world

    @classmethod
    def from_array(cls, arr):
        arr = np.asarray(arr)
        if arr.ndim != 2:
            raise ValueError("Expected 2D arrays")
        H, W = arr.shape
        return cls.from_cells((arr != 0).astype(np.uint8).ravel().tolist(), W, H)

    def to_array(self):
        """(height, width) uint8 array of 0/1."""
        return np.array(self._cells, dtype=np.uint8).reshape(self._height, self._width)

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def cells(self):
        return tuple(self._cells)

    def __len__(self):
        return len(self._cells)

    def __iter__(self):
        return iter(self._cells)

    def __getitem__(self, i):
        if not 0 <= i < len(self._cells):
            raise IndexError(f"cell index {i} out of range for {len(self._cells)} cells")
        return self._cells[i]

    def __eq__(self, other):
        if not isinstance(other, World):
            return NotImplemented
        return (self._width, self._height, self._cells) == (other._width, other._height, other._cells)

    def __repr__(self):
        return f"World(width={self._width}, height={self._height}, population={self.population()})"

    def __str__(self):
        return "\n".join(str(self.get_row(r)) for r in range(self._height))

    def _index(self, row, col):
        return row * self._width + col

    def get_row(self, row):
        if not 0 <= row < self._height:
            raise IndexError(f"row {row} out of range for height {self._height}")
        start = row * self._width
        return Row(self._cells[start:start + self._width])

    def population(self):
        return sum(1 for c in self._cells if c is Cell.ALIVE)

    def count_alive_neighbours(self, row, col):
        # height-1 / width-1 stand in for -1 so the modulo never sees a negative
        count = 0
        for dr in (self._height - 1, 0, 1):
            for dc in (self._width - 1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                n_row = (dr + row) % self._height
                n_col = (dc + col) % self._width
                if self._cells[self._index(n_row, n_col)] is Cell.ALIVE:
                    count += 1
        return count

    def evolve(self):
        """Advance one generation, reading only the pre-advance cells."""
        new_cells = list(self._cells)
        for row in range(self._height):
            for col in range(self._width):
                idx = self._index(row, col)
                n = self.count_alive_neighbours(row, col)
                new_cells[idx] = self._cells[idx].next_state(n)
        self._cells = new_cells
