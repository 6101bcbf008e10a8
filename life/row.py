"""
Read-only view of a single world row.
"""
from collections.abc import Sequence

ALIVE_GLYPH = '#'
DEAD_GLYPH = ' '


class Row(Sequence):
    def __init__(self, cells):
        # snapshot; a row taken before evolve() keeps the old generation
        self._cells = tuple(cells)

    def __len__(self):
        return len(self._cells)

    def __getitem__(self, i):
        return self._cells[i]

    def __eq__(self, other):
        if isinstance(other, Row):
            return self._cells == other._cells
        if isinstance(other, Sequence) and not isinstance(other, str):
            return self._cells == tuple(other)
        return NotImplemented

    def __hash__(self):
        return hash(self._cells)

    def __repr__(self):
        return f"Row({list(self._cells)!r})"

    def render(self):
        return ''.join(ALIVE_GLYPH if cell.is_alive() else DEAD_GLYPH for cell in self._cells)

    __str__ = render
