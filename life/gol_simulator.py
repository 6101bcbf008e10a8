"""
Run a World forward and record its history.
"""
import numpy as np

NEIGHBOUR_SHIFTS = [(i, j) for i in (-1, 0, 1) for j in (-1, 0, 1) if (i, j) != (0, 0)]


def step(grid):
    """Vectorised GoL update on a (H, W) 0/1 array with toroidal boundary."""
    grid = np.asarray(grid, dtype=np.uint8)
    neighbours = sum(np.roll(grid, shift, axis=(0, 1)) for shift in NEIGHBOUR_SHIFTS)
    birth = (neighbours == 3) & (grid == 0)
    survive = ((neighbours == 2) | (neighbours == 3)) & (grid == 1)
    return (birth | survive).astype(np.uint8)


def simulate(world, steps=50):
    """
    Evolve `world` in place for up to `steps` generations.

    Returns the history as a list of (H, W) uint8 arrays starting with the
    initial state. Stops at the first repeated state, which is kept as the
    last entry so that detect_period can find its earlier occurrence.
    """
    seen = set()
    history = []
    for _ in range(steps):
        g = world.to_array()
        history.append(g)
        key = g.tobytes()
        if key in seen:
            break
        seen.add(key)
        world.evolve()
    return history
