"""
Metrics over simulated histories: period detection, population, classification.
"""
import numpy as np
from collections import defaultdict
from .gol_simulator import simulate


def detect_period(history):
    """Given a history list of grids, return period (1 for still life, >1 if oscillator), or None if no repeat."""
    if len(history) <= 1:
        return None
    last = history[-1]
    for p in range(1, len(history)):
        if np.array_equal(history[-1-p], last):
            return p
    return None


def population(grid):
    return int(np.count_nonzero(grid))


def classify(history):
    if population(history[-1]) == 0:
        return 'died_out'
    per = detect_period(history)
    if per == 1:
        return 'still_life'
    if per and per > 1:
        return f'oscillator_p{per}'
    return 'survived_unknown'


def evaluate_worlds(worlds, max_steps=50):
    """
    Simulate each world (in place) and tally outcome categories.

    Returns:
        dict of category -> count, plus 'total'.
    """
    results = defaultdict(int)
    for world in worlds:
        hist = simulate(world, steps=max_steps)
        results[classify(hist)] += 1
    results['total'] = len(worlds)
    return dict(results)
