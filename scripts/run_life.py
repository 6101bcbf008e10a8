#!/usr/bin/env python3
"""
Run Conway's Game of Life on a random toroidal world and display each generation,
either as text in the terminal or as a matplotlib animation.

With --survey N, instead simulate N random worlds and print how many died out,
settled into still lifes, oscillated, or kept going.
"""
import os
import sys
import time
import argparse
import numpy as np
import matplotlib.pyplot as plt
import matplotlib.animation as animation

# ensure project root is on sys.path for sibling imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from life.world import World, random_bool
from life.metrics import detect_period, evaluate_worlds, population


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Toroidal Game of Life (B3/S23)")
    parser.add_argument('--width', type=int, default=64, help='number of columns')
    parser.add_argument('--height', type=int, default=32, help='number of rows')
    parser.add_argument('--generations', type=int, default=100, help='generations to run')
    parser.add_argument('--delay', type=float, default=0.1, help='seconds between frames')
    parser.add_argument('--seed', type=int, default=None, help='seed for the initial random fill')
    parser.add_argument('--display', type=str, default='text', choices=['text', 'plot'],
                        help='terminal text or matplotlib animation')
    parser.add_argument('--stop_on_repeat', action='store_true',
                        help='stop as soon as a generation repeats')
    parser.add_argument('--survey', type=int, default=0,
                        help='simulate this many random worlds and print outcome counts instead of displaying')
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error('--width and --height must be positive')
    if args.generations <= 0:
        parser.error('--generations must be positive')
    if args.delay < 0:
        parser.error('--delay must be non-negative')
    if args.survey < 0:
        parser.error('--survey must be non-negative')
    return args


def coin_flips(seed):
    """Seeded random-bool source; None falls back to the shared generator."""
    if seed is None:
        return random_bool
    rng = np.random.default_rng(seed)
    return lambda: bool(rng.integers(0, 2))


def run_text(world, generations, delay, stop_on_repeat=False):
    """Print each generation to the terminal. Returns the list of frames shown."""
    seen = set()
    history = []
    for gen in range(generations):
        frame = world.to_array()
        history.append(frame)
        key = frame.tobytes()
        os.system('cls' if os.name == 'nt' else 'clear')
        print(f"Generation {gen + 1}/{generations}  population {world.population()}")
        for r in range(world.height):
            print(world.get_row(r).render())
        if stop_on_repeat and key in seen:
            print(f"Generation {gen + 1} repeats an earlier state, stopping.")
            break
        seen.add(key)
        if gen == generations - 1:
            break
        world.evolve()
        if delay:
            time.sleep(delay)
    return history


def run_plot(world, generations, delay):
    """Evolve `generations - 1` times up front, then animate the recorded frames."""
    history = [world.to_array()]
    for _ in range(generations - 1):
        world.evolve()
        history.append(world.to_array())

    fig, ax = plt.subplots()
    im = ax.imshow(history[0], cmap='gray_r', vmin=0, vmax=1)
    ax.set_xticks([])
    ax.set_yticks([])
    title = ax.set_title(f"Generation 1  population {population(history[0])}")

    def update(i):
        im.set_data(history[i])
        title.set_text(f"Generation {i + 1}  population {population(history[i])}")
        return [im, title]

    anim = animation.FuncAnimation(fig, update, frames=len(history),
                                   interval=max(int(delay * 1000), 1), repeat=False)
    plt.show()
    return history, anim


def main(argv=None):
    args = parse_args(argv)

    flip = coin_flips(args.seed)

    if args.survey:
        worlds = [World(args.width, args.height, flip) for _ in range(args.survey)]
        results = evaluate_worlds(worlds, max_steps=args.generations)
        print(f"Survey of {args.survey} random {args.width}x{args.height} worlds, {args.generations} generations:")
        for k, v in sorted(results.items()):
            print(f"{k}: {v}")
        return results

    world = World(args.width, args.height, flip)
    if args.display == 'text':
        history = run_text(world, args.generations, args.delay, args.stop_on_repeat)
    else:
        history, _ = run_plot(world, args.generations, args.delay)

    per = detect_period(history)
    status = 'no repeat seen' if per is None else f'period {per}'
    print(f"Finished: {len(history)} generations shown, final population {population(history[-1])}, {status}")
    return history


if __name__ == '__main__':
    main()
