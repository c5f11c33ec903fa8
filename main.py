"""
Pocket Cube - Interactive Console

Shows the cube unfolded as a cross and reads one command per line:
    xy1, zx0, ...   Turn one layer (two axes + side 0/1)
    xy, zx, ...     Turn the whole cube
    s               Solve: print the optimal number of moves and the moves
    r               Rescramble
    n               New solved cube
    q               Quit

Usage:
    python main.py [--scramble N] [--seed S] [--chunked] [--chunk-size K] [--verbose]

Options:
    --scramble N    Number of random moves for a new scramble (default 4)
    --seed S        Seed for reproducible scrambles
    --chunked       Use the memory-bounded search
    --chunk-size K  Capacity of each search chunk
    --verbose       Print search progress per depth level

The solver is an exhaustive breadth-first search and each extra level of
depth costs roughly five times the work: scrambles solving in up to about 6
moves finish in seconds, deeper ones can take many minutes.
"""

import argparse
import time

import numpy as np

from BFSSolver import SearchExhaustedError, path_to
from Cube_class import Cube
from CubeSolver import CubeSolver
from chunked import DEFAULT_CHUNK_CAPACITY
from cube_display import cube_to_text
from cube_moves import DEFAULT_SCRAMBLE_MOVES, parse_axes, parse_move, scramble


def print_cube(cube):
    print()
    print(cube_to_text(cube))
    print()
    print(f"Is finished : {cube.is_finished()}")


def solve_mode(cube, solver):
    """Run the solver on the current cube and print the result."""
    print("\n" + "=" * 50)
    print("  SOLVING CUBE")
    print("=" * 50)

    start_time = time.time()
    try:
        node = solver.solve(cube)
    except SearchExhaustedError as e:
        print(f"\nError running solver: {e}")
        return
    solve_time = time.time() - start_time

    moves = path_to(node)
    print(f"\nMoves to solve: {node.depth}")
    if moves:
        print(f"Moves: {' '.join(str(m) for m in moves)}")
    print(f"Nodes discovered: {solver.nodes_discovered:,}")
    print(f"Solve time: {solve_time:.3f}s")


def apply_command(cube, command):
    """
    Apply a move command to the cube.

    Returns:
        The new cube

    Raises:
        ValueError: if the command is not a move
    """
    compact = "".join(command.split())
    if len(compact) == 2:
        a1, a2 = parse_axes(compact)
        return cube.transform(a1, a2)
    m = parse_move(compact)
    return cube.transform(m.a1, m.a2, m.side)


def main():
    """Main entry point for the console."""
    parser = argparse.ArgumentParser(
        description="Pocket cube console and shortest-path solver",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        '--scramble',
        type=int,
        default=DEFAULT_SCRAMBLE_MOVES,
        help='Number of random moves in a scramble'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed for reproducible scrambles'
    )
    parser.add_argument(
        '--chunked',
        action='store_true',
        help='Use the chunked (memory-bounded) search'
    )
    parser.add_argument(
        '--chunk-size',
        type=int,
        default=DEFAULT_CHUNK_CAPACITY,
        help='Capacity of each chunk for --chunked'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Print search progress per depth level'
    )
    args = parser.parse_args()

    print("=" * 50)
    print("  POCKET CUBE")
    print("  Quarter turns + Breadth-First Solver")
    print("=" * 50)

    rng = np.random.default_rng(args.seed)
    solver = CubeSolver(chunked=args.chunked, chunk_capacity=args.chunk_size,
                        verbose=args.verbose)
    cube, moves = scramble(Cube(), args.scramble, rng=rng)
    print(f"\n[Scrambled with: {' '.join(str(m) for m in moves) or '-'}]")

    while True:
        print_cube(cube)
        print("\n" + "-" * 50)
        print("  xy1 / xy0  Turn a layer     xy  Turn the whole cube")
        print("  s Solve   r Rescramble   n New cube   q Quit")
        print("-" * 50)

        choice = input("> ").strip().lower()

        if choice == 'q':
            print("\nGoodbye!")
            break
        elif choice == 's':
            solve_mode(cube, solver)
        elif choice == 'r':
            cube, moves = scramble(Cube(), args.scramble, rng=rng)
            print(f"\n[Scrambled with: {' '.join(str(m) for m in moves) or '-'}]")
        elif choice == 'n':
            cube = Cube()
        elif choice:
            try:
                cube = apply_command(cube, choice)
            except ValueError as e:
                print(f"Invalid command: {e}")


if __name__ == "__main__":
    main()
