"""
Legal quarter-turn moves of the pocket cube.

A move is (a1, a2, side): turn the layer at `side` along the pivot axis so
that a1 rotates towards a2. (a1, a2, side) and (a2, a1, side) undo each other.
"""

from itertools import permutations
from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple

import numpy as np

from Cube_class import AXES, Axis, Cube

DEFAULT_SCRAMBLE_MOVES = 4

AXIS_LETTERS = {"x": Axis.X, "y": Axis.Y, "z": Axis.Z}


class Move(NamedTuple):
    a1: Axis
    a2: Axis
    side: bool

    def __str__(self):
        return f"{self.a1.name.lower()}{self.a2.name.lower()}{int(self.side)}"


# 6 ordered axis pairs x 2 sides
MOVES: Tuple[Move, ...] = tuple(
    Move(a1, a2, side)
    for a1, a2 in permutations(AXES, 2)
    for side in (False, True)
)


def next_states(cube: Cube) -> Iterator[Tuple[Move, Cube]]:
    """Yield every (move, resulting cube) reachable with one layer turn."""
    for m in MOVES:
        yield m, cube.transform(m.a1, m.a2, m.side)


def inverse_move(move: Move) -> Move:
    return Move(move.a2, move.a1, move.side)


def apply_moves(cube: Cube, moves: Iterable[Move]) -> Cube:
    for m in moves:
        cube = cube.transform(m.a1, m.a2, m.side)
    return cube


def to_axis(c: str) -> Axis:
    try:
        return AXIS_LETTERS[c.lower()]
    except KeyError:
        raise ValueError(f"Unknown axis '{c}', expected one of x, y, z") from None


def parse_axes(text: str) -> Tuple[Axis, Axis]:
    """Parse an axis pair such as 'xy'."""
    text = text.strip()
    if len(text) != 2:
        raise ValueError(f"Expected two axis letters, got '{text}'")
    a1, a2 = to_axis(text[0]), to_axis(text[1])
    if a1 == a2:
        raise ValueError(f"Axes must differ, got '{text}'")
    return a1, a2


def parse_move(text: str) -> Move:
    """
    Parse a layer move like 'xy1', 'xy 0' or 'ZX1'.

    Raises:
        ValueError: if the text is not two distinct axes followed by 0 or 1
    """
    compact = "".join(text.split())
    if len(compact) != 3 or compact[2] not in "01":
        raise ValueError(f"Expected a move like 'xy1', got '{text}'")
    a1, a2 = parse_axes(compact[:2])
    return Move(a1, a2, compact[2] == "1")


def scramble(cube: Cube, count: int,
             rng: Optional[np.random.Generator] = None,
             seed=None) -> Tuple[Cube, List[Move]]:
    """
    Apply `count` random layer moves.

    Args:
        cube: starting cube
        count: number of moves to apply
        rng: random generator to draw moves from; created from `seed` if None
        seed: seed for a new generator (ignored when rng is given)

    Returns:
        (scrambled cube, list of moves applied)
    """
    if count < 0:
        raise ValueError(f"Scramble length must be non-negative, got {count}")
    if rng is None:
        rng = np.random.default_rng(seed)

    moves = [MOVES[int(i)] for i in rng.integers(0, len(MOVES), size=count)]
    return apply_moves(cube, moves), moves
