"""
Pocket cube (2x2x2) state model.

Every corner piece is a Cubelet: a CornerPosition (one bit per axis) plus the
three sticker values on the faces it shows. All types are immutable values,
so a transform always returns a new object.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, List, Optional, Tuple

import numpy as np


class Axis(IntEnum):
    X = 0
    Y = 1
    Z = 2


AXES = (Axis.X, Axis.Y, Axis.Z)

# Unordered axis pairs, one per pair of opposite faces
AXIS_PAIRS = ((Axis.X, Axis.Y), (Axis.X, Axis.Z), (Axis.Y, Axis.Z))


def pivot_axis(a1: Axis, a2: Axis) -> Axis:
    """Return the axis that is neither a1 nor a2."""
    if a1 == a2:
        raise ValueError(f"Rotation needs two different axes, got {a1.name} twice")
    return Axis(3 - a1 - a2)


@dataclass(frozen=True)
class CornerPosition:
    """One of the 8 corners of the unit cube, bit `a` is the flag for axis `a`."""

    value: int

    def __post_init__(self):
        if not 0 <= self.value <= 7:
            raise ValueError(f"Corner position must be in [0, 7], got {self.value}")

    @classmethod
    def from_flags(cls, x: bool, y: bool, z: bool) -> "CornerPosition":
        return cls(int(x) | int(y) << 1 | int(z) << 2)

    def axis_value(self, axis: Axis) -> bool:
        return bool(self.value >> axis & 1)

    def transform(self, a1: Axis, a2: Axis) -> "CornerPosition":
        """
        Rotate the corner 90 degrees about the pivot axis of (a1, a2).

        The new a1 flag is the negated old a2 flag and the new a2 flag is the
        old a1 flag. The pivot flag is left alone.
        """
        pivot_axis(a1, a2)
        new_a1 = not self.axis_value(a2)
        new_a2 = self.axis_value(a1)

        value = self.value & ~(1 << a1) & ~(1 << a2)
        value |= int(new_a1) << a1 | int(new_a2) << a2
        return CornerPosition(value)

    def __str__(self):
        return " ".join("1" if self.axis_value(a) else "0" for a in AXES)


def _face_digit(a1: Axis, a2: Axis) -> int:
    # XY -> 0, XZ -> 1, YZ -> 2
    pivot_axis(a1, a2)
    return a1 + a2 - 1


@dataclass(frozen=True)
class Cubelet:
    """
    A corner piece: where it sits and which sticker faces which way.

    `value` packs the three sticker colours as decimal digits, one per
    unordered axis pair (XY, XZ, YZ). The XY sticker is the one seen on the
    face perpendicular to Z.
    """

    position: CornerPosition
    value: int

    @classmethod
    def from_faces(cls, position: CornerPosition, xy: int, xz: int, yz: int) -> "Cubelet":
        for color in (xy, xz, yz):
            if not 0 <= color <= 9:
                raise ValueError(f"Sticker value must be a single digit, got {color}")
        return cls(position, xy + xz * 10 + yz * 100)

    @classmethod
    def solved(cls, index: int) -> "Cubelet":
        """Solved corner `index`: each sticker colour depends on the bit of the axis it faces."""
        p = CornerPosition(index)
        return cls.from_faces(
            p,
            xy=2 if p.axis_value(Axis.Z) else 1,
            xz=6 if p.axis_value(Axis.Y) else 5,
            yz=4 if p.axis_value(Axis.X) else 3,
        )

    def face_value(self, a1: Axis, a2: Axis) -> int:
        return self.value // 10 ** _face_digit(a1, a2) % 10

    def _with_face(self, a1: Axis, a2: Axis, color: int) -> int:
        m = 10 ** _face_digit(a1, a2)
        return self.value - (self.value // m % 10) * m + color * m

    def transform(self, a1: Axis, a2: Axis) -> "Cubelet":
        """Quarter turn about the pivot of (a1, a2): stickers on (p, a1) and (p, a2) trade places."""
        p = pivot_axis(a1, a2)
        s1 = self.face_value(p, a1)
        s2 = self.face_value(p, a2)

        swapped = Cubelet(self.position, self._with_face(p, a1, s2))
        value = swapped._with_face(p, a2, s1)
        return Cubelet(self.position.transform(a1, a2), value)

    def __str__(self):
        return "L {0} XY {1} XZ {2} YZ {3}".format(
            self.position,
            self.face_value(Axis.X, Axis.Y),
            self.face_value(Axis.X, Axis.Z),
            self.face_value(Axis.Y, Axis.Z),
        )


class Cube:
    """
    Immutable pocket cube: exactly 8 cubelets in a fixed slot order.

    A slot always follows the same physical corner, only its position and
    sticker orientation change as the cube is turned.
    """

    HASH_SEED = 17
    HASH_BASE = 23

    def __init__(self, cubelets: Optional[Tuple[Cubelet, ...]] = None):
        if cubelets is None:
            cubelets = tuple(Cubelet.solved(i) for i in range(8))
        cubelets = tuple(cubelets)
        if len(cubelets) != 8:
            raise ValueError(f"A cube has 8 cubelets, got {len(cubelets)}")
        if len({c.position for c in cubelets}) != 8:
            raise ValueError("Two cubelets share a corner position")
        self._cubelets = cubelets
        self._hash = None

    @classmethod
    def _trusted(cls, cubelets: Tuple[Cubelet, ...]) -> "Cube":
        # transforms only permute positions, so the 8-corner check cannot fail
        cube = cls.__new__(cls)
        cube._cubelets = cubelets
        cube._hash = None
        return cube

    @property
    def cubelets(self) -> Tuple[Cubelet, ...]:
        return self._cubelets

    @classmethod
    def scrambled(cls, count: int, seed=None, rng=None) -> "Cube":
        """Solved cube turned by `count` random layer moves."""
        from cube_moves import scramble

        cube, _ = scramble(cls(), count, rng=rng, seed=seed)
        return cube

    def side_cubelets(self, a1: Axis, a2: Axis, side: bool) -> Iterator[Cubelet]:
        """Cubelets on the face spanned by a1, a2 whose pivot bit equals `side`."""
        a = pivot_axis(a1, a2)
        return (c for c in self._cubelets if c.position.axis_value(a) == side)

    def transform(self, a1: Axis, a2: Axis, side: Optional[bool] = None) -> "Cube":
        """
        Turn one layer, or the whole cube when `side` is None.

        Args:
            a1, a2: the two axes the rotation moves between
            side: which layer along the pivot axis turns (False/True)

        Returns:
            New Cube, this one is left untouched
        """
        a = pivot_axis(a1, a2)
        if side is None:
            return Cube._trusted(tuple(c.transform(a1, a2) for c in self._cubelets))

        side = bool(side)
        return Cube._trusted(tuple(
            c.transform(a1, a2) if c.position.axis_value(a) == side else c
            for c in self._cubelets
        ))

    def face(self, a1: Axis, a2: Axis, side: bool,
             flip1: bool = False, flip2: bool = False) -> np.ndarray:
        """
        2x2 grid of the stickers on one face.

        Row comes from the a1 bit and column from the a2 bit of each corner,
        each optionally flipped so faces can be unfolded consistently.
        """
        result = np.zeros((2, 2), dtype=int)
        for c in self.side_cubelets(a1, a2, side):
            i = int(c.position.axis_value(a1) ^ flip1)
            j = int(c.position.axis_value(a2) ^ flip2)
            result[i, j] = c.face_value(a1, a2)
        return result

    def is_face_finished(self, a1: Axis, a2: Axis, side: bool) -> bool:
        grid = self.face(a1, a2, side)
        return bool(np.all(grid == grid[0, 0]))

    def is_finished(self) -> bool:
        for a1, a2 in AXIS_PAIRS:
            for side in (False, True):
                if not self.is_face_finished(a1, a2, side):
                    return False
        return True

    def faces(self) -> List[np.ndarray]:
        """All six faces in (pair, side) order: XY0, XY1, XZ0, XZ1, YZ0, YZ1."""
        return [self.face(a1, a2, side) for a1, a2 in AXIS_PAIRS for side in (False, True)]

    def __eq__(self, other):
        if not isinstance(other, Cube):
            return NotImplemented
        return self._cubelets == other._cubelets

    def __hash__(self):
        if self._hash is None:
            h = self.HASH_SEED
            for c in self._cubelets:
                h = h * self.HASH_BASE + hash(c)
            self._hash = hash(h)
        return self._hash

    def __repr__(self):
        return "Cube(" + "; ".join(str(c) for c in self._cubelets) + ")"
