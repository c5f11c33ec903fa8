"""
Text rendering of a pocket cube as an unfolded cross:

       YZ0
    XZ0 XY0 XZ1 XY1
       YZ1
"""

from Cube_class import Axis

# (a1, a2, side) for each face of the cross
TOP = (Axis.Y, Axis.Z, False)
MIDDLE = (
    (Axis.X, Axis.Z, False),
    (Axis.X, Axis.Y, False),
    (Axis.X, Axis.Z, True),
    (Axis.X, Axis.Y, True),
)
BOTTOM = (Axis.Y, Axis.Z, True)


def format_face(grid):
    """Two strings of two digits, one per grid row."""
    return [f"{grid[i, 0]}{grid[i, 1]}" for i in range(2)]


def cube_to_text(cube):
    top = format_face(cube.face(*TOP))
    middle = [format_face(cube.face(*f)) for f in MIDDLE]
    bottom = format_face(cube.face(*BOTTOM))

    lines = ["   " + row for row in top]
    lines.append("")
    for i in range(2):
        lines.append(" ".join(face[i] for face in middle))
    lines.append("")
    lines.extend("   " + row for row in bottom)
    return "\n".join(lines)
