from BFSSolver import BreadthFirstSearch, ChunkedBreadthFirstSearch, path_to
from chunked import DEFAULT_CHUNK_CAPACITY
from cube_moves import next_states


class CubeNode:
    """Search node wrapping a Cube; equality and hash are the cube's own."""

    __slots__ = ("cube", "depth", "parent", "move")

    def __init__(self, cube, depth=0, parent=None, move=None):
        self.cube = cube
        self.depth = depth
        self.parent = parent
        self.move = move

    def expand(self):
        return [CubeNode(c, parent=self, move=m) for m, c in next_states(self.cube)]

    def __eq__(self, other):
        if not isinstance(other, CubeNode):
            return NotImplemented
        return self.cube == other.cube

    def __hash__(self):
        return hash(self.cube)


def _is_finished(node):
    return node.cube.is_finished()


class CubeSolver:

    def __init__(self, chunked=False, chunk_capacity=DEFAULT_CHUNK_CAPACITY, verbose=False):
        if chunked:
            self.search = ChunkedBreadthFirstSearch(chunk_capacity, verbose=verbose)
        else:
            self.search = BreadthFirstSearch(verbose=verbose)

    def solve(self, cube):
        """Return the nearest solved CubeNode; its depth is the optimal move count."""
        return self.search.find(CubeNode(cube), _is_finished)

    def solution_moves(self, cube):
        return path_to(self.solve(cube))

    @property
    def nodes_discovered(self):
        return self.search.nodes_discovered


def find_shortest_solution(start_cube, chunked=False,
                           chunk_capacity=DEFAULT_CHUNK_CAPACITY, verbose=False):
    """
    Breadth-first search from start_cube to the nearest solved cube.

    Returns:
        (solved cube, number of moves)
    """
    node = CubeSolver(chunked, chunk_capacity, verbose).solve(start_cube)
    return node.cube, node.depth
