"""
Tests for the breadth-first solver, its chunked variant and the containers.

Run with pytest or directly: python test_solver.py
"""

import pytest

from BFSSolver import (
    BreadthFirstSearch, ChunkedBreadthFirstSearch, SearchExhaustedError, path_to,
)
from Cube_class import Axis, Cube
from CubeSolver import CubeNode, CubeSolver, find_shortest_solution
from chunked import ChunkedQueue, ChunkedSet
from cube_moves import DEFAULT_SCRAMBLE_MOVES, MOVES, Move, apply_moves, scramble


class NumberNode:
    """Toy graph: from n you can go to n + 1 or 2n, up to a limit."""

    def __init__(self, value, limit, parent=None, move=None):
        self.value = value
        self.limit = limit
        self.depth = None
        self.parent = parent
        self.move = move

    def expand(self):
        steps = (("+1", self.value + 1), ("*2", self.value * 2))
        return [NumberNode(v, self.limit, self, name) for name, v in steps if v <= self.limit]

    def __eq__(self, other):
        return isinstance(other, NumberNode) and self.value == other.value

    def __hash__(self):
        return hash(self.value)


def replay(value, moves):
    for m in moves:
        value = value + 1 if m == "+1" else value * 2
    return value


def test_generic_search():
    """BFS finds the shortest path on a non-cube graph."""
    print("=" * 50)
    print("Test: Generic Search")
    print("=" * 50)

    for search in (BreadthFirstSearch(), ChunkedBreadthFirstSearch(chunk_capacity=3)):
        start = NumberNode(1, limit=100)
        found = search.find(start, lambda n: n.value == 10)
        # 1 -> 2 -> 4 -> 5 -> 10
        assert found.depth == 4, f"Expected depth 4, got {found.depth}"
        assert start.depth == 0

        moves = path_to(found)
        assert len(moves) == found.depth
        assert replay(1, moves) == 10
        assert search.nodes_discovered > 1

    print("PASSED: Generic search test")


def test_search_exhausted():
    """An unreachable goal raises instead of returning a sentinel."""
    print("\n" + "=" * 50)
    print("Test: Search Exhausted")
    print("=" * 50)

    search = BreadthFirstSearch()
    with pytest.raises(SearchExhaustedError) as excinfo:
        search.find(NumberNode(1, limit=5), lambda n: n.value == 7)
    assert excinfo.value.nodes_discovered == 5

    with pytest.raises(SearchExhaustedError):
        ChunkedBreadthFirstSearch(chunk_capacity=2).find(
            NumberNode(1, limit=5), lambda n: False)

    print("PASSED: Search exhausted test")


def test_start_matches_immediately():
    search = BreadthFirstSearch()
    node = search.find(NumberNode(3, limit=10), lambda n: n.value == 3)
    assert node.depth == 0
    assert path_to(node) == []
    assert search.nodes_discovered == 1


def test_solved_cube_depth_zero():
    """Solving a solved cube needs no moves."""
    print("\n" + "=" * 50)
    print("Test: Solved Cube Depth")
    print("=" * 50)

    cube = Cube()
    solved, depth = find_shortest_solution(cube)
    assert depth == 0
    assert solved == cube

    print("PASSED: Solved cube depth test")


def test_one_move_depth_one():
    """Any single move is solved in exactly one move."""
    print("\n" + "=" * 50)
    print("Test: One Move Depth")
    print("=" * 50)

    for m in MOVES:
        cube = Cube().transform(m.a1, m.a2, m.side)
        solved, depth = find_shortest_solution(cube)
        assert depth == 1, f"Move {m}: expected depth 1, got {depth}"
        assert solved.is_finished()

    print("PASSED: One move depth test")


def test_known_three_move_scramble():
    """A scramble of 3 known moves never needs more than 3."""
    print("\n" + "=" * 50)
    print("Test: Three Move Scramble")
    print("=" * 50)

    moves = [Move(Axis.X, Axis.Y, True), Move(Axis.X, Axis.Z, True), Move(Axis.Y, Axis.Z, False)]
    cube = apply_moves(Cube(), moves)
    solved, depth = find_shortest_solution(cube)
    assert 1 <= depth <= 3, f"Expected depth at most 3, got {depth}"
    assert solved.is_finished()

    # two turns of different layers that share a fixed corner
    two = apply_moves(Cube(), moves[:2])
    assert find_shortest_solution(two)[1] == 2

    # a move and its inverse cancel
    cancel = apply_moves(Cube(), [moves[0], Move(Axis.Y, Axis.X, True), moves[1]])
    assert find_shortest_solution(cancel)[1] == 1

    print("PASSED: Three move scramble test")


def test_solution_moves_solve_the_cube():
    """Replaying the traced path on the start cube finishes it."""
    print("\n" + "=" * 50)
    print("Test: Solution Moves")
    print("=" * 50)

    cube, scramble_moves = scramble(Cube(), 3, seed=7)
    solver = CubeSolver()
    moves = solver.solution_moves(cube)
    assert len(moves) <= len(scramble_moves)
    assert apply_moves(cube, moves).is_finished()
    print(f"Scramble: {' '.join(str(m) for m in scramble_moves)}")
    print(f"Solution: {' '.join(str(m) for m in moves) or '-'}")

    print("PASSED: Solution moves test")


def test_chunked_matches_plain():
    """The chunked search reports the same optimal depth."""
    print("\n" + "=" * 50)
    print("Test: Chunked Search")
    print("=" * 50)

    for seed in range(5):
        cube, _ = scramble(Cube(), 3, seed=seed)
        _, plain = find_shortest_solution(cube)
        _, chunked = find_shortest_solution(cube, chunked=True, chunk_capacity=16)
        assert plain == chunked, f"Seed {seed}: plain {plain} vs chunked {chunked}"

    with pytest.raises(ValueError):
        CubeSolver(chunked=True, chunk_capacity=0)
    with pytest.raises(ValueError):
        ChunkedBreadthFirstSearch(chunk_capacity=-3)

    print("PASSED: Chunked search test")


def test_default_scramble_is_solvable():
    """Scrambles of the console's default length solve within that many moves."""
    print("\n" + "=" * 50)
    print("Test: Default Scramble Length")
    print("=" * 50)

    assert DEFAULT_SCRAMBLE_MOVES <= 5, "Deeper scrambles are too slow to solve interactively"
    cube, _ = scramble(Cube(), DEFAULT_SCRAMBLE_MOVES, seed=2)
    solved, depth = find_shortest_solution(cube)
    assert depth <= DEFAULT_SCRAMBLE_MOVES
    assert solved.is_finished()

    print("PASSED: Default scramble length test")


def test_verbose_progress(capsys):
    """Verbose search prints one line per depth level."""
    search = BreadthFirstSearch(verbose=True)
    found = search.find(NumberNode(1, limit=100), lambda n: n.value == 10)
    assert found.depth == 4

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "  Depth 0: 1 states (total visited: 1)",
        "  Depth 1: 1 states (total visited: 2)",
        "  Depth 2: 2 states (total visited: 4)",
        "  Depth 3: 3 states (total visited: 7)",
        "  Depth 4: 5 states (total visited: 12)",
    ]


def test_cube_node_identity():
    """Nodes compare and hash by their cube only."""
    a = CubeNode(Cube(), depth=3)
    b = CubeNode(Cube(), depth=5)
    assert a == b and hash(a) == hash(b)
    assert len(a.expand()) == 12
    assert all(n.parent is a for n in a.expand())


def test_chunked_queue():
    """FIFO order across chunks, drained chunks are dropped."""
    print("\n" + "=" * 50)
    print("Test: Chunked Queue")
    print("=" * 50)

    q = ChunkedQueue(capacity=2)
    for i in range(1, 6):
        q.append(i)
    assert len(q) == 5
    assert q.chunk_count == 3

    assert q.popleft() == 1
    assert q.popleft() == 2
    assert q.chunk_count == 2

    assert [q.popleft() for _ in range(3)] == [3, 4, 5]
    assert not q
    with pytest.raises(IndexError):
        q.popleft()

    q.append(6)
    assert q.popleft() == 6
    assert len(q) == 0

    with pytest.raises(ValueError):
        ChunkedQueue(capacity=0)

    print("PASSED: Chunked queue test")


def test_chunked_set():
    """Only the newest chunk grows; membership spans all chunks."""
    print("\n" + "=" * 50)
    print("Test: Chunked Set")
    print("=" * 50)

    s = ChunkedSet(capacity=2)
    for item in ("a", "b", "c", "a"):
        s.add(item)
    assert len(s) == 3
    assert s.chunk_count == 2
    assert "a" in s and "c" in s
    assert "d" not in s

    print("PASSED: Chunked set test")


def main():
    """Run all tests."""
    print("Pocket Cube Solver - Test Suite")
    print("=" * 50)

    test_generic_search()
    test_search_exhausted()
    test_start_matches_immediately()
    test_solved_cube_depth_zero()
    test_one_move_depth_one()
    test_known_three_move_scramble()
    test_solution_moves_solve_the_cube()
    test_chunked_matches_plain()
    test_default_scramble_is_solvable()
    test_cube_node_identity()
    test_chunked_queue()
    test_chunked_set()

    print("\n" + "=" * 50)
    print("ALL TESTS PASSED")
    print("=" * 50)


if __name__ == "__main__":
    main()
