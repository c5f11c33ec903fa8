"""
Generic breadth-first shortest-path search.

Works on any node type that provides:
    node.expand()  -> iterable of neighbour nodes (new objects)
    node.depth     -> settable int, number of moves from the start
and is hashable with exact equality. Nodes that also carry `parent` and
`move` attributes can be traced back to the start with path_to().
"""

from collections import deque

from chunked import DEFAULT_CHUNK_CAPACITY, ChunkedQueue, ChunkedSet, check_capacity


class SearchExhaustedError(RuntimeError):
    """Raised when every reachable node was visited and none matched."""

    def __init__(self, nodes_discovered):
        super().__init__(
            f"Search exhausted after {nodes_discovered:,} nodes without reaching the goal"
        )
        self.nodes_discovered = nodes_discovered


class BreadthFirstSearch:
    """
    Level-order BFS with a FIFO frontier and a visited set.

    The first node that satisfies the predicate is returned; because the
    graph is unweighted its depth is the shortest distance from the start.
    """

    def __init__(self, verbose=False):
        self.verbose = verbose
        self.nodes_discovered = 0

    def _new_frontier(self):
        return deque()

    def _new_visited(self):
        return set()

    def find(self, start, predicate):
        """
        Return the nearest node for which predicate(node) is true.

        Raises:
            SearchExhaustedError: if the frontier empties first
        """
        frontier = self._new_frontier()
        visited = self._new_visited()

        start.depth = 0
        frontier.append(start)
        visited.add(start)
        self.nodes_discovered = 1
        level = -1

        while frontier:
            node = frontier.popleft()
            if self.verbose and node.depth != level:
                level = node.depth
                print(f"  Depth {level}: {len(frontier) + 1:,} states "
                      f"(total visited: {self.nodes_discovered:,})")

            if predicate(node):
                return node

            for nxt in node.expand():
                if nxt in visited:
                    continue
                nxt.depth = node.depth + 1
                visited.add(nxt)
                frontier.append(nxt)
                self.nodes_discovered += 1

        raise SearchExhaustedError(self.nodes_discovered)


class ChunkedBreadthFirstSearch(BreadthFirstSearch):
    """BFS whose frontier and visited set are split into fixed-capacity chunks."""

    def __init__(self, chunk_capacity=DEFAULT_CHUNK_CAPACITY, verbose=False):
        super().__init__(verbose=verbose)
        check_capacity(chunk_capacity)
        self.chunk_capacity = chunk_capacity

    def _new_frontier(self):
        return ChunkedQueue(self.chunk_capacity)

    def _new_visited(self):
        return ChunkedSet(self.chunk_capacity)


def path_to(node):
    """Moves leading from the search start to `node`, following parent links."""
    moves = []
    while getattr(node, "parent", None) is not None:
        moves.append(node.move)
        node = node.parent
    moves.reverse()
    return moves
