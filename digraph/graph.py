"""Generic directed graph structure."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import (
    Deque,
    Dict,
    Generic,
    Hashable,
    Iterator,
    List,
    Optional,
    Set,
    TextIO,
    TypeVar,
)

T = TypeVar("T", bound=Hashable)


class GraphKernel(ABC, Generic[T]):

    """Basic graph capabilities: mutation, inspection, and traversal."""

    @abstractmethod
    def add_node(self, node: T):
        """Add a node. Does nothing if it already exists."""

    @abstractmethod
    def add_edge(self, src: T, dst: T):
        """Add a directed edge from src to dst."""

    @abstractmethod
    def get_nodes(self) -> List[T]:
        """Return all nodes."""

    @abstractmethod
    def get_edges(self, node: T) -> List[T]:
        """Return the neighbors of node."""

    @abstractmethod
    def traverse_dfs(self, start: T) -> List[T]:
        """Return nodes in depth-first order from start."""

    @abstractmethod
    def traverse_bfs(self, start: T) -> List[T]:
        """Return nodes in breadth-first order from start."""


class GraphSecondary(GraphKernel[T]):

    """Graph capabilities layered on top of the kernel."""

    @abstractmethod
    def find_path(self, start: T, end: T) -> List[T]:
        """Return a shortest path from start to end, or [] if there is none."""

    @abstractmethod
    def reset_graph(self):
        """Remove all nodes and edges."""


class DirectedGraph(GraphSecondary[T]):

    """A directed graph backed by an adjacency list.

    Vertices are hashable objects of type T. Each vertex maps to the list of
    its outgoing neighbors in the order the edges were added. Adding the same
    edge twice stores it twice.

    Traversals starting from a vertex that was never added treat it as a
    vertex with no neighbors, so they return [start]. They do not add it.

    Not thread-safe. Callers sharing a graph across threads must lock it.
    """

    def __init__(self):
        self.adjacency: Dict[T, List[T]] = {}

    def __repr__(self) -> str:
        return f"DirectedGraph(N={len(self.adjacency)}, E={self.edge_count()})"

    def __len__(self) -> int:
        return len(self.adjacency)

    def __contains__(self, node: object) -> bool:
        return node in self.adjacency

    def __iter__(self) -> Iterator[T]:
        """Iterate over all vertices in insertion order."""
        return iter(self.adjacency)

    def dump(self, out: Optional[TextIO] = None):
        """Dump a textual representation of this graph to out (default stdout)."""
        for node, neighbors in self.adjacency.items():
            targets = ", ".join(str(n) for n in neighbors)
            print(f"{node} -> {targets}".rstrip(), file=out)

    def edge_count(self) -> int:
        """Return the number of edges, counting duplicates."""
        return sum(len(neighbors) for neighbors in self.adjacency.values())

    def add_node(self, node: T):
        if node not in self.adjacency:
            self.adjacency[node] = []

    def add_edge(self, src: T, dst: T):
        self.add_node(src)
        self.add_node(dst)
        self.adjacency[src].append(dst)

    def get_nodes(self) -> List[T]:
        return list(self.adjacency)

    def get_edges(self, node: T) -> List[T]:
        return list(self.adjacency.get(node, ()))

    def traverse_dfs(self, start: T) -> List[T]:
        """Return nodes in depth-first pre-order from start.

        Uses an explicit stack rather than recursion. Neighbors are pushed in
        reverse and checked against the seen set when popped, which gives the
        same order as the recursive version.
        """
        if start not in self.adjacency:
            logging.debug("dfs from unknown node %r", start)
        visited: List[T] = []
        seen: Set[T] = set()
        stack = [start]
        while stack:
            current = stack.pop()
            if current in seen:
                continue
            seen.add(current)
            visited.append(current)
            stack.extend(reversed(self.adjacency.get(current, ())))
        return visited

    def traverse_bfs(self, start: T) -> List[T]:
        """Return nodes in breadth-first order from start.

        Neighbors are marked seen when enqueued, so none is queued twice.
        """
        if start not in self.adjacency:
            logging.debug("bfs from unknown node %r", start)
        visited: List[T] = []
        seen = {start}
        queue: Deque[T] = deque([start])
        while queue:
            current = queue.popleft()
            visited.append(current)
            for neighbor in self.adjacency.get(current, ()):
                if neighbor not in seen:
                    seen.add(neighbor)
                    queue.append(neighbor)
        return visited

    def find_path(self, start: T, end: T) -> List[T]:
        """Return a shortest path from start to end by edge count.

        Returns [] if either node is absent or end is unreachable, and [start]
        if start equals end. The search stops as soon as end is discovered.
        """
        if start not in self.adjacency or end not in self.adjacency:
            return []
        if start is end or start == end:
            return [start]
        parents: Dict[T, T] = {}
        seen = {start}
        queue: Deque[T] = deque([start])
        while queue:
            current = queue.popleft()
            for neighbor in self.adjacency[current]:
                if neighbor in seen:
                    continue
                seen.add(neighbor)
                parents[neighbor] = current
                if neighbor is end or neighbor == end:
                    return self._reconstruct(parents, end)
                queue.append(neighbor)
        logging.debug("no path from %r to %r", start, end)
        return []

    @staticmethod
    def _reconstruct(parents: Dict[T, T], end: T) -> List[T]:
        # start is the only node on the path without a parent.
        path = [end]
        while path[-1] in parents:
            path.append(parents[path[-1]])
        path.reverse()
        return path

    def reset_graph(self):
        self.adjacency.clear()
