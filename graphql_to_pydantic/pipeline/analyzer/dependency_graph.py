"""
Dependency graph over declaration names.

An edge ``a -> b`` means ``a`` must be emitted after ``b``. Cycles are
only detected when an order is requested.
"""

from __future__ import annotations

import graphlib
import heapq
from collections.abc import Iterable, Mapping

from ..errors import CycleError


class DependencyGraph:
    """Directed graph answering "in which order can declarations be emitted"."""

    def __init__(self, excluded: Iterable[str] = (), positions: Mapping[str, int] | None = None):
        """
        Initialize an empty graph.

        Args:
            excluded: Names that never become nodes (scalar primitives, dynamic marker)
            positions: Declaration position of each name in the source document,
                used to order nodes that have no constraint between them
        """
        self._excluded = frozenset(excluded)
        self._positions = dict(positions or {})
        # name -> insertion index; dicts keep insertion order
        self._nodes: dict[str, int] = {}
        self._edges: dict[str, set[str]] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def nodes(self) -> list[str]:
        """Nodes in first-insertion order."""
        return list(self._nodes)

    def can_add_node(self, name: str) -> bool:
        return name not in self._excluded

    def add_node(self, name: str) -> None:
        """Add a node; no-op if present or excluded."""
        if name in self._nodes or not self.can_add_node(name):
            return
        self._nodes[name] = len(self._nodes)
        self._edges[name] = set()

    def add_edge(self, source: str, target: str) -> None:
        """Record that ``source`` depends on ``target``; excluded endpoints add no edge."""
        self.add_node(source)
        self.add_node(target)
        if source in self._nodes and target in self._nodes:
            self._edges[source].add(target)

    def dependencies_of(self, name: str) -> set[str]:
        """Direct dependencies of a node."""
        return set(self._edges.get(name, ()))

    def _sort_key(self, name: str) -> tuple[int, int]:
        # Declared names by document position, then undeclared ones by insertion
        if name in self._positions:
            return (0, self._positions[name])
        return (1, self._nodes[name])

    def topological_order(self) -> list[str]:
        """
        Return every node once, each after all nodes it depends on.

        Among nodes that are ready at the same time, the one declared
        first in the source document comes first.

        Raises:
            CycleError: If the dependencies form a cycle
        """
        sorter = graphlib.TopologicalSorter()
        for name in self._nodes:
            sorter.add(name, *sorted(self._edges[name], key=self._sort_key))

        try:
            sorter.prepare()
        except graphlib.CycleError as e:
            raise CycleError(e.args[1]) from e

        ready: list[tuple[tuple[int, int], str]] = []
        order: list[str] = []
        while sorter.is_active():
            for name in sorter.get_ready():
                heapq.heappush(ready, (self._sort_key(name), name))
            _, name = heapq.heappop(ready)
            order.append(name)
            sorter.done(name)
        return order
