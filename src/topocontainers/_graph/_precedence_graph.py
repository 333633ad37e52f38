"""Mutable precedence graph with a memoized linearization."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from ._algorithms import CycleError, find_cycle, linearize

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


@dataclass(slots=True)
class PrecedenceGraph(Generic[K]):
    """A set of "v before w" constraints between keys.

    The graph only stores constraints; it never knows which keys are actually
    present in a container. An edge ``precede(v, w)`` means w must appear no
    earlier than v. Edges are never deduplicated or removed.

    Traversals start from the keys of the vertex table in ascending key order.
    ``precede(v, w)`` puts v in the table, and every key reached by a
    linearization joins it afterwards, so sinks discovered by one sort become
    roots of the next one.

    The linearization is memoized until the next mutation (``precede`` or
    ``invalidate``), so repeated sorts of an unchanged graph agree.

    Attributes:
        _successors: Vertex table mapping each key to its successors, in
            declaration order.
        _stack: Memoized post-order stack, or None when stale.

    """

    _successors: dict[K, list[K]] = field(default_factory=dict)
    _stack: list[K] | None = field(default=None, repr=False, compare=False)

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[K, K]]) -> PrecedenceGraph[K]:
        """Build a graph from (before, after) pairs.

        Example:
            >>> graph = PrecedenceGraph.from_edges([("a", "b"), ("b", "c")])
            >>> graph.topological_order()
            ['a', 'b', 'c']

        """
        graph: PrecedenceGraph[K] = cls()
        graph.precede_all(edges)
        return graph

    def precede(self, v: K, w: K) -> None:
        """Declare that ``v`` must come before ``w``.

        Self-edges and repeated edges are accepted as-is.
        """
        self._successors.setdefault(v, []).append(w)
        self.invalidate()

    def precede_all(self, edges: Iterable[tuple[K, K]]) -> None:
        """Declare every (before, after) pair of ``edges`` in order."""
        for v, w in edges:
            self.precede(v, w)

    def invalidate(self) -> None:
        """Drop the memoized linearization."""
        if self._stack is not None:
            logger.debug("Dropping memoized linearization")
        self._stack = None

    def successors(self, key: K) -> tuple[K, ...]:
        """Keys declared to come after ``key``, in declaration order.

        Unknown keys have no successors; the graph is not modified.
        """
        return tuple(self._successors.get(key, ()))

    @property
    def vertices(self) -> tuple[K, ...]:
        """Every key appearing on either side of an edge, in first-seen order."""
        seen: dict[K, None] = {}
        for key, successors in self._successors.items():
            seen.setdefault(key)
            for successor in successors:
                seen.setdefault(successor)
        return tuple(seen)

    def edges(self) -> Iterator[tuple[K, K]]:
        """Iterate over declared edges, duplicates included."""
        for key, successors in self._successors.items():
            for successor in successors:
                yield key, successor

    def _roots(self) -> list[K]:
        try:
            return sorted(self._successors)  # type: ignore[type-var]
        except TypeError:
            logger.debug("Keys are not mutually orderable, visiting in insertion order")
            return list(self._successors)

    def find_cycle(self) -> list[K] | None:
        """Return one cycle of the graph (first key repeated last), or None."""
        return find_cycle(self._successors, self._roots())

    def has_cycle(self) -> bool:
        """Check if the graph contains a cycle."""
        return self.find_cycle() is not None

    def topological_sort(self, *, strict: bool = False) -> list[K]:
        """Linearize the graph into a stack.

        The last element of the returned list is the key that must come first;
        popping the list empty yields the topological order. The list is a
        fresh copy and may be consumed freely.

        Args:
            strict: Raise instead of silently producing a best-effort order
                when the graph has a cycle.

        Returns:
            The post-order stack over all vertices.

        Raises:
            CycleError: If ``strict`` is set and the graph contains a cycle.

        """
        if strict:
            cycle = self.find_cycle()
            if cycle is not None:
                raise CycleError(cycle)

        if self._stack is None:
            self._stack = linearize(self._successors, self._roots())
            for key in self._stack:
                self._successors.setdefault(key, [])
            logger.debug(f"Linearized {len(self._stack)} vertices")
        else:
            logger.debug("Reusing memoized linearization")

        return list(self._stack)

    def topological_order(self, *, strict: bool = False) -> list[K]:
        """Return vertices in topological order (earliest-required first)."""
        return self.topological_sort(strict=strict)[::-1]

    def __len__(self) -> int:
        """Return the number of vertices in the graph."""
        return len(self.vertices)

    def __contains__(self, key: object) -> bool:
        """Check if a key appears on either side of an edge."""
        return key in self.vertices
