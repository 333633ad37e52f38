"""Graph algorithms for precedence graph operations."""

from collections.abc import Callable, Hashable, Iterable, Mapping, MutableSequence, Sequence
from typing import TypeVar

T = TypeVar("T", bound=Hashable)
U = TypeVar("U")


class CycleError(ValueError):
    """Raised by strict linearization when the precedence relation has a cycle.

    Attributes:
        cycle: The keys along the cycle, with the first key repeated at the end.

    """

    def __init__(self, cycle: Sequence[object]) -> None:
        self.cycle = list(cycle)
        path = " -> ".join(repr(key) for key in self.cycle)
        super().__init__(f"Cycle detected in precedence graph: {path}")


def linearize(
    successors: Mapping[T, Sequence[T]],
    roots: Iterable[T],
) -> list[T]:
    """Linearize a precedence graph by depth-first post-order.

    Every root is visited in the given order; each key is marked visited before
    its successors are explored, and pushed onto the output once all of them
    have finished. The returned list is a stack: its last element is the key
    that must come first, so popping it empty yields the topological order.

    Cycles do not prevent termination. They only make the order locally
    inconsistent along the cycle.

    Args:
        successors: Mapping from key to the keys that must come after it.
            Keys missing from the mapping have no successors.
        roots: Keys to start traversals from, in visiting order.

    Returns:
        The post-order stack (top of stack is the last element).

    Example:
        >>> stack = linearize({"a": ["b"], "b": ["c"]}, ["a", "b"])
        >>> stack
        ['c', 'b', 'a']
        >>> stack.pop()
        'a'

    """
    visited: set[T] = set()
    stack: list[T] = []

    for root in roots:
        if root in visited:
            continue
        visited.add(root)
        # Work-list of (key, pending successors), equivalent to the recursive walk
        pending = [(root, iter(successors.get(root, ())))]
        while pending:
            key, children = pending[-1]
            for child in children:
                if child not in visited:
                    visited.add(child)
                    pending.append((child, iter(successors.get(child, ()))))
                    break
            else:
                pending.pop()
                stack.append(key)

    return stack


def find_cycle(
    successors: Mapping[T, Sequence[T]],
    roots: Iterable[T],
) -> list[T] | None:
    """Find a cycle reachable from the given roots.

    Args:
        successors: Mapping from key to the keys that must come after it.
        roots: Keys to start the search from.

    Returns:
        The keys along the first cycle found, with the first key repeated at
        the end (``[a, b, a]``), or None if the reachable graph is acyclic.

    Example:
        >>> find_cycle({"a": ["b"], "b": ["a"]}, ["a"])
        ['a', 'b', 'a']
        >>> find_cycle({"a": ["b"]}, ["a"]) is None
        True

    """
    finished: set[T] = set()

    for root in roots:
        if root in finished:
            continue
        path: list[T] = [root]
        on_path = {root}
        pending = [iter(successors.get(root, ()))]
        while pending:
            for child in pending[-1]:
                if child in on_path:
                    return [*path[path.index(child) :], child]
                if child not in finished:
                    path.append(child)
                    on_path.add(child)
                    pending.append(iter(successors.get(child, ())))
                    break
            else:
                pending.pop()
                done = path.pop()
                on_path.discard(done)
                finished.add(done)

    return None


def drain(stack: MutableSequence[U], func: Callable[[U], object]) -> None:
    """Pop every key off ``stack`` (top first) and apply ``func`` to it.

    The stack is left empty.
    """
    while stack:
        func(stack[-1])
        stack.pop()
