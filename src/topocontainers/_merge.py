"""Merge a linearization stack with the actual contents of a container.

Every function here works in two phases that never interleave:

1. Stack consumption: keys are popped top-first and each key present in the
   container is emitted at that point, all of its occurrences together.
2. Unclaimed sweep: the container is walked in its native order and every key
   the stack did not claim is emitted, again with all of its occurrences.

Keys known to the graph but absent from the container contribute nothing, so
the result always has exactly as many elements as the container.
"""

import logging
from collections import Counter
from collections.abc import Hashable, Mapping, MutableSequence, Sequence
from typing import TypeVar

from ._graph import drain

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
T = TypeVar("T", bound=Hashable)


def merge_items(stack: MutableSequence[K], items: Mapping[K, V]) -> list[tuple[K, V]]:
    """Order the (key, value) pairs of a mapping by a linearization stack.

    Args:
        stack: Post-order stack from the linearizer. It is consumed.
        items: The mapping to order. Its iteration order decides the position
            of keys unknown to the graph.

    Returns:
        One (key, value) pair per mapping key.

    Example:
        >>> merge_items(["b", "a"], {"a": 1, "b": 2, "x": 3})
        [('a', 1), ('b', 2), ('x', 3)]

    """
    result: list[tuple[K, V]] = []
    copied: set[K] = set()

    def _emit(key: K) -> None:
        if key in items and key not in copied:
            result.append((key, items[key]))
            copied.add(key)

    drain(stack, _emit)
    ordered = len(result)

    for key, value in items.items():
        if key not in copied:
            copied.add(key)
            result.append((key, value))

    logger.debug(f"Merged {ordered} constrained and {len(result) - ordered} unconstrained keys")
    return result


def merge_elements(stack: MutableSequence[T], elements: Sequence[T]) -> list[T]:
    """Order the elements of a sequence by a linearization stack.

    Duplicates stay grouped: every occurrence of a key is emitted where the
    key is first claimed, either by the stack or by the sweep.

    Args:
        stack: Post-order stack from the linearizer. It is consumed.
        elements: The sequence to order; duplicates allowed.

    Returns:
        A new list with the same elements (and multiplicities) as ``elements``.

    Example:
        >>> merge_elements(["b", "a"], ["x", "b", "a", "b"])
        ['a', 'b', 'b', 'x']

    """
    counts = Counter(elements)
    result: list[T] = []
    copied: set[T] = set()

    def _emit(key: T) -> None:
        if key not in copied:
            result.extend([key] * counts[key])
            copied.add(key)

    drain(stack, _emit)
    ordered = len(result)

    for key in elements:
        if key not in copied:
            copied.add(key)
            result.extend([key] * counts[key])

    logger.debug(f"Merged {ordered} constrained and {len(result) - ordered} unconstrained elements")
    return result


def merge_fixed(stack: MutableSequence[T], elements: Sequence[T], capacity: int) -> tuple[T, ...]:
    """Order a fixed-size sequence into a destination of the same size.

    Args:
        stack: Post-order stack from the linearizer. It is consumed.
        elements: The source sequence.
        capacity: Size of the destination.

    Returns:
        A tuple of exactly ``capacity`` elements.

    Raises:
        ValueError: If ``elements`` does not hold exactly ``capacity`` elements.

    """
    if len(elements) != capacity:
        msg = f"Expected {capacity} elements, got {len(elements)}"
        raise ValueError(msg)

    destination: list[T | None] = [None] * capacity
    index = 0
    for key in merge_elements(stack, elements):
        destination[index] = key
        index += 1
    return tuple(destination)  # type: ignore[arg-type]
