"""Containers that can be sorted by a separately declared precedence graph.

Each adapter owns one plain container and one ``PrecedenceGraph``. The
container behaves like the builtin it wraps; ``sort()`` returns a new,
topologically ordered copy of its contents and never reorders it in place.
Any mutation of the container drops the graph's memoized linearization.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterable, Iterator, MutableMapping, MutableSequence, Sequence
from typing import Any, Generic, TypeVar, overload

from ._graph import PrecedenceGraph
from ._merge import merge_elements, merge_fixed, merge_items

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
T = TypeVar("T", bound=Hashable)


class TopologicalAdapter(ABC, Generic[K]):
    """Base class pairing a container with a precedence graph."""

    graph: PrecedenceGraph[K]

    def __init__(self) -> None:
        self.graph = PrecedenceGraph()

    def precede(self, v: K, w: K) -> None:
        """Declare that ``v`` must come before ``w``.

        Neither key is added to the container.
        """
        self.graph.precede(v, w)

    def _touched(self) -> None:
        self.graph.invalidate()

    @abstractmethod
    def __len__(self) -> int: ...

    @abstractmethod
    def sort(self, *, strict: bool = False) -> Sequence[Any]:
        """Return the container contents ordered by the precedence graph."""


class TopologicalDict(TopologicalAdapter[K], MutableMapping[K, V]):
    """A mapping sortable by precedence; unconstrained keys keep insertion order.

    Example:
        >>> d = TopologicalDict(a=1, b=2, x=3)
        >>> d.precede("b", "a")
        >>> d.sort()
        [('b', 2), ('a', 1), ('x', 3)]

    """

    def __init__(self, *args: Any, **kwargs: V) -> None:
        super().__init__()
        self._data: dict[K, V] = dict(*args, **kwargs)

    def __getitem__(self, key: K) -> V:
        return self._data[key]

    def __setitem__(self, key: K, value: V) -> None:
        self._data[key] = value
        self._touched()

    def __delitem__(self, key: K) -> None:
        del self._data[key]
        self._touched()

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"

    def sort(self, *, strict: bool = False) -> list[tuple[K, V]]:
        """Return (key, value) pairs ordered by the precedence graph.

        Keys reached by the graph come first, in topological order; the rest
        follow in this mapping's iteration order.

        Raises:
            CycleError: If ``strict`` is set and the graph contains a cycle.

        """
        return merge_items(self.graph.topological_sort(strict=strict), self)


class TopologicalSortedDict(TopologicalDict[K, V]):
    """A mapping iterated in ascending key order, sortable by precedence.

    Unconstrained keys trail the result in ascending key order.
    """

    def __iter__(self) -> Iterator[K]:
        return iter(sorted(self._data))  # type: ignore[type-var]


class TopologicalList(TopologicalAdapter[T], MutableSequence[T]):
    """A list sortable by precedence, duplicates allowed.

    All occurrences of a key move together to the key's position in the
    topological order.

    Example:
        >>> lst = TopologicalList(["a", "b", "a"])
        >>> lst.precede("b", "a")
        >>> lst.sort()
        ['b', 'a', 'a']

    """

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        super().__init__()
        self._data: list[T] = list(iterable)

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> list[T]: ...
    def __getitem__(self, index: int | slice) -> T | list[T]:
        return self._data[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        self._data[index] = value
        self._touched()

    def __delitem__(self, index: int | slice) -> None:
        del self._data[index]
        self._touched()

    def __len__(self) -> int:
        return len(self._data)

    def insert(self, index: int, value: T) -> None:
        self._data.insert(index, value)
        self._touched()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TopologicalList):
            return self._data == other._data
        if isinstance(other, list):
            return self._data == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def sort(self, *, strict: bool = False) -> list[T]:
        """Return the elements ordered by the precedence graph.

        Raises:
            CycleError: If ``strict`` is set and the graph contains a cycle.

        """
        return merge_elements(self.graph.topological_sort(strict=strict), self._data)


class TopologicalArray(TopologicalAdapter[T], Sequence[T]):
    """A fixed-capacity sequence sortable by precedence.

    Items can be reassigned but the array can never grow or shrink, so the
    sorted result always has exactly ``capacity`` elements.

    Args:
        iterable: Initial elements.
        capacity: Fixed size. Defaults to the number of initial elements.
        fill: Value padding the array up to ``capacity``.

    Raises:
        ValueError: If the initial elements do not fit ``capacity`` and no
            ``fill`` is given, or if there are more of them than ``capacity``.

    """

    def __init__(self, iterable: Iterable[T] = (), *, capacity: int | None = None, fill: T | None = None) -> None:
        super().__init__()
        data = list(iterable)
        if capacity is None:
            capacity = len(data)
        if len(data) > capacity or (len(data) < capacity and fill is None):
            msg = f"{type(self).__name__} of capacity {capacity} cannot hold {len(data)} initial elements"
            raise ValueError(msg)
        data.extend([fill] * (capacity - len(data)))  # type: ignore[list-item]
        self._data: list[T] = data

    @property
    def capacity(self) -> int:
        return len(self._data)

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> list[T]: ...
    def __getitem__(self, index: int | slice) -> T | list[T]:
        return self._data[index]

    def __setitem__(self, index: int | slice, value: Any) -> None:
        if isinstance(index, slice):
            replaced = list(self._data)
            replaced[index] = value
            if len(replaced) != len(self._data):
                msg = f"{type(self).__name__} cannot be resized"
                raise TypeError(msg)
            self._data = replaced
        else:
            self._data[index] = value
        self._touched()

    def __delitem__(self, index: int | slice) -> None:
        msg = f"{type(self).__name__} cannot be resized"
        raise TypeError(msg)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def sort(self, *, strict: bool = False) -> tuple[T, ...]:
        """Return a tuple of ``capacity`` elements ordered by the precedence graph.

        Raises:
            CycleError: If ``strict`` is set and the graph contains a cycle.

        """
        return merge_fixed(self.graph.topological_sort(strict=strict), self._data, self.capacity)
