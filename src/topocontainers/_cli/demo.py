"""Demonstration scenarios printed by ``topocontainers demo``."""

from collections.abc import Callable, Iterator

from topocontainers._adapters import (
    TopologicalArray,
    TopologicalDict,
    TopologicalList,
    TopologicalSortedDict,
)
from topocontainers._format import format_sequence
from topocontainers._graph import PrecedenceGraph, drain

# F before C, F before A, E before A, ...
EDGES = [("F", "C"), ("F", "A"), ("E", "A"), ("E", "B"), ("C", "D"), ("D", "B")]

VALUES = {"A": 0, "B": 1, "C": 2, "D": 3, "E": 4, "F": 5, "X": 100, "Y": 101, "Z": 102}


def bare_stack() -> Iterator[tuple[str, str]]:
    graph: PrecedenceGraph[str] = PrecedenceGraph.from_edges(EDGES)
    consumed: list[str] = []
    drain(graph.topological_sort(), consumed.append)
    yield "graph", format_sequence(consumed)


def sorted_dict() -> Iterator[tuple[str, str]]:
    d: TopologicalSortedDict[str, int] = TopologicalSortedDict()
    for v, w in EDGES:
        d.precede(v, w)
    d.update(VALUES)
    yield "sorted_dict", format_sequence(d.sort())


def insertion_dict() -> Iterator[tuple[str, str]]:
    d: TopologicalDict[str, int] = TopologicalDict()
    for v, w in EDGES:
        d.precede(v, w)
    d.update(VALUES)
    d.precede("Z", "F")
    yield "dict, Z before F", format_sequence(d.sort())


def growing_list() -> Iterator[tuple[str, str]]:
    lst: TopologicalList[str] = TopologicalList()
    for v, w in EDGES:
        lst.precede(v, w)
    lst.extend(["A"] * 3 + ["B"] * 2 + ["C"] * 2 + ["D"] * 2 + ["E"] * 2 + ["F"] * 3)
    # Z is constrained but not in the list yet
    lst.precede("Z", "F")
    yield "list, Z absent", format_sequence(lst.sort())

    lst.append("Z")
    yield "list, Z appended", format_sequence(lst.sort())

    numbers = TopologicalList(range(10))
    for v, w in [(9, 0), (8, 1), (7, 2), (6, 3), (5, 4)]:
        numbers.precede(v, w)
    yield "list of integers", format_sequence(numbers.sort())


def fixed_array() -> Iterator[tuple[str, str]]:
    array = TopologicalArray(["A", "B", "C", "D", "E", "F", "X", "Y", "Z"])
    for v, w in EDGES:
        array.precede(v, w)
    yield "array", format_sequence(array.sort())


SCENARIOS: list[Callable[[], Iterator[tuple[str, str]]]] = [
    bare_stack,
    sorted_dict,
    insertion_dict,
    growing_list,
    fixed_array,
]


def run_demo() -> list[tuple[str, str]]:
    """Run every scenario and return (title, rendered result) rows."""
    return [row for scenario in SCENARIOS for row in scenario()]
