"""Topological sorting adapters for Python containers."""

__all__ = [
    "ContainerKind",
    "CycleError",
    "DocumentError",
    "PrecedenceGraph",
    "SortDocument",
    "StrEnumWithDoc",
    "TopologicalAdapter",
    "TopologicalArray",
    "TopologicalDict",
    "TopologicalList",
    "TopologicalSortedDict",
    "drain",
    "export_result_to_toml",
    "find_cycle",
    "format_pair",
    "format_sequence",
    "linearize",
    "load_sort_document",
    "merge_elements",
    "merge_fixed",
    "merge_items",
]

from ._adapters import (
    TopologicalAdapter,
    TopologicalArray,
    TopologicalDict,
    TopologicalList,
    TopologicalSortedDict,
)
from ._format import format_pair, format_sequence
from ._graph import CycleError, PrecedenceGraph, drain, find_cycle, linearize
from ._io import DocumentError, export_result_to_toml, load_sort_document
from ._merge import merge_elements, merge_fixed, merge_items
from ._models import ContainerKind, SortDocument
from ._str_enum_with_doc import StrEnumWithDoc
