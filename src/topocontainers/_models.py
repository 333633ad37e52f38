"""Pydantic models describing sort documents."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ._adapters import (
    TopologicalAdapter,
    TopologicalArray,
    TopologicalDict,
    TopologicalList,
    TopologicalSortedDict,
)
from ._str_enum_with_doc import StrEnumWithDoc

Key = str | int


class ContainerKind(StrEnumWithDoc):
    """Container shapes a sort document can describe."""

    DICT = "dict", "Mapping sorted with unconstrained keys in insertion order"
    SORTED_DICT = "sorted_dict", "Mapping sorted with unconstrained keys in ascending order"
    LIST = "list", "Sequence with duplicates, occurrences grouped per key"
    ARRAY = "array", "Fixed-size sequence, result has exactly the same size"

    @property
    def is_mapping(self) -> bool:
        return self in {ContainerKind.DICT, ContainerKind.SORTED_DICT}


class SortDocument(BaseModel):
    """A container together with the precedence edges to sort it by.

    Mapping kinds take ``values``; sequence kinds take ``items``.
    """

    model_config = ConfigDict(extra="forbid")

    kind: ContainerKind = ContainerKind.LIST
    edges: list[tuple[Key, Key]] = Field(default_factory=list)
    items: list[Key] | None = None
    values: dict[str, Any] | None = None

    @model_validator(mode="after")
    def _check_contents(self) -> Self:
        if self.kind.is_mapping:
            if self.items is not None:
                msg = f"'items' is not allowed for kind '{self.kind}', use 'values'"
                raise ValueError(msg)
        elif self.values is not None:
            msg = f"'values' is not allowed for kind '{self.kind}', use 'items'"
            raise ValueError(msg)
        return self

    def build(self) -> TopologicalAdapter[Any]:
        """Create the adapter described by this document, edges declared."""
        adapter: TopologicalAdapter[Any]
        match self.kind:
            case ContainerKind.DICT:
                adapter = TopologicalDict(self.values or {})
            case ContainerKind.SORTED_DICT:
                adapter = TopologicalSortedDict(self.values or {})
            case ContainerKind.LIST:
                adapter = TopologicalList(self.items or [])
            case ContainerKind.ARRAY:
                adapter = TopologicalArray(self.items or [])
        for v, w in self.edges:
            adapter.precede(v, w)
        return adapter
