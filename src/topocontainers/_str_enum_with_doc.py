"""Module providing a base class for string enums with docstrings."""

from enum import StrEnum
from typing import Self


class StrEnumWithDoc(StrEnum):
    """Base class for string enums whose members carry a description.

    Members are declared as ``NAME = "value", "description"``; the description
    becomes the member's ``__doc__`` and is shown in CLI help.
    """

    def __new__(cls, value: str, doc: str = "") -> Self:
        """Create a new enum member with a docstring."""
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.__doc__ = doc
        return obj
