import logging
import tomllib
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import ValidationError

from ._models import ContainerKind, SortDocument

logger = logging.getLogger(__name__)


class DocumentError(Exception):
    """Error reading a sort document."""


def load_sort_document(path: Path) -> SortDocument:
    """Load and validate a sort document from a TOML file.

    Args:
        path: Path to the TOML document.

    Returns:
        The validated document.

    Raises:
        DocumentError: If the file is not valid TOML or does not describe a
            container and its edges.

    """
    with path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {path}: {e}"
            raise DocumentError(msg) from e

    try:
        document = SortDocument.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid sort document {path}:\n{e}"
        raise DocumentError(msg) from e

    logger.debug(f"Loaded {document.kind} document with {len(document.edges)} edges from {path}")
    return document


def _serialize_result(kind: ContainerKind, result: Sequence[Any]) -> dict[str, Any]:
    if kind.is_mapping:
        return {"kind": str(kind), "result": [{"key": key, "value": value} for key, value in result]}
    return {"kind": str(kind), "result": list(result)}


def export_result_to_toml(kind: ContainerKind, result: Sequence[Any], output_path: Path) -> None:
    """Write a sorted result to a TOML file.

    Mapping results are written as an array of ``{key, value}`` tables,
    sequence results as a plain array.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("wb") as f:
        tomli_w.dump(_serialize_result(kind, result), f)
    logger.debug(f"Exported {len(result)} elements to {output_path}")
