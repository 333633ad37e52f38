"""Display helpers for sorted results."""

from collections.abc import Iterable


def format_pair(pair: tuple[object, object]) -> str:
    """Render a (key, value) pair as ``(key, value)``."""
    key, value = pair
    return f"({key}, {value})"


def format_sequence(seq: Iterable[object]) -> str:
    """Render a sorted result as ``[a, b, c]``.

    Pairs are rendered with ``format_pair``.

    Example:
        >>> format_sequence([("F", 5), ("E", 4)])
        '[(F, 5), (E, 4)]'

    """
    parts = [format_pair(item) if isinstance(item, tuple) and len(item) == 2 else str(item) for item in seq]  # noqa: PLR2004
    return f"[{', '.join(parts)}]"
