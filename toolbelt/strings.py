"""String helpers."""

from __future__ import annotations

from typing import Iterable, List


def merge(items: Iterable[str], delimiter: str) -> str:
    """Join ``items`` with ``delimiter`` between consecutive elements."""

    return delimiter.join(items)


def split(text: str, delimiter: str) -> List[str]:
    """Split ``text`` on ``delimiter``, dropping empty pieces.

    ``split("a,,b,", ",")`` gives ``["a", "b"]``. An empty delimiter leaves
    the text whole.
    """

    if not delimiter:
        return [text] if text else []
    return [piece for piece in text.split(delimiter) if piece]


def starts_with(text: str, prefix: str) -> bool:
    return text.startswith(prefix)


def ends_with(text: str, suffix: str) -> bool:
    return text.endswith(suffix)
