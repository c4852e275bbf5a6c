"""Identifier formatting helpers."""

from typing import Any


def format_id(prefix: str, id: Any) -> str:
    """Return ``"<prefix>-<id>"``.

    Neither part is escaped, so a prefix that already contains ``-``
    produces an ambiguous result.
    """
    return f"{prefix}-{id}"
