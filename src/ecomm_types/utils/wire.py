"""Helpers shared by the protocol buffer conversions."""

from typing import Any


def present(**fields: Any) -> dict[str, Any]:
    """Keyword arguments for a message constructor, minus the unset values.

    protean hands back ``None`` for fields that were never given a value,
    while proto3 reads the same fields back as ``""`` or ``[]``. Leaving
    them out of the constructor keeps both sides describing the same message.
    """
    return {name: value for name, value in fields.items() if value is not None}
