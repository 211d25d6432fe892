from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Optional

STRING = "string"
NUMBER = "number"
BOOLEAN = "boolean"
OBJECT = "object"
ARRAY = "array"
NULL = "null"

KINDS = frozenset([STRING, NUMBER, BOOLEAN, OBJECT, ARRAY, NULL])


def kind_of(value: Any) -> Optional[str]:
    """
    Map a runtime value onto the closed set of kind tags.

    Returns None for values outside the set (callables, bytes, sets, ...).
    """
    if value is None:
        return NULL
    # bool is a subclass of int; check it first.
    if isinstance(value, bool):
        return BOOLEAN
    if isinstance(value, (int, float)):
        return NUMBER
    if isinstance(value, str):
        return STRING
    if isinstance(value, Mapping):
        return OBJECT
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return ARRAY
    return None


def is_number(value: Any) -> bool:
    return kind_of(value) == NUMBER


def is_container(value: Any) -> bool:
    return kind_of(value) in (OBJECT, ARRAY)
