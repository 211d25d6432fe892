from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from .errors import InvalidArgumentError, read_only
from .record import FrozenRecord

DEFAULT_EXEMPT_FIELD = "address"


def apply_updates(record: MutableMapping, updates: Mapping[str, Any], *, exempt: str = DEFAULT_EXEMPT_FIELD) -> MutableMapping:
    """
    Apply `updates` to `record` field by field, in order.

    Invariants:
    - the exempt field is always assigned, even when frozen.
    - any other frozen field raises ReadOnlyFieldError and stops the batch;
      earlier assignments in the same batch are kept.
    """
    if not isinstance(record, MutableMapping):
        raise InvalidArgumentError(code="argument.not_object", message="Record must be an object")
    if not isinstance(updates, Mapping):
        raise InvalidArgumentError(code="argument.not_object", message="Updates must be an object")

    for key, value in updates.items():
        if key == exempt:
            if isinstance(record, FrozenRecord):
                record._put(key, value)
            else:
                record[key] = value
        elif isinstance(record, FrozenRecord) and record.is_frozen(key):
            raise read_only(key)
        else:
            record[key] = value
    return record
