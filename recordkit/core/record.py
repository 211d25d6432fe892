from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterator, Optional

from .errors import InvalidArgumentError, non_configurable, read_only


@dataclass(frozen=True)
class FieldDescriptor:
    writable: bool = True
    enumerable: bool = True
    configurable: bool = True


class FrozenRecord(MutableMapping):
    """
    Ordered record with a per-field descriptor side table.

    Notes:
    - Assigning to a non-writable field raises ReadOnlyFieldError.
    - Deleting a non-configurable field raises NonConfigurableFieldError.
    - Iteration, len() and equality only see enumerable fields; item access
      and `in` also see hidden ones.
    - Fields added after freeze() stay writable until frozen again.
    """

    def __init__(self, fields: Optional[Mapping[str, Any]] = None):
        self._values: Dict[str, Any] = {}
        self._descriptors: Dict[str, FieldDescriptor] = {}
        if fields is not None:
            for k, v in fields.items():
                self._define(k, v, FieldDescriptor())

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __setitem__(self, key: str, value: Any) -> None:
        desc = self._descriptors.get(key)
        if desc is not None and not desc.writable:
            raise read_only(key)
        if desc is None:
            self._descriptors[key] = FieldDescriptor()
        self._values[key] = value

    def __delitem__(self, key: str) -> None:
        desc = self._descriptors.get(key)
        if desc is None:
            raise KeyError(key)
        if not desc.configurable:
            raise non_configurable(key)
        del self._values[key]
        del self._descriptors[key]

    def __iter__(self) -> Iterator[str]:
        return iter([k for k, d in self._descriptors.items() if d.enumerable])

    def __len__(self) -> int:
        return sum(1 for d in self._descriptors.values() if d.enumerable)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __repr__(self) -> str:
        return "FrozenRecord({!r})".format(self.to_dict())

    def has_own(self, name: str) -> bool:
        return name in self._descriptors

    def descriptor(self, name: str) -> Optional[FieldDescriptor]:
        return self._descriptors.get(name)

    def all_keys(self) -> list[str]:
        """Every field name, hidden ones included, in definition order."""
        return list(self._descriptors.keys())

    def is_frozen(self, name: str) -> bool:
        desc = self._descriptors.get(name)
        return desc is not None and not desc.writable

    def freeze(self) -> "FrozenRecord":
        for k, d in self._descriptors.items():
            self._descriptors[k] = replace(d, writable=False, configurable=False)
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {k: self._values[k] for k in self}

    def _define(self, key: str, value: Any, desc: FieldDescriptor) -> None:
        self._values[key] = value
        self._descriptors[key] = desc

    def _put(self, key: str, value: Any) -> None:
        # Writes through the descriptor table; only for the updater exemption
        # path and for building frozen copies.
        if key not in self._descriptors:
            self._descriptors[key] = FieldDescriptor()
        self._values[key] = value


def _require_name(name: Any) -> str:
    if not isinstance(name, str) or not name:
        raise InvalidArgumentError(
            code="argument.invalid_name",
            message="Property name must be a non-empty string",
            data={"name": repr(name)},
        )
    return name


def as_record(record: Any) -> FrozenRecord:
    if isinstance(record, FrozenRecord):
        return record
    if isinstance(record, Mapping):
        return FrozenRecord(record)
    raise InvalidArgumentError(code="argument.not_object", message="Input must be an object")


def freeze_record(record: Any) -> FrozenRecord:
    """
    Mark every currently present field non-writable and non-configurable.

    A FrozenRecord is frozen in place; a plain mapping is wrapped first.
    """
    return as_record(record).freeze()


def define_field(
    record: FrozenRecord,
    name: str,
    value: Any,
    *,
    writable: bool = True,
    enumerable: bool = True,
    configurable: bool = True,
) -> FrozenRecord:
    if not isinstance(record, FrozenRecord):
        raise InvalidArgumentError(code="argument.not_record", message="define_field requires a FrozenRecord")
    _require_name(name)
    existing = record.descriptor(name)
    if existing is not None and not existing.configurable:
        raise non_configurable(name)
    record._define(name, value, FieldDescriptor(writable=writable, enumerable=enumerable, configurable=configurable))
    return record


def delete_field(record: Any, name: Any) -> None:
    """
    Delete `name` from `record`. Missing fields are ignored.
    """
    if not isinstance(record, MutableMapping):
        raise InvalidArgumentError(code="argument.not_object", message="Invalid object")
    _require_name(name)
    if isinstance(record, FrozenRecord):
        desc = record.descriptor(name)
        if desc is None:
            return
        if not desc.configurable:
            raise non_configurable(name)
    elif name not in record:
        return
    del record[name]
