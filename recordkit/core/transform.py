from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .errors import InvalidArgumentError, non_configurable, read_only
from .kinds import ARRAY, OBJECT, is_container, kind_of
from .record import FieldDescriptor, FrozenRecord

# id(original) -> (original, copy). Holding the original keeps its id from
# being reused by another object while the walk is in progress.
Visited = Dict[int, Tuple[Any, Any]]


class FrozenList(Sequence):
    """
    Read-only sequence produced by deep_freeze.
    """

    def __init__(self, items: Optional[List[Any]] = None):
        self._items: List[Any] = list(items) if items is not None else []

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __setitem__(self, index, value) -> None:
        raise read_only(str(index))

    def __delitem__(self, index) -> None:
        raise non_configurable(str(index))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (FrozenList, list, tuple)):
            return list(self._items) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return "FrozenList({!r})".format(self._items)


def _field_names(value: Any) -> List[str]:
    if isinstance(value, FrozenRecord):
        return value.all_keys()
    return list(value.keys())


def deep_freeze(value: Any) -> Any:
    """
    Return a fully immutable copy of a nested record or sequence.

    The input is left untouched. Shared sub-objects stay shared in the copy
    and cycles terminate.
    """
    if not is_container(value):
        raise InvalidArgumentError(code="argument.not_object", message="Input must be an object")
    return _freeze(value, {})


def _freeze(value: Any, visited: Visited) -> Any:
    kind = kind_of(value)
    if kind not in (OBJECT, ARRAY):
        return value
    hit = visited.get(id(value))
    if hit is not None:
        return hit[1]

    if kind == OBJECT:
        out = FrozenRecord()
        visited[id(value)] = (value, out)
        for k in _field_names(value):
            enumerable = True
            if isinstance(value, FrozenRecord):
                desc = value.descriptor(k)
                enumerable = desc.enumerable if desc is not None else True
            out._define(
                k,
                _freeze(value[k], visited),
                FieldDescriptor(writable=False, enumerable=enumerable, configurable=False),
            )
        return out

    frozen = FrozenList()
    visited[id(value)] = (value, frozen)
    for item in value:
        frozen._items.append(_freeze(item, visited))
    return frozen


def deep_clone(value: Any, visited: Optional[Visited] = None) -> Any:
    """
    Return an independent mutable copy of a nested record/sequence graph.

    Mappings (FrozenRecord included, hidden fields too) become dicts and
    sequences become lists. The visited map is keyed by object identity and
    is filled before recursing, so cycles terminate and shared sub-objects
    map to a single shared clone. A non-container root is rejected; nested
    scalars are returned unchanged.
    """
    if visited is None:
        visited = {}
    elif not isinstance(visited, dict):
        raise InvalidArgumentError(code="argument.invalid_visited", message="Second argument must be a dict")
    if not is_container(value):
        raise InvalidArgumentError(code="argument.not_object", message="Argument must be an object")
    return _clone(value, visited)


def _clone(value: Any, visited: Visited) -> Any:
    kind = kind_of(value)
    if kind not in (OBJECT, ARRAY):
        return value
    hit = visited.get(id(value))
    if hit is not None:
        return hit[1]

    if kind == OBJECT:
        out: Dict[str, Any] = {}
        visited[id(value)] = (value, out)
        for k in _field_names(value):
            out[k] = _clone(value[k], visited)
        return out

    items: List[Any] = []
    visited[id(value)] = (value, items)
    for item in value:
        items.append(_clone(item, visited))
    return items
