from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, Callable, Iterator

from .errors import InvalidArgumentError

Observer = Callable[[str, str], None]


class ObservedRecord(MutableMapping):
    """
    Mapping proxy that reports each field read ("get") and write ("set")
    to a callback before delegating to the wrapped record.
    """

    def __init__(self, target: MutableMapping, callback: Observer):
        self._target = target
        self._callback = callback

    @property
    def target(self) -> MutableMapping:
        return self._target

    def __getitem__(self, key: str) -> Any:
        self._callback(key, "get")
        return self._target[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._callback(key, "set")
        self._target[key] = value

    def __delitem__(self, key: str) -> None:
        del self._target[key]

    def __contains__(self, key: object) -> bool:
        # Membership is not a read; no callback.
        return key in self._target

    def __iter__(self) -> Iterator[str]:
        return iter(self._target)

    def __len__(self) -> int:
        return len(self._target)

    def __repr__(self) -> str:
        return "ObservedRecord({!r})".format(self._target)


def observe(record: Any, callback: Any) -> ObservedRecord:
    if not isinstance(record, Mapping):
        raise InvalidArgumentError(code="argument.not_object", message="First parameter must be an object")
    if not callable(callback):
        raise InvalidArgumentError(code="argument.not_callable", message="Second parameter must be a function")
    return ObservedRecord(record, callback)
