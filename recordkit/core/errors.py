from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RecordError(Exception):
    code: str
    message: str
    data: dict[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class ReadOnlyFieldError(RecordError):
    pass


class NonConfigurableFieldError(RecordError):
    pass


class InvalidArgumentError(RecordError):
    pass


class InvalidAmountError(InvalidArgumentError):
    pass


class InvalidTargetError(RecordError):
    pass


class InsufficientFundsError(RecordError):
    pass


class SchemaError(RecordError):
    pass


def read_only(field: str) -> ReadOnlyFieldError:
    return ReadOnlyFieldError(
        code="field.read_only",
        message=f"{field} property is read-only.",
        data={"field": field},
    )


def non_configurable(field: str) -> NonConfigurableFieldError:
    return NonConfigurableFieldError(
        code="field.non_configurable",
        message=f"{field} property is non-configurable.",
        data={"field": field},
    )
