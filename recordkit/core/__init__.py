from .errors import (
    InsufficientFundsError,
    InvalidAmountError,
    InvalidArgumentError,
    InvalidTargetError,
    NonConfigurableFieldError,
    ReadOnlyFieldError,
    RecordError,
    SchemaError,
)
from .kinds import KINDS, kind_of
from .record import FieldDescriptor, FrozenRecord, define_field, delete_field, freeze_record
from .updater import apply_updates
from .account import Account, transfer
from .transform import FrozenList, deep_clone, deep_freeze
from .schema import explain, load_schema, to_json_schema, validate
from .observe import ObservedRecord, observe
from .product import total_price
from .runtime_context import RuntimeContext

__all__ = [
  "RecordError",
  "ReadOnlyFieldError",
  "NonConfigurableFieldError",
  "InvalidArgumentError",
  "InvalidAmountError",
  "InvalidTargetError",
  "InsufficientFundsError",
  "SchemaError",
  "KINDS",
  "kind_of",
  "FieldDescriptor",
  "FrozenRecord",
  "define_field",
  "delete_field",
  "freeze_record",
  "apply_updates",
  "Account",
  "transfer",
  "FrozenList",
  "deep_clone",
  "deep_freeze",
  "validate",
  "explain",
  "to_json_schema",
  "load_schema",
  "ObservedRecord",
  "observe",
  "total_price",
  "RuntimeContext",
]
