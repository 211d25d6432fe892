from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, List

import jsonschema
import yaml

from .errors import InvalidArgumentError, SchemaError
from .kinds import KINDS, kind_of
from .record import FrozenRecord
from .transform import deep_clone


def _require_object(value: Any, what: str) -> None:
    if not isinstance(value, Mapping):
        raise InvalidArgumentError(code="argument.not_object", message=f"{what} argument must be an object")


def check_schema(schema: Mapping[str, Any]) -> Dict[str, str]:
    """
    Ensure every tag in a field -> kind mapping belongs to the closed kind set.
    """
    _require_object(schema, "Second")
    bad = {str(k): repr(v) for k, v in schema.items() if not isinstance(k, str) or v not in KINDS}
    if bad:
        raise SchemaError(
            code="schema.invalid",
            message="Schema tags must be one of: {}".format(", ".join(sorted(KINDS))),
            data={"fields": bad},
        )
    return dict(schema)


def _has_own(record: Mapping[str, Any], name: str) -> bool:
    if isinstance(record, FrozenRecord):
        return record.has_own(name)
    return name in record


def validate(record: Any, schema: Any) -> bool:
    """
    True iff every schema field exists on `record` with the expected kind tag.

    Extra fields on the record are ignored. A tag outside the kind set never
    matches, so it yields False; load_schema and to_json_schema reject it.
    """
    _require_object(record, "First")
    _require_object(schema, "Second")
    for name, tag in schema.items():
        if not _has_own(record, name):
            return False
        if kind_of(record[name]) != tag:
            return False
    return True


def to_json_schema(schema: Mapping[str, Any]) -> Dict[str, Any]:
    tags = check_schema(schema)
    return {
        "$schema": "https://json-schema.org/draft/2020-12/schema",
        "type": "object",
        "properties": {name: {"type": tag} for name, tag in tags.items()},
        "required": list(tags.keys()),
    }


def explain(record: Any, schema: Any) -> List[str]:
    """
    Validates `record` and returns a list of error strings (empty means valid).
    """
    _require_object(record, "First")
    json_schema = to_json_schema(schema)
    # jsonschema only understands dict/list containers.
    instance = deep_clone(record)
    validator = jsonschema.Draft202012Validator(json_schema)
    return [e.message for e in sorted(validator.iter_errors(instance), key=str)]


def read_document(path: Path) -> Any:
    if path.suffix.lower() in (".yml", ".yaml"):
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    if path.suffix.lower() == ".json":
        return json.loads(path.read_text(encoding="utf-8"))
    raise InvalidArgumentError(code="document.unsupported", message=f"Unsupported document extension: {path.name}")


def load_schema(path: Path) -> Dict[str, str]:
    doc = read_document(path)
    if not isinstance(doc, Mapping):
        raise SchemaError(code="schema.invalid", message=f"Schema file must contain a mapping: {path}")
    return check_schema(doc)
