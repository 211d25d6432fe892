from __future__ import annotations

from pathlib import Path


def _package_dir(package_name: str) -> Path:
    """
    Return the on-disk directory for an imported package.

    Note:
    This assumes a filesystem-backed install (regular or editable).
    """
    module = __import__(package_name, fromlist=["__file__"])
    p = getattr(module, "__file__", None)
    if not isinstance(p, str) or not p:
        raise RuntimeError(f"Cannot resolve package directory for: {package_name}")
    return Path(p).resolve().parent


def contracts_dir() -> Path:
    """
    Directory that contains shipped contract artifacts (JSON Schemas, sample records).
    """
    return _package_dir("recordkit.contracts")


def trace_event_schema_path() -> Path:
    return contracts_dir() / "trace_event.schema.json"


def person_schema_path() -> Path:
    return contracts_dir() / "person.schema.yml"


def person_example_path() -> Path:
    return contracts_dir() / "person.example.yml"
