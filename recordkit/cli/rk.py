from __future__ import annotations

import argparse
import json
import os
import re
from pathlib import Path

import yaml

from recordkit.contract_store import ContractStore
from recordkit.core.errors import InvalidArgumentError, RecordError
from recordkit.core.record import FrozenRecord
from recordkit.core.runtime_context import RuntimeContext
from recordkit.core.schema import explain, load_schema, read_document, validate
from recordkit.core.transform import deep_clone, deep_freeze
from recordkit.demo import run_demo
from recordkit.resources import contracts_dir
from recordkit.trace.replay import Replay

_ENV_KEY_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _load_dotenv_from_file(path: Path) -> None:
    """
    Minimal dotenv loader.

    - Supports lines like KEY=VALUE (optionally prefixed with 'export ')
    - Ignores empty lines and comments (# ...)
    - Strips single/double quotes around values
    - Does not override already-present environment variables
    """
    if not path.is_file():
        return
    txt = path.read_text(encoding="utf-8", errors="replace")
    for raw_line in txt.splitlines():
        s = raw_line.strip()
        if not s or s.startswith("#"):
            continue
        if s.startswith("export "):
            s = s[len("export ") :].lstrip()
        if "=" not in s:
            continue
        k, v = s.split("=", 1)
        k = k.strip()
        v = v.strip()
        if not k or not _ENV_KEY_RE.match(k):
            continue
        if k in os.environ:
            continue
        if len(v) >= 2 and v[0] == v[-1] and v[0] in ("'", '"'):
            v = v[1:-1]
        os.environ[k] = v


def _maybe_load_dotenv() -> None:
    _load_dotenv_from_file(Path.cwd() / ".env")


def _format_cli_error(e: Exception) -> str:
    """
    Print-friendly error formatting: code/message plus the structured `data`
    payload when present.
    """
    if isinstance(e, RecordError) and isinstance(e.data, dict) and e.data:
        return str(e) + "\n" + json.dumps(e.data, ensure_ascii=False, indent=2, default=repr)
    return str(e)


def _load_record(path: Path):
    doc = read_document(path)
    if not isinstance(doc, (dict, list)):
        raise InvalidArgumentError(
            code="document.not_object",
            message=f"Input must contain an object or array: {path}",
            data={"path": str(path)},
        )
    return doc


def cmd_demo(args: argparse.Namespace) -> int:
    trace = args.trace or os.environ.get("RECORDKIT_TRACE") or None
    ctx = RuntimeContext(
        run_id=args.run_id or os.environ.get("RECORDKIT_RUN_ID") or "run_cli",
        trace_path=Path(trace) if trace else None,
        allow_overdraft=bool(args.allow_overdraft),
    )
    run_demo(ctx)
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    record = _load_record(Path(args.record))
    schema = load_schema(Path(args.schema))
    ok = validate(record, schema)
    errors = [] if ok else explain(record, schema)
    if args.json:
        print(json.dumps({"valid": ok, "errors": errors}, ensure_ascii=False, indent=2))
    elif ok:
        print("OK: record matches schema.")
    else:
        print("Record does not match schema:")
        for msg in errors:
            print("- {}".format(msg))
    return 0 if ok else 1


def cmd_clone(args: argparse.Namespace) -> int:
    value = _load_record(Path(args.input))
    print(json.dumps(deep_clone(value), ensure_ascii=False, indent=2))
    return 0


def cmd_freeze(args: argparse.Namespace) -> int:
    frozen = deep_freeze(_load_record(Path(args.input)))
    fields = frozen.all_keys() if isinstance(frozen, FrozenRecord) else list(range(len(frozen)))
    print(json.dumps({"frozen_fields": fields, "value": deep_clone(frozen)}, ensure_ascii=False, indent=2))
    return 0


def cmd_show_trace(args: argparse.Namespace) -> int:
    events = Replay(Path(args.trace)).select(
        event_type=args.event_type or None,
        field=args.field or None,
        tail=args.tail,
    )
    for e in events:
        print(json.dumps(e, ensure_ascii=False))
    return 0


def cmd_check_trace(args: argparse.Namespace) -> int:
    store = ContractStore(contracts_dir())
    store.load()
    errors = store.validate_jsonl_file("trace_event.schema.json", Path(args.trace))
    if errors:
        print("Trace validation failed:")
        for msg in errors:
            print("- {}".format(msg))
        return 1
    print("OK: trace events validate.")
    return 0


def main(argv=None) -> int:
    if str(os.environ.get("RECORDKIT_DISABLE_DOTENV", "")).strip().lower() not in ("1", "true", "yes"):
        _maybe_load_dotenv()
    parser = argparse.ArgumentParser(prog="rk", description="Record property semantics toolkit")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_demo = sub.add_parser("demo", help="Run the freeze/update/transfer/clone/validate walkthrough")
    p_demo.add_argument("--trace", help="Trace output path (jsonl) (default: $RECORDKIT_TRACE, else disabled)")
    p_demo.add_argument("--run-id", help="Run ID for trace correlation (default: $RECORDKIT_RUN_ID or run_cli)")
    p_demo.add_argument("--allow-overdraft", action="store_true", help="Permit transfers larger than the balance")
    p_demo.set_defaults(func=cmd_demo)

    p_validate = sub.add_parser("validate", help="Validate a record file against a field -> kind schema file")
    p_validate.add_argument("--record", required=True, help="Record path (json|yml|yaml)")
    p_validate.add_argument("--schema", required=True, help="Schema path (json|yml|yaml)")
    p_validate.add_argument("--json", action="store_true", help="Output JSON")
    p_validate.set_defaults(func=cmd_validate)

    p_clone = sub.add_parser("clone", help="Deep-clone a record file and print it as JSON")
    p_clone.add_argument("--input", required=True, help="Record path (json|yml|yaml)")
    p_clone.set_defaults(func=cmd_clone)

    p_freeze = sub.add_parser("freeze", help="Deep-freeze a record file and report its frozen fields")
    p_freeze.add_argument("--input", required=True, help="Record path (json|yml|yaml)")
    p_freeze.set_defaults(func=cmd_freeze)

    p_show_trace = sub.add_parser("show-trace", help="Show trace events from a JSONL file")
    p_show_trace.add_argument("--trace", required=True, help="Trace path (jsonl)")
    p_show_trace.add_argument("--event-type", help="Filter by event_type")
    p_show_trace.add_argument("--field", help="Filter by the record field an event touched")
    p_show_trace.add_argument("--tail", type=int, help="Show only last N events")
    p_show_trace.set_defaults(func=cmd_show_trace)

    p_check_trace = sub.add_parser("check-trace", help="Validate trace events against trace_event.schema.json")
    p_check_trace.add_argument("--trace", required=True, help="Trace path (jsonl)")
    p_check_trace.set_defaults(func=cmd_check_trace)

    ns = parser.parse_args(argv)
    try:
        return int(ns.func(ns))
    except (RecordError, OSError, ValueError, yaml.YAMLError) as e:
        print(_format_cli_error(e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
