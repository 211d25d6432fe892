from __future__ import annotations

import sys
from typing import Any, Dict, List, Optional, TextIO

from recordkit.core.account import Account, transfer
from recordkit.core.errors import RecordError
from recordkit.core.record import define_field, freeze_record
from recordkit.core.runtime_context import RuntimeContext
from recordkit.core.schema import load_schema, read_document, validate
from recordkit.core.transform import deep_clone
from recordkit.core.updater import apply_updates
from recordkit.resources import person_example_path, person_schema_path
from recordkit.trace.trace_emitter import TraceEmitter
from recordkit.trace.trace_store_jsonl import NullTraceStore, TraceStoreJSONL


def _error_payload(e: RecordError) -> Dict[str, Any]:
    return {"code": e.code, "message": e.message, "data": e.data}


def _emitter(ctx: RuntimeContext) -> TraceEmitter:
    store = TraceStoreJSONL(ctx.trace_path) if ctx.trace_path is not None else NullTraceStore()
    return TraceEmitter(store=store, run_id=ctx.run_id)


def run_demo(ctx: RuntimeContext, out: Optional[TextIO] = None) -> Dict[str, Any]:
    """
    Console walkthrough: freeze a person record, push two update batches
    through the updater, transfer between accounts, clone nested values and
    validate the person against the shipped schema.

    Only update-batch failures are caught and printed; everything else
    propagates to the caller.
    """
    out = out if out is not None else sys.stdout
    trace = _emitter(ctx)
    trace.emit("run_started", message="Demo started")

    person = freeze_record(read_document(person_example_path()))
    define_field(person, ctx.exempt_field, {}, writable=False, enumerable=False, configurable=False)
    trace.emit("record_frozen", data={"fields": person.all_keys()})
    print(person, file=out)

    errors: List[Dict[str, Any]] = []
    batches = [
        {ctx.exempt_field: {"city": "New York"}},
        {"firstName": "Jane", ctx.exempt_field: {"city": "New York"}},
    ]
    for batch in batches:
        try:
            apply_updates(person, batch, exempt=ctx.exempt_field)
        except RecordError as e:
            errors.append(_error_payload(e))
            field = e.data.get("field") if isinstance(e.data, dict) else None
            trace.emit("update_rejected", field=field, message=e.message, error=_error_payload(e))
            print(e.message, file=out)
            continue
        trace.emit("update_applied", data={"fields": list(batch.keys())})
        print(person, file=out)

    amount = ctx.meta.get("transfer_amount", 500)
    account = Account(1000, currency=ctx.currency)
    target = {"balance": 0}
    try:
        transfer(account, target, amount, allow_overdraft=ctx.allow_overdraft)
    except RecordError as e:
        trace.emit("transfer_rejected", message=e.message, error=_error_payload(e))
        raise
    trace.emit("transfer_finished", data={"source": account.balance, "target": target["balance"]})
    print("Transfer successful", file=out)
    print("Bank account balance:", account.formatted_balance, file=out)
    print("Target account balance:", target["balance"], file=out)

    clones = [deep_clone({"a": 1, "b": "hello"}), deep_clone([1, 2, 3, {"a": 4, "b": 5}])]
    trace.emit("clone_finished", data={"count": len(clones)})
    for c in clones:
        print(c, file=out)

    schema = load_schema(person_schema_path())
    is_valid = validate(person, schema)
    trace.emit("validation_finished", data={"valid": is_valid, "schema": schema})
    print("Is person object valid?", is_valid, file=out)

    trace.emit("run_finished", message="Demo finished")
    return {
        "person": person.to_dict(),
        "address": person[ctx.exempt_field],
        "errors": errors,
        "source_balance": account.balance,
        "target_balance": target["balance"],
        "clones": clones,
        "valid": is_valid,
    }
