from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Union

from .trace_store_jsonl import NullTraceStore, TraceStoreJSONL


class TraceEmitter:
    def __init__(self, store: Union[TraceStoreJSONL, NullTraceStore], run_id: str):
        self._store = store
        self._run_id = run_id

    def emit(
        self,
        event_type: str,
        *,
        field: str | None = None,
        message: str | None = None,
        error: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> None:
        event: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "run_id": self._run_id,
            "event_type": event_type,
        }
        if field is not None:
            event["field"] = field
        if message is not None:
            event["message"] = message
        if error is not None:
            event["error"] = error
        if data is not None:
            event["data"] = data

        self._store.append(event)
