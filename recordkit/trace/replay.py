from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional


class Replay:
    """
    Reads record trace events back from a JSONL file.

    A missing file replays as an empty run.
    """

    def __init__(self, path: Path):
        self._path = path

    def iter_events(self) -> Iterator[Dict[str, Any]]:
        if not self._path.exists():
            return
        with self._path.open("r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if line:
                    yield json.loads(line)

    def select(
        self,
        *,
        event_type: Optional[str] = None,
        field: Optional[str] = None,
        tail: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Events matching `event_type` and the touched `field`, keeping only
        the last `tail` of them when given (tail=0 selects nothing).
        """
        events = [
            e
            for e in self.iter_events()
            if (event_type is None or e.get("event_type") == event_type)
            and (field is None or e.get("field") == field)
        ]
        if tail is not None and tail >= 0:
            events = events[-tail:] if tail else []
        return events

    def rejected_fields(self) -> List[str]:
        """Fields named by update_rejected events, in trace order."""
        return [e["field"] for e in self.select(event_type="update_rejected") if isinstance(e.get("field"), str)]
