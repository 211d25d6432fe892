from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional


@dataclass(frozen=True)
class RuntimeContext:
    """
    Runtime configuration for the demonstration flow and the CLI.

    - trace_path=None disables the JSONL trace.
    - allow_overdraft=False rejects transfers larger than the source balance.
    """

    run_id: str
    trace_path: Optional[Path] = None
    exempt_field: str = "address"
    allow_overdraft: bool = False
    currency: str = "$"
    meta: dict[str, Any] = field(default_factory=dict)
