from __future__ import annotations

import json
from typing import Any


def dumps(data: Any) -> str:
    """Stable JSON for CLI output: sorted keys, UTF-8 as is, trailing newline."""
    return json.dumps(data, ensure_ascii=False, indent=2, sort_keys=True) + "\n"

__all__ = ["dumps"]
