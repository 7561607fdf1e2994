from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ObjkitConfig:
    json_indent: int | None = None  # None = compact output
    json_sort_keys: bool = False
    log_level: str = "WARNING"
