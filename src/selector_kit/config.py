from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectorKitConfig:
    strict_combinators: bool = False  # only allow " ", "+", "~", ">"
    json_indent: int | None = None  # None = compact output
    json_sort_keys: bool = False
