"""Data classes for ReTree."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class OutlineEntry:
    depth: int
    name: str


@dataclass
class FormatCheckResult:
    status: bool = False
    message: str = ""
    error_lines: list[int] = field(default_factory=list)  # 1-based
    root_count: int = 0
