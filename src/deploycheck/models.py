"""Data models: CheckResult and status values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

PASS = "pass"
FAIL = "fail"
WARN = "warn"
INFO = "info"

STATUSES = (PASS, FAIL, WARN, INFO)


@dataclass
class CheckResult:
    status: str  # "pass" | "fail" | "warn" | "info"
    subject: str
    message: str = ""
    detail: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.status not in STATUSES:
            raise ValueError(f"Unknown check status: {self.status!r}")

    @property
    def failed(self) -> bool:
        return self.status == FAIL
