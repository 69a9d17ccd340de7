"""Error taxonomy helpers — result envelopes and the fatal descriptor error."""

from __future__ import annotations

from typing import Any


def err(
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a structured error envelope."""
    return {
        "ok": False,
        "error": {
            "code": code,
            "message": message,
            "details": details or {},
        },
    }


def ok(result: dict[str, Any]) -> dict[str, Any]:
    """Build a structured success envelope."""
    return {"ok": True, "result": result}


class DescriptorParseError(RuntimeError):
    """A package descriptor could not be parsed and the strict policy is on.

    Aborts the whole run; no later section executes. The runner attaches the
    partial report so completed sections can still be printed.
    """

    def __init__(self, path: str, message: str, label: str = "INVALID JSON") -> None:
        super().__init__(f"{path} - {label}: {message}")
        self.path = path
        self.message = message
        self.label = label
        self.report: Any = None  # sections completed before the abort
