"""Uniform fallible JSON loading for descriptors and platform config."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from deploycheck.errors import err, ok

logger = logging.getLogger(__name__)


def load_json(path: Path) -> dict[str, Any]:
    """Read and parse a JSON document.

    Returns ok({"document": ...}) on success, or an error envelope with code
    E_INVALID_JSON (parse failure) or E_READ_FAILED (I/O or decoding).
    Never raises for either case; callers decide how fatal a failure is.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("read failed for %s: %s", path, e)
        return err("E_READ_FAILED", str(e), {"path": str(path)})

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug("invalid JSON in %s: %s", path, e)
        return err(
            "E_INVALID_JSON",
            str(e),
            {"path": str(path), "line": e.lineno, "column": e.colno},
        )

    return ok({"document": document})
