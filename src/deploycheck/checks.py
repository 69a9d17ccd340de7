"""Section checkers: required files, build outputs, scripts, vercel.json, env templates."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable

from deploycheck.config import Checklist
from deploycheck.errors import DescriptorParseError
from deploycheck.jsonio import load_json
from deploycheck.models import CheckResult, FAIL, INFO, PASS, WARN

logger = logging.getLogger(__name__)


# --- Generic routines ---


def check_exists(root: Path, paths: Iterable[str], missing_message: str) -> list[CheckResult]:
    """One result per path: pass if it exists, fail otherwise.

    Existence only; a directory entry does not have to be a directory.
    """
    results: list[CheckResult] = []
    for rel in paths:
        if (root / rel).exists():
            results.append(CheckResult(PASS, rel))
        else:
            logger.debug("missing required path: %s", rel)
            results.append(CheckResult(FAIL, rel, missing_message))
    return results


def check_contains(
    present: Any,
    expected: Iterable[str],
    subject: str,
    missing_status: str,
    missing_message: str,
) -> list[CheckResult]:
    """One result per expected name: pass if `name in present`.

    `subject` is a format string with a `{name}` field.
    """
    results: list[CheckResult] = []
    for name in expected:
        label = subject.format(name=name)
        if name in present:
            results.append(CheckResult(PASS, label))
        else:
            results.append(CheckResult(missing_status, label, missing_message))
    return results


# --- Sections ---


def check_required_files(root: Path, checklist: Checklist) -> list[CheckResult]:
    return check_exists(root, checklist.required_files, "MISSING")


def check_build_outputs(root: Path, checklist: Checklist) -> list[CheckResult]:
    return check_exists(
        root,
        checklist.required_dirs,
        f"MISSING (run '{checklist.build_hint}')",
    )


def check_package_scripts(root: Path, checklist: Checklist) -> list[CheckResult]:
    """Check each existing package descriptor for its required script entries.

    Missing descriptors are skipped silently. Script values are not
    inspected; an empty string or null still counts as present.

    Raises DescriptorParseError for unreadable JSON when the checklist's
    strict_descriptors policy is on.
    """
    results: list[CheckResult] = []

    for descriptor, scripts in checklist.required_scripts:
        path = root / descriptor
        if not path.exists():
            logger.debug("descriptor not present, skipping: %s", descriptor)
            continue

        loaded = load_json(path)
        if not loaded["ok"]:
            message = loaded["error"]["message"]
            label = _load_failure_label(loaded)
            if checklist.strict_descriptors:
                raise DescriptorParseError(descriptor, message, label)
            results.append(CheckResult(
                FAIL,
                descriptor,
                f"{label}: {message}",
                {"code": loaded["error"]["code"]},
            ))
            continue

        document = loaded["result"]["document"]
        declared = document.get("scripts") if isinstance(document, dict) else None
        if not isinstance(declared, dict):
            declared = {}

        results.extend(check_contains(
            declared,
            scripts,
            descriptor + ": {name}",
            FAIL,
            "MISSING",
        ))

    return results


def check_platform_config(root: Path, checklist: Checklist) -> list[CheckResult]:
    """Inspect the platform config for recommended sections and security headers.

    Absent file: nothing reported (the required-files section covers it).
    Malformed or non-object document: one failure, sub-checks skipped.
    Missing sections and headers are warnings only.
    """
    name = checklist.platform_config
    path = root / name
    if not path.exists():
        return []

    loaded = load_json(path)
    if not loaded["ok"]:
        return [CheckResult(
            FAIL,
            name,
            f"{_load_failure_label(loaded)}: {loaded['error']['message']}",
            {"code": loaded["error"]["code"]},
        )]

    document = loaded["result"]["document"]
    if not isinstance(document, dict):
        return [CheckResult(FAIL, name, "INVALID JSON: expected a JSON object")]

    results = check_contains(
        document,
        checklist.config_sections,
        name + ": {name}",
        WARN,
        "OPTIONAL but recommended",
    )

    header_keys = _security_header_keys(document)
    if header_keys is not None:
        results.extend(check_contains(
            header_keys,
            checklist.security_headers,
            "Security header: {name}",
            WARN,
            "MISSING",
        ))
    else:
        logger.debug("no headers[0].headers list in %s, skipping header check", name)

    return results


def check_env_templates(root: Path, checklist: Checklist) -> list[CheckResult]:
    """Report the variable count of each existing env template. Never fails.

    Undecodable bytes are replaced rather than rejected; an unreadable
    template is a warning.
    """
    results: list[CheckResult] = []
    for rel in checklist.env_templates:
        path = root / rel
        if not path.exists():
            continue
        try:
            content = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.debug("cannot read env template %s: %s", rel, e)
            results.append(CheckResult(WARN, rel, f"UNREADABLE: {e}"))
            continue
        count = count_env_variables(content)
        results.append(CheckResult(INFO, rel, f"({count} variables)", {"variables": count}))
    return results


# --- Internal helpers ---


def _load_failure_label(loaded: dict[str, Any]) -> str:
    """Report label for a failed load_json envelope."""
    if loaded["error"]["code"] == "E_READ_FAILED":
        return "UNREADABLE"
    return "INVALID JSON"


def count_env_variables(content: str) -> int:
    """Count lines that are non-blank and do not start with '#'.

    The comment test is on the raw line, so an indented '#' still counts.
    """
    return sum(
        1 for line in content.split("\n")
        if line.strip() and not line.startswith("#")
    )


def _security_header_keys(document: dict[str, Any]) -> set[str] | None:
    """Project document["headers"][0]["headers"][*]["key"] into a set.

    Returns None when the structure is absent or shaped differently.
    """
    headers = document.get("headers")
    if not isinstance(headers, list) or not headers:
        return None
    first = headers[0]
    if not isinstance(first, dict):
        return None
    nested = first.get("headers")
    if not isinstance(nested, list):
        return None
    return {
        entry["key"]
        for entry in nested
        if isinstance(entry, dict) and isinstance(entry.get("key"), str)
    }
