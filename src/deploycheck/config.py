"""Configuration: the fixed deployment checklist, project root, policies."""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Checklist:
    required_files: tuple[str, ...]
    required_dirs: tuple[str, ...]
    required_scripts: tuple[tuple[str, tuple[str, ...]], ...]  # (descriptor path, script names)
    platform_config: str
    config_sections: tuple[str, ...]
    security_headers: tuple[str, ...]
    env_templates: tuple[str, ...]
    strict_descriptors: bool = True
    build_hint: str = "npm run build"


DEFAULT_CHECKLIST = Checklist(
    required_files=(
        "vercel.json",
        "package.json",
        "client/package.json",
        "backend/package.json",
        "client/.env.example",
        "backend/.env.example",
        "DEPLOYMENT.md",
    ),
    required_dirs=(
        "client/dist",
        "backend/dist",
    ),
    required_scripts=(
        ("package.json", ("build", "vercel-build", "deploy")),
        ("client/package.json", ("build", "vercel-build")),
        ("backend/package.json", ("build", "vercel-build")),
    ),
    platform_config="vercel.json",
    config_sections=("builds", "routes", "functions", "headers", "redirects"),
    security_headers=(
        "X-Content-Type-Options",
        "X-Frame-Options",
        "Strict-Transport-Security",
        "Content-Security-Policy",
    ),
    env_templates=("client/.env.example", "backend/.env.example"),
)

NEXT_STEPS = (
    "Set up environment variables in Vercel dashboard",
    "Run: npm run deploy",
    "Configure custom domain (optional)",
)

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def load_root() -> Path:
    """Return the project root from DEPLOYCHECK_ROOT, defaulting to the cwd.

    Fail closed if the configured root is not an existing directory.
    """
    raw = os.environ.get("DEPLOYCHECK_ROOT", "").strip()
    if not raw:
        return Path.cwd()
    root = Path(raw).expanduser().resolve()
    if not root.is_dir():
        raise RuntimeError(f"Configured root does not exist or is not a directory: {root}")
    return root


def strict_descriptors_enabled() -> bool:
    """Read DEPLOYCHECK_STRICT_DESCRIPTORS. Unset means strict."""
    raw = os.environ.get("DEPLOYCHECK_STRICT_DESCRIPTORS", "").strip().lower()
    if not raw or raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    raise RuntimeError(
        "DEPLOYCHECK_STRICT_DESCRIPTORS must be one of "
        "1/0, true/false, yes/no, on/off; got: " + repr(raw)
    )


def log_level() -> str:
    """Read DEPLOYCHECK_LOG_LEVEL. Fail closed on names logging does not know."""
    level = os.environ.get("DEPLOYCHECK_LOG_LEVEL", "").strip().upper() or "WARNING"
    if not isinstance(logging.getLevelName(level), int):
        raise RuntimeError(
            "DEPLOYCHECK_LOG_LEVEL must be a logging level name "
            "(DEBUG, INFO, WARNING, ERROR, CRITICAL); got: " + repr(level)
        )
    return level


def load_checklist() -> Checklist:
    """Return the default checklist with environment policies applied."""
    return dataclasses.replace(
        DEFAULT_CHECKLIST,
        strict_descriptors=strict_descriptors_enabled(),
    )
