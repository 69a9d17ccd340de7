"""Shared test fixtures for deploycheck tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from deploycheck.config import Checklist, DEFAULT_CHECKLIST

SECURITY_HEADERS = [
    {"key": "X-Content-Type-Options", "value": "nosniff"},
    {"key": "X-Frame-Options", "value": "DENY"},
    {"key": "Strict-Transport-Security", "value": "max-age=63072000; includeSubDomains"},
    {"key": "Content-Security-Policy", "value": "default-src 'self'"},
]


def vercel_config(**overrides) -> dict:
    config = {
        "version": 2,
        "builds": [{"src": "backend/dist/index.js", "use": "@vercel/node"}],
        "routes": [{"src": "/api/(.*)", "dest": "backend/dist/index.js"}],
        "functions": {"backend/dist/index.js": {"maxDuration": 30}},
        "headers": [{"source": "/(.*)", "headers": list(SECURITY_HEADERS)}],
        "redirects": [{"source": "/home", "destination": "/"}],
    }
    config.update(overrides)
    return config


def write_json(path: Path, document) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(document), encoding="utf-8")


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project tree that passes every check."""
    write_json(tmp_path / "vercel.json", vercel_config())
    write_json(tmp_path / "package.json", {
        "name": "saas",
        "scripts": {"build": "npm run build -ws", "vercel-build": "npm run build", "deploy": "vercel --prod"},
    })
    write_json(tmp_path / "client" / "package.json", {
        "name": "client",
        "scripts": {"build": "vite build", "vercel-build": "vite build"},
    })
    write_json(tmp_path / "backend" / "package.json", {
        "name": "backend",
        "scripts": {"build": "tsc", "vercel-build": "tsc"},
    })
    (tmp_path / "client" / ".env.example").write_text(
        "# Client settings\nVITE_API_URL=\nVITE_APP_NAME=\n", encoding="utf-8"
    )
    (tmp_path / "backend" / ".env.example").write_text(
        "# Backend settings\nDATABASE_URL=\n\nJWT_SECRET=\nSMTP_HOST=\n", encoding="utf-8"
    )
    (tmp_path / "DEPLOYMENT.md").write_text("# Deployment\n", encoding="utf-8")
    (tmp_path / "client" / "dist").mkdir()
    (tmp_path / "backend" / "dist").mkdir()
    return tmp_path


@pytest.fixture
def checklist() -> Checklist:
    return DEFAULT_CHECKLIST


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DEPLOYCHECK_ROOT", "DEPLOYCHECK_STRICT_DESCRIPTORS", "DEPLOYCHECK_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
