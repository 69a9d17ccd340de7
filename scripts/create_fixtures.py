"""Create a deploy-ready sample project for manual runs.

Usage: python scripts/create_fixtures.py <root_dir>

Creates every artifact the deployment checklist requires:
  - vercel.json         (all recommended sections + security headers)
  - package.json        (build, vercel-build, deploy)
  - client/, backend/   (package.json, .env.example, dist/)
  - DEPLOYMENT.md

Then: DEPLOYCHECK_ROOT=<root_dir> python -m deploycheck.cli
"""

from __future__ import annotations

import json
import os
import sys

VERCEL_CONFIG = {
    "version": 2,
    "builds": [
        {"src": "client/package.json", "use": "@vercel/static-build", "config": {"distDir": "dist"}},
        {"src": "backend/dist/index.js", "use": "@vercel/node"},
    ],
    "routes": [
        {"src": "/api/(.*)", "dest": "backend/dist/index.js"},
        {"src": "/(.*)", "dest": "client/dist/$1"},
    ],
    "functions": {"backend/dist/index.js": {"maxDuration": 30}},
    "headers": [
        {
            "source": "/(.*)",
            "headers": [
                {"key": "X-Content-Type-Options", "value": "nosniff"},
                {"key": "X-Frame-Options", "value": "DENY"},
                {"key": "Strict-Transport-Security", "value": "max-age=63072000"},
                {"key": "Content-Security-Policy", "value": "default-src 'self'"},
            ],
        }
    ],
    "redirects": [{"source": "/home", "destination": "/", "permanent": True}],
}

PACKAGES = {
    "package.json": {"build": "npm run build --workspaces", "vercel-build": "npm run build", "deploy": "vercel --prod"},
    os.path.join("client", "package.json"): {"build": "vite build", "vercel-build": "vite build"},
    os.path.join("backend", "package.json"): {"build": "tsc", "vercel-build": "tsc"},
}

ENV_TEMPLATES = {
    os.path.join("client", ".env.example"): "# Client\nVITE_API_URL=\nVITE_APP_NAME=\n",
    os.path.join("backend", ".env.example"): "# Backend\nDATABASE_URL=\nJWT_SECRET=\n\nSMTP_HOST=\n",
}


def _write(path: str, text: str) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    print(f"  created: {path}")


def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python create_fixtures.py <root_dir>", file=sys.stderr)
        sys.exit(1)

    root = sys.argv[1]
    if not os.path.isdir(root):
        print(f"Root does not exist: {root}", file=sys.stderr)
        sys.exit(1)

    _write(os.path.join(root, "vercel.json"), json.dumps(VERCEL_CONFIG, indent=2))
    for rel, scripts in PACKAGES.items():
        name = os.path.basename(os.path.dirname(rel)) or "app"
        _write(os.path.join(root, rel), json.dumps({"name": name, "scripts": scripts}, indent=2))
    for rel, text in ENV_TEMPLATES.items():
        _write(os.path.join(root, rel), text)
    _write(os.path.join(root, "DEPLOYMENT.md"), "# Deployment\n\nRun `npm run deploy`.\n")

    for rel in ("client/dist", "backend/dist"):
        os.makedirs(os.path.join(root, rel), exist_ok=True)
        print(f"  created: {rel}/ (build output)")

    count = sum(1 for _ in os.scandir(root))
    print(f"  root contains {count} entries")


if __name__ == "__main__":
    main()
