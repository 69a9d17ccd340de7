"""Deployment readiness check — run every section, print the report, set the exit code."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable

from deploycheck.checks import (
    check_required_files,
    check_build_outputs,
    check_package_scripts,
    check_platform_config,
    check_env_templates,
)
from deploycheck.config import Checklist, NEXT_STEPS, load_checklist, load_root, log_level
from deploycheck.errors import DescriptorParseError
from deploycheck.models import CheckResult
from deploycheck.report import Report, render, render_sections

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_FATAL = 2
EXIT_CONFIG = 3

HEADER = "🔍 Validating Vercel deployment configuration..."

Section = Callable[[Path, Checklist], list[CheckResult]]

# Run order is the output order.
SECTIONS: list[tuple[str, Section]] = [
    ("📁 Checking required files...", check_required_files),
    ("📂 Checking build outputs...", check_build_outputs),
    ("📜 Checking package.json scripts...", check_package_scripts),
    ("⚙️  Checking vercel.json configuration...", check_platform_config),
    ("🔐 Checking environment variable templates...", check_env_templates),
]


def run_checks(root: Path, checklist: Checklist) -> Report:
    """Run every section in order against `root`.

    DescriptorParseError propagates and aborts the run, carrying the
    sections completed so far on its `report` attribute.
    """
    report = Report()
    for title, section in SECTIONS:
        logger.debug("running section %s", section.__name__)
        try:
            results = section(root, checklist)
        except DescriptorParseError as e:
            e.report = report
            raise
        report.add_section(title, results)
    logger.info("checks finished: %s", report.counts())
    return report


def main() -> None:
    """Entry point: load config, run checks, print the report, exit."""
    try:
        level = log_level()
        root = load_root()
        checklist = load_checklist()
    except RuntimeError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(EXIT_CONFIG)

    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.info("checking project at %s", root)

    try:
        report = run_checks(root, checklist)
    except DescriptorParseError as e:
        if e.report is not None:
            sys.stdout.write("\n".join(render_sections(e.report, HEADER)) + "\n")
            sys.stdout.flush()
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(EXIT_FATAL)

    sys.stdout.write("\n".join(render(report, HEADER, NEXT_STEPS)) + "\n")
    sys.stdout.flush()

    if report.has_errors:
        sys.exit(EXIT_FAILED)


if __name__ == "__main__":
    main()
