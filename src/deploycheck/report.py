"""Run report: ordered section results, folded failure state, console rendering."""

from __future__ import annotations

from deploycheck.models import CheckResult, FAIL, INFO, PASS, WARN

MARKERS: dict[str, str] = {
    PASS: "✅",
    INFO: "✅",
    FAIL: "❌",
    WARN: "⚠️ ",
}

RULE = "=" * 50


class Report:
    """Accumulates section results in run order."""

    def __init__(self) -> None:
        self._sections: list[tuple[str, list[CheckResult]]] = []

    def add_section(self, title: str, results: list[CheckResult]) -> None:
        self._sections.append((title, list(results)))

    @property
    def sections(self) -> list[tuple[str, list[CheckResult]]]:
        return list(self._sections)

    def results(self) -> list[CheckResult]:
        return [r for _, section in self._sections for r in section]

    @property
    def has_errors(self) -> bool:
        return any(r.failed for r in self.results())

    def counts(self) -> dict[str, int]:
        counts = {status: 0 for status in (PASS, FAIL, WARN, INFO)}
        for r in self.results():
            counts[r.status] += 1
        return counts


def format_result(result: CheckResult) -> str:
    line = f"{MARKERS[result.status]} {result.subject}"
    if not result.message:
        return line
    if result.status == INFO:
        return f"{line} {result.message}"
    return f"{line} - {result.message}"


def render_sections(report: Report, header: str) -> list[str]:
    """Render the header and every completed section, without a banner."""
    lines = [header]
    for title, results in report.sections:
        lines.append("")
        lines.append(title)
        lines.extend(format_result(r) for r in results)
    return lines


def render(report: Report, header: str, next_steps: tuple[str, ...] | list[str]) -> list[str]:
    """Render the full console report, including the pass/fail banner."""
    lines = render_sections(report, header)
    lines.append("")
    lines.append(RULE)
    if report.has_errors:
        lines.append("❌ Deployment validation FAILED")
        lines.append("Please fix the issues above before deploying to Vercel.")
    else:
        lines.append("✅ Deployment validation PASSED")
        lines.append("Your project is ready for Vercel deployment!")
        lines.append("")
        lines.append("Next steps:")
        lines.extend(f"{i}. {step}" for i, step in enumerate(next_steps, start=1))
    return lines
