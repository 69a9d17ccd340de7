"""Tests for environment template variable counting."""

from __future__ import annotations

from deploycheck.checks import check_env_templates, count_env_variables
from deploycheck.models import INFO, WARN


def test_reports_counts_for_both_templates(project, checklist):
    results = check_env_templates(project, checklist)
    assert [(r.subject, r.message) for r in results] == [
        ("client/.env.example", "(2 variables)"),
        ("backend/.env.example", "(3 variables)"),
    ]
    assert all(r.status == INFO for r in results)


def test_missing_template_skipped(project, checklist):
    (project / "client" / ".env.example").unlink()
    results = check_env_templates(project, checklist)
    assert [r.subject for r in results] == ["backend/.env.example"]


def test_count_ignores_blank_and_comment_lines():
    assert count_env_variables("") == 0
    assert count_env_variables("# only a comment\n\n   \n") == 0
    assert count_env_variables("A=1\n#B=2\nC=3") == 2


def test_indented_comment_still_counts():
    assert count_env_variables("A=1\n  # indented\n") == 2


def test_crlf_lines():
    assert count_env_variables("A=1\r\n\r\n# note\r\nB=2\r\n") == 2


def test_undecodable_bytes_are_replaced(project, checklist):
    (project / "client" / ".env.example").write_bytes(b"# caf\xe9\nA=1\n")
    results = check_env_templates(project, checklist)
    assert (results[0].status, results[0].message) == (INFO, "(1 variables)")


def test_unreadable_template_is_warning(project, checklist):
    template = project / "backend" / ".env.example"
    template.unlink()
    template.mkdir()
    results = check_env_templates(project, checklist)
    assert results[1].subject == "backend/.env.example"
    assert results[1].status == WARN
    assert results[1].message.startswith("UNREADABLE:")
    assert not any(r.failed for r in results)
