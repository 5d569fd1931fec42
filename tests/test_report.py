"""Tests for report rendering."""

from sharpcheck.report import log_report, render_report, show_rules
from sharpcheck.rules import ALL_RULE_CLASSES
from sharpcheck.types import GREEN, NC, RED, AnalysisReport, Violation

FAILED = AnalysisReport(violations=(
    Violation(rule=5, message="Rule 5 Violation: No Array or List found in the code."),
    Violation(rule=9, message="Rule 9 Violation: Undocumented Class or Method found on line 1.",
              line=1),
))


def test_render_success_plain():
    assert render_report(AnalysisReport(), color=False) == [
        "--- Analysis Report ---",
        "",
        "All requirements are met!",
    ]


def test_render_success_colored():
    assert render_report(AnalysisReport())[-1] == f"{GREEN}All requirements are met!{NC}"


def test_render_failures_plain():
    assert render_report(FAILED, color=False)[2:] == [
        "- [Failed] Rule 5 Violation: No Array or List found in the code.",
        "- [Failed] Rule 9 Violation: Undocumented Class or Method found on line 1.",
    ]


def test_render_failures_colored():
    lines = render_report(FAILED)
    assert lines[2] == f"{RED}- [Failed] Rule 5 Violation: No Array or List found in the code.{NC}"


def test_log_report_success(capsys):
    assert log_report(AnalysisReport(), color=False) == 0
    assert "All requirements are met!" in capsys.readouterr().out


def test_log_report_failures(capsys):
    assert log_report(FAILED, color=False) == 1
    out = capsys.readouterr().out
    assert out.count("- [Failed] ") == 2
    assert "All requirements are met!" not in out


def test_show_rules(capsys):
    show_rules(ALL_RULE_CLASSES, color=False)
    out = capsys.readouterr().out
    assert "=== sharpcheck rules ===" in out
    assert "[ 1] method-naming" in out
    assert "[10] subroutine-presence" in out
