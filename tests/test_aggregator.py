"""
Tests for the Result Aggregator.
"""

from code_auditor.core.aggregator import build_summary
from code_auditor.models.rule_models import FileFinding, Severity


def _finding(path, severity):
    return FileFinding(
        line_number=1,
        snippet="x",
        message="m",
        rule_id="r",
        severity=severity,
        category="c",
        title="t",
        description="d",
        suggestion="s",
        file_path=path,
    )


def test_summary_counts_by_severity_and_file():
    summary = build_summary({
        "a.js": [_finding("a.js", Severity.ERROR)],
        "b.css": [_finding("b.css", Severity.WARNING), _finding("b.css", Severity.WARNING)],
    })
    assert summary.error == 1
    assert summary.warning == 2
    assert summary.suggestion == 0
    assert summary.files_with_issues == 2
    assert summary.total_issues == 3


def test_empty_results():
    summary = build_summary({})
    assert summary.total_issues == 0
    assert summary.files_with_issues == 0


def test_files_without_findings_not_counted():
    summary = build_summary({
        "a.js": [],
        "b.js": [_finding("b.js", Severity.SUGGESTION)],
    })
    assert summary.files_with_issues == 1
    assert summary.suggestion == 1
