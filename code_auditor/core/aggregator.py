"""
Result Aggregator — Reduces per-file findings to severity and file counts.
"""

from __future__ import annotations

from collections import Counter
from typing import Mapping, Sequence

from code_auditor.models.rule_models import AnnotatedFinding, Severity
from code_auditor.models.scan_models import ScanSummary


def build_summary(results_by_file: Mapping[str, Sequence[AnnotatedFinding]]) -> ScanSummary:
    """
    Count findings by severity, plus files with at least one finding.

    Works for a single-text result too: pass ``{"<text>": findings}``.
    """
    by_severity: Counter[Severity] = Counter()
    files_with_issues = 0
    for findings in results_by_file.values():
        if findings:
            files_with_issues += 1
        by_severity.update(finding.severity for finding in findings)

    return ScanSummary(
        error=by_severity[Severity.ERROR],
        warning=by_severity[Severity.WARNING],
        suggestion=by_severity[Severity.SUGGESTION],
        files_with_issues=files_with_issues,
        total_issues=sum(by_severity.values()),
    )
