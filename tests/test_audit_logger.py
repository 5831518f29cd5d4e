"""
Tests for the Audit Logger.
"""

import json

from code_auditor.audit.logger import AuditLogger
from code_auditor.models.scan_models import AuditEntry


def _entry(scan_id="abc12345"):
    return AuditEntry(
        scan_id=scan_id,
        repository="octocat/site@main",
        files_considered=4,
        files_scanned=3,
        files_skipped=1,
        files_with_issues=2,
        total_issues=5,
        duration_ms=12.5,
    )


def _read(path):
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


def test_log_appends_one_line_per_scan(tmp_path):
    path = tmp_path / "audit.jsonl"
    audit = AuditLogger(log_path=str(path), enabled=True)
    audit.log(_entry("first"))
    audit.log(_entry("second"))

    entries = _read(path)
    assert [e["scan_id"] for e in entries] == ["first", "second"]
    assert entries[0]["repository"] == "octocat/site@main"
    assert entries[0]["files_scanned"] == 3
    assert entries[0]["timestamp"].endswith("Z")


def test_disabled_logger_writes_nothing(tmp_path):
    path = tmp_path / "audit.jsonl"
    audit = AuditLogger(log_path=str(path), enabled=False)
    audit.log(_entry())
    assert not path.exists()


def test_write_failure_is_not_raised(tmp_path, caplog):
    audit = AuditLogger(log_path=str(tmp_path), enabled=True)
    audit.log(_entry())
    assert "Failed to write audit log" in caplog.text
