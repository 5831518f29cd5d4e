"""
Tests for the Repository Scan Worker — end-to-end scans against a fake GitHub.
"""

import asyncio
import json

import pytest

from code_auditor.audit.logger import AuditLogger
from code_auditor.core.errors import BranchResolutionError, ReferenceParseError, TreeFetchError
from code_auditor.workers.scan_worker import RepoScanWorker


@pytest.fixture
def audit_path(tmp_path):
    return tmp_path / "audit.jsonl"


@pytest.fixture
def worker(fake_github, audit_path):
    return RepoScanWorker(
        audit=AuditLogger(log_path=str(audit_path)),
        client_factory=fake_github.client,
    )


def test_full_repository_scan(worker, fake_github, audit_path):
    report = asyncio.run(worker.run_scan("octocat/site"))

    assert report.target.ref == "main"
    assert report.files_considered == 4
    assert report.files_scanned == 3
    assert list(report.results_by_file) == ["index.html", "src/app.js"]
    assert [s.model_dump() for s in report.skipped_files] == [
        {"path": "src/missing.js", "reason": "fetch_failed"}
    ]
    assert fake_github.metadata_requested

    js_ids = {f.rule_id for f in report.results_by_file["src/app.js"]}
    assert "eval-usage" in js_ids
    assert report.summary.files_with_issues == 2
    assert report.summary.total_issues == sum(
        len(findings) for findings in report.results_by_file.values()
    )
    assert len(report.scan_id) == 8


def test_scan_writes_audit_entry(worker, audit_path):
    report = asyncio.run(worker.run_scan("octocat/site"))

    lines = audit_path.read_text().splitlines()
    assert len(lines) == 1
    entry = json.loads(lines[0])
    assert entry["repository"] == "octocat/site@main"
    assert entry["scan_id"] == report.scan_id
    assert entry["files_skipped"] == 1
    assert entry["files_scanned"] == 3
    assert entry["total_issues"] == report.summary.total_issues


def test_url_ref_and_path_skip_default_branch_lookup(worker, fake_github):
    report = asyncio.run(worker.run_scan("https://github.com/octocat/site/tree/dev/src"))

    assert not fake_github.metadata_requested
    assert fake_github.tree_refs == ["dev"]
    assert report.target.base_path == "src"
    assert report.target.label == "octocat/site@dev/src"
    assert report.files_considered == 3
    assert list(report.results_by_file) == ["src/app.js"]


def test_explicit_branch_wins_over_url_ref(worker, fake_github):
    report = asyncio.run(
        worker.run_scan("https://github.com/octocat/site/tree/dev", branch=" release ")
    )
    assert report.target.ref == "release"
    assert fake_github.tree_refs == ["release"]


def test_blank_branch_falls_back_to_default(worker, fake_github):
    report = asyncio.run(worker.run_scan("octocat/site", branch="   "))
    assert report.target.ref == "main"
    assert fake_github.metadata_requested


def test_invalid_reference_makes_no_requests(fake_github, audit_path):
    opened = []

    def factory():
        opened.append(True)
        return fake_github.client()

    worker = RepoScanWorker(audit=AuditLogger(log_path=str(audit_path)), client_factory=factory)
    with pytest.raises(ReferenceParseError):
        asyncio.run(worker.run_scan("not a repo"))
    assert opened == []
    assert fake_github.requests == []
    assert not audit_path.exists()


def test_unresolvable_default_branch(worker, fake_github):
    fake_github.metadata_status = 404
    with pytest.raises(BranchResolutionError):
        asyncio.run(worker.run_scan("octocat/private"))
    assert fake_github.tree_refs == []


def test_tree_failure_aborts_scan(worker, fake_github):
    fake_github.tree_status = 500
    with pytest.raises(TreeFetchError, match="Failed to fetch repository tree"):
        asyncio.run(worker.run_scan("octocat/site", branch="main"))
