"""
Tests for the Code Auditor API — integration tests through the FastAPI app.
"""

import pytest
from fastapi.testclient import TestClient

from code_auditor.api.dependencies import get_scan_worker
from code_auditor.audit.logger import AuditLogger
from code_auditor.config import settings
from code_auditor.core.rule_engine import rules_for
from code_auditor.main import app
from code_auditor.models.rule_models import SEVERITY_ORDER
from code_auditor.workers.scan_worker import RepoScanWorker

client = TestClient(app)


@pytest.fixture
def fake_worker(fake_github, tmp_path):
    worker = RepoScanWorker(
        audit=AuditLogger(log_path=str(tmp_path / "audit.jsonl")),
        client_factory=fake_github.client,
    )
    app.dependency_overrides[get_scan_worker] = lambda: worker
    yield worker
    app.dependency_overrides.clear()


def test_health_check():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == "1.0.0"
    assert data["rules"] == 31


# ── /analyze ──


def test_analyze_javascript(sample_js_code):
    response = client.post("/analyze", json={"code": sample_js_code, "language": "javascript"})
    assert response.status_code == 200
    data = response.json()
    assert data["language"] == "javascript"
    assert len(data["findings"]) > 0
    assert data["summary"]["total_issues"] == len(data["findings"])
    assert data["summary"]["files_with_issues"] == 1

    finding = data["findings"][0]
    for key in ("rule_id", "severity", "title", "line_number", "snippet", "message"):
        assert key in finding


def test_analyze_clean_css(clean_css_code):
    response = client.post("/analyze", json={"code": clean_css_code, "language": "css"})
    assert response.status_code == 200
    data = response.json()
    assert data["findings"] == []
    assert data["summary"]["total_issues"] == 0


def test_analyze_rejects_unknown_language():
    response = client.post("/analyze", json={"code": "print(1)", "language": "python"})
    assert response.status_code == 422
    assert "detail" in response.json()


def test_analyze_rejects_empty_code():
    response = client.post("/analyze", json={"code": "", "language": "css"})
    assert response.status_code == 422


def test_analyze_rejects_oversized_code(monkeypatch):
    monkeypatch.setattr(settings, "max_text_chars", 10)
    response = client.post("/analyze", json={"code": "x" * 11, "language": "javascript"})
    assert response.status_code == 400
    assert "maximum length" in response.json()["detail"]


# ── /rules ──


def test_list_rules():
    response = client.get("/rules")
    assert response.status_code == 200
    assert len(response.json()) == 31


def test_list_rules_by_language():
    response = client.get("/rules", params={"language": "html"})
    assert response.status_code == 200
    rules = response.json()
    assert len(rules) == 8
    assert {rule["language"] for rule in rules} == {"html"}


def test_list_rules_errors_first():
    rules = client.get("/rules", params={"language": "css"}).json()
    precedence = [SEVERITY_ORDER[rule["severity"]] for rule in rules]
    assert precedence == sorted(precedence)
    assert rules[0]["severity"] == "error"

    # Registration order is kept within one severity
    errors = [rule["id"] for rule in rules if rule["severity"] == "error"]
    assert errors == [rule.id for rule in rules_for("css") if rule.severity == "error"]


def test_rule_detail():
    response = client.get("/rules/eval-usage")
    assert response.status_code == 200
    data = response.json()
    assert data["severity"] == "error"
    assert "eval()" in data["educational_content"]


def test_unknown_rule_detail():
    response = client.get("/rules/nope")
    assert response.status_code == 404
    assert response.json()["detail"] == "Unknown rule: nope"


# ── /scan-repo ──


def test_scan_repo(fake_worker):
    response = client.post("/scan-repo", json={"reference": "octocat/site"})
    assert response.status_code == 200
    data = response.json()
    assert data["target"]["ref"] == "main"
    assert sorted(data["results_by_file"]) == ["index.html", "src/app.js"]
    assert data["skipped_files"] == [{"path": "src/missing.js", "reason": "fetch_failed"}]
    assert data["summary"]["files_with_issues"] == 2
    assert all(
        finding["file_path"] == "src/app.js" for finding in data["results_by_file"]["src/app.js"]
    )


def test_scan_repo_invalid_reference(fake_worker):
    response = client.post("/scan-repo", json={"reference": "not a repo"})
    assert response.status_code == 400
    assert response.json()["detail"] == (
        "Use owner/repo or https://github.com/owner/repo[/tree/branch[/path]]."
    )


def test_scan_repo_unresolvable_branch(fake_worker, fake_github):
    fake_github.metadata_status = 404
    response = client.post("/scan-repo", json={"reference": "octocat/private"})
    assert response.status_code == 404
    assert "Specify a branch" in response.json()["detail"]


def test_scan_repo_tree_failure(fake_worker, fake_github):
    fake_github.tree_status = 500
    response = client.post("/scan-repo", json={"reference": "octocat/site", "branch": "main"})
    assert response.status_code == 502
    assert response.json()["detail"] == "Failed to fetch repository tree"


def test_scan_repo_non_json_tree_body(fake_worker, fake_github):
    fake_github.api_text = "<html>Service Unavailable</html>"
    response = client.post("/scan-repo", json={"reference": "octocat/site", "branch": "main"})
    assert response.status_code == 502
    assert response.json()["detail"] == "Tree not available"


def test_scan_repo_non_json_metadata_body(fake_worker, fake_github):
    fake_github.api_text = "<html>Service Unavailable</html>"
    response = client.post("/scan-repo", json={"reference": "octocat/site"})
    assert response.status_code == 404
    assert "Specify a branch" in response.json()["detail"]


def test_scan_repo_tree_not_a_list(fake_worker, fake_github):
    fake_github.tree = "nope"
    response = client.post("/scan-repo", json={"reference": "octocat/site"})
    assert response.status_code == 502
    assert response.json()["detail"] == "Tree not available"


def test_scan_repo_missing_reference(fake_worker):
    response = client.post("/scan-repo", json={})
    assert response.status_code == 422
