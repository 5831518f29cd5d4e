"""
Tests for the Scan Pipeline — bounded concurrency, exactly-once processing,
and per-file failure containment.
"""

import asyncio
import time

from code_auditor.core.rule_engine import AnalysisEngine
from code_auditor.core.scan_pipeline import scan_files
from code_auditor.models.scan_models import ScanTarget

TARGET = ScanTarget(owner="octocat", repo="site", ref="main")

FLAGGED_JS = "const r = eval(x);\n"
CLEAN_CSS = ".card {\n  color: #333;\n}\n"


class FakeFetcher:
    """Serves texts from a dict, tracking call counts and peak concurrency."""

    def __init__(self, files, delays=None, errors=()):
        self.files = files
        self.delays = delays or {}
        self.errors = set(errors)
        self.calls: list[str] = []
        self.active = 0
        self.max_active = 0

    async def fetch_raw_file(self, owner, repo, ref, path):
        self.calls.append(path)
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            await asyncio.sleep(self.delays.get(path, 0.001))
            if path in self.errors:
                raise ConnectionError("connection reset")
            return self.files.get(path)
        finally:
            self.active -= 1


def _scan(fetcher, paths, engine=None, **kwargs):
    return asyncio.run(scan_files(fetcher, TARGET, paths, engine or AnalysisEngine(), **kwargs))


def test_each_path_processed_once_within_concurrency_limit():
    paths = [f"src/f{i}.js" for i in range(10)]
    # Later paths finish first
    delays = {path: 0.02 - i * 0.0015 for i, path in enumerate(paths)}
    fetcher = FakeFetcher({p: FLAGGED_JS for p in paths}, delays=delays)

    outcome = _scan(fetcher, paths, concurrency=6)

    assert sorted(fetcher.calls) == sorted(paths)
    assert len(fetcher.calls) == len(set(fetcher.calls))
    assert 1 < fetcher.max_active <= 6
    assert list(outcome.results_by_file) == paths
    assert outcome.files_scanned == 10


def test_findings_tagged_with_file_path():
    fetcher = FakeFetcher({"a.js": FLAGGED_JS})
    outcome = _scan(fetcher, ["a.js"])
    findings = outcome.results_by_file["a.js"]
    assert any(f.rule_id == "eval-usage" for f in findings)
    assert all(f.file_path == "a.js" for f in findings)


def test_clean_files_omitted_from_results():
    fetcher = FakeFetcher({"a.css": CLEAN_CSS})
    outcome = _scan(fetcher, ["a.css"])
    assert outcome.results_by_file == {}
    assert outcome.skipped == []


def test_oversized_file_skipped():
    fetcher = FakeFetcher({"big.js": "x;\n" * 50, "a.js": FLAGGED_JS})
    outcome = _scan(fetcher, ["big.js", "a.js"], max_file_chars=40)
    assert [(s.path, s.reason) for s in outcome.skipped] == [("big.js", "too_large")]
    assert list(outcome.results_by_file) == ["a.js"]
    assert outcome.files_scanned == 1


def test_fetch_failures_skipped_without_stopping_others():
    fetcher = FakeFetcher({"a.js": FLAGGED_JS, "c.js": FLAGGED_JS}, errors={"a.js"})
    outcome = _scan(fetcher, ["a.js", "b.js", "c.js"])
    assert [(s.path, s.reason) for s in outcome.skipped] == [
        ("a.js", "fetch_failed"),
        ("b.js", "fetch_failed"),
    ]
    assert list(outcome.results_by_file) == ["c.js"]
    assert outcome.files_scanned == 1


def test_file_cap_limits_fetches():
    paths = [f"f{i}.js" for i in range(5)]
    fetcher = FakeFetcher({p: FLAGGED_JS for p in paths})
    outcome = _scan(fetcher, paths, max_files=3)
    assert sorted(fetcher.calls) == paths[:3]
    assert outcome.files_scanned == 3
    assert list(outcome.results_by_file) == paths[:3]


def test_unsupported_paths_not_fetched():
    fetcher = FakeFetcher({"README.md": "# Title"})
    outcome = _scan(fetcher, ["README.md"])
    assert fetcher.calls == []
    assert outcome.files_scanned == 0
    assert outcome.results_by_file == {}
    assert outcome.skipped == []


class ExplodingEngine(AnalysisEngine):
    def analyze(self, text, language):
        if "boom" in text:
            raise RuntimeError("engine exploded")
        return super().analyze(text, language)


def test_analysis_failure_skipped():
    fetcher = FakeFetcher({"a.js": "boom();\n", "b.js": FLAGGED_JS})
    outcome = _scan(fetcher, ["a.js", "b.js"], engine=ExplodingEngine())
    assert [(s.path, s.reason) for s in outcome.skipped] == [("a.js", "analysis_failed")]
    assert list(outcome.results_by_file) == ["b.js"]
    assert outcome.files_scanned == 1


class OverlapTrackingEngine(AnalysisEngine):
    """Records how many analyze calls are in progress at once."""

    def __init__(self):
        super().__init__()
        self.active = 0
        self.max_active = 0

    def analyze(self, text, language):
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            time.sleep(0.005)
            return super().analyze(text, language)
        finally:
            self.active -= 1


def test_analysis_runs_to_completion_without_interleaving():
    paths = [f"f{i}.js" for i in range(8)]
    engine = OverlapTrackingEngine()
    outcome = _scan(FakeFetcher({p: FLAGGED_JS for p in paths}), paths, engine=engine)
    assert engine.max_active == 1
    assert outcome.files_scanned == 8
