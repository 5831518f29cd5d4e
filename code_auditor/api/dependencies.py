"""
FastAPI Dependencies — Shared singletons injected via Depends().
"""

from __future__ import annotations

from functools import lru_cache

from code_auditor.audit.logger import AuditLogger
from code_auditor.core.rule_engine import AnalysisEngine
from code_auditor.workers.scan_worker import RepoScanWorker


@lru_cache
def get_analysis_engine() -> AnalysisEngine:
    """Shared analysis engine singleton."""
    return AnalysisEngine()


@lru_cache
def get_audit_logger() -> AuditLogger:
    """Shared audit logger singleton."""
    return AuditLogger()


@lru_cache
def get_scan_worker() -> RepoScanWorker:
    """Shared repository scan worker singleton."""
    return RepoScanWorker(
        engine=get_analysis_engine(),
        audit=get_audit_logger(),
    )
