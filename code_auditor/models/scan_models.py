"""
Scan Request/Response Models — API contract schemas.

These are the public-facing Pydantic models used by the FastAPI endpoints
and by the repository scan worker.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from code_auditor.models.rule_models import AnnotatedFinding, FileFinding, LanguageGroup


class RepoReference(BaseModel):
    """Parsed form of a user-supplied repository reference."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    ref: str | None = None
    path: str = ""


class ScanTarget(BaseModel):
    """A fully resolved repository location. Immutable once resolved."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    ref: str
    base_path: str = ""

    @property
    def label(self) -> str:
        suffix = f"/{self.base_path}" if self.base_path else ""
        return f"{self.owner}/{self.repo}@{self.ref}{suffix}"


class FileEntry(BaseModel):
    """One entry of a recursive git tree listing."""

    path: str
    type: str = Field(..., description="'blob' for files, 'tree' for directories")


class SkippedFile(BaseModel):
    """A file that was selected for scanning but produced no analysis."""

    path: str
    reason: Literal["fetch_failed", "too_large", "analysis_failed"]


class ScanSummary(BaseModel):
    """Counts over a per-file finding map."""

    error: int = 0
    warning: int = 0
    suggestion: int = 0
    files_with_issues: int = 0
    total_issues: int = 0


class ScanReport(BaseModel):
    """Full repository scan report."""

    scan_id: str = ""
    target: ScanTarget
    results_by_file: dict[str, list[FileFinding]] = Field(default_factory=dict)
    summary: ScanSummary = Field(default_factory=ScanSummary)
    skipped_files: list[SkippedFile] = Field(default_factory=list)
    files_considered: int = Field(default=0, description="Supported files found in the tree")
    files_scanned: int = Field(default=0, description="Files fetched and analyzed")
    duration_ms: float = 0.0


class AnalyzeRequest(BaseModel):
    """Request body for /analyze."""

    code: str = Field(..., min_length=1, description="Source text to analyze")
    language: LanguageGroup


class AnalyzeResponse(BaseModel):
    """Response for /analyze."""

    language: LanguageGroup
    findings: list[AnnotatedFinding] = Field(default_factory=list)
    summary: ScanSummary = Field(default_factory=ScanSummary)


class RepoScanRequest(BaseModel):
    """Request body for /scan-repo."""

    reference: str = Field(
        ..., min_length=1, description="owner/repo or https://github.com/owner/repo[/tree/ref[/path]]"
    )
    branch: str | None = Field(
        default=None, description="Explicit ref; overrides any ref in the reference"
    )


class AuditEntry(BaseModel):
    """Audit metadata for a repository scan."""

    scan_id: str
    repository: str
    files_considered: int
    files_scanned: int
    files_skipped: int
    files_with_issues: int
    total_issues: int
    duration_ms: float = 0.0
