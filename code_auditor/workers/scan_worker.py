"""
Repository Scan Worker — Async orchestrator for a whole-repository scan.

Pipeline:
1. Parse the reference (no network on failure)
2. Resolve the ref: explicit branch, then ref from the URL, then default branch
3. Fetch the recursive tree and keep supported files under the base path
4. Fetch + analyze files with bounded concurrency
5. Summarize, write the audit entry, assemble the ScanReport
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import Callable

from code_auditor.audit.logger import AuditLogger
from code_auditor.config import settings
from code_auditor.core.aggregator import build_summary
from code_auditor.core.errors import ReferenceParseError
from code_auditor.core.repo_resolver import GitHubClient, filter_supported_files, parse_reference
from code_auditor.core.rule_engine import AnalysisEngine
from code_auditor.core.scan_pipeline import scan_files
from code_auditor.models.scan_models import AuditEntry, ScanReport, ScanTarget

logger = logging.getLogger("code_auditor.worker")


def default_client_factory() -> GitHubClient:
    return GitHubClient(
        api_url=settings.github_api_url,
        raw_url=settings.github_raw_url,
        token=settings.github_token,
        timeout=settings.fetch_timeout_seconds,
    )


class RepoScanWorker:
    """
    Runs repository scans end to end.

    A fresh GitHubClient is opened per scan and closed when the scan ends.
    """

    def __init__(
        self,
        engine: AnalysisEngine | None = None,
        audit: AuditLogger | None = None,
        client_factory: Callable[[], GitHubClient] | None = None,
    ) -> None:
        self.engine = engine or AnalysisEngine()
        self.audit = audit or AuditLogger()
        self.client_factory = client_factory or default_client_factory

    async def run_scan(self, reference: str, branch: str | None = None) -> ScanReport:
        """
        Scan every supported file of a public repository.

        Args:
            reference: ``owner/repo`` or a repository web URL.
            branch: Explicit ref; wins over any ref in the URL.

        Returns:
            ScanReport with per-file findings, summary and skipped files.

        Raises:
            ReferenceParseError: The reference matched neither accepted form.
            BranchResolutionError: No ref given and the default branch lookup failed.
            TreeFetchError: The tree listing could not be retrieved.
        """
        scan_id = str(uuid.uuid4())[:8]
        start_time = time.monotonic()

        parsed = parse_reference(reference, host=settings.github_host)
        if parsed is None:
            logger.info(f"[{scan_id}] Rejected reference {reference!r}")
            raise ReferenceParseError(reference)

        async with self.client_factory() as client:
            ref = (branch or "").strip() or parsed.ref
            if not ref:
                ref = await client.fetch_default_branch(parsed.owner, parsed.repo)

            target = ScanTarget(
                owner=parsed.owner, repo=parsed.repo, ref=ref, base_path=parsed.path
            )
            logger.info(f"[{scan_id}] Starting repo scan of {target.label}")

            entries = await client.fetch_tree(target.owner, target.repo, target.ref)
            paths = filter_supported_files(entries, target.base_path)
            logger.info(
                f"[{scan_id}] Tree: {len(entries)} entries, {len(paths)} supported files"
            )

            outcome = await scan_files(
                client,
                target,
                paths,
                self.engine,
                concurrency=settings.scan_concurrency,
                max_files=settings.max_repo_files,
                max_file_chars=settings.max_file_chars,
            )

        summary = build_summary(outcome.results_by_file)
        elapsed = (time.monotonic() - start_time) * 1000

        logger.info(
            f"[{scan_id}] Scan complete: {summary.total_issues} issues in "
            f"{summary.files_with_issues} files, {len(outcome.skipped)} skipped "
            f"({elapsed:.0f}ms)"
        )

        self.audit.log(
            AuditEntry(
                scan_id=scan_id,
                repository=target.label,
                files_considered=len(paths),
                files_scanned=outcome.files_scanned,
                files_skipped=len(outcome.skipped),
                files_with_issues=summary.files_with_issues,
                total_issues=summary.total_issues,
                duration_ms=round(elapsed, 2),
            )
        )

        return ScanReport(
            scan_id=scan_id,
            target=target,
            results_by_file=outcome.results_by_file,
            summary=summary,
            skipped_files=outcome.skipped,
            files_considered=len(paths),
            files_scanned=outcome.files_scanned,
            duration_ms=round(elapsed, 2),
        )
