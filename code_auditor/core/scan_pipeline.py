"""
Scan Pipeline — Bounded-concurrency fetch + analyze over a list of repository paths.

A fixed pool of workers drains one shared queue. A path is removed from the
queue before its fetch starts, so no two workers ever see the same path.
Per-file problems (fetch failure, oversize text, analysis error) are logged,
recorded as skipped, and never stop the other workers. Analysis of a fetched
text runs on the event loop without suspending, so each file is analyzed
to completion once its fetch returns.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Protocol

from code_auditor.core.rule_engine import AnalysisEngine
from code_auditor.models.rule_models import FileFinding, LanguageGroup
from code_auditor.models.scan_models import ScanTarget, SkippedFile

logger = logging.getLogger("code_auditor.scan_pipeline")


class RawFileFetcher(Protocol):
    async def fetch_raw_file(self, owner: str, repo: str, ref: str, path: str) -> str | None:
        ...


@dataclass
class ScanOutcome:
    """Per-file results of one pipeline run."""

    # Only paths with at least one finding
    results_by_file: dict[str, list[FileFinding]] = field(default_factory=dict)
    skipped: list[SkippedFile] = field(default_factory=list)
    # Fetched and analyzed without error
    files_scanned: int = 0


async def scan_files(
    fetcher: RawFileFetcher,
    target: ScanTarget,
    paths: list[str],
    engine: AnalysisEngine,
    *,
    concurrency: int = 6,
    max_files: int = 300,
    max_file_chars: int = 200_000,
) -> ScanOutcome:
    """
    Fetch and analyze up to ``max_files`` paths with ``concurrency`` workers.

    Args:
        fetcher: Object providing ``fetch_raw_file``.
        target: Resolved repository location the paths belong to.
        paths: Repository-relative file paths, in scan order.
        engine: Analysis engine applied to each fetched text.
        concurrency: Number of workers draining the queue.
        max_files: Paths beyond this count are dropped.
        max_file_chars: Fetched texts longer than this are skipped.

    Returns:
        ScanOutcome keyed and ordered by the input path order.
    """
    selected = paths[:max_files]
    if len(paths) > max_files:
        logger.debug(f"Dropping {len(paths) - max_files} paths beyond the {max_files} file cap")

    queue: asyncio.Queue[str] = asyncio.Queue()
    for path in selected:
        queue.put_nowait(path)

    results: dict[str, list[FileFinding]] = {}
    skipped: dict[str, SkippedFile] = {}
    analyzed: set[str] = set()

    async def scan_one(path: str) -> None:
        language = LanguageGroup.from_path(path)
        if language is None:
            logger.debug(f"No language group for {path}; not scanned")
            return

        try:
            text = await fetcher.fetch_raw_file(target.owner, target.repo, target.ref, path)
        except Exception as e:
            logger.warning(f"Fetch failed for {path}: {e}")
            skipped[path] = SkippedFile(path=path, reason="fetch_failed")
            return
        if text is None:
            skipped[path] = SkippedFile(path=path, reason="fetch_failed")
            return
        if len(text) > max_file_chars:
            logger.info(f"Skipping {path}: {len(text)} chars exceeds {max_file_chars}")
            skipped[path] = SkippedFile(path=path, reason="too_large")
            return

        try:
            findings = engine.analyze(text, language)
            tagged = [FileFinding(**f.model_dump(), file_path=path) for f in findings]
        except Exception as e:
            logger.warning(f"Analysis failed for {path}: {e}", exc_info=True)
            skipped[path] = SkippedFile(path=path, reason="analysis_failed")
            return

        analyzed.add(path)
        if tagged:
            results[path] = tagged

    async def worker() -> None:
        while True:
            try:
                path = queue.get_nowait()
            except asyncio.QueueEmpty:
                return
            await scan_one(path)

    workers = [asyncio.create_task(worker()) for _ in range(max(1, concurrency))]
    await asyncio.gather(*workers)

    return ScanOutcome(
        results_by_file={p: results[p] for p in selected if p in results},
        skipped=[skipped[p] for p in selected if p in skipped],
        files_scanned=len(analyzed),
    )
