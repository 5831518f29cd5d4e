"""
Repository Scan Route — POST /scan-repo

Scans every .js, .html and .css file of a public GitHub repository.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from code_auditor.api.dependencies import get_scan_worker
from code_auditor.core.errors import BranchResolutionError, ReferenceParseError, TreeFetchError
from code_auditor.models.scan_models import RepoScanRequest, ScanReport
from code_auditor.workers.scan_worker import RepoScanWorker

logger = logging.getLogger("code_auditor.api.repo_scan")

router = APIRouter()


@router.post("/scan-repo", response_model=ScanReport)
async def scan_repo(
    request: RepoScanRequest,
    worker: RepoScanWorker = Depends(get_scan_worker),
):
    """Resolve, fetch and analyze a repository."""
    try:
        return await worker.run_scan(request.reference, branch=request.branch)
    except ReferenceParseError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except BranchResolutionError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except TreeFetchError as e:
        logger.warning(f"Tree fetch failed for {request.reference!r}: {e}")
        raise HTTPException(status_code=502, detail=str(e))
