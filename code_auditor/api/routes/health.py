"""
Health Check Route — GET /health
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from code_auditor.api.dependencies import get_analysis_engine
from code_auditor.config import VERSION
from code_auditor.core.rule_engine import AnalysisEngine

router = APIRouter()


@router.get("/health")
async def health(engine: AnalysisEngine = Depends(get_analysis_engine)):
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": VERSION,
        "rules": engine.rule_count,
    }
