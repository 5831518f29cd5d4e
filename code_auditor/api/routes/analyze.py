"""
Analyze Route — POST /analyze

Runs the rule set of one language group over a submitted text.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from code_auditor.api.dependencies import get_analysis_engine
from code_auditor.config import settings
from code_auditor.core.aggregator import build_summary
from code_auditor.core.rule_engine import AnalysisEngine
from code_auditor.models.scan_models import AnalyzeRequest, AnalyzeResponse

logger = logging.getLogger("code_auditor.api.analyze")

router = APIRouter()


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(
    request: AnalyzeRequest,
    engine: AnalysisEngine = Depends(get_analysis_engine),
):
    """Analyze a single source text."""
    if len(request.code) > settings.max_text_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Code exceeds maximum length of {settings.max_text_chars} characters",
        )

    findings = engine.analyze(request.code, request.language)
    logger.info(
        f"Analyzed {len(request.code)} chars of {request.language.value}: "
        f"{len(findings)} findings"
    )

    return AnalyzeResponse(
        language=request.language,
        findings=findings,
        summary=build_summary({"<text>": findings}),
    )
