"""
Rule Catalog Routes — GET /rules, GET /rules/{rule_id}
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from code_auditor.core.rule_engine import get_rule, rules_for
from code_auditor.models.rule_models import SEVERITY_ORDER, LanguageGroup, RuleInfo

router = APIRouter(prefix="/rules")


@router.get("", response_model=list[RuleInfo])
async def list_rules(language: LanguageGroup | None = None):
    """Rule metadata, optionally for one language group, errors first."""
    ordered = sorted(rules_for(language), key=lambda rule: SEVERITY_ORDER[rule.severity])
    return [RuleInfo.from_rule(rule) for rule in ordered]


@router.get("/{rule_id}", response_model=RuleInfo)
async def rule_detail(rule_id: str):
    rule = get_rule(rule_id)
    if rule is None:
        raise HTTPException(status_code=404, detail=f"Unknown rule: {rule_id}")
    return RuleInfo.from_rule(rule)
