"""
Unbalanced Brackets Rule — Compares opening and closing bracket counts over the whole text.

Produces at most one finding, always on line 1, carrying the three
open-minus-close differences.
"""

from __future__ import annotations

from code_auditor.core.text import SourceText
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "unbalanced-brackets"


def detect(text: str) -> list[Finding]:
    paren = text.count("(") - text.count(")")
    bracket = text.count("[") - text.count("]")
    brace = text.count("{") - text.count("}")
    if paren == 0 and bracket == 0 and brace == 0:
        return []

    source = SourceText(text)
    return [
        source.finding_on_line(
            1,
            f"Unbalanced brackets: () diff={paren}, [] diff={bracket}, {{}} diff={brace}.",
        )
    ]


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.JAVASCRIPT,
    category="Error",
    severity=Severity.ERROR,
    title="Unbalanced Brackets/Braces/Parentheses",
    description="Mismatched (), [], or {} lead to syntax errors.",
    suggestion="Ensure each opening bracket has a matching closing bracket.",
    detect=detect,
)
