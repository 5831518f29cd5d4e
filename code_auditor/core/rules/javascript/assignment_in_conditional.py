"""
Assignment In Conditional Rule — Detects a single '=' inside if/while/for conditions.

For classic `for (init; test; update)` loops only the test clause is checked;
`for...in` and `for...of` headers are ignored.
"""

from __future__ import annotations

import re

from code_auditor.core.text import SourceText, mask_js_literals
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "js-assignment-in-conditional"

_CONDITIONAL = re.compile(r"\b(if|while|for)\s*\(([^)]*)\)")
_ASSIGNMENT = re.compile(r"(?<![=!<>+\-*/%&|^])=(?![=>])")
_FOR_IN_OF = re.compile(r"\b(?:in|of)\b")


def _condition(keyword: str, expression: str) -> str | None:
    if keyword != "for":
        return expression
    if ";" in expression:
        return expression.split(";")[1]
    if _FOR_IN_OF.search(expression):
        return None
    return expression


def detect(text: str) -> list[Finding]:
    masked = mask_js_literals(text)
    source = SourceText(text)
    findings: list[Finding] = []

    for match in _CONDITIONAL.finditer(masked):
        condition = _condition(match.group(1), match.group(2))
        if condition and _ASSIGNMENT.search(condition):
            findings.append(
                source.finding_at(
                    match.start(2), "Possible assignment (=) in conditional. Did you mean ===?"
                )
            )
    return findings


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.JAVASCRIPT,
    category="Bug Risk",
    severity=Severity.ERROR,
    title="Assignment Inside Conditional",
    description=(
        "Using = inside if/while/for conditions usually indicates a bug where == or === "
        "was intended."
    ),
    suggestion=(
        "Replace = with === (or == if intentional) inside conditionals. If assignment is "
        "intentional, wrap it in parentheses and add a comment."
    ),
    detect=detect,
)
