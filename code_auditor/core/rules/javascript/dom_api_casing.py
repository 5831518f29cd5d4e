"""
DOM API Casing Rule — Detects document lookup methods written with the wrong case.
"""

from __future__ import annotations

import re

from code_auditor.core.text import SourceText
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "dom-api-casing"

_CANONICAL = {
    name.lower(): name
    for name in (
        "getElementById",
        "getElementsByClassName",
        "querySelector",
        "querySelectorAll",
    )
}

_DOM_LOOKUP = re.compile(
    r"document\.(getelementbyid|getelementsbyclassname|queryselectorall|queryselector)\s*\(",
    re.IGNORECASE,
)


def detect(text: str) -> list[Finding]:
    source = SourceText(text)
    findings: list[Finding] = []
    for match in _DOM_LOOKUP.finditer(text):
        written = match.group(1)
        canonical = _CANONICAL[written.lower()]
        if written != canonical:
            findings.append(
                source.finding_at(
                    match.start(),
                    f"Incorrect casing '{written}'. Use proper casing (e.g., {canonical}).",
                )
            )
    return findings


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.JAVASCRIPT,
    category="Bug Risk",
    severity=Severity.ERROR,
    title="DOM API Case Sensitivity",
    description=(
        "DOM APIs are case sensitive (e.g., getElementById). Wrong casing will cause "
        "runtime errors."
    ),
    suggestion=(
        "Use correct casing: document.getElementById, document.querySelector, "
        "document.querySelectorAll, document.getElementsByClassName."
    ),
    detect=detect,
)
