"""
DOM Access Before Ready Rule — Detects DOM lookups in scripts that never wait for the document.

One finding at the first lookup, only when the text has no
DOMContentLoaded listener and no window.onload handler.
"""

from __future__ import annotations

import re

from code_auditor.core.text import SourceText
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "dom-access-before-ready"

_DOM_LOOKUP = re.compile(r"document\.(?:getElementById|querySelector|querySelectorAll)\s*\(")
_READY_GUARD = re.compile(r"DOMContentLoaded|window\.onload")


def detect(text: str) -> list[Finding]:
    match = _DOM_LOOKUP.search(text)
    if match is None or _READY_GUARD.search(text):
        return []
    source = SourceText(text)
    return [
        source.finding_at(
            match.start(), "DOM access detected without DOMContentLoaded/onload guard."
        )
    ]


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.JAVASCRIPT,
    category="Best Practice",
    severity=Severity.WARNING,
    title="DOM Access Before Ready",
    description="Accessing DOM elements before DOMContentLoaded can return null.",
    suggestion=(
        "Wrap DOM access in DOMContentLoaded or place scripts at the end of body or use defer."
    ),
    detect=detect,
)
