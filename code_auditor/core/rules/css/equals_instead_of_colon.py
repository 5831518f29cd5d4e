"""
Equals Instead Of Colon Rule — Detects `property = value;` declarations.
"""

from __future__ import annotations

import re

from code_auditor.core.text import SourceText, mask_css_comments
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "css-equals-instead-of-colon"

_EQUALS_DECLARATION = re.compile(r"\b[a-z-]+\s*=\s*[^;{}]+;")


def detect(text: str) -> list[Finding]:
    source = SourceText(text)
    return [
        source.finding_at(m.start(), "Use : instead of = in CSS declarations.")
        for m in _EQUALS_DECLARATION.finditer(mask_css_comments(text))
    ]


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.CSS,
    category="Error",
    severity=Severity.ERROR,
    title="Using = Instead of : in CSS Declaration",
    description="CSS uses colon to assign values (color: red), not equals (color = red).",
    suggestion="Replace = with : in CSS property declarations.",
    detect=detect,
)
