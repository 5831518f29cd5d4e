"""
Conflicting Overrides Rule — Detects a selector redefining a property with a different value.

Blocks are compared against earlier blocks with the same selector
(whitespace-normalized), never against themselves. The later declaration
is reported on the line of its block's opening brace.
"""

from __future__ import annotations

import re

from code_auditor.core.text import SourceText, iter_css_blocks
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "css-conflicting-overrides"

_DECLARATION = re.compile(r"([a-z-]+)\s*:\s*([^;]+);")


def detect(text: str) -> list[Finding]:
    source = SourceText(text)
    findings: list[Finding] = []
    seen: dict[str, dict[str, str]] = {}

    for block in iter_css_blocks(text):
        selector = " ".join(block.selector.split())
        line_number = source.line_number(block.open_offset)
        earlier = seen.setdefault(selector, {})
        declared: dict[str, str] = {}

        for match in _DECLARATION.finditer(block.body):
            prop, value = match.group(1), match.group(2).strip()
            old = earlier.get(prop)
            if old is not None and old != value:
                findings.append(
                    source.finding_on_line(
                        line_number,
                        f"Selector '{selector}' overrides '{prop}' (new: {value}, old: {old}).",
                    )
                )
            declared[prop] = value

        earlier.update(declared)

    return findings


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.CSS,
    category="Maintainability",
    severity=Severity.WARNING,
    title="Later Rule Overrides Earlier Rule",
    description=(
        "Same selector redefined later with different values can unintentionally override "
        "earlier styles."
    ),
    suggestion="Consolidate declarations or ensure the order is intentional.",
    detect=detect,
)
