"""
Duplicate Id Rule — Detects id attribute values used more than once.

Occurrences are grouped by value; every occurrence after the first in a
group is reported. Groups are emitted in order of their first appearance.
"""

from __future__ import annotations

import re

from code_auditor.core.text import SourceText
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "duplicate-id-attribute"

_ID_ATTRIBUTE = re.compile(r"(?<![\w-])id\s*=\s*[\"']([^\"']+)[\"']")


def detect(text: str) -> list[Finding]:
    source = SourceText(text)
    occurrences: dict[str, list[int]] = {}
    for match in _ID_ATTRIBUTE.finditer(text):
        occurrences.setdefault(match.group(1), []).append(source.line_number(match.start()))

    findings: list[Finding] = []
    for id_value, line_numbers in occurrences.items():
        for line_number in line_numbers[1:]:
            findings.append(
                source.finding_on_line(line_number, f"Duplicate id '{id_value}' detected.")
            )
    return findings


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.HTML,
    category="Accessibility",
    severity=Severity.ERROR,
    title="Duplicate id Attributes in HTML",
    description=(
        "HTML id attributes must be unique within a page. Duplicate ids can break styling and "
        "JavaScript selectors."
    ),
    suggestion=(
        "Ensure each element has a unique id. Convert repeated ids to classes if styling "
        "multiple elements."
    ),
    detect=detect,
)
