"""
Undeclared Variable Rule — Detects identifiers that are never declared anywhere in the text.

Strings and comments are masked first. Property accesses (`a.b`), object
keys and labels (`name:`), keywords and well-known globals are ignored.
Each name is reported once, at its first use.
"""

from __future__ import annotations

import re

from code_auditor.core.rules.javascript.declarations import (
    JS_KEYWORDS,
    KNOWN_GLOBALS,
    declared_names,
)
from code_auditor.core.text import SourceText, mask_js_literals
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "undeclared-variable"

_TOKEN = re.compile(r"(^|[^.])\b([a-zA-Z_$][\w$]*)\b", re.ASCII)
_KEY_SUFFIX = re.compile(r"\s*:")


def detect(text: str) -> list[Finding]:
    masked = mask_js_literals(text)
    source = SourceText(text)
    declared = declared_names(masked)

    findings: list[Finding] = []
    reported: set[str] = set()
    for match in _TOKEN.finditer(masked):
        name = match.group(2)
        if name in reported or name in declared:
            continue
        if name in JS_KEYWORDS or name in KNOWN_GLOBALS:
            continue
        if _KEY_SUFFIX.match(masked, match.end(2)):
            continue
        reported.add(name)
        findings.append(source.finding_at(match.start(2), f"Undeclared variable '{name}' used."))
    return findings


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.JAVASCRIPT,
    category="Bug Risk",
    severity=Severity.ERROR,
    title="Undeclared Variable Usage",
    description="Using variables that are not declared leads to ReferenceError at runtime.",
    suggestion="Declare all variables with const/let/var before use.",
    detect=detect,
)
