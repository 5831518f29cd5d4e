"""
Unquoted String Literal Rule — Detects a bare word passed to console/alert style calls.

The word is only reported when it is not declared anywhere, so
`console.log(total)` with a declared `total` is fine.
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


RULE_ID = "unquoted-string-literal"

_BARE_WORD_CALL = re.compile(
    r"\b(?:console\.(?:log|warn|error|info)|alert|prompt|confirm)\s*\(\s*([A-Za-z_$][\w$]*)\s*\)",
    re.ASCII,
)


def detect(text: str) -> list[Finding]:
    masked = mask_js_literals(text)
    source = SourceText(text)
    declared = declared_names(masked)

    findings: list[Finding] = []
    for match in _BARE_WORD_CALL.finditer(masked):
        word = match.group(1)
        if word in declared or word in JS_KEYWORDS or word in KNOWN_GLOBALS:
            continue
        findings.append(
            source.finding_at(
                match.start(), f"Unquoted word '{word}' passed. Did you mean \"{word}\"?"
            )
        )
    return findings


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.JAVASCRIPT,
    category="Bug Risk",
    severity=Severity.WARNING,
    title="Unquoted String in Call",
    description=(
        "Calls like console.log should pass strings in quotes. A bare word is likely a typo "
        "or undeclared variable."
    ),
    suggestion='Wrap string literals in quotes: "Hello".',
    detect=detect,
)
