"""
Linking Issues Rule — Detects stylesheet links and script sources with unexpected extensions.
"""

from __future__ import annotations

import re

from code_auditor.core.text import SourceText
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "html-linking-issues"

_STYLESHEET_LINK = re.compile(r"<link\b[^<>]*rel=[\"']stylesheet[\"'][^<>]*>", re.IGNORECASE)
_HREF = re.compile(r"href=[\"']([^\"']+)[\"']", re.IGNORECASE)
_SCRIPT_SRC = re.compile(r"<script\b[^<>]*src=[\"']([^\"'<>]+)[\"'][^<>]*>", re.IGNORECASE)
_CSS_EXTENSION = re.compile(r"\.css(?:[?#]|$)", re.IGNORECASE)
_JS_EXTENSION = re.compile(r"\.m?js(?:[?#]|$)", re.IGNORECASE)


def detect(text: str) -> list[Finding]:
    source = SourceText(text)
    findings: list[Finding] = []

    for match in _STYLESHEET_LINK.finditer(text):
        href = _HREF.search(match.group(0))
        if href is None or not _CSS_EXTENSION.search(href.group(1)):
            line_number = source.line_number(match.start())
            findings.append(
                source.finding_on_line(
                    line_number,
                    "Stylesheet link may be incorrect or missing .css extension.",
                    snippet=source.snippet(line_number) or match.group(0),
                )
            )

    for match in _SCRIPT_SRC.finditer(text):
        if not _JS_EXTENSION.search(match.group(1)):
            line_number = source.line_number(match.start())
            findings.append(
                source.finding_on_line(
                    line_number,
                    "Script source may be incorrect or missing .js extension.",
                    snippet=source.snippet(line_number) or match.group(0),
                )
            )

    return findings


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.HTML,
    category="Best Practice",
    severity=Severity.WARNING,
    title="Possible Wrong File Linking",
    description=(
        "Stylesheets should typically end with .css and scripts with .js. Incorrect paths or "
        "extensions can break loading."
    ),
    suggestion=(
        "Ensure <link rel=\"stylesheet\"> points to .css and <script src> points to .js, and "
        "paths are valid."
    ),
    detect=detect,
)
