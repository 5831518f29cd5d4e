"""
Wrong Nesting Rule — Validates tag nesting with a stack of open elements.

Void elements and self-closed tokens never enter the stack. A closing tag
that does not match the top of the stack is reported as a mismatch; if the
tag is open further down, the stack unwinds through it so the elements in
between are not reported again as unclosed. Whatever is still open at the
end of the text is reported as unclosed, outermost first.
"""

from __future__ import annotations

import re

from code_auditor.core.text import SourceText
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "wrong-nesting"

VOID_TAGS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input", "link",
    "meta", "param", "source", "track", "wbr",
})

_TAG_TOKEN = re.compile(r"<\/?([a-zA-Z][a-zA-Z0-9-]*)(\s[^<>]*)?>")


def detect(text: str) -> list[Finding]:
    source = SourceText(text)
    findings: list[Finding] = []
    stack: list[tuple[str, int]] = []

    for match in _TAG_TOKEN.finditer(text):
        token = match.group(0)
        tag = match.group(1).lower()
        line_number = source.line_number(match.start())
        snippet = source.snippet(line_number) or token

        if not token.startswith("</"):
            if tag not in VOID_TAGS and not token.endswith("/>"):
                stack.append((tag, line_number))
            continue

        if not stack:
            findings.append(
                Finding(
                    line_number=line_number,
                    snippet=snippet,
                    message=f"Closing tag </{tag}> has no opening tag.",
                )
            )
            continue

        expected = stack[-1][0]
        if expected == tag:
            stack.pop()
            continue

        findings.append(
            Finding(
                line_number=line_number,
                snippet=snippet,
                message=f"Mismatched closing tag </{tag}>. Expected </{expected}>.",
            )
        )
        open_tags = [open_tag for open_tag, _ in stack]
        if tag in open_tags:
            depth = len(open_tags) - 1 - open_tags[::-1].index(tag)
            del stack[depth:]

    for tag, line_number in stack:
        findings.append(
            Finding(
                line_number=line_number,
                snippet=source.snippet(line_number) or f"<{tag}>",
                message=f"Unclosed tag <{tag}> detected.",
            )
        )
    return findings


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.HTML,
    category="Error",
    severity=Severity.ERROR,
    title="Wrong or Mismatched Tag Nesting",
    description=(
        "HTML tags must be properly nested. A closing tag must match the most recent unclosed "
        "opening tag."
    ),
    suggestion=(
        "Fix tag order so that closing tags match their corresponding opening tags (LIFO)."
    ),
    detect=detect,
)
