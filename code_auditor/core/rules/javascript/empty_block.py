"""
Empty Block Rule — Detects control-flow and function bodies with nothing in them.

Braces followed by ',', ':' or ')' are treated as arguments or object
values rather than statement blocks and are not reported.
"""

from __future__ import annotations

import re

from code_auditor.core.text import SourceText, mask_js_literals
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "empty-block"

_EMPTY_BLOCK = re.compile(
    r"\b(?:(?:if|for|while|switch|catch|function(?:\s+[A-Za-z_$][\w$]*)?)\s*\([^)]*\)"
    r"|else|try|finally)\s*\{\s*\}(?!\s*[,:)])",
    re.ASCII,
)

EDUCATIONAL_CONTENT = """\
An empty block such as `if (condition) {}` or an empty `catch {}` is rarely
harmless:
- Hidden logic: it often marks forgotten or unfinished work.
- Debugging: readers cannot tell an intentional no-op from an oversight.
- Suppressed errors: an empty catch silently swallows failures.

If the block really is meant to be empty, say so in a comment inside it.
Otherwise implement the missing logic, and at least log in catch blocks.

Bad:
    try {
      riskyOperation();
    } catch (error) {}

Good:
    try {
      riskyOperation();
    } catch (error) {
      console.error("An error occurred:", error);
    }
"""


def detect(text: str) -> list[Finding]:
    masked = mask_js_literals(text)
    source = SourceText(text)
    return [
        source.finding_at(m.start(), "Empty code block detected.")
        for m in _EMPTY_BLOCK.finditer(masked)
    ]


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.JAVASCRIPT,
    category="Readability",
    severity=Severity.WARNING,
    title="Empty Code Block Detected",
    description=(
        "An empty code block (e.g., empty `if`, `for`, `while` body, or empty `catch` "
        "block) can be a sign of incomplete code, a logical error, or unhandled exceptions. "
        "It often indicates that something was intended to be done but was left out."
    ),
    suggestion=(
        "Review empty code blocks. If intentional, add a comment explaining why it's empty. "
        "If a `catch` block is intentionally empty, consider if logging or error handling "
        "is still needed. Otherwise, implement the missing logic."
    ),
    detect=detect,
    educational_content=EDUCATIONAL_CONTENT,
)
