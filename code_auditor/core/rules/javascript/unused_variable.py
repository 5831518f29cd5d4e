"""
Unused Variable Rule — Detects const/let/var declarations never referenced afterwards.

Declaration/usage correlation: for each declaration site, the rest of the
text is searched for the identifier as a whole word. Each declaration is
judged on its own, even when the same name is declared more than once.
"""

from __future__ import annotations

import re

from code_auditor.core.text import SourceText
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "unused-variable"

_DECLARATION = re.compile(r"(?:const|let|var)\s+([a-zA-Z_$][0-9a-zA-Z_$]*)\s*=")

EDUCATIONAL_CONTENT = """\
Unused variables are a common sign of dead code or incomplete refactoring.
They add cognitive load for readers and can hint at logic that was meant to
run but never does.

Why avoid them?
- Readability: they clutter the code and make the logic harder to follow.
- Maintainability: other developers will wonder what the variable is for.
- Bundle size: unused code is not always removed by tree-shaking.

Bad:
    function greetUser(name) {
      const greeting = "Hello, "; // never used
      console.log(name);
    }

Good:
    function greetUser(name) {
      const greeting = "Hello, ";
      console.log(greeting + name);
    }
"""


def detect(text: str) -> list[Finding]:
    """Flag every declaration whose name does not appear again after it."""
    source = SourceText(text)
    findings: list[Finding] = []

    for match in _DECLARATION.finditer(text):
        name = match.group(1)
        usage = re.compile(rf"(?<![\w$]){re.escape(name)}(?![\w$])", re.ASCII)
        if usage.search(text, match.end()):
            continue
        findings.append(
            source.finding_at(match.start(), f"Variable '{name}' is declared but never used.")
        )

    return findings


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.JAVASCRIPT,
    category="Readability",
    severity=Severity.WARNING,
    title="Unused Variable Detected",
    description=(
        "This variable is declared but never used. Removing unused variables helps keep "
        "your code clean and easier to understand, reducing potential confusion and "
        "bundle size."
    ),
    suggestion=(
        "Remove the unused variable declaration or ensure it is used somewhere in your code."
    ),
    detect=detect,
    educational_content=EDUCATIONAL_CONTENT,
)
