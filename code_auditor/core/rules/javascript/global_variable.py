"""
Global Variable Rule — Detects assignments at the start of a line with no declaration keyword.

Candidates look like free-standing `name = value` statements. A candidate is
dropped when its line is a comment or mentions a declaration keyword
anywhere, since the assignment is then plausibly part of a declaration.
"""

from __future__ import annotations

import re

from code_auditor.core.text import SourceText
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "global-variable"

_FREE_ASSIGNMENT = re.compile(
    r"^(?!\s*(?:const|let|var|function|class|import|export|if|for|while|switch|try)\s)"
    r"[a-zA-Z_$][0-9a-zA-Z_$]*\s*=(?!=)",
    re.MULTILINE,
)

_DECLARATION_WORDS = ("const", "let", "var", "function", "class")

EDUCATIONAL_CONTENT = """\
A variable assigned without const, let or var becomes a property of the
global object (outside strict mode). Global state leads to:
- Name collisions with other scripts or libraries.
- Hard debugging, since any code can change the value.
- Less reusable code that silently depends on shared state.
- Security exposure, as other scripts can read or overwrite the value.

Declare every variable with const (or let when it must be reassigned) so its
scope is limited to the block, function or module that owns it.

Bad:
    appName = "MyApp";
    function init() {
      version = "1.0";
    }

Good:
    const appName = "MyApp";
    function init() {
      const version = "1.0";
    }
"""


def detect(text: str) -> list[Finding]:
    """Flag line-leading assignments that are not declarations or comments."""
    source = SourceText(text)
    findings: list[Finding] = []

    for match in _FREE_ASSIGNMENT.finditer(text):
        line_number = source.line_number(match.start())
        line = source.line(line_number)
        stripped = line.strip()
        if stripped.startswith(("//", "/*")):
            continue
        if any(word in line for word in _DECLARATION_WORDS):
            continue
        name = match.group(0).split("=")[0].strip()
        findings.append(
            source.finding_on_line(line_number, f"Possible global variable '{name}' detected.")
        )

    return findings


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.JAVASCRIPT,
    category="Best Practice",
    severity=Severity.ERROR,
    title="Global Variable Detected",
    description=(
        "Declaring variables without `const`, `let`, or `var` makes them global, which "
        "can lead to conflicts and make code harder to manage. It's generally considered "
        "bad practice to pollute the global namespace."
    ),
    suggestion=(
        "Always declare variables with `const`, `let`, or `var` to ensure they are "
        "properly scoped. Use `const` by default, and `let` if the variable needs to be "
        "reassigned."
    ),
    detect=detect,
    educational_content=EDUCATIONAL_CONTENT,
)
