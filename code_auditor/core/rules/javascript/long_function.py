"""
Long Function Rule — Detects function bodies spanning more than 30 lines.

A function starts on a line matching one of the declaration shapes below;
its span ends on the first later line containing '}' where the running
brace balance returns to zero. Functions do not nest for this count.
"""

from __future__ import annotations

import re

from code_auditor.core.text import SourceText
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "long-function-js"

FUNCTION_MAX_LINES = 30

_FUNCTION_START = re.compile(
    r"function\s+(?P<declared>[a-zA-Z_$][0-9a-zA-Z_$]*)\s*\("
    r"|(?:const|let|var)\s+(?P<expression>[a-zA-Z_$][0-9a-zA-Z_$]*)\s*=\s*(?:async\s+)?function\s*\("
    r"|(?:const|let|var)\s+(?P<arrow>[a-zA-Z_$][0-9a-zA-Z_$]*)\s*=\s*(?:async\s*)?\([^)]*\)\s*=\s*>\s*\{"
    r"|[a-zA-Z_$][0-9a-zA-Z_$]*\s*=\s*>\s*\{"
)

EDUCATIONAL_CONTENT = """\
Long functions are a strong sign that a function does too much. That makes
it hard to read, hard to test, hard to debug and hard to reuse.

The Single Responsibility Principle says a function should have one reason
to change. Splitting a large function into small, focused ones improves
modularity, readability and testability.

Bad:
    function processUserData(user, data) {
      // validate, authenticate, fetch, transform, save,
      // send confirmation, log activity ... all in one place
    }

Good:
    function processUserData(user, data) {
      validateUser(user);
      authenticateUser(user);
      const transformed = fetchAndTransformData(data);
      saveUserData(transformed);
      sendConfirmation(user);
      logUserActivity(user, 'data processed');
    }
"""


def detect(text: str) -> list[Finding]:
    """Measure each top-level function span and flag the long ones."""
    source = SourceText(text)
    findings: list[Finding] = []

    in_function = False
    start_line = 0
    name = ""
    balance = 0

    for line_number, raw_line in enumerate(source.lines, start=1):
        line = raw_line.strip()
        match = None if in_function else _FUNCTION_START.search(line)

        if match:
            in_function = True
            start_line = line_number
            name = (
                match.group("declared")
                or match.group("expression")
                or match.group("arrow")
                or "anonymous"
            )
            balance = line.count("{") - line.count("}")
            # One-line body: `function f() { return 1; }`
            if balance == 0 and "{" in line and "}" in line:
                in_function = False
        elif in_function:
            balance += line.count("{") - line.count("}")
            if balance == 0 and "}" in line:
                length = line_number - start_line + 1
                if length > FUNCTION_MAX_LINES:
                    findings.append(
                        Finding(
                            line_number=start_line,
                            snippet=f"function {name}(...)",
                            message=(
                                f"Function '{name}' is {length} lines long. "
                                "Consider breaking it down."
                            ),
                        )
                    )
                in_function = False

    return findings


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.JAVASCRIPT,
    category="Maintainability",
    severity=Severity.WARNING,
    title="Function Exceeds Max Lines",
    description=(
        "Functions that are too long (e.g., over 30-50 lines) often do too many things. "
        "This violates the Single Responsibility Principle and makes them hard to read, "
        "test, and reuse."
    ),
    suggestion=(
        "Break down this function into smaller, more focused functions. Each function "
        "should ideally do one thing and do it well."
    ),
    detect=detect,
    educational_content=EDUCATIONAL_CONTENT,
)
