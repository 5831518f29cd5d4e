"""
Deep Nesting Rule — Detects code blocks nested four or more levels deep.

Depth is counted line by line from the number of '{' and '}' characters,
clamped at zero so stray closing braces cannot drive it negative.
"""

from __future__ import annotations

from code_auditor.core.text import SourceText
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "deep-nesting-js"

NESTING_THRESHOLD = 4

EDUCATIONAL_CONTENT = """\
Deeply nested code, often called "arrowhead code" because of its shape,
happens when many conditionals or loops sit inside each other. The control
flow becomes hard to follow.

Problems with deep nesting:
- Readability: the logic cannot be grasped at a glance.
- Debugging: tracing execution paths gets complex.
- Maintainability: changes easily introduce new bugs.
- Testability: every nested path needs its own test.

Ways to reduce nesting: guard clauses with early returns, extracting nested
logic into small functions, and replacing tangled conditionals with a
lookup table or strategy object.

Bad:
    function processOrder(order) {
      if (order) {
        if (order.items.length > 0) {
          if (order.total > 0) {
            if (order.status === 'pending') { /* ... */ }
          }
        }
      }
    }

Good:
    function processOrder(order) {
      if (!order || order.items.length === 0 || order.total <= 0) return;
      if (order.status !== 'pending') return;
      /* ... */
    }
"""


def detect(text: str) -> list[Finding]:
    """Report the deepest point once, if it reaches the threshold."""
    source = SourceText(text)
    max_depth = 0
    depth = 0
    depth_line = 0

    for line_number, line in enumerate(source.lines, start=1):
        depth += line.count("{") - line.count("}")
        if depth > max_depth:
            max_depth = depth
            depth_line = line_number
        if depth < 0:
            depth = 0

    if max_depth < NESTING_THRESHOLD:
        return []

    return [
        source.finding_on_line(
            depth_line,
            f"Nesting depth of {max_depth} detected. Consider refactoring for readability.",
        )
    ]


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.JAVASCRIPT,
    category="Maintainability",
    severity=Severity.WARNING,
    title="Deeply Nested Code Block",
    description=(
        "Excessive nesting (e.g., too many if/else, for, while loops within each other) "
        "makes code difficult to read, understand, and debug. It often indicates a "
        "complex logic that could be simplified."
    ),
    suggestion=(
        "Refactor deeply nested code using techniques like early returns, breaking down "
        "functions, or using array methods (map, filter, reduce) instead of nested loops."
    ),
    detect=detect,
    educational_content=EDUCATIONAL_CONTENT,
)
