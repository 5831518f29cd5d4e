"""
Console Log Rule — Detects console.log/warn/error/info/debug calls left in code.
"""

from __future__ import annotations

import re

from code_auditor.core.text import SourceText
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "console-log"

_CONSOLE_CALL = re.compile(r"console\.(?:log|warn|error|info|debug)\s*\(")

EDUCATIONAL_CONTENT = """\
console.log() and the other console methods are invaluable while
developing, but they should be removed or gated in production:
- Information leakage: logged data is visible to anyone who opens the
  browser's developer tools.
- Performance: heavy logging in hot paths has a measurable cost.
- Clutter: noise in the console hides the messages that matter.

Gate debug output behind an environment check, strip it in the build, or
use a logging library with configurable levels.

Bad:
    function calculatePrice(item) {
      console.log("Calculating price for:", item.name);
      return item.price * item.quantity;
    }

Good:
    function calculatePrice(item) {
      if (process.env.NODE_ENV !== 'production') {
        console.log("Calculating price for:", item.name);
      }
      return item.price * item.quantity;
    }
"""


def detect(text: str) -> list[Finding]:
    source = SourceText(text)
    return [
        source.finding_at(m.start(), "`console.log` or similar statement detected.")
        for m in _CONSOLE_CALL.finditer(text)
    ]


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.JAVASCRIPT,
    category="Debugging",
    severity=Severity.SUGGESTION,
    title="`console.log` Detected",
    description=(
        "`console.log` statements are useful for debugging but should generally be removed "
        "before deploying code to production. They can expose sensitive information and "
        "impact performance."
    ),
    suggestion=(
        "Remove `console.log` statements from production code. Use a proper logging "
        "library or conditional logging based on environment variables for debugging "
        "purposes."
    ),
    detect=detect,
    educational_content=EDUCATIONAL_CONTENT,
)
