"""
Eval Usage Rule — Detects calls to eval().
"""

from __future__ import annotations

import re

from code_auditor.core.text import SourceText
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "eval-usage"

_EVAL_CALL = re.compile(r"\beval\s*\(")

EDUCATIONAL_CONTENT = """\
eval() takes a string and executes it as JavaScript. Its use is strongly
discouraged:
- Security: evaluating a string that contains user input allows code
  injection (XSS).
- Performance: engines cannot optimize code whose content is only known at
  runtime.
- Debugging: evaluated code does not appear in any source file.
- Maintainability: the code that actually runs is not visible to readers.

There is almost always a safer alternative: JSON.parse() for JSON, bracket
notation (obj[prop]) for dynamic property access, or a plain function call.

Bad:
    const userInput = "console.log('Hello from eval!');";
    eval(userInput);

Good:
    const data = JSON.parse('{"name": "Alice"}');
    const prop = "greeting";
    console.log(obj[prop]);
"""


def detect(text: str) -> list[Finding]:
    source = SourceText(text)
    return [
        source.finding_at(m.start(), "`eval()` function detected. This is a security risk.")
        for m in _EVAL_CALL.finditer(text)
    ]


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.JAVASCRIPT,
    category="Security",
    severity=Severity.ERROR,
    title="`eval()` Usage Detected",
    description=(
        "The `eval()` function executes JavaScript code represented as a string. It is a "
        "security risk as it can execute arbitrary code, and it also makes debugging and "
        "optimization difficult."
    ),
    suggestion=(
        "Avoid using `eval()`. There are almost always safer and more efficient "
        "alternatives, such as `JSON.parse()` for parsing JSON strings, or direct function "
        "calls and object lookups instead of dynamic code execution."
    ),
    detect=detect,
    educational_content=EDUCATIONAL_CONTENT,
)
