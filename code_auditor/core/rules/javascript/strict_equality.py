"""
Strict Equality Rule — Detects loose equality (==).

Only `==` that is glued to its left operand is matched: an operator
character or whitespace right before it, or a third '=' after it, rules the
match out. `a==b` is flagged; `a === b` and `a != b` are not.
"""

from __future__ import annotations

import re

from code_auditor.core.text import SourceText
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "strict-equality"

_LOOSE_EQUALITY = re.compile(r"(?<![!=\s\-+*/%&|^~])==(?!=)")

EDUCATIONAL_CONTENT = """\
JavaScript has two equality operators:
- Loose equality (==) converts both operands to a common type before
  comparing, which produces surprising results.
- Strict equality (===) compares without conversion; value and type must
  both match.

Prefer === for predictability, fewer coercion bugs and clearer intent.

Loose:
    false == 0;          // true
    "1" == 1;            // true
    null == undefined;   // true

Strict:
    false === 0;         // false
    "1" === 1;           // false
    null === undefined;  // false
"""


def detect(text: str) -> list[Finding]:
    source = SourceText(text)
    return [
        source.finding_at(
            m.start(), "Loose equality (==) detected. Consider using strict equality (===)."
        )
        for m in _LOOSE_EQUALITY.finditer(text)
    ]


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.JAVASCRIPT,
    category="Best Practice",
    severity=Severity.WARNING,
    title="Loose Equality (==) Used",
    description=(
        "Using `==` (loose equality) instead of `===` (strict equality) can lead to "
        "unexpected type coercion and subtle bugs. Strict equality compares both value and "
        "type without type conversion."
    ),
    suggestion=(
        "Prefer `===` (strict equality) over `==` (loose equality) to avoid unexpected type "
        "coercion. Use `==` only when you fully understand its behavior and specifically "
        "intend for type coercion to occur."
    ),
    detect=detect,
    educational_content=EDUCATIONAL_CONTENT,
)
