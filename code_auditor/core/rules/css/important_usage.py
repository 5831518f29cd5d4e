"""
Important Usage Rule — Detects the !important flag.
"""

from __future__ import annotations

import re

from code_auditor.core.text import SourceText
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "important-usage"

_IMPORTANT = re.compile(r"!important")

EDUCATIONAL_CONTENT = """\
!important makes a declaration win over every other declaration for the
same property, whatever their specificity or order. It is a maintenance
trap:
- It breaks the natural cascade, so styles stop behaving predictably.
- The only way to override it is another !important, and the problem
  spreads.
- Finding out why a style is (or is not) applied becomes much harder.

Reserve it for rare cases such as utility classes or overriding third-party
styles. Otherwise rely on specificity and rule order.

Bad:
    .my-button {
      background-color: red !important;
    }

Good:
    button.primary-button {
      background-color: blue;
    }
    .my-button.active {
      background-color: purple;
    }
"""


def detect(text: str) -> list[Finding]:
    source = SourceText(text)
    return [
        source.finding_at(m.start(), "`!important` flag detected.")
        for m in _IMPORTANT.finditer(text)
    ]


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.CSS,
    category="Maintainability",
    severity=Severity.WARNING,
    title="Usage of !important",
    description=(
        "Using `!important` is generally an anti-pattern in CSS. It breaks the natural cascade "
        "and makes your styles difficult to override, leading to maintenance nightmares and "
        "unpredictable behavior."
    ),
    suggestion=(
        "Refactor your CSS to rely on proper specificity, cascade, and order of rules instead "
        "of `!important`. Consider using more specific selectors or restructuring your "
        "stylesheets."
    ),
    detect=detect,
    educational_content=EDUCATIONAL_CONTENT,
)
