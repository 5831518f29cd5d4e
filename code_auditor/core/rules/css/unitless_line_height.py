"""
Unitless Line Height Rule — Detects line-height values given in px, em, rem or %.
"""

from __future__ import annotations

import re

from code_auditor.core.text import SourceText
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "unitless-line-height"

_LINE_HEIGHT_WITH_UNIT = re.compile(r"line-height:\s*(\d+(?:\.\d+)?)(px|em|rem|%)")

EDUCATIONAL_CONTENT = """\
line-height accepts lengths, percentages and plain numbers, and they
inherit differently:
- px, em and % are resolved to a fixed length on the element, and
  children inherit that length.
- A unitless number is inherited as a ratio, and each descendant
  multiplies it by its own font-size.

With a unitless value, headings and other elements with a larger font get
proportionally taller lines instead of cramped text.

Bad:
    body {
      font-size: 16px;
      line-height: 1.5em;  /* h1 below inherits 24px */
    }
    h1 {
      font-size: 32px;
    }

Good:
    body {
      font-size: 16px;
      line-height: 1.5;    /* h1 gets 48px */
    }
"""


def detect(text: str) -> list[Finding]:
    source = SourceText(text)
    return [
        source.finding_at(
            m.start(),
            f"Line-height with unit '{m.group(2)}' detected. Consider using a unitless value.",
        )
        for m in _LINE_HEIGHT_WITH_UNIT.finditer(text)
    ]


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.CSS,
    category="Best Practice",
    severity=Severity.SUGGESTION,
    title="Unitless Line-Height Recommended",
    description=(
        "Using unitless values for `line-height` (e.g., `1.5` instead of `1.5em` or `150%`) is "
        "generally recommended. It allows the `line-height` to be inherited as a ratio, making "
        "it scale correctly with different `font-size` values."
    ),
    suggestion=(
        "Change `line-height` values to be unitless numbers (e.g., `1.5`). This ensures proper "
        "scaling relative to the `font-size` of the element it applies to, and its descendants."
    ),
    detect=detect,
    educational_content=EDUCATIONAL_CONTENT,
)
