"""
Shorthand Property Rule — Detects longhand declarations that could be folded into a shorthand.

A longhand is a candidate when at least one sibling longhand of the same
family appears on the same line or in the same declaration block.
"""

from __future__ import annotations

import re

from code_auditor.core.text import SourceText, mask_css_comments
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "shorthand-property"

LONGHAND_TO_SHORTHAND = {
    "margin-top": "margin",
    "margin-right": "margin",
    "margin-bottom": "margin",
    "margin-left": "margin",
    "padding-top": "padding",
    "padding-right": "padding",
    "padding-bottom": "padding",
    "padding-left": "padding",
    "border-top": "border",
    "border-right": "border",
    "border-bottom": "border",
    "border-left": "border",
    "background-color": "background",
    "background-image": "background",
    "background-repeat": "background",
    "background-position": "background",
}

_DECLARATIONS = {
    longhand: re.compile(rf"(?<![\w-]){re.escape(longhand)}\s*:")
    for longhand in LONGHAND_TO_SHORTHAND
}

EDUCATIONAL_CONTENT = """\
Many CSS properties come in two forms. Longhand properties set one value
(margin-top, background-color); shorthand properties set a whole family in
one declaration (margin, background).

Shorthands make stylesheets shorter and keep related values together.
Longhands are still the right tool when you deliberately change a single
value and want the others left alone.

Bad:
    .box {
      margin-top: 10px;
      margin-right: 20px;
      margin-bottom: 10px;
      margin-left: 20px;
    }

Good:
    .box {
      margin: 10px 20px;
    }
"""


def _siblings(longhand: str) -> list[re.Pattern[str]]:
    family = LONGHAND_TO_SHORTHAND[longhand]
    return [
        pattern
        for other, pattern in _DECLARATIONS.items()
        if other != longhand and LONGHAND_TO_SHORTHAND[other] == family
    ]


def _enclosing_block(masked: str, offset: int) -> str | None:
    start = masked.rfind("{", 0, offset)
    end = masked.find("}", offset)
    if start == -1 or end == -1:
        return None
    return masked[start:end]


def detect(text: str) -> list[Finding]:
    masked = mask_css_comments(text)
    source = SourceText(text)
    masked_lines = masked.split("\n")
    findings: list[Finding] = []

    for longhand, pattern in _DECLARATIONS.items():
        siblings = _siblings(longhand)
        for match in pattern.finditer(masked):
            line_number = source.line_number(match.start())
            line = masked_lines[line_number - 1]
            candidate = any(sibling.search(line) for sibling in siblings)
            if not candidate:
                block = _enclosing_block(masked, match.start())
                candidate = block is not None and any(sibling.search(block) for sibling in siblings)
            if candidate:
                findings.append(
                    source.finding_on_line(
                        line_number,
                        f"Consider using the shorthand property "
                        f"'{LONGHAND_TO_SHORTHAND[longhand]}' instead of '{longhand}'.",
                    )
                )

    return findings


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.CSS,
    category="Performance",
    severity=Severity.SUGGESTION,
    title="Longhand CSS Property Usage",
    description=(
        "Using longhand CSS properties when a shorthand property is available can lead to more "
        "verbose stylesheets. Shorthand properties can make your CSS more concise and easier to "
        "read, and sometimes slightly improve parsing performance."
    ),
    suggestion=(
        "Consider using shorthand CSS properties (e.g., `margin: 10px 20px;` instead of "
        "`margin-top: 10px; margin-right: 20px; ...`) where appropriate for conciseness and "
        "readability."
    ),
    detect=detect,
    educational_content=EDUCATIONAL_CONTENT,
)
