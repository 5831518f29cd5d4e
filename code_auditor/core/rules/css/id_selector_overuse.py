"""
Id Selector Overuse Rule — Detects the same #id selector appearing in more than one selector.

Only selector text is searched, so hex colors inside declarations never
count. One finding per repeated id, at its first occurrence.
"""

from __future__ import annotations

import re

from code_auditor.core.text import SourceText, iter_css_selectors
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "id-selector-overuse"

_ID_SELECTOR = re.compile(r"#[a-zA-Z0-9_-]+")

EDUCATIONAL_CONTENT = """\
ID selectors (#header) and class selectors (.button) both target elements,
but they behave differently:
- An id must be unique in the document, so an id selector can only ever
  style one element.
- Id selectors have very high specificity and are hard to override.
- Classes can be reused on any number of elements and combined freely.

Style with classes. Keep ids for unique landmarks, fragment links and
JavaScript hooks.

Bad:
    #myButton {
      background-color: blue;
      padding: 10px;
    }
    #anotherButton {
      background-color: blue;
      padding: 10px;
    }

Good:
    .btn-primary {
      background-color: blue;
      padding: 10px;
    }
"""


def detect(text: str) -> list[Finding]:
    source = SourceText(text)
    occurrences: dict[str, list[int]] = {}
    for selector, offset in iter_css_selectors(text):
        for match in _ID_SELECTOR.finditer(selector):
            occurrences.setdefault(match.group(0), []).append(offset + match.start())

    return [
        source.finding_at(
            offsets[0],
            f"ID selector '{id_selector}' used multiple times. IDs should be unique. "
            "Consider using a class instead.",
        )
        for id_selector, offsets in occurrences.items()
        if len(offsets) > 1
    ]


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.CSS,
    category="Maintainability",
    severity=Severity.SUGGESTION,
    title="Overuse of ID Selectors",
    description=(
        "ID selectors (`#myid`) have high specificity and are not reusable, making CSS harder "
        "to maintain and less flexible. They should be used sparingly, primarily for unique "
        "document elements or JavaScript hooks."
    ),
    suggestion=(
        "Prefer using class selectors (`.my-class`) or attribute selectors over ID selectors "
        "for styling. Reserve IDs for unique elements or when JavaScript needs a direct "
        "reference."
    ),
    detect=detect,
    educational_content=EDUCATIONAL_CONTENT,
)
