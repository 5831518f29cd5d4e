"""
Deprecated Tag Rule — Detects opening tags of elements removed from modern HTML.
"""

from __future__ import annotations

import re

from code_auditor.core.text import SourceText
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "deprecated-html-tag"

DEPRECATED_TAGS = (
    "acronym", "applet", "basefont", "big", "center", "dir", "font", "frame",
    "frameset", "isindex", "noframes", "s", "strike", "tt", "u",
)

# Longest names first so `frameset` is not read as `frame`
_DEPRECATED_TAG = re.compile(
    r"<(" + "|".join(sorted(DEPRECATED_TAGS, key=len, reverse=True)) + r")\b[^<>]*>",
    re.IGNORECASE,
)

EDUCATIONAL_CONTENT = """\
Deprecated tags are elements the HTML standard no longer recommends.
Browsers may still render them for backward compatibility, but:
- Support can disappear in future browser versions.
- Behavior differs from one browser to another.
- Many of them carry no meaning for assistive technology.
- Most mix presentation into markup, which belongs in CSS.

Use semantic HTML5 elements and control presentation with CSS.

Bad:
    <center><font color="red">Important Message</font></center>
    <strike>Old Price</strike>

Good:
    <p class="centered-red-text">Important Message</p>
    <del>Old Price</del>

    .centered-red-text {
      text-align: center;
      color: red;
    }
"""


def detect(text: str) -> list[Finding]:
    source = SourceText(text)
    return [
        source.finding_at(
            m.start(),
            f"Deprecated HTML tag '<{m.group(1)}>' detected.",
            snippet=m.group(0).strip(),
        )
        for m in _DEPRECATED_TAG.finditer(text)
    ]


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.HTML,
    category="Maintainability",
    severity=Severity.ERROR,
    title="Deprecated HTML Tag Used",
    description=(
        "Using deprecated HTML tags or attributes can lead to inconsistent behavior across "
        "browsers, accessibility issues, and may not be supported in future HTML versions. "
        "Modern alternatives should be preferred."
    ),
    suggestion=(
        "Replace deprecated HTML tags/attributes with their modern, semantic, and accessible "
        "equivalents. Refer to the MDN Web Docs for up-to-date HTML specifications."
    ),
    detect=detect,
    educational_content=EDUCATIONAL_CONTENT,
)
