"""
Missing Alt Rule — Detects <img> tags without an alt attribute.

An empty ``alt=""`` is accepted: it is the correct markup for decorative
images.
"""

from __future__ import annotations

import re

from code_auditor.core.text import SourceText
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "missing-alt"

_IMG_WITHOUT_ALT = re.compile(r"<img\b(?![^<>]*\balt\s*=)[^<>]*>", re.IGNORECASE)

EDUCATIONAL_CONTENT = """\
The alt attribute of an <img> tag is the text alternative for the image.
It matters because:
- Screen readers read it aloud to users who cannot see the image.
- Browsers show it when the image fails to load.
- Search engines use it to understand what the image shows.

Describe the image's content or function concisely. Skip phrases like
"image of". If the image is purely decorative, use an empty alt="" so
assistive technology ignores it.

Bad:
    <img src="sunset.jpg">

Good:
    <img src="sunset.jpg" alt="Vibrant sunset over a calm ocean">
    <img src="decorative-line.png" alt="">
"""


def detect(text: str) -> list[Finding]:
    source = SourceText(text)
    return [
        source.finding_at(m.start(), "Image tag has no alt attribute.", snippet=m.group(0).strip())
        for m in _IMG_WITHOUT_ALT.finditer(text)
    ]


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.HTML,
    category="Accessibility",
    severity=Severity.ERROR,
    title="Missing Alt Attribute for Image",
    description=(
        "Image elements (`<img>`) should always have an `alt` attribute. This provides "
        "descriptive text for screen readers, improving accessibility for visually impaired "
        "users, and is displayed if the image fails to load."
    ),
    suggestion=(
        "Add a meaningful `alt` attribute to all `<img>` tags. If the image is purely "
        "decorative, use an empty `alt=\"\"`."
    ),
    detect=detect,
    educational_content=EDUCATIONAL_CONTENT,
)
