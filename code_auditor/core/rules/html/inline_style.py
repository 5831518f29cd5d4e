"""
Inline Style Rule — Detects elements carrying a non-empty style attribute.
"""

from __future__ import annotations

import re

from code_auditor.core.text import SourceText
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "inline-style"

_STYLED_TAG = re.compile(r"<[^<>]*\sstyle\s*=\s*[\"'][^\"'<>]+[\"'][^<>]*>", re.IGNORECASE)

EDUCATIONAL_CONTENT = """\
Inline styles are CSS declarations written directly on an element through
its style attribute. They work, but they are considered bad practice:
- Presentation gets mixed into content, so the markup is harder to read.
- The same styles cannot be reused across elements or pages.
- Site-wide visual changes mean editing every element by hand.
- Inline declarations beat almost every stylesheet rule, which makes
  overrides painful.

Keep styles in external stylesheets (or a <style> block) and apply them
through classes.

Bad:
    <p style="color: blue; font-size: 16px;">Hello World</p>

Good:
    <p class="blue-text">Hello World</p>

    .blue-text {
      color: blue;
      font-size: 16px;
    }
"""


def detect(text: str) -> list[Finding]:
    source = SourceText(text)
    return [
        source.finding_at(m.start(), "Inline style found.", snippet=m.group(0).strip())
        for m in _STYLED_TAG.finditer(text)
    ]


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.HTML,
    category="Maintainability",
    severity=Severity.ERROR,
    title="Inline Style Detected",
    description=(
        "Using `style` attributes directly in HTML elements mixes content with presentation, "
        "making your CSS harder to manage, reuse, and maintain. It also clutters the HTML."
    ),
    suggestion=(
        "Move inline styles to external CSS files or internal `<style>` blocks. Use CSS "
        "classes for styling elements consistently."
    ),
    detect=detect,
    educational_content=EDUCATIONAL_CONTENT,
)
