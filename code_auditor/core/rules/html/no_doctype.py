"""
No Doctype Rule — Detects documents that do not open with <!DOCTYPE html>.

Leading whitespace and a byte order mark are allowed before the
declaration. Empty documents are not reported.
"""

from __future__ import annotations

import re

from code_auditor.core.text import SourceText
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "no-doctype"

_DOCTYPE = re.compile(r"<!DOCTYPE\s+html\s*>", re.IGNORECASE)

_SNIPPET_CHARS = 50

EDUCATIONAL_CONTENT = """\
<!DOCTYPE html> is not an HTML tag. It tells the browser that the
document is HTML5. Without it:
- Browsers fall back to "quirks mode", emulating old, non-standard
  behavior.
- Layout and styling can differ between browsers.
- Validators cannot check the document against the right standard.

Always put <!DOCTYPE html> on the very first line of the file.

Bad:
    <html>
    <head>...</head>
    <body>...</body>
    </html>

Good:
    <!DOCTYPE html>
    <html lang="en">
    <head>...</head>
    <body>...</body>
    </html>
"""


def detect(text: str) -> list[Finding]:
    content = text.lstrip("\ufeff \t\r\n")
    if not content:
        return []
    if _DOCTYPE.match(content):
        return []

    source = SourceText(text)
    first_line = source.snippet(1)
    return [
        Finding(
            line_number=1,
            snippet=first_line[:_SNIPPET_CHARS] + "...",
            message="Missing or invalid <!DOCTYPE html> declaration.",
        )
    ]


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.HTML,
    category="Best Practice",
    severity=Severity.ERROR,
    title="Missing or Invalid Doctype Declaration",
    description=(
        "Every HTML document should start with a `<!DOCTYPE html>` declaration. This tells "
        "the browser which HTML standard to use, preventing \"quirks mode\" and ensuring "
        "consistent rendering."
    ),
    suggestion=(
        "Add `<!DOCTYPE html>` as the very first line of your HTML document. This is the "
        "standard HTML5 doctype."
    ),
    detect=detect,
    educational_content=EDUCATIONAL_CONTENT,
)
