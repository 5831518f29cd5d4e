"""
Incomplete Tag Rule — Detects lines that open a tag but never close it with '>'.

Checked line by line: a trimmed line starting with '<' (but not '<!') that
contains no '>' is reported once, as a closing tag when it starts with '</'.
"""

from __future__ import annotations

from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "incomplete-html-tag"

EDUCATIONAL_CONTENT = """\
Well-formed tags are essential for a functional page. A missing angle
bracket or an unclosed attribute quote leads to broken rendering, layout
problems and surprises for scripts and assistive technology. Browsers try
to recover from malformed markup, but each one recovers differently.

Common mistakes:
- Missing the closing '>' of an opening or closing tag.
- Forgetting the closing quote of an attribute value.
- Typos in tag names.

Bad:
    <div class="my-class"
      <p>Some content</p>
    </div

Good:
    <div class="my-class">
      <p>Some content</p>
    </div>
"""


def detect(text: str) -> list[Finding]:
    findings: list[Finding] = []
    for line_number, raw_line in enumerate(text.split("\n"), start=1):
        line = raw_line.strip()
        if ">" in line or not line.startswith("<"):
            continue
        if line.startswith("</"):
            if len(line) > 2:
                findings.append(
                    Finding(
                        line_number=line_number,
                        snippet=line,
                        message="Incomplete HTML closing tag: missing closing '>'.",
                    )
                )
        elif not line.startswith("<!") and len(line) > 1:
            findings.append(
                Finding(
                    line_number=line_number,
                    snippet=line,
                    message="Incomplete HTML opening tag: missing closing '>'.",
                )
            )
    return findings


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.HTML,
    category="Error",
    severity=Severity.ERROR,
    title="Incomplete HTML Tag Syntax",
    description=(
        "HTML tags must be properly opened and closed with angle brackets (< and >). A tag "
        "that is opened but not closed on the same line can indicate a syntax error, leading "
        "to rendering issues or unexpected behavior."
    ),
    suggestion=(
        "Ensure all HTML tags have a matching closing angle bracket (>). Check for typos or "
        "missing characters in your tag declarations."
    ),
    detect=detect,
    educational_content=EDUCATIONAL_CONTENT,
)
