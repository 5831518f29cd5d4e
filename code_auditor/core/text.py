"""
Text helpers shared by the rules — offset/line mapping, literal masking,
and brace-delimited CSS block iteration.

Everything here works on raw text. Nothing tokenizes or parses a language.
"""

from __future__ import annotations

import re
from bisect import bisect_right
from dataclasses import dataclass
from typing import Iterator

from code_auditor.models.rule_models import Finding


class SourceText:
    """Raw source text with line lookups by character offset."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.lines = text.split("\n")
        self._line_starts = [0] + [m.end() for m in re.finditer("\n", text)]

    def line_number(self, offset: int) -> int:
        """1-based line of a character offset (newlines before it, plus one)."""
        return bisect_right(self._line_starts, offset)

    def line(self, line_number: int) -> str:
        if 1 <= line_number <= len(self.lines):
            return self.lines[line_number - 1]
        return ""

    def snippet(self, line_number: int) -> str:
        return self.line(line_number).strip()

    def finding_at(self, offset: int, message: str, snippet: str | None = None) -> Finding:
        """Build a Finding for a match starting at ``offset``."""
        line_number = self.line_number(offset)
        return self.finding_on_line(line_number, message, snippet)

    def finding_on_line(
        self, line_number: int, message: str, snippet: str | None = None
    ) -> Finding:
        return Finding(
            line_number=line_number,
            snippet=self.snippet(line_number) if snippet is None else snippet,
            message=message,
        )


def blank(text: str) -> str:
    """Replace every character except newlines with a space."""
    return re.sub(r"[^\n]", " ", text)


def mask_js_literals(text: str) -> str:
    """
    Blank out string literals and comments, keeping offsets and newlines.

    Quote and comment delimiters themselves are kept so the surrounding
    structure stays recognizable. Regex literals are not recognized.
    """
    out = list(text)
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "/" and i + 1 < n and text[i + 1] == "/":
            end = text.find("\n", i)
            end = n if end == -1 else end
            _blank_range(out, i + 2, end)
            i = end
        elif ch == "/" and i + 1 < n and text[i + 1] == "*":
            end = text.find("*/", i + 2)
            end = n if end == -1 else end
            _blank_range(out, i + 2, end)
            i = end + 2
        elif ch in ("'", '"', "`"):
            j = i + 1
            while j < n and text[j] != ch:
                # Plain quotes cannot span lines; template literals can
                if text[j] == "\n" and ch != "`":
                    break
                j += 2 if text[j] == "\\" else 1
            end = min(j, n)
            _blank_range(out, i + 1, end)
            i = end + 1
        else:
            i += 1
    return "".join(out)


def mask_css_comments(text: str) -> str:
    """Blank out /* ... */ comments, keeping offsets and newlines."""
    return re.sub(r"/\*.*?(?:\*/|\Z)", lambda m: blank(m.group(0)), text, flags=re.DOTALL)


def _blank_range(chars: list[str], start: int, end: int) -> None:
    for k in range(start, min(end, len(chars))):
        if chars[k] != "\n":
            chars[k] = " "


@dataclass(frozen=True)
class CssBlock:
    """An innermost ``selector { body }`` block."""

    selector: str
    body: str
    open_offset: int


def iter_css_blocks(text: str) -> Iterator[CssBlock]:
    """
    Yield every innermost brace-delimited block in order of its closing brace.

    The selector is the text between the previous brace (of either kind)
    and the opening brace, so blocks nested in at-rules get their own
    selector. Comments are blanked first.
    """
    masked = mask_css_comments(text)
    last_brace = -1
    open_at: int | None = None
    selector_start = 0
    for index, char in enumerate(masked):
        if char == "{":
            selector_start = last_brace + 1
            open_at = index
            last_brace = index
        elif char == "}":
            if open_at is not None:
                yield CssBlock(
                    selector=masked[selector_start:open_at].strip(),
                    body=masked[open_at + 1 : index],
                    open_offset=open_at,
                )
                open_at = None
            last_brace = index


def iter_css_selectors(text: str) -> Iterator[tuple[str, int]]:
    """Yield ``(selector, offset)`` for every opening brace, innermost or not."""
    masked = mask_css_comments(text)
    last_brace = -1
    for index, char in enumerate(masked):
        if char == "{":
            raw = masked[last_brace + 1 : index]
            stripped = raw.lstrip()
            yield stripped.rstrip(), last_brace + 1 + (len(raw) - len(stripped))
            last_brace = index
        elif char == "}":
            last_brace = index
