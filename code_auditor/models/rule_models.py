"""
Rule Data Models — Rule records, findings, and their enums.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    SUGGESTION = "suggestion"


# Display precedence, not a weight
SEVERITY_ORDER: dict[Severity, int] = {
    Severity.ERROR: 0,
    Severity.WARNING: 1,
    Severity.SUGGESTION: 2,
}


class LanguageGroup(str, Enum):
    JAVASCRIPT = "javascript"
    HTML = "html"
    CSS = "css"

    @classmethod
    def from_path(cls, path: str) -> LanguageGroup | None:
        """Map a file path to its language group by extension."""
        return _EXTENSION_LANGUAGES.get(PurePosixPath(path).suffix.lower())


_EXTENSION_LANGUAGES: dict[str, LanguageGroup] = {
    ".js": LanguageGroup.JAVASCRIPT,
    ".html": LanguageGroup.HTML,
    ".css": LanguageGroup.CSS,
}

SUPPORTED_EXTENSIONS: tuple[str, ...] = tuple(_EXTENSION_LANGUAGES)


class Finding(BaseModel):
    """A single match produced by one rule's detect function."""

    model_config = ConfigDict(frozen=True)

    line_number: int = Field(..., ge=1, description="1-based line of the match")
    snippet: str = Field(default="", description="Trimmed source line at the match")
    message: str = Field(..., description="Rule-specific human-readable message")


class AnnotatedFinding(Finding):
    """A finding merged with the metadata of the rule that produced it."""

    rule_id: str
    severity: Severity
    category: str
    title: str
    description: str
    suggestion: str


class FileFinding(AnnotatedFinding):
    """An annotated finding tagged with its path inside a scanned repository."""

    file_path: str


DetectFn = Callable[[str], list[Finding]]


@dataclass(frozen=True)
class Rule:
    """
    Immutable rule record.

    ``detect`` is a pure function of the source text: it never mutates its
    input, keeps no state between calls, and returns an empty list for
    empty input.
    """

    id: str
    language: LanguageGroup
    category: str
    severity: Severity
    title: str
    description: str
    suggestion: str
    detect: DetectFn
    educational_content: str | None = None

    def annotate(self, finding: Finding) -> AnnotatedFinding:
        """Merge a raw finding with this rule's metadata."""
        return AnnotatedFinding(
            line_number=finding.line_number,
            snippet=finding.snippet,
            message=finding.message,
            rule_id=self.id,
            severity=self.severity,
            category=self.category,
            title=self.title,
            description=self.description,
            suggestion=self.suggestion,
        )


class RuleInfo(BaseModel):
    """Public, serializable view of a Rule (no detect function)."""

    id: str
    language: LanguageGroup
    category: str
    severity: Severity
    title: str
    description: str
    suggestion: str
    educational_content: str | None = None

    @classmethod
    def from_rule(cls, rule: Rule) -> RuleInfo:
        return cls(
            id=rule.id,
            language=rule.language,
            category=rule.category,
            severity=rule.severity,
            title=rule.title,
            description=rule.description,
            suggestion=rule.suggestion,
            educational_content=rule.educational_content,
        )
