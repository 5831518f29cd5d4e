"""
Scan Errors — Failures that abort a repository scan.

Per-file and per-rule failures are contained where they happen and never
surface as these exceptions.
"""


class ScanError(Exception):
    """Base class for repository scan failures."""


class ReferenceParseError(ScanError):
    """The repository reference matched neither accepted form."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(
            "Use owner/repo or https://github.com/owner/repo[/tree/branch[/path]]."
        )


class BranchResolutionError(ScanError):
    """No ref was given and the default branch could not be looked up."""

    def __init__(self, owner: str, repo: str) -> None:
        self.owner = owner
        self.repo = repo
        super().__init__(
            "Could not resolve branch. Specify a branch or ensure the repo exists and is public."
        )


class TreeFetchError(ScanError):
    """The recursive tree listing could not be retrieved."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)
