"""
Code Auditor Configuration — pydantic-settings based.

All settings are read from environment variables or .env file.
"""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application-wide settings sourced from environment variables."""

    # ── GitHub ──
    github_host: str = Field(
        default="github.com", description="Only web URLs on this host are accepted"
    )
    github_api_url: str = Field(
        default="https://api.github.com", description="REST API base URL"
    )
    github_raw_url: str = Field(
        default="https://raw.githubusercontent.com",
        description="Base URL for raw file contents",
    )
    github_token: str | None = Field(
        default=None, description="Optional token to raise API rate limits"
    )
    fetch_timeout_seconds: float = Field(
        default=15.0, description="Timeout applied to every outbound fetch"
    )

    # ── Scanning ──
    scan_concurrency: int = Field(
        default=6, ge=1, description="Number of concurrent file workers per repo scan"
    )
    max_repo_files: int = Field(
        default=300, ge=1, description="Files beyond this count are dropped from a repo scan"
    )
    max_file_chars: int = Field(
        default=200_000, description="Fetched files longer than this are skipped"
    )
    max_text_chars: int = Field(
        default=200_000, description="Max length accepted by /analyze"
    )

    # ── Server ──
    cors_origins: list[str] = Field(
        default=["*"], description="Allowed CORS origins"
    )

    # ── Audit ──
    audit_enabled: bool = Field(default=True, description="Write repo scan audit entries")
    audit_log_path: str = Field(
        default="audit.jsonl", description="Path to JSON-lines audit log file"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


VERSION = "1.0.0"

# Singleton instance, imported by other modules
settings = Settings()
