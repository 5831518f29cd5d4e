"""
Audit Logger — JSON-lines trail of repository scans.

One line per scan: timestamp, scan id, repository label, file counts,
finding counts and duration. Write failures are logged, never raised.
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path

from code_auditor.config import settings
from code_auditor.models.scan_models import AuditEntry

logger = logging.getLogger("code_auditor.audit")


class AuditLogger:
    def __init__(self, log_path: str | None = None, enabled: bool | None = None) -> None:
        self.log_path = Path(log_path or settings.audit_log_path)
        self.enabled = settings.audit_enabled if enabled is None else enabled

    def log(self, entry: AuditEntry) -> None:
        """Append one entry; a no-op when auditing is disabled."""
        if not self.enabled:
            return

        record = {
            "timestamp": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
            **entry.model_dump(),
        }
        try:
            with open(self.log_path, "a", encoding="utf-8") as f:
                f.write(json.dumps(record) + "\n")
        except OSError as e:
            logger.error(f"Failed to write audit log: {e}")
