"""Data models for the harvester."""

from dataclasses import dataclass
from typing import Optional

SKIPPED = "skipped"
FAILED = "failed"
SUCCEEDED = "succeeded"


@dataclass
class DownloadOutcome:
    url: str
    status: str  # skipped, failed, succeeded
    path: str = ""
    bytes_written: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == SUCCEEDED


@dataclass
class HarvestReport:
    pages_requested: int = 0
    pages_fetched: int = 0
    candidates: int = 0
    invalid_urls: int = 0
    succeeded: int = 0
    skipped: int = 0
    failed: int = 0
    total_bytes: int = 0

    def record(self, outcome: DownloadOutcome):
        if outcome.ok:
            self.succeeded += 1
            self.total_bytes += outcome.bytes_written
        elif outcome.status == SKIPPED:
            self.skipped += 1
        else:
            self.failed += 1

    @property
    def exit_code(self) -> int:
        """Non-zero when the run produced no file and found none already on disk."""
        return 0 if self.succeeded or self.skipped else 1
