"""Learn history: a log of finished review sessions."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class SessionSummary:
    start: datetime
    end: datetime
    passed: int = 0
    failed: int = 0
    skipped: int = 0

    @property
    def tested(self) -> int:
        return self.passed + self.failed

    @property
    def duration_seconds(self) -> float:
        return (self.end - self.start).total_seconds()


@dataclass
class LearnHistory:
    summaries: list[SessionSummary] = field(default_factory=list)

    def add_summary(self, summary: SessionSummary):
        self.summaries.append(summary)

    @property
    def last_summary(self) -> SessionSummary | None:
        return self.summaries[-1] if self.summaries else None

    def totals(self) -> dict:
        """Aggregate counts over all sessions."""
        return {
            "sessions": len(self.summaries),
            "passed": sum(s.passed for s in self.summaries),
            "failed": sum(s.failed for s in self.summaries),
            "skipped": sum(s.skipped for s in self.summaries),
        }
