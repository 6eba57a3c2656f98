"""Per-item outcomes of a refresh pass.

Soft-failing loops return one ``ItemResult`` per item instead of swallowing
errors, so the invoker (and tests) can see exactly what was partial.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ItemStatus(Enum):
    OK = "ok"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class ItemResult:
    key: str
    status: ItemStatus
    detail: str = ""
    error: Optional[BaseException] = None

    @classmethod
    def ok(cls, key: str, detail: str = "") -> "ItemResult":
        return cls(key, ItemStatus.OK, detail)

    @classmethod
    def skipped(cls, key: str, detail: str = "") -> "ItemResult":
        return cls(key, ItemStatus.SKIPPED, detail)

    @classmethod
    def failed(cls, key: str, error: BaseException, detail: str = "") -> "ItemResult":
        return cls(key, ItemStatus.FAILED, detail or str(error), error)

    @property
    def is_failure(self) -> bool:
        return self.status is ItemStatus.FAILED

    def to_dict(self) -> dict:
        return {'key': self.key, 'status': self.status.value, 'detail': self.detail}


def count_by_status(results: List[ItemResult]) -> dict[str, int]:
    counts = {s.value: 0 for s in ItemStatus}
    for r in results:
        counts[r.status.value] += 1
    return counts


@dataclass
class AccountRefreshResult:
    """Outcome of one account's rank-then-matches refresh."""

    slug: str
    rank: List[ItemResult] = field(default_factory=list)
    matches: List[ItemResult] = field(default_factory=list)
    error: Optional[BaseException] = None

    @property
    def failed(self) -> List[ItemResult]:
        return [r for r in self.rank + self.matches if r.is_failure]

    @property
    def ok(self) -> bool:
        """True when nothing failed at all."""
        return self.error is None and not self.failed

    def summary(self) -> str:
        if self.error is not None:
            return f"{self.slug}: error ({self.error})"
        rank = count_by_status(self.rank)
        matches = count_by_status(self.matches)
        return (
            f"{self.slug}: rank {rank['ok']} new/{rank['skipped']} unchanged/{rank['failed']} failed, "
            f"matches {matches['ok']} new/{matches['skipped']} skipped/{matches['failed']} failed"
        )

    def to_dict(self) -> dict:
        return {
            'slug': self.slug,
            'status': 'error' if self.error is not None else 'success',
            'error': str(self.error) if self.error is not None else None,
            'rank': [r.to_dict() for r in self.rank],
            'matches': [r.to_dict() for r in self.matches],
        }
