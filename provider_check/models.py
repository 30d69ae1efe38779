"""Data models for the provider checker."""

from dataclasses import dataclass, field
from typing import List

REASON_EMPTY = "empty input"
REASON_UNRECOGNIZED = "unrecognized format"
REASON_FOUND = "found"
REASON_NO_MATCH = "no matching prefix"

REASONS = (REASON_EMPTY, REASON_UNRECOGNIZED, REASON_FOUND, REASON_NO_MATCH)


@dataclass(frozen=True)
class Match:
    prefix: str
    provider: str
    partial: bool = False

    def to_dict(self) -> dict:
        return {
            "prefix": self.prefix,
            "provider": self.provider,
            "partial": self.partial,
        }


@dataclass(frozen=True)
class CheckResult:
    normalized: str
    matches: List[Match] = field(default_factory=list)
    reason: str = REASON_NO_MATCH

    @property
    def found(self) -> bool:
        return self.reason == REASON_FOUND

    @property
    def providers(self) -> List[str]:
        """Provider names in match order, without repeats."""
        seen = []
        for m in self.matches:
            if m.provider not in seen:
                seen.append(m.provider)
        return seen

    def to_dict(self) -> dict:
        """Serialize to dict for JSON output."""
        return {
            "normalized": self.normalized,
            "matches": [m.to_dict() for m in self.matches],
            "reason": self.reason,
        }
