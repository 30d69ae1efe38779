"""ProviderChecker — normalizes a phone number and matches it against the prefix table."""

import logging
import re
from typing import Iterable, List, Optional

from .config import Config
from .models import (
    CheckResult,
    Match,
    REASON_EMPTY,
    REASON_FOUND,
    REASON_NO_MATCH,
    REASON_UNRECOGNIZED,
)
from .normalizer import normalize as _normalize
from .prefix_table import ProviderTable

logger = logging.getLogger(__name__)


class ProviderChecker:
    """
    Mobile provider checker.

    Takes a raw phone number string, normalizes it to local format and
    returns exact prefix matches, or partial (forward-extension) matches
    when no exact prefix is known. Never raises for any input.
    """

    def __init__(self, config: Optional[Config] = None, table: Optional[ProviderTable] = None):
        self.config = config or Config()
        self.table = table or ProviderTable.load(self.config)
        self._shape = re.compile(
            rf"^{re.escape(self.config.trunk_prefix)}\d{{{max(self.config.min_local_digits, 0)},}}$"
        )
        logger.info(
            f"ProviderChecker ready — {len(self.table.providers)} providers, "
            f"{len(self.table)} prefixes"
        )

    def normalize(self, raw: str) -> str:
        return _normalize(raw, self.config.country_code, self.config.trunk_prefix)

    def match(self, raw: str) -> CheckResult:
        """
        Check a raw phone number.

        1. Normalize
        2. Reject empty / malformed numbers
        3. Exact match on the leading 4 then 3 digits (both may match)
        4. If nothing matched, every prefix the number could still grow into
        """
        n = self.normalize(raw)
        if not n:
            return self._result("", [], REASON_EMPTY)
        if not self._shape.match(n):
            return self._result(n, [], REASON_UNRECOGNIZED)

        index = self.table.index
        matches: List[Match] = []
        seen = []
        for length in self.config.exact_prefix_lengths:
            head = n[:length]
            if head in seen:
                continue
            seen.append(head)
            provider = index.get(head)
            if provider is not None:
                matches.append(Match(prefix=head, provider=provider))

        if not matches:
            for prefix, provider in index.items():
                if prefix.startswith(n[:len(prefix)]):
                    matches.append(Match(prefix=prefix, provider=provider, partial=True))

        return self._result(n, matches, REASON_FOUND if matches else REASON_NO_MATCH)

    check = match

    def check_batch(self, raws: Iterable[str]) -> List[CheckResult]:
        """Check each number in order; one result per input."""
        results = [self.match(raw) for raw in raws]
        logger.info(
            f"Batch check: {len(results)} numbers, "
            f"{sum(1 for r in results if r.found)} with a provider"
        )
        return results

    @staticmethod
    def _result(normalized: str, matches: List[Match], reason: str) -> CheckResult:
        logger.debug(f"Check -> reason='{reason}', matches={len(matches)}")
        return CheckResult(normalized=normalized, matches=matches, reason=reason)


_default_checker: Optional[ProviderChecker] = None


def default_checker() -> ProviderChecker:
    """Shared checker over the built-in table, built on first use."""
    global _default_checker
    if _default_checker is None:
        _default_checker = ProviderChecker(Config(), ProviderTable.default())
    return _default_checker


def normalize(raw: str) -> str:
    return default_checker().normalize(raw)


def match(raw: str) -> CheckResult:
    return default_checker().match(raw)


def check(raw: str) -> CheckResult:
    return default_checker().match(raw)
