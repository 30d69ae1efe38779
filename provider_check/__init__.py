"""Mobile Provider Checker — Indonesian phone number prefix lookup, no external APIs."""

from .checker import ProviderChecker, check, match, normalize
from .models import CheckResult, Match
from .prefix_table import PrefixTableError, ProviderTable

__all__ = [
    "ProviderChecker",
    "ProviderTable",
    "PrefixTableError",
    "CheckResult",
    "Match",
    "check",
    "match",
    "normalize",
]
