"""Operator prefix table and the flattened prefix -> provider index.

The table is static and maintained by hand. A JSON file of the same shape
can replace the built-in table:

    {"Telkomsel": ["0852", "0853"], "Axis": ["0831", "0838"]}
"""

import json
import logging
import re
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from .config import Config

logger = logging.getLogger(__name__)

_PREFIX_RE = re.compile(r"^0\d{2,3}$")


DEFAULT_PROVIDER_PREFIXES: Dict[str, List[str]] = {
    "Telkomsel": ["0852", "0853", "0811", "0812", "0813", "0821", "0822", "0851"],
    "XL Axiata": ["0817", "0818", "0819", "0859", "0877", "0878", "0879"],
    "Indosat Ooredoo": ["0814", "0815", "0816", "0855", "0856", "0857", "0858"],
    "Three (3)": ["0896", "0897", "0898", "0899"],
    "Axis": ["0831", "0838"],
    "Smartfren": ["0881", "0882", "0883", "0884"],
}


class PrefixTableError(Exception):
    """Raised when a prefix table file cannot be loaded."""


def is_valid_prefix(prefix) -> bool:
    return isinstance(prefix, str) and bool(_PREFIX_RE.match(prefix))


def build_prefix_index(table: Mapping[str, Tuple[str, ...]]) -> Dict[str, str]:
    """
    Flatten provider -> prefixes into prefix -> provider.

    Keys keep first-insertion order. When two providers claim the same
    prefix the later provider wins.
    """
    index: Dict[str, str] = {}
    for provider, prefixes in table.items():
        for prefix in prefixes:
            owner = index.get(prefix)
            if owner is not None and owner != provider:
                logger.warning(
                    f"Prefix {prefix} claimed by both '{owner}' and '{provider}' — using '{provider}'"
                )
            index[prefix] = provider
    return index


class ProviderTable:
    """Immutable provider -> prefixes table with its reverse index."""

    def __init__(self, providers: Mapping[str, List[str]]):
        frozen = {}
        for name, prefixes in providers.items():
            kept = []
            for p in prefixes:
                if not is_valid_prefix(p):
                    logger.warning(f"Skipping invalid prefix {p!r} for '{name}'")
                    continue
                if p not in kept:
                    kept.append(p)
            frozen[name] = tuple(kept)
        self._providers = MappingProxyType(frozen)
        self._index = MappingProxyType(build_prefix_index(self._providers))
        logger.debug(f"Prefix table: {len(self._providers)} providers, {len(self._index)} prefixes")

    @classmethod
    def default(cls) -> "ProviderTable":
        return cls(DEFAULT_PROVIDER_PREFIXES)

    @classmethod
    def from_file(cls, path) -> "ProviderTable":
        """Load a table from a JSON object of provider name -> list of prefixes."""
        p = Path(path)
        if not p.exists():
            raise PrefixTableError(f"Prefix table not found: {p}")
        try:
            with open(p, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            raise PrefixTableError(f"Failed to load prefix table {p}: {e}") from e

        if not isinstance(data, dict):
            raise PrefixTableError(f"Prefix table {p} must be a JSON object")

        providers = {}
        for name, prefixes in data.items():
            if not isinstance(prefixes, list):
                logger.warning(f"Skipping '{name}' in {p.name}: prefixes must be a list")
                continue
            providers[str(name)] = prefixes

        table = cls(providers)
        logger.info(f"Prefix table from {p.name}: {len(table.providers)} providers, {len(table.index)} prefixes")
        return table

    @classmethod
    def load(cls, config: Optional[Config] = None) -> "ProviderTable":
        config = config or Config()
        if config.prefix_file:
            return cls.from_file(config.prefix_file)
        return cls.default()

    @property
    def providers(self) -> Mapping[str, Tuple[str, ...]]:
        return self._providers

    @property
    def index(self) -> Mapping[str, str]:
        return self._index

    def provider_for(self, prefix: str) -> Optional[str]:
        return self._index.get(prefix)

    def examples(self) -> Dict[str, str]:
        """First prefix of each provider, used as quick-pick example input."""
        return {name: prefixes[0] for name, prefixes in self._providers.items() if prefixes}

    def to_dict(self) -> Dict[str, List[str]]:
        return {name: list(prefixes) for name, prefixes in self._providers.items()}

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, prefix) -> bool:
        return prefix in self._index
