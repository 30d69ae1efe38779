"""Configuration for the provider checker."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple


_ROOT = Path(__file__).parent.parent


@dataclass
class Config:
    # Numbering plan (Indonesia)
    country_code: str = "62"
    trunk_prefix: str = "0"

    # Exact-match phase tries these prefix lengths in order
    exact_prefix_lengths: Tuple[int, ...] = (4, 3)

    # Digits required after the trunk "0" before a number is checked at all.
    # 1 also lets two-digit input like "08" reach the fallback scan.
    min_local_digits: int = 2

    # Optional JSON override of the built-in prefix table
    prefix_file: Optional[Path] = None

    # Display language for reason labels ("en" or "id")
    locale: str = "en"
