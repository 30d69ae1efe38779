#!/usr/bin/env python3
"""
CLI for the Mobile Provider Checker.

Usage:
    python run_checker.py 08520098374
    python run_checker.py "+62 817-1234-5678" 0896123456 --locale id
    python run_checker.py --batch numbers.csv --output results.csv
    python run_checker.py --list-providers
"""

import argparse
import csv
import json
import logging
import sys
from pathlib import Path

from provider_check.checker import ProviderChecker
from provider_check.config import Config
from provider_check.messages import LOCALES, partial_label, reason_label
from provider_check.prefix_table import PrefixTableError

logger = logging.getLogger("run_checker")


def setup_logging(verbose: bool = False):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def single_check(checker: ProviderChecker, numbers: list):
    """Check each number and print JSON results."""
    locale = checker.config.locale
    out = []
    for number in numbers:
        result = checker.check(number)
        d = result.to_dict()
        d["input"] = number
        d["label"] = reason_label(result.reason, locale)
        out.append(d)
    print(json.dumps(out[0] if len(out) == 1 else out, indent=2, ensure_ascii=False))


def list_providers(checker: ProviderChecker):
    examples = checker.table.examples()
    for name, prefixes in checker.table.providers.items():
        print(f"{name}: {', '.join(prefixes)}  (e.g. {examples.get(name, '-')})")


def read_numbers(input_csv: str) -> list:
    """Read numbers from the number/phone column of a CSV (first column if neither)."""
    numbers = []
    with open(input_csv, "r", newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        fieldnames = reader.fieldnames or []
        num_col = None
        for col in fieldnames:
            if col.strip().lower() in ("number", "phone", "phone_number", "nomor"):
                num_col = col
                break
        if not num_col and fieldnames:
            num_col = fieldnames[0]
        for row in reader:
            numbers.append((row.get(num_col) or "").strip())
    return numbers


def batch_check(checker: ProviderChecker, input_csv: str, output_csv: str):
    """Batch check from CSV file."""
    numbers = read_numbers(input_csv)
    print(f"Loaded {len(numbers)} numbers from {input_csv}")
    results = checker.check_batch(numbers)
    marker = partial_label(checker.config.locale)

    with open(output_csv, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["number", "normalized", "reason", "providers", "prefixes", "partial"])
        for number, r in zip(numbers, results):
            writer.writerow([
                number,
                r.normalized,
                reason_label(r.reason, checker.config.locale),
                "; ".join(r.providers),
                "; ".join(f"{m.prefix} {marker}" if m.partial else m.prefix for m in r.matches),
                any(m.partial for m in r.matches),
            ])

    print(f"Wrote {len(results)} results to {output_csv}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Mobile Provider Checker")
    parser.add_argument("numbers", nargs="*", help="Phone number(s) to check")
    parser.add_argument("--batch", help="Input CSV file for batch processing")
    parser.add_argument("--output", default="results.csv", help="Output CSV for batch mode")
    parser.add_argument("--table", help="JSON prefix table to use instead of the built-in one")
    parser.add_argument("--locale", choices=list(LOCALES), default="en", help="Language of reason labels")
    parser.add_argument("--min-digits", type=int, default=Config.min_local_digits,
                        help="Digits required after the leading 0 before a number is checked")
    parser.add_argument("--list-providers", action="store_true", help="Print the prefix table and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if not args.numbers and not args.batch and not args.list_providers:
        parser.print_help()
        sys.exit(1)

    config = Config(
        prefix_file=Path(args.table) if args.table else None,
        locale=args.locale,
        min_local_digits=args.min_digits,
    )

    try:
        checker = ProviderChecker(config)
    except PrefixTableError as e:
        logger.error(str(e))
        sys.exit(2)

    if args.list_providers:
        list_providers(checker)
    elif args.batch:
        batch_check(checker, args.batch, args.output)
    else:
        single_check(checker, args.numbers)


if __name__ == "__main__":
    main()
