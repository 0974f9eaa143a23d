# Command-line surface: build a filter from a dictionary, or check words against it.
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from spell_checker.app import build_filter, find_missing, load_filter
from spell_checker.core.config import DEFAULT_DB_PATH, DEFAULT_PROBABILITY, FilterConfig
from spell_checker.core.errors import SpellCheckerError


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="spell-checker",
        description="Check whether words are in a dictionary using a bloom filter",
    )
    p.add_argument("words", nargs="*", help="Words to check against the filter")
    p.add_argument(
        "-b", "--build", type=Path, metavar="FILE", help="Build the filter from a dictionary file"
    )
    p.add_argument(
        "-p",
        "--probability",
        type=float,
        help=f"Expected false positive probability (default: {DEFAULT_PROBABILITY})",
    )
    p.add_argument(
        "-H",
        "--hash-functions",
        type=int,
        help="Number of hash functions (default: derived from size and word count)",
    )
    p.add_argument(
        "-s",
        "--size",
        type=int,
        help="Bit array size (default: derived from word count and probability)",
    )
    p.add_argument(
        "--db", type=Path, default=DEFAULT_DB_PATH, help=f"Filter file (default: {DEFAULT_DB_PATH})"
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    overrides = (args.probability, args.hash_functions, args.size)
    if args.build is not None and args.words:
        parser.error("words cannot be combined with --build")
    if args.build is None and any(o is not None for o in overrides):
        parser.error("--probability, --hash-functions and --size require --build")
    if args.build is None and not args.words:
        parser.error("either --build FILE or at least one word is required")

    setup_logging(args.verbose)

    try:
        if args.build is not None:
            config = FilterConfig(
                probability=args.probability, size=args.size, hash_count=args.hash_functions
            )
            bloom = build_filter(args.build, config, args.db)
            print(
                f"Built {args.db} from {args.build}: {bloom.item_count} words, "
                f"{bloom.size} bits, {bloom.hash_count} hash functions"
            )
        else:
            bloom = load_filter(args.db)
            missing = find_missing(bloom, args.words)
            print(f"Missing words: {missing}")
    except (OSError, SpellCheckerError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
