#!/usr/bin/env python3
"""
Chained hash table demo

Inserts one pair and looks up a deliberately different key.

Usage:
    python demo.py                              # inserts test -> value, looks up tes
    python demo.py --lookup test                # hit
    python demo.py --key a --value b --lookup a
    python demo.py --debug                      # show bucket activity

Environment Variables:
    HASH_TABLE_SEED       - Seed for the tabulation tables
    HASH_TABLE_DEBUG      - Enable debug logging (true/false)
    HASH_TABLE_LOG_LEVEL  - Log level when not debugging
"""

import argparse
import logging
from typing import Optional, Sequence

from chained_hash_table import HashTable
from table_settings import settings


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Insert a pair into a chained hash table and look up a key",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--key", default="test", help="Key to insert")
    parser.add_argument("--value", default="value", help="Value to insert")
    parser.add_argument("--lookup", default="tes", help="Key to look up")
    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.DEBUG,
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def lookup_message(table: HashTable[str, str], key: str) -> str:
    if (value := table.get(key)) is not None:
        return f"{key}: {value}"
    return f"{key} has no value."


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    table: HashTable[str, str] = HashTable()
    table.insert(args.key, args.value)
    print(lookup_message(table, args.lookup))


if __name__ == "__main__":
    main()
