from __future__ import annotations

import argparse
from typing import Sequence


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="words-transformer",
        description=(
            "Look up terms and record their translations in a plain text dictionary "
            "(key = value --> newer value)."
        ),
    )
    parser.add_argument(
        "--dictionary",
        help="Path to the dictionary file. Defaults to $WORDS_TRANSFORMER_DICTIONARY or ./WordsData.",
    )
    parser.add_argument(
        "--log-file",
        help="Path to the file where actions and errors are appended.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    search_parser = subparsers.add_parser(
        "search",
        help="Find a term by key, then by value (exact matches before partial ones).",
    )
    search_parser.add_argument("keyword", help="Term or translation to look up.")
    search_parser.add_argument(
        "--all",
        action="store_true",
        help="Keep going to the next match until every distinct match has been shown.",
    )

    add_parser = subparsers.add_parser(
        "add",
        help="Add a term, or record a new translation for an existing term.",
    )
    add_parser.add_argument("key", help="Term to add or edit.")
    add_parser.add_argument("value", help="Translation that becomes the current value.")

    delete_parser = subparsers.add_parser("delete", help="Delete a term and its whole history.")
    delete_parser.add_argument("key", help="Exact term to delete (case-insensitive).")

    subparsers.add_parser("list", help="Show every entry in file order.")
    subparsers.add_parser("count", help="Print the number of entries.")

    transform_parser = subparsers.add_parser(
        "transform",
        help="Replace every known term in the text with its current translation.",
    )
    transform_parser.add_argument("text", help="Text to transform.")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    return parser.parse_args(argv)
