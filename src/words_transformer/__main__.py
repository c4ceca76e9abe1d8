from __future__ import annotations

import argparse
from typing import Sequence

from .cli import parse_args
from .config import build_config
from .dictionary import Dictionary, EditOutcome, transform_text
from .errors import DictionaryError
from .logging_utils import RichLogger
from .lookup import LookupResult, LookupSession


def show_result(logger: RichLogger, result: LookupResult) -> None:
    logger.log_panel(result.evolution, f"FOUND {result.result}", "green1")


def run_search(logger: RichLogger, dictionary: Dictionary, args: argparse.Namespace) -> int:
    session = LookupSession(dictionary)
    if args.all:
        results = list(session.iter_matches(args.keyword))
    else:
        result = session.search(args.keyword)
        results = [result] if result is not None else []

    if not results:
        logger.log_panel(f"Cannot find {args.keyword.strip()!r}", "NOT FOUND", "yellow")
        return 1
    for result in results:
        show_result(logger, result)
    return 0


def run_add(logger: RichLogger, dictionary: Dictionary, args: argparse.Namespace) -> int:
    outcome = dictionary.add_edit(args.key, args.value)
    verb = "Added" if outcome is EditOutcome.CREATED else "Updated"
    index = dictionary.find_left_strictly(args.key.strip(), 0)
    logger.log_panel(
        f"{dictionary.get_left(index)} = {dictionary.get_all_right_to_string(index)}",
        verb.upper(),
        "cyan",
    )
    return 0


def run_delete(logger: RichLogger, dictionary: Dictionary, args: argparse.Namespace) -> int:
    key = args.key.strip()
    index = dictionary.find_left_strictly(key, 0)
    if index is None or not dictionary.delete(index):
        logger.log_panel(f"Cannot find {key!r}", "NOT FOUND", "yellow")
        return 1
    logger.log_panel(f"Deleted {key!r}, {dictionary.count()} entries left", "DELETED", "magenta3")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    config = build_config(args)
    logger = RichLogger(log_file=config.log_file)

    dictionary = Dictionary(config.dictionary_path)
    try:
        dictionary.read_data()
        if args.command == "search":
            return run_search(logger, dictionary, args)
        if args.command == "add":
            return run_add(logger, dictionary, args)
        if args.command == "delete":
            return run_delete(logger, dictionary, args)
        if args.command == "list":
            logger.log_entries(dictionary.entries(), title=str(config.dictionary_path))
            return 0
        if args.command == "count":
            logger.log_text(str(dictionary.count()))
            return 0
        logger.log_text(transform_text(args.text, dictionary))
        return 0
    except (DictionaryError, OSError) as error:
        logger.log_exception(error)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
