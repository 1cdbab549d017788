"""Command-line interface for the word list tools.

  - ``check``: exit 0 when ``words`` is sorted, 1 on the first out-of-order
    word, 2 when the document cannot be checked.
  - ``format``: sort and deduplicate ``words`` in place; exit 1 on failure.
    ``--check`` reports (exit 1) instead of rewriting.

Both subcommands take ``--config``, ``--collation``, ``--locale`` and ``-v``.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from .checker import EXIT_ERROR, run_check
from .config import Settings, add_arguments, resolve_settings
from .errors import ConfigError
from .formatter import format_document

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[cspell-words] %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def _cmd_check(settings: Settings, args: argparse.Namespace) -> int:
    return run_check(settings.path, settings.collation, settings.locale)


def _cmd_format(settings: Settings, args: argparse.Namespace) -> int:
    result = format_document(settings.path, settings.collation, settings.locale, check=args.check)
    if not result.ok:
        logger.error("formatting failed: %s", result.error)
        return 1
    if args.check and result.changed:
        print(f"{settings.path}: would reformat")
        return 1
    if result.changed:
        logger.info("%s: reformatted (%d duplicate(s) removed)", settings.path, result.removed_duplicates)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cspell-words", description=__doc__.splitlines()[0])
    sub = parser.add_subparsers(dest="command", required=True)

    p_check = sub.add_parser("check", help="verify the word list is sorted")
    add_arguments(p_check)
    p_check.set_defaults(func=_cmd_check)

    p_format = sub.add_parser("format", help="sort and deduplicate the word list")
    add_arguments(p_format)
    p_format.add_argument("--check", action="store_true", help="report instead of rewriting")
    p_format.set_defaults(func=_cmd_format)
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)
    try:
        settings = resolve_settings(args)
    except ConfigError as exc:
        print(f"cspell-words: error: {exc}", file=sys.stderr)
        return EXIT_ERROR
    logger.debug("settings: %s", settings)
    return args.func(settings, args)


def check_main(argv: List[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    return main(["check", *argv])


def format_main(argv: List[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    return main(["format", *argv])
