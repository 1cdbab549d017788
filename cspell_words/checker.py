"""Order checker: fail CI when the ``words`` list is not sorted.

Exit codes: 0 sorted, 1 order violation, 2 the document could not be checked
(unreadable or malformed config, or an internal length mismatch).
"""
from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from .document import load_document
from .errors import CspellWordsError
from .ordering import DEFAULT_COLLATION, Collation, sorted_words

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNSORTED = 1
EXIT_ERROR = 2

OK = "ok"
OUT_OF_ORDER = "out-of-order"
INTERNAL_ERROR = "internal-error"


@dataclass
class CheckResult:
    status: str
    index: Optional[int] = None
    actual: Optional[str] = None
    expected: Optional[str] = None

    @property
    def exit_code(self) -> int:
        if self.status == OK:
            return EXIT_OK
        if self.status == OUT_OF_ORDER:
            return EXIT_UNSORTED
        return EXIT_ERROR


def check_order(
    words: Sequence[str],
    collation: Collation = DEFAULT_COLLATION,
    locale_name: str = "",
) -> CheckResult:
    """Compare *words* against their sorted copy and report the first mismatch."""
    original: List[str] = list(words)
    expected = sorted_words(original, collation, locale_name)
    if len(original) != len(expected):
        return CheckResult(INTERNAL_ERROR)
    for idx, (have, want) in enumerate(zip(original, expected)):
        if have != want:
            return CheckResult(OUT_OF_ORDER, index=idx, actual=have, expected=want)
    return CheckResult(OK)


def run_check(
    path: Path,
    collation: Collation = DEFAULT_COLLATION,
    locale_name: str = "",
) -> int:
    """Check the document at *path* and return the process exit code."""
    try:
        doc = load_document(path)
        result = check_order(doc.words, collation, locale_name)
    except CspellWordsError as exc:
        logger.error("cannot check word order: %s", exc)
        return EXIT_ERROR
    logger.debug("%s: %d word(s) checked with %s collation", path, len(doc.words), collation.value)

    if result.status == INTERNAL_ERROR:
        print(f"{path}: internal error while checking word order", file=sys.stderr)
    elif result.status == OUT_OF_ORDER:
        print(
            f'{path}: words are not sorted at index {result.index}: '
            f'actual "{result.actual}", expected "{result.expected}"'
        )
        if os.getenv("GITHUB_ACTIONS"):
            print(
                f"::error file={path}::words are not sorted "
                f'(actual "{result.actual}", expected "{result.expected}")'
            )
    return result.exit_code
