"""Config formatter: sort the ``words`` list, drop duplicates, write it back."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from .document import parse_document, save_document
from .errors import CspellWordsError
from .ordering import DEFAULT_COLLATION, Collation, sort_unique

logger = logging.getLogger(__name__)


@dataclass
class FormatResult:
    ok: bool
    changed: bool = False
    removed_duplicates: int = 0
    error: Optional[str] = None


def format_words(
    words: Iterable[str],
    collation: Collation = DEFAULT_COLLATION,
    locale_name: str = "",
) -> List[str]:
    return sort_unique(words, collation, locale_name)


def format_document(
    path: Path,
    collation: Collation = DEFAULT_COLLATION,
    locale_name: str = "",
    check: bool = False,
) -> FormatResult:
    """Normalize the word list of the document at *path*.

    A list that is already sorted and unique leaves the file byte-for-byte
    untouched. With ``check`` the file is never written and ``changed``
    reports whether a rewrite would happen. Failures are returned, not raised.
    """
    path = Path(path)
    try:
        original_text = path.read_text(encoding="utf-8")
        doc = parse_document(original_text, path)
        words = doc.words
        formatted = format_words(words, collation, locale_name)
        changed = formatted != words
        if changed:
            doc.set_words(formatted)
            if not check:
                save_document(doc, path)
    except (CspellWordsError, OSError, UnicodeDecodeError) as exc:
        return FormatResult(ok=False, error=str(exc))

    removed = len(words) - len(formatted)
    logger.debug(
        "%s: %d word(s), %d duplicate(s) removed, changed=%s", path, len(formatted), removed, changed
    )
    return FormatResult(ok=True, changed=changed, removed_duplicates=removed)
