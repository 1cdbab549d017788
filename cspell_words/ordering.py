"""Comparison policy shared by the checker and the formatter.

Both tools order words with the same ``Collation`` so that a list written by
the formatter always passes the checker under the same settings.

  - ``ordinal``: raw code point order (Python's ``str`` ordering).
  - ``casefold``: case-insensitive primary order, ordinal tie-break. Only
    case is folded, not accents: "Éclair" sorts after "zeta", where a real
    locale would put it next to "eclair". Use ``locale`` for that.
  - ``locale``: ``locale.strxfrm`` under ``LC_COLLATE``, ordinal tie-break.
"""
from __future__ import annotations

import itertools
import locale
import logging
from contextlib import contextmanager
from enum import Enum
from typing import Callable, Iterable, Iterator, List

from .errors import ConfigError

logger = logging.getLogger(__name__)


class Collation(str, Enum):
    ORDINAL = "ordinal"
    CASEFOLD = "casefold"
    LOCALE = "locale"

    @classmethod
    def parse(cls, name: str) -> "Collation":
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            choices = ", ".join(c.value for c in cls)
            raise ConfigError(f"unknown collation {name!r} (choose from {choices})") from None


DEFAULT_COLLATION = Collation.CASEFOLD


@contextmanager
def collate_locale(name: str = "") -> Iterator[None]:
    """Temporarily switch ``LC_COLLATE`` to *name* ("" = process environment)."""
    previous = locale.setlocale(locale.LC_COLLATE)
    try:
        locale.setlocale(locale.LC_COLLATE, name)
    except locale.Error as exc:
        raise ConfigError(f"unsupported locale {name!r}: {exc}") from exc
    logger.debug("LC_COLLATE set to %s", locale.setlocale(locale.LC_COLLATE))
    try:
        yield
    finally:
        locale.setlocale(locale.LC_COLLATE, previous)


def sort_key(collation: Collation) -> Callable[[str], object]:
    """Return the key function for *collation*.

    The ``locale`` key reads the active ``LC_COLLATE``; call it inside
    :func:`collate_locale`.
    """
    if collation is Collation.ORDINAL:
        return str
    if collation is Collation.CASEFOLD:
        return lambda word: (word.casefold(), word)
    return lambda word: (locale.strxfrm(word), word)


def sorted_words(
    words: Iterable[str],
    collation: Collation = DEFAULT_COLLATION,
    locale_name: str = "",
) -> List[str]:
    """Return a sorted copy of *words*."""
    items = list(words)
    if collation is Collation.LOCALE:
        with collate_locale(locale_name):
            return sorted(items, key=sort_key(collation))
    return sorted(items, key=sort_key(collation))


def sort_unique(
    words: Iterable[str],
    collation: Collation = DEFAULT_COLLATION,
    locale_name: str = "",
) -> List[str]:
    """Sort *words* and collapse exact duplicates.

    Equal strings always sort next to each other, so dropping equal adjacent
    elements removes every duplicate.
    """
    return [word for word, _ in itertools.groupby(sorted_words(words, collation, locale_name))]
