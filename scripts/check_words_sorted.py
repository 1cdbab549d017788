#!/usr/bin/env python3
"""CI gate: fail when the ``words`` list of the cspell config is not sorted.

Usage:
    python scripts/check_words_sorted.py [--config PATH] [--collation NAME]

The config is looked up in the repository root (the parent of ``scripts/``)
unless ``--config`` or ``CSPELL_WORDS_ROOT`` / ``CSPELL_WORDS_CONFIG`` say
otherwise, so the gate gives the same answer from any working directory.

Exit codes: 0 OK, 1 words out of order, 2 config could not be checked.
"""
from __future__ import annotations

import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cspell_words.cli import check_main  # noqa: E402
from cspell_words.config import ENV_ROOT  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    os.environ.setdefault(ENV_ROOT, str(ROOT))
    return check_main(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
