#!/usr/bin/env python3
"""Sort and deduplicate the ``words`` list of the cspell config in place.

Usage:
    python scripts/format_cspell.py [--config PATH] [--collation NAME] [--check]

Exit codes: 0 OK, 1 formatting failed (or, with --check, the file would change).
"""
from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cspell_words.cli import format_main  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    return format_main(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
