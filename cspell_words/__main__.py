"""Entry point for the word list tools.

Executing ``python -m cspell_words`` forwards to the CLI defined in
``cspell_words.cli``.
"""
from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
