"""Exceptions raised by the word list tools."""

from __future__ import annotations


class CspellWordsError(Exception):
    """Base class for failures the entry points translate into exit codes."""


class DocumentError(CspellWordsError):
    """The configuration document cannot be read, parsed or written."""

    def __init__(self, path, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


class ConfigError(CspellWordsError):
    """Invalid tool settings (unknown collation, unsupported locale)."""
