"""Maintenance tools for the ``words`` list of a cspell configuration file.

Two utilities share one document loader and one comparison policy:

  - the order checker (``cspell_words.checker``) is a CI gate that fails when
    the word list is not sorted;
  - the formatter (``cspell_words.formatter``) sorts the list, drops exact
    duplicates and writes the document back in its own format.
"""

__all__ = ["checker", "cli", "config", "document", "errors", "formatter", "ordering"]
__version__ = "0.1.0"
