"""Tests for the config formatter."""

from __future__ import annotations

import json

import pytest

from cspell_words import formatter
from cspell_words.checker import EXIT_OK, run_check
from cspell_words.document import load_document
from cspell_words.errors import DocumentError
from cspell_words.formatter import format_document, format_words
from cspell_words.ordering import Collation


@pytest.mark.parametrize("collation", [Collation.ORDINAL, Collation.CASEFOLD])
def test_format_words_sorts_and_drops_exact_duplicates(collation):
    words = ["banana", "apple", "banana", "Apple"]
    assert format_words(words, collation) == ["Apple", "apple", "banana"]


def test_format_document_rewrites_words(yaml_words):
    path = yaml_words(["banana", "apple", "banana", "Apple"])
    result = format_document(path, Collation.ORDINAL)
    assert result.ok and result.changed
    assert result.removed_duplicates == 1
    assert load_document(path).words == ["Apple", "apple", "banana"]


def test_format_document_keeps_other_fields_and_comments(write_config):
    path = write_config(
        "# dictionary\n"
        'version: "0.2"\n'
        "words:\n"
        "  - mango\n"
        "  - apple\n"
        "flagWords:\n"
        "  - teh\n"
    )
    assert format_document(path).ok
    assert path.read_text(encoding="utf-8") == (
        "# dictionary\n"
        'version: "0.2"\n'
        "words:\n"
        "  - apple\n"
        "  - mango\n"
        "flagWords:\n"
        "  - teh\n"
    )


def test_format_document_is_idempotent(yaml_words):
    path = yaml_words(["zeta", "Alpha", "beta", "alpha", "beta"])
    format_document(path)
    once = path.read_text(encoding="utf-8")
    result = format_document(path)
    assert result.ok
    assert not result.changed
    assert path.read_text(encoding="utf-8") == once


def test_formatted_file_passes_the_checker(yaml_words):
    for collation in Collation:
        path = yaml_words(["b", "B", "a", "A", "b"])
        assert format_document(path, collation, "C").ok
        assert run_check(path, collation, "C") == EXIT_OK


def test_format_json_document(write_config):
    path = write_config(
        '{\n  "version": "0.2",\n  "words": ["mango", "apple", "mango"]\n}\n', "cspell.json"
    )
    result = format_document(path)
    assert result.ok and result.removed_duplicates == 1
    text = path.read_text(encoding="utf-8")
    assert json.loads(text) == {"version": "0.2", "words": ["apple", "mango"]}
    assert text.endswith("}\n")


def test_check_mode_reports_without_writing(yaml_words):
    path = yaml_words(["b", "a"])
    before = path.read_text(encoding="utf-8")
    result = format_document(path, check=True)
    assert result.ok and result.changed
    assert path.read_text(encoding="utf-8") == before


def test_missing_words_field_is_left_out(write_config):
    path = write_config("language: en\n")
    result = format_document(path)
    assert result.ok and not result.changed
    assert path.read_text(encoding="utf-8") == "language: en\n"


def test_parse_failure_is_returned_not_raised(write_config):
    path = write_config("words: [a, b\n")
    result = format_document(path)
    assert not result.ok
    assert "YAML parse error" in result.error
    assert path.read_text(encoding="utf-8") == "words: [a, b\n"


def test_missing_file_is_returned_as_failure(tmp_path):
    result = format_document(tmp_path / "cspell.yaml")
    assert not result.ok
    assert result.error


def test_write_failure_is_returned_as_failure(yaml_words, monkeypatch):
    path = yaml_words(["b", "a"])

    def boom(doc, target=None):
        raise DocumentError(target, "cannot write file: disk full")

    monkeypatch.setattr(formatter, "save_document", boom)
    result = format_document(path)
    assert not result.ok
    assert "disk full" in result.error


def test_sorted_list_leaves_file_untouched(write_config):
    text = (
        "dictionaryDefinitions:\n"
        "    name: proj\n"
        "    path: ./words.txt\n"
        "words:\n"
        "  - apple\n"
        "  - mango\n"
    )
    path = write_config(text)
    result = format_document(path, check=True)
    assert result.ok and not result.changed
    result = format_document(path)
    assert result.ok and not result.changed
    assert path.read_text(encoding="utf-8") == text


def test_reordering_keeps_each_comment_on_its_word(write_config):
    path = write_config("words:\n  - mango\n  - zebra\n  - apple  # fruit\n")
    assert format_document(path).ok
    assert path.read_text(encoding="utf-8") == "words:\n  - apple  # fruit\n  - mango\n  - zebra\n"
