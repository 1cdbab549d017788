"""Load and save cspell configuration documents.

YAML documents go through ruamel.yaml in round-trip mode so comments, key
order and quoting survive a rewrite; JSON documents keep their key order and
indentation. Only the ``words`` field is ever modified.
"""
from __future__ import annotations

import json
import logging
import re
from io import StringIO
from pathlib import Path
from typing import Any, List, Optional, Union

from ruamel.yaml import YAML, YAMLError
from ruamel.yaml.comments import CommentedMap, CommentedSeq
from ruamel.yaml.tokens import CommentToken

from .errors import DocumentError

logger = logging.getLogger(__name__)

WORDS_KEY = "words"
YAML_SUFFIXES = {".yaml", ".yml"}
JSON_SUFFIXES = {".json"}

_YAML_SEQ_RE = re.compile(rf"^( *){WORDS_KEY}:[ \t]*\n(?:[ \t]*(?:#.*)?\n)*( *)- ", re.M)
_YAML_MAP_RE = re.compile(r"^( *)[^\s#-][^\n]*:[ \t]*\n(?:[ \t]*(?:#.*)?\n)*( *)[^\s#-]", re.M)
_JSON_INDENT_RE = re.compile(r'^([ \t]+)"', re.M)


def _mapping_indent(text: str) -> int:
    for m in _YAML_MAP_RE.finditer(text):
        step = len(m.group(2)) - len(m.group(1))
        if step > 0:
            return step
    return 2


def _make_yaml(text: str) -> YAML:
    yaml = YAML(typ="rt")
    yaml.preserve_quotes = True
    yaml.width = 4096  # avoid folding
    mapping = _mapping_indent(text)
    # keep the list style the file already uses ("- a" vs "  - a")
    m = _YAML_SEQ_RE.search(text)
    offset = len(m.group(2)) - len(m.group(1)) if m else 2
    if offset > 0:
        yaml.indent(mapping=mapping, sequence=offset + 2, offset=offset)
    else:
        yaml.indent(mapping=mapping, sequence=2, offset=0)
    return yaml


def _json_indent(text: str) -> Union[int, str]:
    m = _JSON_INDENT_RE.search(text)
    if not m:
        return 2
    ws = m.group(1)
    return ws if "\t" in ws else len(ws)


class ConfigDocument:
    """A parsed configuration file, ready to be serialized back."""

    def __init__(self, path: Path, data: Any, fmt: str, text: str = ""):
        self.path = Path(path)
        self.data = data
        self.format = fmt
        self._yaml = _make_yaml(text) if fmt == "yaml" else None
        self._json_indent = _json_indent(text) if fmt == "json" else 2

    @property
    def words(self) -> List[str]:
        """The ``words`` list; a missing field reads as empty."""
        value = self.data.get(WORDS_KEY)
        if value is None:
            return []
        if not isinstance(value, list):
            raise DocumentError(self.path, f"'{WORDS_KEY}' must be a list, got {type(value).__name__}")
        for idx, word in enumerate(value):
            if not isinstance(word, str):
                raise DocumentError(
                    self.path, f"'{WORDS_KEY}[{idx}]' must be a string, got {type(word).__name__}"
                )
        return list(value)

    def has_words(self) -> bool:
        return WORDS_KEY in self.data

    def set_words(self, words: List[str]) -> None:
        """Replace the contents of ``words``.

        For YAML the existing sequence object is reused so comments attached
        to it stay put: an end-of-line comment follows its word, and the lines
        that trailed the last item (blank lines, full-line comments) keep
        trailing the list.
        """
        current = self.data.get(WORDS_KEY)
        if not isinstance(current, CommentedSeq):
            self.data[WORDS_KEY] = list(words)
            return
        last = len(current) - 1
        tail: Optional[str] = None
        tail_mark = None
        by_word = {}
        for idx, entry in current.ca.items.items():
            if not (0 <= idx < len(current)) or not entry or entry[0] is None:
                continue
            token = entry[0]
            if idx == last:
                # "# eol\n" + following lines; the item line ends at the first newline
                head, _, tail = token.value.partition("\n")
                tail_mark = token.start_mark
                if not head.strip():
                    continue
                token = CommentToken(head + "\n", token.start_mark)
            by_word[current[idx]] = [token, *entry[1:]]
        current.ca.items.clear()
        del current[:]
        current.extend(words)
        for idx, word in enumerate(words):
            if word in by_word:
                current.ca.items[idx] = by_word.pop(word)
        if tail and words:
            idx = len(words) - 1
            entry = current.ca.items.get(idx)
            if entry is None:
                current.ca.items[idx] = [CommentToken("\n" + tail, tail_mark), None, None, None]
            else:
                token = entry[0]
                current.ca.items[idx] = [CommentToken(token.value + tail, token.start_mark), *entry[1:]]

    def dumps(self) -> str:
        if self.format == "json":
            return json.dumps(self.data, indent=self._json_indent, ensure_ascii=False) + "\n"
        buf = StringIO()
        self._yaml.dump(self.data, buf)
        return buf.getvalue()


def _detect_format(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in YAML_SUFFIXES:
        return "yaml"
    if suffix in JSON_SUFFIXES:
        return "json"
    raise DocumentError(path, f"unsupported config format {suffix or '(no suffix)'!r}")


def parse_document(text: str, path: Path) -> ConfigDocument:
    """Parse *text* as the document stored at *path*."""
    path = Path(path)
    fmt = _detect_format(path)
    if fmt == "json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DocumentError(path, f"JSON parse error: {exc}") from exc
    else:
        try:
            data = _make_yaml(text).load(text)
        except YAMLError as exc:
            raise DocumentError(path, f"YAML parse error: {exc}") from exc
        if data is None:
            data = CommentedMap()
    if not isinstance(data, dict):
        raise DocumentError(path, f"top-level value must be a mapping, got {type(data).__name__}")
    return ConfigDocument(path, data, fmt, text)


def load_document(path: Union[str, Path]) -> ConfigDocument:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentError(path, f"cannot read file: {exc}") from exc
    logger.debug("loaded %s (%d bytes)", path, len(text))
    return parse_document(text, path)


def save_document(doc: ConfigDocument, path: Optional[Union[str, Path]] = None) -> None:
    """Serialize *doc* and replace the file through a temporary sibling."""
    target = Path(path) if path is not None else doc.path
    text = doc.dumps()
    tmp = target.with_name(target.name + ".tmp")
    try:
        with tmp.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(text)
        tmp.replace(target)
    except OSError as exc:
        tmp.unlink(missing_ok=True)
        raise DocumentError(target, f"cannot write file: {exc}") from exc
    logger.debug("wrote %s (%d bytes)", target, len(text))
