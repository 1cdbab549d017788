import sys
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

_ENV_VARS = (
    "CSPELL_WORDS_CONFIG",
    "CSPELL_WORDS_ROOT",
    "CSPELL_WORDS_COLLATION",
    "CSPELL_WORDS_LOCALE",
    "GITHUB_ACTIONS",
)


def _repo_root() -> Path:
    """Return repository root (tests/ is one level below)."""
    return _REPO_ROOT


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path_factory, monkeypatch):
    """
    Per-test isolation:
    - chdir into a unique tmp dir so config auto-discovery never sees the repo's cspell.yaml
    - drop CSPELL_WORDS_* / GITHUB_ACTIONS inherited from the caller
    """
    tmp_path = tmp_path_factory.mktemp("cwd")
    monkeypatch.chdir(tmp_path)
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield tmp_path


@pytest.fixture
def write_config(tmp_path):
    """Write *text* to ``tmp_path/name`` and return the path."""

    def _write(text: str, name: str = "cspell.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def yaml_words(write_config):
    """Write a minimal YAML config holding *words*."""

    def _write(words, name: str = "cspell.yaml") -> Path:
        body = "".join(f"  - {w}\n" for w in words)
        return write_config(f'version: "0.2"\nwords:\n{body}', name)

    return _write
