"""Settings for the word list tools.

Values are layered: command-line flag, then environment variable, then
default. The target document is always an explicit setting; when neither
``--config`` nor ``CSPELL_WORDS_CONFIG`` names it, the first cspell config
file found under the project root is used.
"""
from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Optional

from .errors import ConfigError
from .ordering import DEFAULT_COLLATION, Collation

ENV_CONFIG = "CSPELL_WORDS_CONFIG"
ENV_ROOT = "CSPELL_WORDS_ROOT"
ENV_COLLATION = "CSPELL_WORDS_COLLATION"
ENV_LOCALE = "CSPELL_WORDS_LOCALE"

# cspell's own lookup order for project-level config files
CONFIG_CANDIDATES = (
    "cspell.yaml",
    "cspell.yml",
    "cspell.json",
    ".cspell.json",
    "cspell.config.yaml",
    "cspell.config.yml",
    "cspell.config.json",
)
DEFAULT_CONFIG_NAME = "cspell.yaml"


@dataclass
class Settings:
    path: Path
    collation: Collation = DEFAULT_COLLATION
    locale: str = ""
    verbose: bool = False


def project_root(env: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if env is None else env
    root = env.get(ENV_ROOT)
    return Path(root) if root else Path.cwd()


def find_config(root: Path) -> Path:
    """Return the first cspell config under *root*, or ``root/cspell.yaml``."""
    for name in CONFIG_CANDIDATES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    return root / DEFAULT_CONFIG_NAME


def add_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", metavar="PATH", help="cspell config file (default: auto-detect)")
    parser.add_argument(
        "--collation",
        choices=[c.value for c in Collation],
        help=f"word ordering policy (default: {DEFAULT_COLLATION.value})",
    )
    parser.add_argument("--locale", help="LC_COLLATE name for --collation=locale")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")


def resolve_settings(
    args: argparse.Namespace, env: Optional[Mapping[str, str]] = None
) -> Settings:
    env = os.environ if env is None else env
    raw_path = args.config or env.get(ENV_CONFIG)
    if raw_path:
        path = Path(raw_path)
        if not path.is_absolute() and env.get(ENV_ROOT):
            path = project_root(env) / path
    else:
        path = find_config(project_root(env))
    collation = Collation.parse(args.collation or env.get(ENV_COLLATION) or DEFAULT_COLLATION.value)
    return Settings(
        path=path,
        collation=collation,
        locale=args.locale if args.locale is not None else env.get(ENV_LOCALE, ""),
        verbose=bool(args.verbose),
    )


def load_settings(
    argv: Optional[List[str]] = None, env: Optional[Mapping[str, str]] = None
) -> Settings:
    """Parse *argv* with the shared options only."""
    parser = argparse.ArgumentParser(add_help=False)
    add_arguments(parser)
    args, _ = parser.parse_known_args(argv)
    return resolve_settings(args, env)


__all__ = [
    "CONFIG_CANDIDATES",
    "ConfigError",
    "Settings",
    "add_arguments",
    "find_config",
    "load_settings",
    "project_root",
    "resolve_settings",
]
