"""Test package for cspell-words.

This file enables relative imports within the ``tests`` package.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Make the repository importable without installing the package first.
_REPO_ROOT = Path(__file__).resolve().parent.parent
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))
