"""Pytest configuration.

Puts the repository root on sys.path so the flat top-level packages
(``services``, ``models``, ``routes``...) import the same way the app does.
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
