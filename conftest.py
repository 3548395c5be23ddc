"""
Pytest root configuration.

The suites import the package as ``src.ndlite``; keep the repository root on
``sys.path`` regardless of the directory pytest is started from.
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
