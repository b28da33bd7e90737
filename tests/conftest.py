"""
Put the local `src` directory on sys.path so `python -m pytest` runs against
a fresh checkout of mat2 without `pip install -e .`.
"""

import os
import sys


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)
