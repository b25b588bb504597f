"""
Root conftest.py - Sets up Python path for tests.

This conftest is loaded by pytest before any test collection begins, so the
in-tree chromaharmony package is importable without an install.
"""
import sys
import os

# Get the project root (where this conftest.py lives)
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)
