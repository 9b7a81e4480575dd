"""Pytest configuration helpers for test collection.

Ensure the project root is on sys.path so tests can import the package
without requiring PYTHONPATH to be set externally, and clear the
process-wide bindings after every test.
"""
import sys
from pathlib import Path

# Insert repo root (one level up from tests/) to sys.path
repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from locator_lib.testing import clear_bindings_after_test, registry  # noqa: E402,F401
