# tests/conftest.py
"""
Shared Test Fixtures

Files that USE this module:
- pytest (loads fixtures for every test module)

Files that this module USES:
- logging (root logger state)
"""
import logging

import pytest  # Testing framework for writing and running tests


@pytest.fixture
def restore_logging():
    """Undo setup_logging's changes to the root logger after a test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
