import sys, os

import pytest

# Ensure src and the test helpers are importable
TESTS = os.path.dirname(__file__)
SRC = os.path.join(os.path.dirname(TESTS), 'src')
for path in (SRC, TESTS):
    if path not in sys.path:
        sys.path.insert(0, path)

from helpers import build_session_world  # noqa: E402


@pytest.fixture
def session_world():
    """World with a character session over the default fake catalog and in-memory storage."""
    return build_session_world()
