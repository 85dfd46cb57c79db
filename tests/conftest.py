from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports uninstalled.
2. Provides shared trees and configuration dictionaries.
"""

import os
import sys
from typing import Any, Dict, Tuple

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from sizetree.core.services.demo import build_sample_tree  # noqa: E402
from sizetree.domain.nodes import Directory, Node  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree() -> Tuple[Directory, Dict[str, Node]]:
    """
    The demo tree (430 bytes at the root):

    root
      dir1
      dir2
        dirdir
        g1.txt (20)
      f1.txt (10)
    """
    return build_sample_tree()


@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """Return a valid, complete configuration dictionary."""
    return {
        "style": "indent",
        "show_separator": True,
        "leaf_size": 100,
        "leaf_new_size": 200,
        "audit": True,
    }
