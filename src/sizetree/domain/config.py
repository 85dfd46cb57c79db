from __future__ import annotations

"""
Configuration Domain Management.

Dict-based runtime configuration for the demo driver and the CLI.
"""

from typing import Any, Dict

from sizetree.domain.constants import STYLE_INDENT

DEFAULT_LEAF_SIZE = 100
DEFAULT_LEAF_NEW_SIZE = 200


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Rendering
        "style": STYLE_INDENT,
        "show_separator": True,

        # Demo scenario
        "leaf_size": DEFAULT_LEAF_SIZE,
        "leaf_new_size": DEFAULT_LEAF_NEW_SIZE,

        # Diagnostics
        "audit": True,
    }
