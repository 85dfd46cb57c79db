from __future__ import annotations

"""
Domain Constants.

Centralized values shared by the size model, the renderers and the demo
driver.
"""

from typing import Tuple

# -----------------------------------------------------------------------------
# SIZE MODEL
# -----------------------------------------------------------------------------

# Fixed directory-entry overhead, independent of children
DIRECTORY_BASE_SIZE: int = 100

# -----------------------------------------------------------------------------
# RENDERING
# -----------------------------------------------------------------------------

INDENT_UNIT: str = "  "
LINE_TEMPLATE: str = "{indent} {name} {size} bytes"
SEPARATOR: str = "-" * 32

STYLE_INDENT: str = "indent"
STYLE_ASCII: str = "ascii"
RENDER_STYLES: Tuple[str, ...] = (STYLE_INDENT, STYLE_ASCII)
