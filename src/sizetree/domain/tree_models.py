from __future__ import annotations

"""
Declarative Tree Layout Models.

Provides the recursive type used to describe a size tree as nested
mappings before it is materialised into live nodes.
"""

from typing import Dict, Union

# Keys are node names, values are either sub-layouts (directories) or
# integer sizes (files). Mapping order is the child insertion order.
Layout = Dict[str, Union["Layout", int]]
