from __future__ import annotations

"""
Size Tree Builder.

Materialises declarative Layout mappings into live Directory/File trees and
converts live trees back into plain data for display and JSON output.
"""

import logging
from typing import Any, Dict, Mapping

from sizetree.domain.nodes import Directory, File, Node
from sizetree.domain.tree_models import Layout

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(name: str, layout: Layout) -> Directory:
    """
    Build a Directory named name from a nested Layout mapping.

    Children are attached through Directory.add_child in mapping order, so
    every attach propagates like any other caller's would.

    Args:
        name: Name of the root directory.
        layout: Nested mapping (int values are files, mappings are directories).

    Returns:
        Directory: The populated root.

    Raises:
        TypeError: If a layout value is neither an int nor a mapping.
    """
    root = Directory(name)
    _populate(root, layout)
    logger.debug(f"Built tree '{name}' with total size {root.byte_size} bytes.")
    return root


def tree_to_layout(directory: Directory) -> Layout:
    """
    Convert a live directory back into a Layout mapping.

    Duplicate sibling names collapse: the last one wins.
    """
    layout: Layout = {}
    for child in directory.children():
        if isinstance(child, Directory):
            layout[child.name] = tree_to_layout(child)
        else:
            layout[child.name] = child.byte_size
    return layout


def tree_to_dict(node: Node) -> Dict[str, Any]:
    """
    Serialize a node and its descendants into JSON-ready dictionaries.

    Returns:
        Dict[str, Any]: name, type, byte_size and ordered children.
    """
    return {
        "name": node.name,
        "type": "directory" if node.is_container else "file",
        "byte_size": node.byte_size,
        "children": [tree_to_dict(c) for c in node.children()],
    }

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _populate(directory: Directory, layout: Mapping[str, Any]) -> None:
    if not isinstance(layout, Mapping):
        raise TypeError(
            f"Layout for '{directory.name}' must be a mapping, "
            f"received {type(layout).__name__}."
        )

    for entry, value in layout.items():
        # Case A: sub-directory
        if isinstance(value, Mapping):
            sub = Directory(entry)
            _populate(sub, value)
            directory.add_child(sub)
            continue

        # Case B: file (bool is rejected by File itself)
        if isinstance(value, int):
            directory.add_child(File(entry, value))
            continue

        raise TypeError(
            f"Invalid layout entry '{entry}': expected int or mapping, "
            f"received {type(value).__name__}."
        )
