from __future__ import annotations

"""
Size Invariant Audit.

Read-only diagnostics that recompute directory totals from scratch and
compare them with the incrementally maintained values. Never used on the
propagation path.
"""

import logging
from typing import List

from sizetree.domain.constants import DIRECTORY_BASE_SIZE
from sizetree.domain.nodes import Node, walk_tree

logger = logging.getLogger(__name__)


def audit_tree(root: Node) -> List[str]:
    """
    Check base + sum(children) == byte_size for every directory under root.

    Args:
        root: Subtree to inspect.

    Returns:
        List[str]: One message per mismatching directory (empty when sound).
    """
    problems: List[str] = []
    for _, node in walk_tree(root):
        if not node.is_container:
            continue
        expected = DIRECTORY_BASE_SIZE + sum(c.byte_size for c in node.children())
        if node.byte_size != expected:
            problems.append(
                f"Directory '{node.name}' reports {node.byte_size} bytes, expected {expected}."
            )

    if problems:
        logger.warning(f"Size audit found {len(problems)} mismatch(es).")
    else:
        logger.debug(f"Size audit passed for '{root.name}'.")
    return problems


def total_nodes(root: Node) -> int:
    return sum(1 for _ in walk_tree(root))


def max_depth(root: Node) -> int:
    return max(depth for depth, _ in walk_tree(root))
