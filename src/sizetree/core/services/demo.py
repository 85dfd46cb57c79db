from __future__ import annotations

"""
Demo Scenario Driver.

Builds the sample tree, renders it, grows it with a new leaf, changes
that leaf's size and renders again after each step, so the change is
visible at every ancestor level:

1. Validates configuration.
2. Builds root -> dir1, dir2 -> [dirdir, g1.txt], f1.txt.
3. Adds leaf.txt under dirdir.
4. Changes the size of leaf.txt.
5. Audits the size invariant on the final tree.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from sizetree.core.analysis.audit import audit_tree
from sizetree.core.analysis.tree_builder import tree_to_dict
from sizetree.core.analysis.tree_renderer import render_ascii, render_tree
from sizetree.core.services.validator import validate_config
from sizetree.domain.constants import STYLE_ASCII
from sizetree.domain.demo_models import (
    DemoResult,
    create_error_result,
    create_success_result,
)
from sizetree.domain.errors import TreeContractError
from sizetree.domain.nodes import Directory, File, Node

logger = logging.getLogger(__name__)

LEAF_NAME = "leaf.txt"
LEAF_PARENT_NAME = "dirdir"


def build_sample_tree() -> Tuple[Directory, Dict[str, Node]]:
    """
    Build the sample tree used by the demo.

    dir2 is attached to root before it receives its own children, so
    growing it propagates through an existing parent.

    Returns:
        Tuple[Directory, Dict[str, Node]]: The root and a name -> node index.
    """
    root = Directory("root")
    dir1 = Directory("dir1")
    dir2 = Directory("dir2")
    f1 = File("f1.txt", 10)
    dirdir = Directory("dirdir")
    g1 = File("g1.txt", 20)

    root.add_dir(dir1)
    root.add_dir(dir2)
    root.add_file(f1)
    dir2.add_dir(dirdir)
    dir2.add_file(g1)

    index: Dict[str, Node] = {n.name: n for n in (root, dir1, dir2, f1, dirdir, g1)}
    return root, index


def run_demo(config: Optional[Dict[str, Any]] = None) -> DemoResult:
    """
    Execute the full demo scenario.

    Args:
        config: Raw or partial configuration dictionary.

    Returns:
        DemoResult: Snapshots, root sizes per step and the final tree.
    """
    logger.info("Demo execution started.")

    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    style = cfg["style"]
    snapshots: List[List[str]] = []
    root_sizes: List[int] = []

    try:
        root, index = build_sample_tree()
        _snapshot(root, style, snapshots, root_sizes)

        leaf = File(LEAF_NAME, cfg["leaf_size"])
        parent = index[LEAF_PARENT_NAME]
        if not isinstance(parent, Directory):
            raise TypeError(f"'{LEAF_PARENT_NAME}' is not a directory.")
        parent.add_file(leaf)
        logger.info(f"Added '{LEAF_NAME}' ({leaf.byte_size} bytes) under '{parent.name}'.")
        _snapshot(root, style, snapshots, root_sizes)

        leaf.change_size(cfg["leaf_new_size"])
        logger.info(f"Resized '{LEAF_NAME}' to {leaf.byte_size} bytes.")
        _snapshot(root, style, snapshots, root_sizes)
    except (TreeContractError, TypeError, ValueError) as e:
        msg = f"Demo aborted: {e}"
        logger.error(msg)
        return create_error_result(msg, style)

    problems = audit_tree(root) if cfg["audit"] else []

    logger.info(f"Demo finished. Root sizes per step: {root_sizes}")
    return create_success_result(
        style=style,
        snapshots=snapshots,
        root_sizes=root_sizes,
        tree=tree_to_dict(root),
        audit_problems=problems,
    )


def _snapshot(root: Directory, style: str, snapshots: List[List[str]], sizes: List[int]) -> None:
    lines = render_ascii(root) if style == STYLE_ASCII else render_tree(root)
    snapshots.append(lines)
    sizes.append(root.byte_size)
