from __future__ import annotations

"""
Tree Renderer.

Converts live size trees into text. The indented form is lazy and reads
current sizes on every pass, so rendering again after a mutation reflects
the new state. The ASCII form uses box-drawing connectors.
"""

import sys
from typing import Iterator, List, Optional, TextIO, Tuple

from sizetree.domain.constants import (
    INDENT_UNIT,
    LINE_TEMPLATE,
    STYLE_ASCII,
    STYLE_INDENT,
)
from sizetree.domain.nodes import Node, walk_tree

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def iter_tree_lines(node: Node, indent: str = "") -> Iterator[str]:
    """
    Lazily yield one formatted line per node, depth-first, pre-order.

    Each line reads "{indent} {name} {size} bytes"; every level adds two
    spaces to the indent. Children appear in insertion order.

    Args:
        node: Root of the subtree to render.
        indent: Prefix for the root line.
    """
    for depth, current in walk_tree(node):
        yield format_line(current, indent + INDENT_UNIT * depth)


def render_tree(node: Node, indent: str = "") -> List[str]:
    """Materialise iter_tree_lines into a list."""
    return list(iter_tree_lines(node, indent))


def format_line(node: Node, indent: str = "") -> str:
    return LINE_TEMPLATE.format(indent=indent, name=node.name, size=node.byte_size)


def render_tree_structure(
        node: Node,
        lines: List[str],
        prefix: str = "",
) -> None:
    """
    Render the descendants of node with ASCII connectors.

    The root line itself is not emitted; callers add it (see render_ascii).

    Args:
        node: Node whose descendants are rendered.
        lines: Accumulator list for output lines.
        prefix: Indentation prefix for the first level.
    """
    # Entries are (node, prefix, is_last); reversed so pops keep insertion order
    stack: List[Tuple[Node, str, bool]] = []
    _push_children(stack, node, prefix)

    while stack:
        child, child_prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "
        lines.append(f"{child_prefix}{connector}{child.name} ({child.byte_size} bytes)")
        _push_children(stack, child, child_prefix + ("    " if is_last else "│   "))


def render_ascii(node: Node) -> List[str]:
    """Render node and its descendants with ASCII connectors."""
    lines = [f"{node.name} ({node.byte_size} bytes)"]
    render_tree_structure(node, lines)
    return lines


def print_tree(
        node: Node,
        indent: str = "",
        *,
        style: str = STYLE_INDENT,
        stream: Optional[TextIO] = None,
) -> None:
    """
    Write the rendered tree to stream (stdout by default).

    Raises:
        ValueError: If style is unknown.
    """
    out = stream if stream is not None else sys.stdout

    if style == STYLE_INDENT:
        lines = iter_tree_lines(node, indent)
    elif style == STYLE_ASCII:
        lines = iter(render_ascii(node))
    else:
        raise ValueError(f"Unknown render style: {style!r}")

    for line in lines:
        print(line, file=out)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _push_children(stack: List[Tuple[Node, str, bool]], node: Node, prefix: str) -> None:
    entries = node.children()
    last = len(entries) - 1
    for i in range(last, -1, -1):
        stack.append((entries[i], prefix, i == last))
