from __future__ import annotations

"""
Size Tree Data Models.

Every node carries a name and a byte size. A Directory owns an ordered
sequence of children and keeps its own size equal to the fixed base size
plus the sum of its children. Size changes travel upward as signed deltas:
the changed node walks its parent chain in a loop and each ancestor folds
the delta into its own size, so each change costs one step per ancestor
and no directory is ever re-summed from scratch.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Optional, Tuple

from sizetree.domain.constants import DIRECTORY_BASE_SIZE
from sizetree.domain.errors import AlreadyAttachedError, NotAContainerError

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# BASE CONTRACT
# -----------------------------------------------------------------------------

class Node(ABC):
    """
    Abstract named entity with a byte size.

    Attributes:
        name: Immutable display name.
        byte_size: Own size (File) or base plus aggregated children (Directory).
        parent: Owning Directory, or None for a detached or root node.
    """

    is_container: bool = False

    def __init__(self, name: str, byte_size: int) -> None:
        self._name = _check_name(name)
        self._byte_size = _check_size(byte_size)
        self._parent: Optional[Directory] = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, byte_size={self._byte_size})"

    # --- Read API ---

    @property
    def name(self) -> str:
        return self._name

    @property
    def byte_size(self) -> int:
        return self._byte_size

    @property
    def parent(self) -> Optional[Directory]:
        return self._parent

    def get_name(self) -> str:
        """Return the immutable name."""
        return self._name

    def get_byte_size(self) -> int:
        """Return the current size in bytes."""
        return self._byte_size

    def children(self) -> Tuple[Node, ...]:
        """
        Return the direct children in insertion order.

        Leaves return an empty tuple, so traversals never need a type test.
        """
        return ()

    # --- Mutation API ---

    def set_byte_size(self, new_size: int) -> None:
        """
        Replace the stored size and push the delta to the parent.

        The whole ancestor chain is updated before this call returns. The
        chain is walked iteratively, so any depth completes in one pass.

        Args:
            new_size: New absolute size. Negative values are accepted.

        Raises:
            TypeError: If new_size is not an integer.
        """
        new_size = _check_size(new_size)
        delta = new_size - self._byte_size
        self._byte_size = new_size

        parent = self._parent
        while parent is not None:
            parent.on_child_size_changed(delta)
            parent = parent.parent

    @abstractmethod
    def on_child_size_changed(self, delta: int) -> None:
        """
        Fold a descendant's size delta into this node's own size.

        Only the node itself is updated; set_byte_size carries the delta
        on to the next ancestor.
        """

    # --- Ownership (package internal) ---

    def _attach_to(self, parent: Directory) -> None:
        self._parent = parent


# -----------------------------------------------------------------------------
# DIRECTORY
# -----------------------------------------------------------------------------

class Directory(Node):
    """
    A Node owning an ordered collection of Files and Directories.

    Invariant (after every public call returns):
        byte_size == DIRECTORY_BASE_SIZE + sum(c.byte_size for c in children)

    Duplicate child names are permitted; identity is by reference.

    set_byte_size on a Directory is public and overrides the aggregate:
    ancestors receive the delta and stay consistent, but this directory no
    longer equals base plus children (audit_tree reports it).
    """

    is_container = True

    def __init__(self, name: str) -> None:
        super().__init__(name, DIRECTORY_BASE_SIZE)
        self._children: List[Node] = []

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[Node]:
        return iter(tuple(self._children))

    # --- Child ownership ---

    def add_child(self, node: Node) -> None:
        """
        Take ownership of node and account for its size.

        Precondition: node has no parent and is neither this directory nor
        one of its ancestors. The check runs before any state changes.

        Args:
            node: File or Directory to append.

        Raises:
            TypeError: If node is not a Node.
            AlreadyAttachedError: If the precondition does not hold.
        """
        if not isinstance(node, Node):
            raise TypeError(f"Expected a Node, received {type(node).__name__}.")
        if node.parent is not None:
            raise AlreadyAttachedError(
                f"'{node.name}' already belongs to directory '{node.parent.name}'."
            )
        if self._is_self_or_ancestor(node):
            raise AlreadyAttachedError(
                f"Attaching '{node.name}' under '{self.name}' would create a cycle."
            )

        node._attach_to(self)
        self._children.append(node)
        logger.debug(f"Attached '{node.name}' ({node.byte_size} bytes) to '{self.name}'.")

        self.set_byte_size(self._byte_size + node.byte_size)

    def add_children(self, nodes: Iterable[Node]) -> None:
        """
        Attach each node in order, one propagation event per node.

        Not atomic: a failing element leaves earlier elements attached.
        """
        for node in nodes:
            self.add_child(node)

    def add_dir(self, directory: Directory) -> None:
        """Attach a sub-directory."""
        if not isinstance(directory, Directory):
            raise TypeError(f"Expected a Directory, received {type(directory).__name__}.")
        self.add_child(directory)

    def add_file(self, file: File) -> None:
        """Attach a file."""
        if not isinstance(file, File):
            raise TypeError(f"Expected a File, received {type(file).__name__}.")
        self.add_child(file)

    # --- Propagation relay ---

    def on_child_size_changed(self, delta: int) -> None:
        """
        Apply a descendant's delta to this directory only.

        Args:
            delta: Signed size difference reported from below.
        """
        logger.debug(f"'{self.name}' folding child delta {delta:+d}.")
        self._byte_size += delta

    # --- Read-only views ---

    def children(self) -> Tuple[Node, ...]:
        return tuple(self._children)

    def get_children(self) -> Tuple[Node, ...]:
        """Return a snapshot of the direct children in insertion order."""
        return tuple(self._children)

    def directories(self) -> Tuple[Directory, ...]:
        return tuple(c for c in self._children if isinstance(c, Directory))

    def files(self) -> Tuple[File, ...]:
        return tuple(c for c in self._children if isinstance(c, File))

    def walk(self) -> Iterator[Tuple[int, Node]]:
        """
        Yield (depth, node) pairs depth-first, pre-order, starting at self.
        """
        return walk_tree(self)

    def find(self, name: str) -> Optional[Node]:
        """Return the first descendant named name in pre-order, or None."""
        for depth, node in self.walk():
            if depth > 0 and node.name == name:
                return node
        return None

    # --- Helpers ---

    def _is_self_or_ancestor(self, node: Node) -> bool:
        current: Optional[Node] = self
        while current is not None:
            if current is node:
                return True
            current = current.parent
        return False


# -----------------------------------------------------------------------------
# FILE
# -----------------------------------------------------------------------------

class File(Node):
    """A leaf Node whose size is set directly by the caller."""

    def __init__(self, name: str, size: int) -> None:
        super().__init__(name, size)

    def change_size(self, new_size: int) -> None:
        """Change the file size and propagate the delta to every ancestor."""
        self.set_byte_size(new_size)

    def on_child_size_changed(self, delta: int) -> None:
        raise NotAContainerError(
            f"File '{self.name}' has no children and cannot receive a size delta."
        )


# -----------------------------------------------------------------------------
# TRAVERSAL
# -----------------------------------------------------------------------------

def walk_tree(node: Node) -> Iterator[Tuple[int, Node]]:
    """
    Lazily yield (depth, node) pairs depth-first, pre-order, from node.

    Uses an explicit stack, so arbitrarily deep trees can be walked.
    """
    stack: List[Tuple[int, Node]] = [(0, node)]
    while stack:
        depth, current = stack.pop()
        yield depth, current
        # Reversed so the first child is popped first
        stack.extend((depth + 1, c) for c in reversed(current.children()))


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------


def _check_name(name: str) -> str:
    if not isinstance(name, str):
        raise TypeError(f"Node name must be str, received {type(name).__name__}.")
    if not name:
        raise ValueError("Node name must be a non-empty string.")
    return name


def _check_size(size: int) -> int:
    # bool is an int subclass but never a meaningful size
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"Byte size must be int, received {type(size).__name__}.")
    return size
