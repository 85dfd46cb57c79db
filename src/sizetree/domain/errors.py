from __future__ import annotations

"""
Contract Violation Errors.

These signal defects in calling code, not recoverable runtime conditions.
"""


class TreeContractError(RuntimeError):
    """Base class for broken size-tree invariants."""


class AlreadyAttachedError(TreeContractError):
    """A node was attached while already owned, or would create a cycle."""


class NotAContainerError(TreeContractError):
    """A leaf node was asked to fold a child's size delta."""
