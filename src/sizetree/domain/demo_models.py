from __future__ import annotations

"""
Demo Domain Data Models.

Defines the result structure and factories used to communicate demo runs
between the scenario driver and the interface layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DemoResult:
    """
    Outcome of a complete demo run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        style: Render style used for the snapshots.
        snapshots: Rendered tree lines after each step.
        root_sizes: Root size observed after each step.
        audit_problems: Invariant mismatches found after the last step.
        tree: Final tree serialized as nested dictionaries.
    """
    ok: bool
    error: str
    style: str

    snapshots: List[List[str]] = field(default_factory=list)
    root_sizes: List[int] = field(default_factory=list)
    audit_problems: List[str] = field(default_factory=list)
    tree: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_success_result(
        style: str,
        snapshots: List[List[str]],
        root_sizes: List[int],
        tree: Dict[str, Any],
        audit_problems: Optional[List[str]] = None,
) -> DemoResult:
    """Build a DemoResult for a run that reached the final step."""
    problems = list(audit_problems or [])
    return DemoResult(
        ok=not problems,
        error="; ".join(problems),
        style=style,
        snapshots=snapshots,
        root_sizes=root_sizes,
        audit_problems=problems,
        tree=tree,
    )


def create_error_result(error: str, style: str) -> DemoResult:
    """Build a DemoResult for a run that aborted."""
    return DemoResult(ok=False, error=error, style=style)
