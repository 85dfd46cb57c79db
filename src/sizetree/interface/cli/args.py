from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed namespaces into
configuration overrides.
"""

import argparse
from typing import Any, Dict

from sizetree import __version__
from sizetree.domain.constants import RENDER_STYLES

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the sizetree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="sizetree",
        description=(
            "Build a sample directory tree, grow and resize a leaf, and show "
            "how every ancestor's size follows."
        ),
    )

    # --- Rendering ---
    p.add_argument(
        "--style",
        choices=RENDER_STYLES,
        default=None,
        help="Tree rendering style.",
    )
    p.add_argument(
        "--no-separator",
        action="store_true",
        help="Do not print a separator line before each snapshot.",
    )

    # --- Scenario ---
    p.add_argument(
        "--leaf-size",
        dest="leaf_size",
        type=int,
        default=None,
        help="Initial size of the added leaf file.",
    )
    p.add_argument(
        "--leaf-new-size",
        dest="leaf_new_size",
        type=int,
        default=None,
        help="Size the leaf file is changed to.",
    )
    p.add_argument(
        "--no-audit",
        action="store_true",
        help="Skip the final size invariant audit.",
    )

    # --- Output and diagnostics ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the final tree and root sizes as JSON.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "style": args.style,
        "leaf_size": args.leaf_size,
        "leaf_new_size": args.leaf_new_size,
    }

    if args.no_separator:
        overrides["show_separator"] = False
    if args.no_audit:
        overrides["audit"] = False

    return overrides
