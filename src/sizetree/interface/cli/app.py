from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Bootstraps logging, merges CLI overrides over the default configuration,
runs the demo scenario and renders its result.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from sizetree.core.services.demo import run_demo
from sizetree.core.services.validator import validate_config
from sizetree.domain.config import get_default_config
from sizetree.domain.constants import SEPARATOR
from sizetree.domain.demo_models import DemoResult
from sizetree.infra.logging import LoggingConfig, configure_logging, get_logger
from sizetree.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 130 interrupted).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, optional file)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 3. Merge overrides over defaults, then normalize
    raw_conf = _merge_config(get_default_config(), cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 4. Scenario execution phase
    try:
        result = run_demo(clean_conf)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130

    # 5. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result, show_separator=clean_conf["show_separator"])

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge non-None overrides for keys the base already knows."""
    out = dict(base)
    for k, v in overrides.items():
        if k in base and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: DemoResult, *, show_separator: bool = True) -> None:
    """Print each snapshot, then any audit problems to stderr."""
    for lines in result.snapshots:
        if show_separator:
            print(SEPARATOR)
        for line in lines:
            print(line)

    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
