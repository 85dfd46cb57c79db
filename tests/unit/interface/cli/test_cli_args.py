from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. Handling of boolean flags (store_true).
3. Rejection of invalid choices and integers.
"""

import pytest

from sizetree.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_defaults_produce_none_overrides():
    overrides = args_to_overrides(parse_args([]))
    assert overrides == {"style": None, "leaf_size": None, "leaf_new_size": None}


def test_cli_simple_flags_mapping():
    args = parse_args(["--no-separator", "--no-audit", "--json", "--debug"])
    overrides = args_to_overrides(args)

    assert overrides["show_separator"] is False
    assert overrides["audit"] is False
    assert args.json_output is True
    assert args.debug is True


def test_cli_value_arguments():
    args = parse_args(["--style", "ascii", "--leaf-size", "7", "--leaf-new-size", "-3"])
    overrides = args_to_overrides(args)

    assert overrides["style"] == "ascii"
    assert overrides["leaf_size"] == 7
    assert overrides["leaf_new_size"] == -3


@pytest.mark.parametrize("argv", [["--style", "fancy"], ["--leaf-size", "big"]])
def test_cli_rejects_invalid_values(argv):
    with pytest.raises(SystemExit):
        parse_args(argv)
