from __future__ import annotations

"""
Unit tests for Domain Models.

Verifies:
1. DemoResult factories (success, audit failure, error).
2. Immutability of frozen dataclasses.
3. Default configuration values.
"""

import dataclasses

import pytest

from sizetree.domain.config import get_default_config
from sizetree.domain.demo_models import (
    DemoResult,
    create_error_result,
    create_success_result,
)


def test_create_success_result_populates_fields():
    result = create_success_result(
        style="indent",
        snapshots=[[" root 100 bytes"]],
        root_sizes=[100],
        tree={"name": "root"},
    )

    assert isinstance(result, DemoResult)
    assert result.ok is True
    assert result.error == ""
    assert result.root_sizes == [100]
    assert result.audit_problems == []


def test_success_result_with_audit_problems_is_not_ok():
    result = create_success_result(
        style="indent",
        snapshots=[],
        root_sizes=[],
        tree={},
        audit_problems=["bad 1", "bad 2"],
    )
    assert result.ok is False
    assert result.error == "bad 1; bad 2"


def test_create_error_result_handles_defaults():
    result = create_error_result("boom", "ascii")
    assert result.ok is False
    assert result.error == "boom"
    assert result.style == "ascii"
    assert result.snapshots == []
    assert result.tree == {}


def test_demo_result_is_frozen():
    result = create_error_result("boom", "indent")
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.ok = True  # type: ignore[misc]


def test_default_config_values():
    cfg = get_default_config()
    assert cfg == {
        "style": "indent",
        "show_separator": True,
        "leaf_size": 100,
        "leaf_new_size": 200,
        "audit": True,
    }
    # Fresh dict each call
    cfg["style"] = "ascii"
    assert get_default_config()["style"] == "indent"
