from __future__ import annotations

"""
Unit tests for the demo scenario driver.
"""

import logging

import pytest

from sizetree.core.services import demo
from sizetree.core.services.demo import build_sample_tree, run_demo
from sizetree.domain.errors import AlreadyAttachedError


def test_build_sample_tree_index_and_size():
    root, index = build_sample_tree()
    assert root.byte_size == 430
    assert set(index) == {"root", "dir1", "dir2", "f1.txt", "dirdir", "g1.txt"}
    assert index["dirdir"].parent is index["dir2"]


def test_run_demo_default_steps():
    result = run_demo()

    assert result.ok is True
    assert result.root_sizes == [430, 530, 630]
    assert len(result.snapshots) == 3
    assert result.snapshots[0][0] == " root 430 bytes"
    assert "       leaf.txt 200 bytes" in result.snapshots[2]
    assert result.tree["byte_size"] == 630


def test_run_demo_custom_sizes(mock_config_dict):
    mock_config_dict.update({"leaf_size": 10, "leaf_new_size": 0})
    result = run_demo(mock_config_dict)
    assert result.root_sizes == [430, 440, 430]


def test_run_demo_ascii_style(mock_config_dict):
    mock_config_dict["style"] = "ascii"
    result = run_demo(mock_config_dict)
    assert result.style == "ascii"
    assert result.snapshots[0][0] == "root (430 bytes)"


def test_run_demo_warns_on_bad_config(caplog):
    with caplog.at_level(logging.WARNING):
        result = run_demo({"style": "fancy"})
    assert result.ok is True
    assert "Configuration Warning" in caplog.text


def test_run_demo_returns_error_result_on_contract_violation(monkeypatch):
    def broken_sample():
        root, index = build_sample_tree()
        # Re-attaching an owned node breaks the single-parent rule
        root.add_child(index["g1.txt"])
        return root, index

    monkeypatch.setattr(demo, "build_sample_tree", broken_sample)
    result = run_demo()

    assert result.ok is False
    assert "Demo aborted" in result.error
    assert result.snapshots == []


def test_run_demo_skips_audit_when_disabled(mock_config_dict, monkeypatch):
    mock_config_dict["audit"] = False
    monkeypatch.setattr(demo, "audit_tree", lambda root: ["should not run"])
    assert run_demo(mock_config_dict).ok is True


def test_run_demo_reports_audit_problems(monkeypatch):
    monkeypatch.setattr(demo, "audit_tree", lambda root: ["mismatch"])
    result = run_demo()
    assert result.ok is False
    assert result.audit_problems == ["mismatch"]


def test_already_attached_is_contract_error():
    root, index = build_sample_tree()
    with pytest.raises(AlreadyAttachedError, match="f1.txt"):
        index["dir1"].add_child(index["f1.txt"])
    assert index["f1.txt"].parent is root
    assert index["dir1"].byte_size == 100
