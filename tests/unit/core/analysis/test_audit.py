from __future__ import annotations

"""
Unit tests for the size invariant audit and tree metrics.
"""

from sizetree.core.analysis.audit import audit_tree, max_depth, total_nodes
from sizetree.domain.nodes import File


def test_audit_passes_on_consistent_tree(sample_tree):
    root, _ = sample_tree
    assert audit_tree(root) == []


def test_audit_reports_corrupted_directory(sample_tree):
    root, idx = sample_tree
    # Bypass the public API to simulate a broken invariant
    idx["dir2"]._byte_size += 7

    problems = audit_tree(root)

    assert len(problems) == 2
    assert any("'dir2'" in p and "227" in p for p in problems)
    assert any("'root'" in p for p in problems)


def test_audit_on_single_file():
    assert audit_tree(File("a", 1)) == []


def test_metrics(sample_tree):
    root, _ = sample_tree
    assert total_nodes(root) == 6
    assert max_depth(root) == 2
    assert max_depth(File("a", 1)) == 0
