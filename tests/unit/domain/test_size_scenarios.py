from __future__ import annotations

"""
Reference scenarios for size aggregation.

Walks the demo tree through its documented states and checks the exact
sizes at every level, plus the aggregation invariant after each step.
"""

from sizetree.core.analysis.audit import audit_tree
from sizetree.domain.nodes import Directory, File


def _build_scenario_c():
    root = Directory("root")
    dir1 = Directory("dir1")
    dir2 = Directory("dir2")
    dirdir = Directory("dirdir")
    g1 = File("g1.txt", 20)
    f1 = File("f1.txt", 10)

    root.add_child(dir1)
    dir2.add_children([dirdir, g1])
    root.add_children([dir2, f1])
    return root, dir1, dir2, dirdir, f1


def test_scenario_a_empty_subdirectory():
    root = Directory("root")
    assert root.byte_size == 100
    root.add_child(Directory("dir1"))
    assert root.byte_size == 200


def test_scenario_b_file_under_root():
    root = Directory("root")
    root.add_child(Directory("dir1"))
    root.add_child(File("f1.txt", 10))
    assert root.byte_size == 210


def test_scenario_c_nested_tree():
    root, dir1, dir2, dirdir, f1 = _build_scenario_c()
    assert dir2.byte_size == 220
    assert root.byte_size == 430
    assert audit_tree(root) == []


def test_scenario_d_new_leaf_under_dirdir():
    root, dir1, dir2, dirdir, f1 = _build_scenario_c()
    before = (dirdir.byte_size, dir2.byte_size, root.byte_size)

    dirdir.add_child(File("leaf.txt", 100))

    after = (dirdir.byte_size, dir2.byte_size, root.byte_size)
    assert [a - b for a, b in zip(after, before)] == [100, 100, 100]
    assert root.byte_size == 530
    assert audit_tree(root) == []


def test_scenario_e_leaf_resize():
    root, dir1, dir2, dirdir, f1 = _build_scenario_c()
    leaf = File("leaf.txt", 100)
    dirdir.add_child(leaf)
    before = (dirdir.byte_size, dir2.byte_size, root.byte_size)

    leaf.change_size(200)

    after = (dirdir.byte_size, dir2.byte_size, root.byte_size)
    assert [a - b for a, b in zip(after, before)] == [100, 100, 100]
    assert root.byte_size == 630
    assert f1.byte_size == 10
    assert dir1.byte_size == 100
    assert audit_tree(root) == []


def test_repeated_reads_are_stable(sample_tree):
    root, _ = sample_tree
    assert {root.get_byte_size() for _ in range(5)} == {430}
