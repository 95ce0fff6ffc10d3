"""
Tests for TreeTestHelper - make sure the invariant checker actually
catches broken trees, otherwise every other test's assert_valid() is
meaningless.
"""

import pytest

from arenatree import OptTree, VecTree, InsertBehavior
from arenatree.testing import TreeTestHelper

UnderNode = InsertBehavior.UnderNode


def small_tree(tree_class=OptTree):
    tree = tree_class()
    root = tree.insert("root", InsertBehavior.AsRoot)
    a = tree.insert("a", UnderNode(root))
    b = tree.insert("b", UnderNode(root))
    c = tree.insert("c", UnderNode(root))
    return tree, root, a, b, c


class TestInvariantChecker:
    """Test violation detection."""

    @pytest.mark.parametrize("tree_class", [OptTree, VecTree])
    def test_valid_tree_has_no_problems(self, tree_class):
        tree, *_ = small_tree(tree_class)
        assert TreeTestHelper(tree).check_invariants() == []

    def test_empty_tree_is_valid(self):
        assert TreeTestHelper(OptTree()).check_invariants() == []

    def test_detects_broken_prev_link(self):
        tree, root, a, b, c = small_tree()
        tree.get_unchecked_mut(c)._prev_sibling = a

        problems = TreeTestHelper(tree).check_invariants()
        assert any("prev_sibling" in p for p in problems)

    def test_detects_half_empty_child_pointers(self):
        tree, root, a, b, c = small_tree()
        tree.get_unchecked_mut(root)._last_child = None

        problems = TreeTestHelper(tree).check_invariants()
        assert any("first_child/last_child" in p for p in problems)

    def test_detects_wrong_parent(self):
        tree, root, a, b, c = small_tree()
        tree.get_unchecked_mut(b)._parent = a

        problems = TreeTestHelper(tree).check_invariants()
        assert any("does not point back" in p for p in problems)

    def test_detects_second_root(self):
        tree, root, a, b, c = small_tree(VecTree)
        tree.get_unchecked_mut(root)._children.remove(c)
        tree.get_unchecked_mut(c)._parent = None

        problems = TreeTestHelper(tree).check_invariants()
        assert any("parentless" in p for p in problems)

    def test_detects_cyclic_sibling_chain(self):
        tree, root, a, b, c = small_tree()
        tree.get_unchecked_mut(c)._next_sibling = a

        problems = TreeTestHelper(tree).check_invariants()
        assert problems

    def test_assert_valid_raises(self):
        tree, root, a, b, c = small_tree()
        tree.get_unchecked_mut(root)._first_child = b

        with pytest.raises(AssertionError, match="Tree invariants violated"):
            TreeTestHelper(tree).assert_valid()


class TestSnapshotAndShape:
    """Test structural snapshots."""

    def test_snapshot_changes_with_structure(self):
        tree, root, a, b, c = small_tree()
        helper = TreeTestHelper(tree)
        before = helper.snapshot()

        tree.insert("d", UnderNode(a))

        assert helper.snapshot() != before

    def test_shape(self):
        tree, root, a, b, c = small_tree(VecTree)
        tree.insert("a1", UnderNode(a))

        assert TreeTestHelper(tree).shape() == (
            "root", [("a", [("a1", [])]), ("b", []), ("c", [])]
        )

    def test_shape_of_empty_tree(self):
        assert TreeTestHelper(OptTree()).shape() is None

    def test_shapes_agree_across_representations(self):
        opt = small_tree(OptTree)[0]
        vec = small_tree(VecTree)[0]
        assert TreeTestHelper(opt).shape() == TreeTestHelper(vec).shape()
