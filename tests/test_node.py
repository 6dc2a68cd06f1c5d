# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for OrdinalNode."""

import pytest

from ordinal_tree import CircularReferenceError, DuplicateChildError, OrdinalNode


def _values(node):
    return [c.value for c in node.children]


class TestOrdinalNodeBasic:
    """Basic tests for OrdinalNode."""

    def test_create_node(self):
        """Test a new node is detached and childless."""
        node = OrdinalNode('Test Node')
        assert node.value == 'Test Node'
        assert node.children == []
        assert node.parent is None
        assert node.pattern == []
        assert node.terminal is False

    def test_create_node_with_pattern(self):
        """Test the initial pattern is copied."""
        source = ['x']
        node = OrdinalNode('a', source)
        node.pattern.append('y')
        assert source == ['x']

    def test_repr(self):
        """Test repr shows the value."""
        node = OrdinalNode('a')
        assert "'a'" in repr(node)

    def test_len_and_child_count(self):
        """Test len() and child_count() count direct children."""
        node = OrdinalNode('root')
        node.add_child(OrdinalNode('a'))
        node.add_child(OrdinalNode('b'))
        assert len(node) == 2
        assert node.child_count() == 2


class TestOrdinalNodeChildren:
    """Tests for attaching and detaching children."""

    def test_add_child_links_both_sides(self):
        """Test add_child sets the parent and appends to children."""
        parent = OrdinalNode('Parent')
        child = OrdinalNode('Child Node')
        parent.add_child(child)
        assert _values(parent) == ['Child Node']
        assert child.parent is parent

    def test_add_child_sorts_without_pattern(self):
        """Test children sort alphabetically without a pattern."""
        parent = OrdinalNode('Root')
        for value in 'cab':
            parent.add_child(OrdinalNode(value))
        assert _values(parent) == ['a', 'b', 'c']

    def test_add_child_sorts_with_pattern(self):
        """Test children follow the pattern given at insertion."""
        parent = OrdinalNode('Root')
        for value in 'abc':
            parent.add_child(OrdinalNode(value), 'cab')
        assert _values(parent) == ['c', 'a', 'b']

    def test_add_duplicate_value_raises(self):
        """Test a sibling value clash raises and leaves children unchanged."""
        parent = OrdinalNode('Root')
        parent.add_child(OrdinalNode('a'))
        with pytest.raises(DuplicateChildError, match="already a child"):
            parent.add_child(OrdinalNode('a'))
        assert len(parent) == 1

    def test_add_child_moves_from_old_parent(self):
        """Test a node is never attached under two parents."""
        first = OrdinalNode('first')
        second = OrdinalNode('second')
        child = OrdinalNode('c')
        first.add_child(child)
        second.add_child(child)
        assert child.parent is second
        assert first.children == []
        assert second.children == [child]

    def test_remove_child(self):
        """Test remove_child detaches and clears the parent link."""
        parent = OrdinalNode('Parent')
        child = OrdinalNode('Child Node')
        parent.add_child(child)
        parent.remove_child(child)
        assert parent.children == []
        assert child.parent is None

    def test_remove_missing_child_is_noop(self):
        """Test removing a node that is not a child does nothing."""
        parent = OrdinalNode('Parent')
        parent.add_child(OrdinalNode('a'))
        parent.remove_child(OrdinalNode('a'))
        assert _values(parent) == ['a']

    def test_detach_child_alias(self):
        """Test detach_child behaves like remove_child."""
        parent = OrdinalNode('Parent')
        child = OrdinalNode('a')
        parent.add_child(child)
        parent.detach_child(child)
        assert child.parent is None
        assert len(parent) == 0

    def test_child_at(self):
        """Test positional access follows sibling order."""
        parent = OrdinalNode('Root')
        parent.add_child(OrdinalNode('Child 1'))
        parent.add_child(OrdinalNode('Child 2'))
        assert parent.child_at(1).value == 'Child 2'

    @pytest.mark.parametrize('index', [2, -1])
    def test_child_at_out_of_range(self, index):
        """Test out-of-range positions raise IndexError."""
        parent = OrdinalNode('Root')
        parent.add_child(OrdinalNode('a'))
        parent.add_child(OrdinalNode('b'))
        with pytest.raises(IndexError, match="out of range"):
            parent.child_at(index)

    def test_find_child(self):
        """Test find_child returns the matching child or None."""
        parent = OrdinalNode('Root')
        child = OrdinalNode('a')
        parent.add_child(child)
        assert parent.find_child('a') is child
        assert parent.find_child('z') is None

    def test_sort_children_reorders(self):
        """Test sort_children applies a new pattern."""
        parent = OrdinalNode('Root')
        for value in 'abc':
            parent.add_child(OrdinalNode(value))
        parent.sort_children(['c'])
        assert _values(parent) == ['c', 'a', 'b']

    def test_add_ancestor_as_child_raises(self):
        """Test attaching an ancestor under its descendant is rejected."""
        root = OrdinalNode('Root')
        child = OrdinalNode('a')
        grandchild = OrdinalNode('b')
        root.add_child(child)
        child.add_child(grandchild)
        with pytest.raises(CircularReferenceError, match="under itself"):
            grandchild.add_child(root)
        with pytest.raises(CircularReferenceError):
            child.add_child(root)
        assert root.parent is None
        assert child.parent is root
        assert grandchild.children == []
        assert [n.value for n in root.iter_preorder()] == ['Root', 'a', 'b']

    def test_add_self_as_child_raises(self):
        """Test a node cannot become its own child."""
        node = OrdinalNode('a')
        with pytest.raises(CircularReferenceError):
            node.add_child(node)
        assert node.parent is None
        assert node.children == []

    def test_is_ancestor(self):
        """Test is_ancestor covers the node itself and its parents only."""
        root = OrdinalNode('Root')
        child = OrdinalNode('a')
        root.add_child(child)
        assert child.is_ancestor(root)
        assert child.is_ancestor(child)
        assert not root.is_ancestor(child)


class TestOrdinalNodeNavigation:
    """Tests for navigation helpers."""

    def setup_method(self):
        self.root = OrdinalNode('Root')
        self.a = OrdinalNode('a')
        self.b = OrdinalNode('b')
        self.c = OrdinalNode('c')
        self.root.add_child(self.a)
        self.root.add_child(self.b)
        self.a.add_child(self.c)

    def test_siblings(self):
        """Test siblings excludes the node itself."""
        assert self.a.siblings() == [self.b]
        assert self.c.siblings() == []

    def test_root_has_no_siblings(self):
        """Test a root has no siblings."""
        assert self.root.siblings() == []

    def test_depth_and_root(self):
        """Test depth counts hops and root finds the top node."""
        assert self.root.depth == 0
        assert self.c.depth == 2
        assert self.c.root is self.root
        assert self.root.is_root
        assert not self.c.is_root

    def test_path(self):
        """Test path lists values from the root down."""
        assert self.c.path == ['Root', 'a', 'c']

    def test_is_leaf(self):
        """Test is_leaf for nodes with and without children."""
        assert self.c.is_leaf
        assert not self.a.is_leaf

    def test_height(self):
        """Test height of a subtree and of a leaf."""
        assert self.root.height() == 2
        assert self.b.height() == 0

    def test_iter_preorder(self):
        """Test pre-order visits a node before its children."""
        values = [n.value for n in self.root.iter_preorder()]
        assert values == ['Root', 'a', 'c', 'b']

    def test_iter_yields_direct_children(self):
        """Test iterating a node yields its direct children."""
        assert list(self.root) == [self.a, self.b]

    def test_deep_chain_without_recursion_limit(self):
        """Test walks over a chain deeper than the interpreter stack."""
        top = node = OrdinalNode('Root')
        for _ in range(5000):
            child = OrdinalNode('a')
            node.add_child(child)
            node = child
        assert top.height() == 5000
        assert sum(1 for _ in top.iter_preorder()) == 5001
        assert len(top.render_children()) == 5000
