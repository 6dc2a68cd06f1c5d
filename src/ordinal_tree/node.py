# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""OrdinalTree node class."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from .exceptions import CircularReferenceError, DuplicateChildError
from .ordering import as_pattern, sort_nodes
from .render import BRANCH, LAST, PIPE, SPACE, format_label


class OrdinalNode:
    """A node in an OrdinalTree.

    Each node has:
    - value: The unit this node stands for (a character, or a label)
    - children: Child nodes, kept in pattern order
    - parent: Back reference to the owning node, None for a root
    - pattern: Accumulated priority tokens that drove insertions here
    - terminal: True if an inserted word ends at this node

    Example:
        >>> root = OrdinalNode('Root')
        >>> root.add_child(OrdinalNode('b'))
        >>> root.add_child(OrdinalNode('a'))
        >>> [c.value for c in root.children]
        ['a', 'b']
    """

    __slots__ = ('value', 'children', 'parent', 'pattern', 'terminal')

    def __init__(
        self,
        value: Any,
        pattern: Iterable[Any] | None = None,
        terminal: bool = False,
    ) -> None:
        """Initialize an OrdinalNode.

        Args:
            value: The node's value.
            pattern: Optional initial pattern (copied).
            terminal: True if a word ends at this node.
        """
        self.value = value
        self.children: list[OrdinalNode] = []
        self.parent: OrdinalNode | None = None
        self.pattern = as_pattern(pattern)
        self.terminal = terminal

    def __repr__(self) -> str:
        return f"OrdinalNode({self.value!r}, children={len(self.children)})"

    def __len__(self) -> int:
        """Return the number of direct children."""
        return len(self.children)

    def __iter__(self) -> Iterator[OrdinalNode]:
        """Iterate over direct children in sibling order."""
        return iter(self.children)

    # ==================== Navigation ====================

    @property
    def is_root(self) -> bool:
        """True if this node has no parent."""
        return self.parent is None

    @property
    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return not self.children

    @property
    def root(self) -> OrdinalNode:
        """The topmost ancestor of this node."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def depth(self) -> int:
        """Number of hops from the root (root=0)."""
        depth = 0
        node = self
        while node.parent is not None:
            node = node.parent
            depth += 1
        return depth

    @property
    def path(self) -> list[Any]:
        """Values from the root down to this node, both included."""
        values = []
        node: OrdinalNode | None = self
        while node is not None:
            values.append(node.value)
            node = node.parent
        values.reverse()
        return values

    def is_ancestor(self, other: OrdinalNode) -> bool:
        """True if other is this node or one of its ancestors."""
        node: OrdinalNode | None = self
        while node is not None:
            if node is other:
                return True
            node = node.parent
        return False

    def siblings(self) -> list[OrdinalNode]:
        """Return the parent's other children, or [] for a root."""
        if self.parent is None:
            return []
        return [c for c in self.parent.children if c is not self]

    # ==================== Children ====================

    def child_count(self) -> int:
        return len(self.children)

    def child_at(self, index: int) -> OrdinalNode:
        """Get the child at a position.

        Raises:
            IndexError: If index is out of range.
        """
        if index < 0 or index >= len(self.children):
            raise IndexError(
                f"Child index {index} out of range (0-{len(self.children) - 1})"
            )
        return self.children[index]

    def find_child(self, value: Any) -> OrdinalNode | None:
        """Return the first direct child with the given value, or None."""
        for child in self.children:
            if child.value == value:
                return child
        return None

    def add_child(
        self, child: OrdinalNode, pattern: Iterable[Any] | None = None
    ) -> None:
        """Attach child and re-sort the children under pattern.

        A child still attached to another node is detached from it first.

        Args:
            child: The node to attach.
            pattern: Pattern governing the sibling order.

        Raises:
            DuplicateChildError: If a sibling already holds child's value.
            CircularReferenceError: If child is this node or one of its
                ancestors.
        """
        if child.parent is self:
            self.sort_children(pattern)
            return
        if child is self or (child.children and self.is_ancestor(child)):
            raise CircularReferenceError(
                f"Cannot attach '{child.value}' under itself or its descendant"
            )
        if self.find_child(child.value) is not None:
            raise DuplicateChildError(
                f"'{child.value}' is already a child of '{self.value}'"
            )
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self.children.append(child)
        self.sort_children(pattern)

    def remove_child(self, child: OrdinalNode) -> None:
        """Remove child from the children and clear its parent link.

        Does nothing if child is not a direct child of this node.
        """
        for i, c in enumerate(self.children):
            if c is child:
                del self.children[i]
                child.parent = None
                return

    detach_child = remove_child

    def sort_children(self, pattern: Iterable[Any] | None = None) -> None:
        """Re-order the children by value under pattern."""
        self.children = sort_nodes(self.children, pattern)

    # ==================== Traversal ====================

    def iter_preorder(self) -> Iterator[OrdinalNode]:
        """Yield this node, then its descendants, in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def height(self) -> int:
        """Edges on the longest path down to a leaf (leaf=0)."""
        best = 0
        stack = [(self, 0)]
        while stack:
            node, depth = stack.pop()
            if depth > best:
                best = depth
            stack.extend((child, depth + 1) for child in node.children)
        return best

    def render(self, prefix: str = '', is_last: bool = True) -> list[str]:
        """Render this node and its subtree as box-drawing lines."""
        lines = [f"{prefix}{LAST if is_last else BRANCH}{format_label(self)}"]
        lines.extend(self.render_children(prefix + (SPACE if is_last else PIPE)))
        return lines

    def render_children(self, prefix: str = '') -> list[str]:
        """Render the children of this node, without the node itself."""
        lines: list[str] = []
        stack = [(child, prefix, False) for child in reversed(self.children)]
        if stack:
            stack[0] = (stack[0][0], prefix, True)
        while stack:
            node, node_prefix, is_last = stack.pop()
            lines.append(
                f"{node_prefix}{LAST if is_last else BRANCH}{format_label(node)}"
            )
            child_prefix = node_prefix + (SPACE if is_last else PIPE)
            last = len(node.children) - 1
            for i in range(last, -1, -1):
                stack.append((node.children[i], child_prefix, i == last))
        return lines
