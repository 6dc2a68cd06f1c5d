# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""OrdinalTree - a character trie with pattern-ordered siblings.

This module provides the OrdinalTree class. Words are decomposed into a
chain of OrdinalNode instances, one per character, sharing common
prefixes. At every branching point the children follow a priority
pattern instead of insertion order (see ordering.py).

Pattern resolution:
    When a new child is created, the pattern that orders it among its
    siblings is the first non-empty of:

    - the pattern passed to the insertion
    - the stored pattern of the node being extended
    - the tree's global pattern

    Inserting through an existing node appends the supplied pattern to
    that node's stored pattern without re-sorting its siblings.

Example:
    Basic usage::

        tree = OrdinalTree(global_pattern='BAC')
        tree.insert_word('CAB')
        tree.insert_word('BAB')
        [n.value for n in tree.root.children]  # ['B', 'C']

    Generic values::

        tree = OrdinalTree()
        tree.insert_value('root')
        tree.insert_value('child1', 'root')
        tree.all_values()  # ['root', 'child1']
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Iterator

from .exceptions import InvalidParentError
from .node import OrdinalNode
from .ordering import as_pattern
from .render import render_tree
from .results import InsertResult, InsertStatus

logger = logging.getLogger(__name__)

ROOT_LABEL = 'Root'


class OrdinalTree:
    """A trie whose siblings are ordered by priority patterns.

    OrdinalTree provides:
    - insert_word(word, pattern): character-chain insertion
    - insert_value(value, parent_value): single node attachment
    - find_by_value / find_where / remove: structural queries and removal
    - traverse / all_values / height / pretty_print: whole-tree views
    - find_prefix / contains / starts_with / words: word lookups

    Attributes:
        root: The root OrdinalNode, or None if the tree is empty.
        global_pattern: Default pattern used when neither the insertion nor
            the extended node supplies one.

    Example:
        >>> tree = OrdinalTree(global_pattern=['B', 'A', 'C'])
        >>> tree.insert_word('CAB').status
        <InsertStatus.CREATED: 'created'>
        >>> 'CAB' in tree
        True
    """

    __slots__ = ('root', 'global_pattern', '_sentinel', '_raise_on_error')

    def __init__(
        self,
        global_pattern: Iterable[Any] | None = None,
        sentinel: bool = False,
        raise_on_error: bool = False,
    ) -> None:
        """Initialize an OrdinalTree.

        Args:
            global_pattern: Optional tree-wide default pattern. A string is
                taken as a sequence of characters.
            sentinel: If True, create the ROOT_LABEL root immediately;
                otherwise the tree starts empty and insert_word creates it
                on first use.
            raise_on_error: If True, insert_value raises InvalidParentError
                for an unknown parent. If False (default), it logs a warning
                and returns a PARENT_NOT_FOUND result.
        """
        self.root: OrdinalNode | None = None
        self.global_pattern = as_pattern(global_pattern)
        self._sentinel = False
        self._raise_on_error = raise_on_error
        if sentinel:
            self._ensure_sentinel()

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        root = self.root.value if self.root is not None else None
        return f"OrdinalTree(root={root!r}, nodes={len(self)})"

    def __len__(self) -> int:
        """Return the number of nodes, root included."""
        return sum(1 for _ in self.traverse())

    def __iter__(self) -> Iterator[OrdinalNode]:
        """Iterate over all nodes in pre-order."""
        return self.traverse()

    def __contains__(self, word: Any) -> bool:
        return self.contains(word)

    @property
    def has_sentinel(self) -> bool:
        """True if the root is the synthetic ROOT_LABEL node."""
        return self._sentinel and self.root is not None

    def _ensure_sentinel(self) -> OrdinalNode:
        if self.root is None:
            self.root = OrdinalNode(ROOT_LABEL)
            self._sentinel = True
        return self.root

    def _resolve_pattern(
        self, pattern: list[Any], node: OrdinalNode
    ) -> list[Any]:
        return pattern or node.pattern or self.global_pattern

    # ==================== Insertion ====================

    def insert_word(
        self, word: Iterable[Any], pattern: Iterable[Any] | None = None
    ) -> InsertResult:
        """Insert a word as a chain of one node per character.

        Existing prefix nodes are reused: a supplied pattern is appended
        to their stored pattern and their siblings keep their order. Each
        new node is ordered among its siblings by the resolved pattern and
        stores a copy of the supplied one.

        Args:
            word: The word (any iterable of tokens).
            pattern: Optional priority pattern for this insertion.

        Returns:
            CREATED with the last node if any node was created, EXISTS
            otherwise. An empty word leaves the tree untouched and returns
            EXISTS with the root, whose node is None on an empty tree.
        """
        pattern = as_pattern(pattern)
        tokens = list(word)
        if not tokens:
            return InsertResult(InsertStatus.EXISTS, self.root)

        current = self._ensure_sentinel()
        created = False
        for token in tokens:
            child = current.find_child(token)
            if child is not None:
                if pattern:
                    child.pattern.extend(pattern)
                    logger.debug("Accumulated pattern on %r: %r", token, child.pattern)
            else:
                child = OrdinalNode(token, pattern)
                current.add_child(child, self._resolve_pattern(pattern, current))
                created = True
                logger.debug("Created node %r under %r", token, current.value)
            current = child

        current.terminal = True
        status = InsertStatus.CREATED if created else InsertStatus.EXISTS
        return InsertResult(status, current)

    def insert_value(self, value: Any, parent_value: Any = None) -> InsertResult:
        """Attach a single node under the node holding parent_value.

        On an empty tree the value becomes the (real) root and parent_value
        is ignored.

        Args:
            value: The value of the new node.
            parent_value: Value of the node to attach under.

        Returns:
            CREATED with the new node, EXISTS with the sibling already
            holding value, or PARENT_NOT_FOUND (tree unchanged).

        Raises:
            InvalidParentError: If the parent is missing and the tree was
                built with raise_on_error=True.
        """
        if self.root is None:
            self.root = OrdinalNode(value)
            self._sentinel = False
            return InsertResult(InsertStatus.CREATED, self.root)

        parent = self.find_by_value(parent_value)
        if parent is None:
            if self._raise_on_error:
                raise InvalidParentError(f"Parent '{parent_value}' not found")
            logger.warning("Parent %r not found, %r not inserted", parent_value, value)
            return InsertResult(InsertStatus.PARENT_NOT_FOUND)

        existing = parent.find_child(value)
        if existing is not None:
            return InsertResult(InsertStatus.EXISTS, existing)

        node = OrdinalNode(value)
        parent.add_child(node, parent.pattern or self.global_pattern)
        return InsertResult(InsertStatus.CREATED, node)

    # ==================== Queries ====================

    def find_where(
        self, predicate: Callable[[OrdinalNode], bool]
    ) -> OrdinalNode | None:
        """Return the first node in pre-order satisfying predicate, or None."""
        for node in self.traverse():
            if predicate(node):
                return node
        return None

    def find_by_value(self, value: Any) -> OrdinalNode | None:
        """Return the first node in pre-order whose value equals value."""
        return self.find_where(lambda node: node.value == value)

    def remove(self, value: Any) -> OrdinalNode | None:
        """Detach the first node holding value, together with its subtree.

        Removing the root empties the tree.

        Returns:
            The removed node, or None if no node holds value.
        """
        node = self.find_by_value(value)
        if node is None:
            return None
        if node.parent is not None:
            node.parent.remove_child(node)
        else:
            self.root = None
            self._sentinel = False
        logger.debug("Removed node %r", value)
        return node

    def height(self) -> int:
        """Height of the tree: -1 if empty, 0 for a lone root."""
        if self.root is None:
            return -1
        return self.root.height()

    # ==================== Traversal ====================

    def traverse(
        self, visitor: Callable[[OrdinalNode], Any] | None = None
    ) -> Iterator[OrdinalNode] | None:
        """Walk all nodes in pre-order, root included.

        Args:
            visitor: Optional function called once per node. If provided,
                traverse returns None. The visitor must not add or remove
                nodes.

        Returns:
            An iterator of nodes when no visitor is given.

        Example::

            tree.traverse(lambda n: print(n.value))
            values = [n.value for n in tree.traverse()]
        """
        if visitor is not None:
            if self.root is not None:
                for node in self.root.iter_preorder():
                    visitor(node)
            return None

        if self.root is None:
            return iter(())
        return self.root.iter_preorder()

    def all_values(self) -> list[Any]:
        """Return every node's value in pre-order."""
        values: list[Any] = []
        self.traverse(lambda node: values.append(node.value))
        return values

    def pretty_print(self, sink: Callable[[str], Any] | None = None) -> str:
        """Render the tree with box-drawing connectors.

        Args:
            sink: Optional callable receiving each line.

        Returns:
            The rendered text.
        """
        return render_tree(self, sink)

    # ==================== Words ====================

    def find_prefix(self, prefix: Iterable[Any]) -> OrdinalNode | None:
        """Follow prefix from the root and return the node reached.

        The empty prefix returns the root. For a tree rooted at a real
        value (see insert_value) the chain starts below that root.
        """
        node = self.root
        for token in prefix:
            if node is None:
                return None
            node = node.find_child(token)
        return node

    def starts_with(self, prefix: Iterable[Any]) -> bool:
        """True if some inserted chain spells prefix."""
        return self.find_prefix(prefix) is not None

    def contains(self, word: Iterable[Any]) -> bool:
        """True if word was inserted as a whole word."""
        tokens = list(word)
        if not tokens:
            return False
        node = self.find_prefix(tokens)
        return node is not None and node.terminal

    def words(self, prefix: str = '') -> list[str]:
        """Return the inserted words starting with prefix, in tree order."""
        start = self.find_prefix(prefix)
        if start is None:
            return []
        found: list[str] = []
        stack = [(start, prefix)]
        while stack:
            node, letters = stack.pop()
            if node.terminal and node is not self.root:
                found.append(letters)
            for child in reversed(node.children):
                stack.append((child, letters + str(child.value)))
        return found
