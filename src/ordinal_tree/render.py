# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Box-drawing rendering of an OrdinalTree.

Each node becomes one line ``value (p,a,t,t,e,r,n)`` prefixed with the
connectors used by common tree visualizers::

    ├── B (B,A,C)
    │   └── A (B,A,C)
    └── C ()
"""

from __future__ import annotations

from typing import Any, Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from .node import OrdinalNode
    from .tree import OrdinalTree

BRANCH = '├── '
LAST = '└── '
PIPE = '│   '
SPACE = '    '


def format_label(node: OrdinalNode) -> str:
    """Return ``value (comma,joined,pattern)`` for a node."""
    pattern = ','.join(str(token) for token in node.pattern)
    return f"{node.value} ({pattern})"


def render_tree(
    tree: OrdinalTree, sink: Callable[[str], Any] | None = None
) -> str:
    """Render tree one line per node in pre-order.

    The sentinel root is not printed; a real root is printed bare on the
    first line with its children hanging below it.

    Args:
        tree: The tree to render.
        sink: Optional callable receiving each line (e.g. print or
            logger.info).

    Returns:
        The rendered lines joined by newlines ('' for an empty tree).
    """
    root = tree.root
    if root is None:
        lines: list[str] = []
    elif tree.has_sentinel:
        lines = root.render_children()
    else:
        lines = [format_label(root)] + root.render_children()
    if sink is not None:
        for line in lines:
            sink(line)
    return '\n'.join(lines)
