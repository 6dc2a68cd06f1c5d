# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Ordinal Tree - A character trie with pattern-ordered siblings.

A lightweight, zero-dependency library for indexing words letter by letter
where the order of children at every node follows a caller-supplied
priority pattern (custom collation, transliteration-aware autocomplete,
locale-specific sorted dictionaries).
"""

__version__ = "0.1.0"

from .exceptions import (
    CircularReferenceError,
    DuplicateChildError,
    InvalidParentError,
    OrdinalTreeError,
)
from .node import OrdinalNode
from .ordering import compare_values, sort_values
from .render import render_tree
from .results import InsertResult, InsertStatus
from .tree import ROOT_LABEL, OrdinalTree

__all__ = [
    # Core classes
    "OrdinalTree",
    "OrdinalNode",
    "ROOT_LABEL",
    # Results
    "InsertResult",
    "InsertStatus",
    # Ordering
    "compare_values",
    "sort_values",
    # Rendering
    "render_tree",
    # Exceptions
    "OrdinalTreeError",
    "InvalidParentError",
    "DuplicateChildError",
    "CircularReferenceError",
]
