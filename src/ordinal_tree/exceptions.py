# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""OrdinalTree exceptions."""

from __future__ import annotations


class OrdinalTreeError(Exception):
    """Base exception for OrdinalTree errors."""

    pass


class InvalidParentError(OrdinalTreeError):
    """Raised when a value is inserted under a parent that does not exist."""

    pass


class DuplicateChildError(OrdinalTreeError):
    """Raised when a child value is already present among its siblings."""

    pass


class CircularReferenceError(OrdinalTreeError):
    """Raised when a node would be attached under itself or a descendant."""

    pass
