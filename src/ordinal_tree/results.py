# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Explicit outcomes of tree insertions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .node import OrdinalNode


class InsertStatus(Enum):
    """What an insertion did to the tree."""

    CREATED = 'created'
    EXISTS = 'exists'
    PARENT_NOT_FOUND = 'parent_not_found'


@dataclass(frozen=True)
class InsertResult:
    """Status of an insertion plus the node it ended on.

    Attributes:
        status: The InsertStatus of the operation.
        node: The created or already existing node, or None when
            nothing could be attached.
    """

    status: InsertStatus
    node: OrdinalNode | None = None

    @property
    def ok(self) -> bool:
        """True unless the insertion was rejected."""
        return self.status is not InsertStatus.PARENT_NOT_FOUND
