"""Base classes for conversion options.

Options are frozen dataclasses; derived configurations are made with
:meth:`CloneFrozenMixin.create_updated`.
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2dast/options/base.py

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated; validation runs again

        """
        return replace(self, **kwargs)


__all__ = ["CloneFrozenMixin"]
