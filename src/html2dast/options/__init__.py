#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2dast/options/__init__.py
"""Conversion options."""

from html2dast.options.base import CloneFrozenMixin
from html2dast.options.conversion import ConversionOptions, Preprocessor

__all__ = ["CloneFrozenMixin", "ConversionOptions", "Preprocessor"]
