#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2dast/hast/__init__.py
"""Input tree model and its producers."""

from html2dast.hast.minify import minify_whitespace
from html2dast.hast.nodes import Element, HastNode, Root, Text, from_dict, h, to_dict, to_text

__all__ = ["Element", "HastNode", "Root", "Text", "from_dict", "h", "minify_whitespace", "to_dict", "to_text"]
