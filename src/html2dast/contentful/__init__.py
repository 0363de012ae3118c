#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2dast/contentful/__init__.py
"""Conversion of Contentful rich-text documents."""

from html2dast.contentful.handlers import CONTENTFUL_HANDLERS, code_paragraph
from html2dast.contentful.rich_text import MARK_TAGS, NODE_TAGS, rich_text_to_hast

__all__ = ["CONTENTFUL_HANDLERS", "MARK_TAGS", "NODE_TAGS", "code_paragraph", "rich_text_to_hast"]
