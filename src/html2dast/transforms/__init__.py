#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2dast/transforms/__init__.py
"""Tree rewriting passes applied before or during conversion."""

from html2dast.transforms.google_docs import preprocess_google_docs
from html2dast.transforms.invert import invert_link_headings
from html2dast.transforms.lift import ASSET_TAGS, lift_assets, lift_images, lift_nodes

__all__ = ["ASSET_TAGS", "invert_link_headings", "lift_assets", "lift_images", "lift_nodes", "preprocess_google_docs"]
