#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2dast/utils/__init__.py
"""Utility helpers shared across html2dast."""

from html2dast.utils.decorators import debug_timer, requires_dependencies
from html2dast.utils.packages import check_version_requirement, get_package_version

__all__ = ["debug_timer", "requires_dependencies", "check_version_requirement", "get_package_version"]
