"""Pytest configuration and shared fixtures for the html2dast test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from html2dast.hast.nodes import Element, Root, h

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def nested_list_tree() -> Root:
    """Provide ``ul > li > (p, asset, p)``, a list item holding an embedded asset.

    Returns
    -------
    Root
        Input tree

    """
    return Root(
        children=[
            h(
                "ul",
                None,
                h("li", None, h("p", None, "item1"), h("asset", {"id": "a1"}), h("p", None, "item2")),
            )
        ]
    )


@pytest.fixture
def image_body_tree() -> Root:
    """Provide a document whose body nests images inside a heading and a list.

    Returns
    -------
    Root
        Input tree

    """
    body = h(
        "body",
        None,
        h("h1", None, "before", h("img", {"src": "/a.png"}), "after"),
        h("ul", None, h("li", None, "one", h("img", {"src": "/b.png"}))),
    )
    return Root(children=[Element(tag_name="html", children=[body])])
