#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_exceptions.py
"""Unit tests for the exception hierarchy and dependency checks."""

import pytest

from html2dast.exceptions import (
    DependencyError,
    Html2DastError,
    InvalidOptionsError,
    ParsingError,
    SchemaError,
    ValidationError,
)
from html2dast.utils.decorators import requires_dependencies
from html2dast.utils.packages import check_version_requirement, get_package_version


@pytest.mark.unit
class TestHierarchy:
    """Tests for exception relationships and attributes."""

    @pytest.mark.parametrize("error_class", [ValidationError, SchemaError, ParsingError])
    def test_subclasses_of_base(self, error_class) -> None:
        """Test library errors derive from Html2DastError."""
        assert issubclass(error_class, Html2DastError)

    def test_invalid_options_message(self) -> None:
        """Test the generated message names both types."""
        error = InvalidOptionsError("convert", expected_type=int, received_type=str)
        assert isinstance(error, ValidationError)
        assert "int" in error.message
        assert "str" in error.message
        assert error.parameter_name == "options"

    def test_original_error_kept(self) -> None:
        """Test the wrapped exception is stored."""
        cause = KeyError("x")
        error = ParsingError("bad", original_error=cause)
        assert error.original_error is cause
        assert str(error) == "bad"

    def test_dependency_message(self) -> None:
        """Test the dependency error suggests an install command."""
        error = DependencyError("html", missing_packages=[("beautifulsoup4", ">=4.12.0")])
        assert "HTML support requires" in error.message
        assert 'pip install --upgrade "beautifulsoup4>=4.12.0"' in error.message

    def test_dependency_version_mismatch(self) -> None:
        """Test version mismatches are reported."""
        error = DependencyError("html", missing_packages=[], version_mismatches=[("beautifulsoup4", ">=9", "4.12.3")])
        assert "requires >=9, but 4.12.3 is installed" in error.message


@pytest.mark.unit
class TestRequiresDependencies:
    """Tests for the requires_dependencies decorator."""

    def test_missing_package(self) -> None:
        """Test a missing module raises DependencyError before the call."""
        calls = []

        @requires_dependencies("demo", [("not-a-real-package", "not_a_real_module_html2dast", "")])
        def run():
            calls.append(1)

        with pytest.raises(DependencyError) as exc_info:
            run()
        assert calls == []
        assert exc_info.value.missing_packages == [("not-a-real-package", "")]
        assert isinstance(exc_info.value.original_import_error, ImportError)

    def test_version_mismatch(self) -> None:
        """Test an installed package below the required version."""

        @requires_dependencies("demo", [("packaging", "packaging", ">=9999")])
        def run():
            return "ran"

        with pytest.raises(DependencyError) as exc_info:
            run()
        assert exc_info.value.version_mismatches[0][0] == "packaging"

    def test_satisfied(self) -> None:
        """Test the function runs when dependencies are present."""

        @requires_dependencies("demo", [("packaging", "packaging", ">=1")])
        def run(value):
            return value * 2

        assert run(21) == 42

    def test_package_helpers(self) -> None:
        """Test version lookups for installed and missing distributions."""
        assert get_package_version("not-a-real-package-html2dast") is None
        assert check_version_requirement("not-a-real-package-html2dast", ">=1") == (False, None)
        meets, installed = check_version_requirement("packaging", ">=1")
        assert meets is True
        assert installed
