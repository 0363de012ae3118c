#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the html2dast library.

This module defines specialized exception classes for the error conditions
that can occur while building input trees, configuring a conversion, and
creating output nodes.

Nodes that are illegal at their position are never an error: the engine
demotes, unwraps or relocates them. Exceptions raised by caller-supplied
handlers are not wrapped and propagate unchanged.

Exception Hierarchy
-------------------
- Html2DastError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class passed to an entry point)

  - SchemaError (output node outside the target schema)

  - ParsingError (input document or input tree could not be read)

  - DependencyError (missing/incompatible optional packages)

"""

from typing import Any


class Html2DastError(Exception):
    """Base exception class for all html2dast-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Html2DastError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an entry point receives the wrong options class.

    Parameters
    ----------
    entry_point : str
        Name of the function that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        entry_point: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{entry_point} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.entry_point = entry_point
        self.expected_type = expected_type
        self.received_type = received_type


class SchemaError(Html2DastError):
    """Exception raised when an output node cannot exist in the target schema.

    Raised by the node factory when a handler asks for an unknown node type
    or passes an attribute that the type does not define.

    Parameters
    ----------
    message : str
        Description of the schema violation
    node_type : str, optional
        The offending node type
    attribute : str, optional
        The offending attribute name, if any

    """

    def __init__(
        self,
        message: str,
        node_type: str | None = None,
        attribute: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the schema error with node details."""
        super().__init__(message, original_error=original_error)
        self.node_type = node_type
        self.attribute = attribute


class ParsingError(Html2DastError):
    """Exception raised when an input document or tree cannot be read.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    original_error : Exception, optional
        The original exception that caused this error

    """


class DependencyError(Html2DastError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    feature_name : str
        Name of the feature requiring dependencies (e.g. "html")
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_import_error : ImportError, optional
        The ImportError raised while probing the first missing package

    """

    def __init__(
        self,
        feature_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        if message is None:
            message_parts = []

            if missing_packages:
                pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
                message_parts.append(f"{feature_name.upper()} support requires the following packages: {pkg_list}")

            if version_mismatches:
                mismatch_str = ", ".join(
                    f"'{name}' (requires {required}, but {installed} is installed)"
                    for name, required, installed in version_mismatches
                )
                message_parts.append(f"{feature_name.upper()} support has version mismatches: {mismatch_str}")

            message = "\n".join(message_parts)

            all_packages = missing_packages + [(name, req) for name, req, _ in version_mismatches]
            if all_packages:
                packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in all_packages)
                message += f"\nInstall with: pip install --upgrade {packages_str}"

        super().__init__(message, original_error=original_import_error)
        self.feature_name = feature_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.original_import_error = original_import_error


__all__ = [
    "Html2DastError",
    "ValidationError",
    "InvalidOptionsError",
    "SchemaError",
    "ParsingError",
    "DependencyError",
]
