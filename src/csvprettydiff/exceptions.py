#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the csvprettydiff library.

This module defines specialized exception classes for the error conditions
that can occur while parsing delimited text, rendering it, and keeping
comparison sessions in sync.

Exception Hierarchy
-------------------
- CsvPrettyDiffError (base exception)

  - ValidationError (parameter/option validation)

  - ParsingError (input document parsing failures)
    - MalformedInputError (reader failures other than field-count mismatches)
    - NoParsableContentError (no records found, strict mode only)

  - RenderingError (output generation failures)

  - SessionStateError (operations on sessions that are not active)

  - DependencyError (missing optional packages)

Notifications that match no session and lookups of unknown rendered
identities are not errors; they are handled silently by the provider.

"""

from typing import Any


class CsvPrettyDiffError(Exception):
    """Base exception class for all csvprettydiff-specific errors.

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


class ValidationError(CsvPrettyDiffError):
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


class ParsingError(CsvPrettyDiffError):
    """Exception raised when parsing delimited text fails.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class MalformedInputError(ParsingError):
    """Exception raised when the record reader fails for a reason other than field count.

    An unterminated quoted field is the typical cause. This error is fatal to
    the parse call; preamble skipping is not attempted.

    Parameters
    ----------
    message : str
        Description of what is malformed
    file_name : str, optional
        Identity of the source being parsed
    original_error : Exception, optional
        The reader exception

    """

    def __init__(self, message: str, file_name: str | None = None, original_error: Exception | None = None):
        """Initialize the malformed input error."""
        super().__init__(message, parsing_stage="records", original_error=original_error)
        self.file_name = file_name


class NoParsableContentError(ParsingError):
    """Exception raised when no tabular records are found and records are required.

    Only raised when ``ParseOptions.require_records`` is enabled; by default an
    input without records parses to an empty ``SourceFile``.

    Parameters
    ----------
    file_name : str
        Identity of the source being parsed
    message : str, optional
        Custom error message

    """

    def __init__(self, file_name: str, message: str | None = None):
        """Initialize the no parsable content error."""
        if message is None:
            message = f"No parsable records in {file_name}"
        super().__init__(message, parsing_stage="records")
        self.file_name = file_name


class RenderingError(CsvPrettyDiffError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class SessionStateError(CsvPrettyDiffError):
    """Exception raised when a comparison session is used outside the active state.

    Parameters
    ----------
    message : str
        Description of the invalid operation
    state : str
        The state the session was in

    """

    def __init__(self, message: str, state: str):
        """Initialize the session state error."""
        super().__init__(message)
        self.state = state


class DependencyError(CsvPrettyDiffError):
    """Exception raised when an optional dependency is not available.

    Parameters
    ----------
    feature : str
        Name of the feature requiring the packages
    missing_packages : list[str]
        Names of the packages that need to be installed
    message : str, optional
        Custom error message. If not provided, generates an install hint

    """

    def __init__(self, feature: str, missing_packages: list[str], message: str | None = None):
        """Initialize the dependency error with package details."""
        if message is None:
            packages_str = " ".join(missing_packages)
            message = f"{feature} requires the following packages: {', '.join(missing_packages)}"
            message += f"\nInstall with: pip install {packages_str}"
        super().__init__(message)
        self.feature = feature
        self.missing_packages = missing_packages
