#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the frontmatter_table library.

None of these ever reach the host Markdown parser: the block rule converts
decode failures into "did not match" so the region is parsed as ordinary
content. They surface through the public API and the CLI.

Exception Hierarchy
-------------------
- FrontmatterTableError (base exception)

  - ValidationError (configuration validation)
    - InvalidOptionsError (wrong options object or inconsistent options)

  - ParsingError (block content failures)
    - DecodeError (decoder raised, or decoded value unusable)

"""

from typing import Any


class FrontmatterTableError(Exception):
    """Base exception class for all frontmatter_table errors.

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


class ValidationError(FrontmatterTableError):
    """Exception raised for invalid configuration values.

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


class InvalidOptionsError(ValidationError):
    """Exception raised when plugin options are of the wrong type or inconsistent.

    Parameters
    ----------
    message : str
        Description of the problem
    parameter_name : str, optional
        Name of the offending option
    parameter_value : any, optional
        The offending value
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
        """Initialize the invalid options error."""
        super().__init__(
            message,
            parameter_name=parameter_name,
            parameter_value=parameter_value,
            original_error=original_error,
        )


class ParsingError(FrontmatterTableError):
    """Exception raised when block content cannot be turned into a table."""


class DecodeError(ParsingError):
    """Exception raised when a delimited block does not decode to usable data.

    Parameters
    ----------
    reason : str
        Short description of why the block was rejected
    content : str, optional
        The raw text handed to the decoder
    original_error : Exception, optional
        The decoder exception, if the decoder raised

    Attributes
    ----------
    reason : str
        Why the block was rejected
    content : str or None
        The rejected text

    """

    def __init__(self, reason: str, content: str | None = None, original_error: Exception | None = None):
        """Initialize the decode error."""
        message = f"Front matter block rejected: {reason}"
        if original_error is not None:
            message += f" ({original_error})"
        super().__init__(message, original_error=original_error)
        self.reason = reason
        self.content = content
