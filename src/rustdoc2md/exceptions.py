#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the rustdoc2md library.

This module defines the exception classes raised while parsing rustdoc HTML
and rendering it to Markdown. These exceptions carry more context than the
generic built-ins they wrap.

Exception Hierarchy
-------------------
- Rustdoc2MdError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class passed in)

  - ParsingError (HTML could not be turned into a tree)

  - RenderingError (tree could not be rendered to Markdown)

  - DependencyError (missing tree builder packages)

"""

from typing import Any


class Rustdoc2MdError(Exception):
    """Base exception class for all rustdoc2md-specific errors.

    Catching this will catch every library-specific error.

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


class ValidationError(Rustdoc2MdError):
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


class InvalidOptionsError(ValidationError):
    """Exception raised when an options object of the wrong class is provided.

    Parameters
    ----------
    converter_name : str
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
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(Rustdoc2MdError):
    """Exception raised when HTML input cannot be parsed into a tree.

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


class RenderingError(Rustdoc2MdError):
    """Exception raised when Markdown rendering fails.

    This is raised for inputs the writer cannot walk, such as objects that
    are not BeautifulSoup nodes, trees nested too deeply to recurse over,
    or a writer that is run a second time.

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


class DependencyError(Rustdoc2MdError):
    """Exception raised when a required tree builder is not installed.

    Parameters
    ----------
    converter_name : str
        Name of the component requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    install_command : str, optional
        Suggested pip install command to resolve the issue
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        install_command: str = "",
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the dependency error with package details."""
        if message is None:
            message = ""
            if missing_packages:
                pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
                message = f"{converter_name} requires the following packages: {pkg_list}"

                if not install_command:
                    packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in missing_packages)
                    install_command = f"pip install --upgrade {packages_str}"
            else:
                message = f"{converter_name} is missing a required dependency"

            if install_command:
                message += f"\nInstall with: {install_command}"

        super().__init__(message, original_error)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.install_command = install_command
