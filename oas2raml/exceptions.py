"""Custom exceptions for oas2raml.

This module defines the exceptions raised at the edges of a conversion run:
loading the source document, writing the RAML output and reading the
configuration. The conversion itself never raises for unsupported content;
those cases are reported as diagnostics (see :mod:`oas2raml.diagnostics`).
"""


class Oas2RamlError(Exception):
    """Base exception for all oas2raml errors.

    All exceptions raised by oas2raml inherit from this class, making it easy
    to catch all oas2raml-related errors with a single except clause.

    Example:
        try:
            document = loader.load('openapi.yaml')
        except Oas2RamlError as e:
            print(f"oas2raml error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class DocumentError(Oas2RamlError):
    """Base exception for source document errors."""

    pass


class DocumentLoadError(DocumentError):
    """Failed to load an OpenAPI document from a source.

    This exception is raised when the document cannot be read from the
    specified URL or file path, or when its content cannot be decoded.

    Attributes:
        source: The source path or URL that failed to load.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load document from '{source}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class DocumentStructureError(DocumentError):
    """The decoded document does not have the shape the converter walks.

    Attributes:
        location: Breadcrumb of the offending node, if known.
    """

    def __init__(self, message: str, location: str | None = None):
        self.location = location
        full_message = message
        if location:
            full_message = f"{message} at '{location}'"
        super().__init__(full_message)


class ConfigurationError(Oas2RamlError):
    """Error in configuration.

    This exception is raised when the configuration is invalid or
    cannot be loaded.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)


class OutputError(Oas2RamlError):
    """Error writing the RAML output.

    Attributes:
        output_path: The path where output was being written.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, output_path: str, cause: Exception | None = None):
        self.output_path = output_path
        self.cause = cause
        message = f"Failed to write output to '{output_path}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)
