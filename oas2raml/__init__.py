"""oas2raml - Convert OpenAPI 3.x documents to RAML 1.0.

The conversion is a best-effort, structural mapping: the fields RAML can
express are carried over, everything else is dropped and reported as a
diagnostic.

Quick Start:
    >>> from oas2raml import DocumentLoader, convert
    >>>
    >>> document = DocumentLoader().load('./openapi.yaml')
    >>> result = convert(document)
    >>> print(result.to_raml())
    >>> for diagnostic in result.diagnostics:
    ...     print(diagnostic.severity.value, diagnostic.message)

CLI Usage:
    $ oas2raml convert ./openapi.yaml -o api.raml
    $ oas2raml convert https://api.example.com/openapi.json --strict
"""

from importlib.metadata import PackageNotFoundError, version

from oas2raml.config import ConverterConfig, get_config
from oas2raml.conversion import ConversionResult, Converter, convert
from oas2raml.diagnostics import Diagnostic, DiagnosticKind, DiagnosticSink, Severity
from oas2raml.emitter import RAML_HEADER, RamlEmitter
from oas2raml.exceptions import (
    ConfigurationError,
    DocumentError,
    DocumentLoadError,
    DocumentStructureError,
    Oas2RamlError,
    OutputError,
)
from oas2raml.loader import DocumentLoader

__all__ = [
    # Conversion
    'convert',
    'Converter',
    'ConversionResult',
    'DocumentLoader',
    'RamlEmitter',
    'RAML_HEADER',
    # Diagnostics
    'Diagnostic',
    'DiagnosticKind',
    'DiagnosticSink',
    'Severity',
    # Configuration
    'ConverterConfig',
    'get_config',
    # Exceptions
    'Oas2RamlError',
    'DocumentError',
    'DocumentLoadError',
    'DocumentStructureError',
    'ConfigurationError',
    'OutputError',
]

try:
    __version__ = version('oas2raml')
except PackageNotFoundError:
    __version__ = 'unknown'
