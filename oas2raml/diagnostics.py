"""Diagnostics produced while converting a document.

A conversion never stops on content it cannot map. Every such case is
recorded as a :class:`Diagnostic` in a :class:`DiagnosticSink`, which is
handed back to the caller and also forwarded to the standard logging
machinery as it is produced.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    """Severity of a diagnostic."""

    WARNING = 'warning'
    ERROR = 'error'

    @property
    def log_level(self) -> int:
        return logging.ERROR if self is Severity.ERROR else logging.WARNING


class DiagnosticKind(str, Enum):
    """What kind of anomaly a diagnostic describes."""

    # key with no handler in the active scope
    UNSUPPORTED_FIELD = 'unsupported_field'
    # key recognized but without a RAML equivalent
    UNSUPPORTED_BY_TARGET = 'unsupported_by_target'
    # more than one server declared
    INCOMPATIBLE_CARDINALITY = 'incompatible_cardinality'
    # openapi major version is not 3
    VERSION_MISMATCH = 'version_mismatch'
    # $ref entry left as is
    UNRESOLVED_REFERENCE = 'unresolved_reference'
    # field needed for the mapping is absent
    MISSING_FIELD = 'missing_field'


@dataclass(frozen=True)
class Diagnostic:
    """A single non-fatal message about the source document.

    Attributes:
        kind: The category of the anomaly.
        severity: Warning or error.
        location: Breadcrumb path of the input node, e.g. ``paths//pets/get``.
        message: Human readable description.
    """

    kind: DiagnosticKind
    severity: Severity
    location: str
    message: str

    def __str__(self) -> str:
        return self.message


class DiagnosticSink:
    """Ordered, append-only collection of diagnostics.

    Example:
        >>> sink = DiagnosticSink()
        >>> sink.warning(DiagnosticKind.UNSUPPORTED_FIELD, 'components', 'Skipping components: not supported')
        >>> len(sink)
        1
    """

    def __init__(self):
        self._diagnostics: list[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        """Record a diagnostic and forward it to the logger."""
        self._diagnostics.append(diagnostic)
        logger.log(diagnostic.severity.log_level, diagnostic.message)

    def warning(self, kind: DiagnosticKind, location: str, message: str) -> None:
        self.report(Diagnostic(kind, Severity.WARNING, location, message))

    def error(self, kind: DiagnosticKind, location: str, message: str) -> None:
        self.report(Diagnostic(kind, Severity.ERROR, location, message))

    def by_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [d for d in self._diagnostics if d.kind is kind]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self._diagnostics if d.severity is Severity.WARNING]

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self._diagnostics if d.severity is Severity.ERROR]

    @property
    def has_errors(self) -> bool:
        return any(d.severity is Severity.ERROR for d in self._diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(list(self._diagnostics))

    def __len__(self) -> int:
        return len(self._diagnostics)
