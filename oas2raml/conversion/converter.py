"""Conversion entry point.

:class:`Converter` walks a decoded OpenAPI 3.x document with the rules of
:mod:`oas2raml.conversion.rules` and assembles the RAML tree. Every run
starts from a fresh output tree and, unless one is given, a fresh
diagnostic sink.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from oas2raml.conversion.rules import DOCUMENT
from oas2raml.conversion.traversal import Context, Scope, visit
from oas2raml.diagnostics import DiagnosticSink
from oas2raml.emitter import RamlEmitter
from oas2raml.exceptions import DocumentStructureError

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """The RAML tree of a run together with its diagnostics."""

    document: dict[str, Any]
    diagnostics: DiagnosticSink

    def to_raml(self) -> str:
        return RamlEmitter().dumps(self.document)


class Converter:
    """Converts OpenAPI 3.x documents into RAML 1.0 trees.

    Conversion is best effort: fields without a RAML counterpart are dropped
    and reported in the diagnostics of the result, and the run always
    completes.

    Example:
        >>> result = Converter().convert({'openapi': '3.0.0', 'info': {'title': 'Pets'}})
        >>> result.document
        {'title': 'Pets'}
    """

    def __init__(self, root_scope: Scope = DOCUMENT):
        self._root_scope = root_scope

    def convert(
        self, document: Mapping[str, Any], sink: DiagnosticSink | None = None
    ) -> ConversionResult:
        """Convert a decoded OpenAPI document.

        Args:
            document: The decoded OpenAPI document.
            sink: Optional sink to collect diagnostics in.

        Returns:
            The RAML tree and the diagnostics of the run.

        Raises:
            DocumentStructureError: If the document is not a mapping.
        """
        if not isinstance(document, Mapping):
            raise DocumentStructureError(
                f'Expected a mapping, got {type(document).__name__}', location='/'
            )

        if sink is None:
            sink = DiagnosticSink()
        output: dict[str, Any] = {}
        context = Context(path='', scope=self._root_scope, sink=sink)

        logger.debug(f'Converting document with keys {list(document)}')
        visit(document, output, context)
        logger.debug(f'Conversion finished with {len(sink)} diagnostics')

        return ConversionResult(document=output, diagnostics=sink)


def convert(
    document: Mapping[str, Any], sink: DiagnosticSink | None = None
) -> ConversionResult:
    """Convert a decoded OpenAPI document with the default rules."""
    return Converter().convert(document, sink)
