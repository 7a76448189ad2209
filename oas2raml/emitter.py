"""Serialization of converted documents to RAML text.

This module turns the RAML tree built by the converter into text with the
RAML version header and writes it to local or remote paths.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from upath import UPath

from oas2raml.exceptions import OutputError

logger = logging.getLogger(__name__)

RAML_HEADER = '#%RAML 1.0'


class RamlEmitter:
    """Renders RAML trees as YAML text prefixed with the RAML header.

    Keys are emitted in insertion order, so the output follows the order in
    which the converter produced them.

    Example:
        >>> emitter = RamlEmitter()
        >>> emitter.dumps({'title': 'Pets API'})
        '#%RAML 1.0\\ntitle: Pets API\\n'
    """

    def dumps(self, document: dict[str, Any]) -> str:
        """Render a RAML tree as text."""
        body = yaml.safe_dump(
            document,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )
        return f'{RAML_HEADER}\n{body}'

    def write(self, document: dict[str, Any], path: UPath | Path | str) -> None:
        """Write a RAML tree to ``path``, creating parent directories.

        Raises:
            OutputError: If the file cannot be written.
        """
        path = UPath(path)
        content = self.dumps(document)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding='utf-8')
        except OSError as e:
            raise OutputError(str(path), cause=e)
        logger.debug(f'Wrote {len(content)} characters to {path}')
