"""Loading of OpenAPI documents.

This module reads an OpenAPI document from a local file or an HTTP(S) URL
and decodes it from YAML or JSON into plain Python mappings, sequences and
scalars, the form the converter walks.
"""

import json
import logging
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import httpx
import yaml

from oas2raml.exceptions import DocumentLoadError, DocumentStructureError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = ('.yaml', '.yml')


class DocumentLoader:
    """Loads OpenAPI documents from URLs or file paths.

    Example:
        >>> loader = DocumentLoader()
        >>> document = loader.load('https://api.example.com/openapi.yaml')
        >>> # or
        >>> document = loader.load('/path/to/openapi.json')
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        base_path: str | Path | None = None,
    ):
        """Initialize the document loader.

        Args:
            http_client: Optional HTTP client to use for URL requests.
                        If not provided, ``httpx.get`` is used.
            base_path: Base path for resolving relative file paths.
                      Defaults to current working directory.
        """
        self._http_client = http_client
        self._base_path = Path(base_path) if base_path else Path.cwd()

    def load(self, source: str) -> dict[str, Any]:
        """Load and decode an OpenAPI document.

        Args:
            source: URL or file path of the document.

        Returns:
            The decoded document.

        Raises:
            DocumentLoadError: If the document cannot be read or decoded.
            DocumentStructureError: If the decoded document is not a mapping.
        """
        if self._is_url(source):
            document = self._load_from_url(source)
        else:
            document = self._load_from_file(source)

        if not isinstance(document, dict):
            raise DocumentStructureError(
                f'Expected a mapping at the root of {source}, '
                f'got {type(document).__name__}'
            )
        logger.debug(f'Loaded {source}')
        return document

    def _is_url(self, text: str) -> bool:
        """Check if a string is a URL."""
        try:
            result = urlparse(text)
            return result.scheme in ('http', 'https')
        except ValueError:
            return False

    def _load_from_url(self, url: str) -> Any:
        """Load document content from a URL."""
        try:
            if self._http_client:
                response = self._http_client.get(url)
            else:
                response = httpx.get(url, follow_redirects=True, timeout=30.0)

            response.raise_for_status()
            content_type = response.headers.get('content-type', '')
            is_yaml = 'yaml' in content_type or url.endswith(YAML_SUFFIXES)
            return self._decode(response.text, is_yaml)

        except httpx.HTTPError as e:
            raise DocumentLoadError(url, cause=e)
        except yaml.YAMLError as e:
            raise DocumentLoadError(url, cause=e)

    def _load_from_file(self, file_path: str) -> Any:
        """Load document content from a file."""
        path = Path(file_path)
        if not path.is_absolute():
            path = self._base_path / path

        if not path.exists():
            raise DocumentLoadError(
                str(file_path), cause=FileNotFoundError(f'File not found: {path}')
            )

        try:
            content = path.read_text(encoding='utf-8')
            return self._decode(content, path.suffix.lower() in YAML_SUFFIXES)
        except yaml.YAMLError as e:
            raise DocumentLoadError(str(file_path), cause=e)
        except OSError as e:
            raise DocumentLoadError(str(file_path), cause=e)

    def _decode(self, content: str, is_yaml: bool) -> Any:
        if is_yaml:
            return yaml.safe_load(content)
        try:
            return json.loads(content)
        except json.JSONDecodeError:
            # JSON is a subset of YAML; extensionless YAML lands here
            logger.debug('Content is not JSON, decoding as YAML')
            return yaml.safe_load(content)
