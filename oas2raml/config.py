import json
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from oas2raml.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['oas2raml.yaml', 'oas2raml.yml']


class ConverterConfig(BaseSettings):
    """Settings of the oas2raml command line.

    Values come from a configuration file and can be overridden with
    ``OAS2RAML_*`` environment variables.
    """

    model_config = SettingsConfigDict(env_prefix='OAS2RAML_', extra='forbid')

    verbose: bool = Field(False, description='Log debug messages.')

    output: str | None = Field(
        None, description='Output file for the RAML document, stdout if not set.'
    )

    strict: bool = Field(
        False, description='Exit with an error status when error diagnostics occur.'
    )

    fail_on_warnings: bool = Field(
        False, description='Exit with an error status when any diagnostic occurs.'
    )


def load_yaml(path: str | Path) -> Any:
    return yaml.safe_load(Path(path).read_text(encoding='utf-8'))


def load_json(path: str | Path) -> Any:
    return json.loads(Path(path).read_text(encoding='utf-8'))


def _validate(data: Any, config_path: str) -> ConverterConfig:
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError('Configuration must be a mapping', config_path)
    try:
        return ConverterConfig(**data)
    except ValidationError as e:
        error = e.errors()[0]
        field = '.'.join(str(part) for part in error['loc']) or None
        raise ConfigurationError(error['msg'], config_path, field) from e


def get_config(path: str | None = None) -> ConverterConfig:
    """Load configuration from a file, or fall back to defaults.

    Lookup order: the explicit ``path``, ``oas2raml.yaml``/``oas2raml.yml`` in
    the working directory, the ``[tool.oas2raml]`` table of ``pyproject.toml``.

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid.
    """
    if path:
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigurationError('Configuration file not found', str(path))
        try:
            if config_path.suffix.lower() == '.json':
                data = load_json(config_path)
            else:
                data = load_yaml(config_path)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f'Cannot parse configuration: {e}', str(path))
        return _validate(data, str(path))

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        config_path = Path(cwd) / filename
        if config_path.exists():
            return _validate(load_yaml(config_path), str(config_path))

    config_path = Path(cwd) / 'pyproject.toml'

    if config_path.exists():
        import tomllib

        pyproject = tomllib.loads(config_path.read_text(encoding='utf-8'))
        tools = pyproject.get('tool', {})

        if 'oas2raml' in tools:
            return _validate(tools['oas2raml'], str(config_path))

    return ConverterConfig()
