"""Conversion rules, one scope per position in an OpenAPI document.

Scopes are declared bottom-up so every table is a closed, fully built
mapping by the time a parent refers to it:

    DOCUMENT
    ├── info       -> INFO (writes into the RAML root)
    ├── servers    -> SERVER (first server only)
    │   └── variables -> SERVER_VARIABLE (one per variable)
    └── paths      -> PATH_ITEM (one per resource path)
        └── get/put/... -> OPERATION
"""

import logging
import re
from typing import Any

from oas2raml.conversion.traversal import (
    Context,
    Copy,
    Descend,
    Node,
    PathItemDefaults,
    Scope,
    Skip,
    Transform,
    join_path,
    visit,
)
from oas2raml.diagnostics import DiagnosticKind

logger = logging.getLogger(__name__)

SUPPORTED_VERSION = re.compile(r'^3(\.|$)')

TERMS_OF_SERVICE_TITLE = 'Terms of Service'

# OpenAPI parameter location -> RAML operation key. Path and cookie
# parameters are left out on purpose.
PARAMETER_BUCKETS = {
    'query': 'queryParameters',
    'header': 'headers',
}

OPERATION_METHODS = ('get', 'put', 'post', 'delete', 'options', 'head', 'patch')


def _check_version(key: str, version: Any, output: Node, context: Context) -> None:
    if not SUPPORTED_VERSION.match(str(version)):
        context.sink.error(
            DiagnosticKind.VERSION_MISMATCH,
            context.locate(key),
            f'The version {version} is not supported',
        )


def _terms_of_service(key: str, url: Any, output: Node, context: Context) -> None:
    output.setdefault('documentation', []).append(
        {
            'title': TERMS_OF_SERVICE_TITLE,
            'content': f'[{TERMS_OF_SERVICE_TITLE}]({url})',
        }
    )


INFO = Scope(
    'info',
    {
        'title': Copy(),
        'description': Copy(),
        'termsOfService': Transform(_terms_of_service),
        'contact': Skip(),
        'license': Skip(),
        'version': Copy(),
    },
)

SERVER_VARIABLE = Scope(
    'server variable',
    {
        'enum': Copy(),
        'default': Copy(),
        'description': Copy(),
    },
)


def _base_uri(key: str, url: Any, output: Node, context: Context) -> None:
    # {placeholders} are kept, RAML templates base URIs the same way
    output['baseUri'] = url


def _base_uri_parameters(
    key: str, variables: Any, output: Node, context: Context
) -> None:
    parameters = output.setdefault('baseUriParameters', {})
    for name, variable in (variables or {}).items():
        parameters[name] = {}
        visit(
            variable or {},
            parameters[name],
            context.descend(
                join_path(key, str(name)), SERVER_VARIABLE, parent=parameters
            ),
        )


SERVER = Scope(
    'server',
    {
        'url': Transform(_base_uri),
        'variables': Transform(_base_uri_parameters),
    },
)


def _servers(key: str, servers: Any, output: Node, context: Context) -> None:
    """Convert the first server; RAML has a single base URI."""
    if not servers:
        return
    if len(servers) > 1:
        location = context.locate(key)
        context.sink.warning(
            DiagnosticKind.INCOMPATIBLE_CARDINALITY,
            location,
            f'Partial conversion of {location}: RAML is limited to one server',
        )
    visit(servers[0] or {}, output, context.descend(f'{key}[0]', SERVER))


def _display_name(key: str, summary: Any, output: Node, context: Context) -> None:
    output['displayName'] = summary


def _parameters(key: str, parameters: Any, output: Node, context: Context) -> None:
    """Sort inline parameters into ``queryParameters`` and ``headers``."""
    for index, parameter in enumerate(parameters or []):
        parameter = parameter or {}
        location = context.locate(f'{key}[{index}]')
        if '$ref' in parameter:
            context.sink.warning(
                DiagnosticKind.UNRESOLVED_REFERENCE,
                location,
                f'Skipping {location}: references are not resolved',
            )
            continue

        bucket = PARAMETER_BUCKETS.get(parameter.get('in'))
        if bucket is None:
            logger.debug(
                f"No RAML counterpart for {parameter.get('in')} parameter "
                f"{parameter.get('name')} at {location}"
            )
            continue

        name = parameter.get('name')
        if name is None:
            context.sink.warning(
                DiagnosticKind.MISSING_FIELD,
                location,
                f'Skipping {location}: parameter has no name',
            )
            continue
        output.setdefault(bucket, {})[name] = {}


OPERATION = Scope(
    'operation',
    {
        'tags': Skip(),
        'summary': Transform(_display_name),
        'description': Copy(),
        'externalDocs': Skip(),
        'operationId': Skip(),
        'parameters': Transform(_parameters),
        'requestBody': Skip(),
        'responses': Skip(),
        'deprecated': Skip(),
        'security': Skip(),
        'servers': Skip(),
    },
)


def _operation(method: str, operation: Any, output: Node, context: Context) -> None:
    """Convert one operation and apply the path item defaults it lacks."""
    Descend(OPERATION, target=method).apply(method, operation, output, context)
    operation_output = output[method]

    defaults = context.defaults
    if defaults is None:
        return
    if not operation_output.get('displayName') and defaults.summary:
        operation_output['displayName'] = defaults.summary
    if not operation_output.get('description') and defaults.description:
        operation_output['description'] = defaults.description


def _default_summary(key: str, summary: Any, output: Node, context: Context) -> None:
    context.defaults.summary = summary


def _default_description(
    key: str, description: Any, output: Node, context: Context
) -> None:
    context.defaults.description = description


PATH_ITEM = Scope(
    'path item',
    {
        '$ref': Skip(),
        'summary': Transform(_default_summary),
        'description': Transform(_default_description),
        **{method: Transform(_operation) for method in OPERATION_METHODS},
        'trace': Skip(),
        'servers': Skip(),
        # shared parameters are not pushed down to the operations
        'parameters': Skip(),
    },
)


def _paths(key: str, paths: Any, output: Node, context: Context) -> None:
    """Open one RAML resource per path, keyed by the literal path string.

    The path item defaults are collected before its keys are walked, so they
    reach every operation wherever ``summary``/``description`` appear.
    """
    for resource, item in (paths or {}).items():
        item = item or {}
        resource_output = output[resource] = {}
        defaults = PathItemDefaults(
            summary=item.get('summary'), description=item.get('description')
        )
        visit(
            item,
            resource_output,
            context.descend(
                join_path(key, str(resource)),
                PATH_ITEM,
                parent=output,
                defaults=defaults,
            ),
        )


DOCUMENT = Scope(
    'document',
    {
        'openapi': Transform(_check_version),
        'info': Descend(INFO),
        'servers': Transform(_servers),
        'paths': Transform(_paths),
    },
)
