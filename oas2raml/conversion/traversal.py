"""Scoped traversal of a decoded OpenAPI document.

The walker in this module knows nothing about OpenAPI or RAML. It iterates
over the keys of a mapping in their own order and, for each key, asks the
active :class:`Scope` for a handler. Handlers come in four closed variants:

- :class:`Copy` assigns the value to the output under the same key.
- :class:`Skip` reports the key as having no RAML equivalent.
- :class:`Descend` walks the value with a nested scope.
- :class:`Transform` runs a scope specific function.

A key without a handler is reported as an unsupported field and never
touches the output.
"""

import copy
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any

from oas2raml.diagnostics import DiagnosticKind, DiagnosticSink

Node = dict[str, Any]


def join_path(path: str, segment: str) -> str:
    """Append a segment to a breadcrumb path."""
    return f'{path}/{segment}' if path else segment


@dataclass
class PathItemDefaults:
    """Summary and description of a path item, inherited by its operations."""

    summary: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class Context:
    """State threaded through every traversal step.

    Attributes:
        path: Breadcrumb of the input node being walked, used in diagnostics.
        scope: The dispatch table for the keys of that node.
        sink: Where diagnostics go.
        parent: The output node owning the current output node, e.g. the
            resource node while an operation is walked. Set on every descent
            into a new output node so handlers can read back sibling output;
            the built-in rules do not need it.
        defaults: Inherited path item defaults, only set below a path item.
    """

    path: str
    scope: 'Scope'
    sink: DiagnosticSink
    parent: Node | None = None
    defaults: PathItemDefaults | None = None

    def locate(self, key: Any) -> str:
        return join_path(self.path, str(key))

    def descend(self, segment: str, scope: 'Scope', **changes: Any) -> 'Context':
        """Derive the context for a nested node."""
        return replace(self, path=self.locate(segment), scope=scope, **changes)


@dataclass(frozen=True)
class Copy:
    def apply(self, key: str, value: Any, output: Node, context: Context) -> None:
        # the output tree must not share nodes with the input
        output[key] = copy.deepcopy(value)


@dataclass(frozen=True)
class Skip:
    reason: str = 'not supported by RAML'

    def apply(self, key: str, value: Any, output: Node, context: Context) -> None:
        location = context.locate(key)
        context.sink.warning(
            DiagnosticKind.UNSUPPORTED_BY_TARGET,
            location,
            f'Skipping {location}: {self.reason}',
        )


@dataclass(frozen=True)
class Descend:
    """Walk the value with ``scope``.

    With ``target`` set, the nested output node is opened under that key of
    the current output; otherwise the nested keys write into the current
    output node.
    """

    scope: 'Scope'
    target: str | None = None

    def apply(self, key: str, value: Any, output: Node, context: Context) -> None:
        if self.target is None:
            visit(value or {}, output, context.descend(key, self.scope))
        else:
            nested = output.setdefault(self.target, {})
            visit(
                value or {}, nested, context.descend(key, self.scope, parent=output)
            )


@dataclass(frozen=True)
class Transform:
    function: Callable[[str, Any, Node, Context], None]

    def apply(self, key: str, value: Any, output: Node, context: Context) -> None:
        self.function(key, value, output, context)


Handler = Copy | Skip | Descend | Transform


@dataclass(frozen=True, eq=False)
class Scope:
    """A named, read-only table of field name to handler."""

    name: str
    fields: Mapping[str, Handler]

    def __post_init__(self):
        object.__setattr__(self, 'fields', MappingProxyType(dict(self.fields)))

    def keys(self) -> tuple[str, ...]:
        return tuple(self.fields)

    def lookup(self, key: Any) -> Handler | None:
        return self.fields.get(key)


def visit(node: Mapping[str, Any], output: Node, context: Context) -> None:
    """Dispatch every key of ``node`` to the handler of the active scope.

    Keys are visited once each, in the node's own order. Unknown keys produce
    a warning and are otherwise ignored.

    Args:
        node: The input mapping.
        output: The output node handlers write into.
        context: The context of ``node``.
    """
    for key, value in node.items():
        handler = context.scope.lookup(key)
        if handler is None:
            location = context.locate(key)
            context.sink.warning(
                DiagnosticKind.UNSUPPORTED_FIELD,
                location,
                f'Skipping {location}: not supported',
            )
            continue
        handler.apply(key, value, output, context)
