from oas2raml.conversion.converter import ConversionResult, Converter, convert
from oas2raml.conversion.traversal import (
    Context,
    Copy,
    Descend,
    PathItemDefaults,
    Scope,
    Skip,
    Transform,
    visit,
)

__all__ = [
    'ConversionResult',
    'Converter',
    'convert',
    'Context',
    'Copy',
    'Descend',
    'PathItemDefaults',
    'Scope',
    'Skip',
    'Transform',
    'visit',
]
