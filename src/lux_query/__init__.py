"""
LUX Query - search-term registry and query compiler

Compiles (scope, term, value) search requests against the LUX
search-term registry into nested AND/OR query trees, resolves
human-readable labels for related-list relations, and ships the curated
library of named query templates.
"""

__version__ = "0.1.0"

from .lux_exceptions import (
    LuxQueryError,
    SchemaError,
    UnknownScope,
    UnknownTerm,
    InvalidValue,
    TraversalBoundExceeded,
    UnknownTemplate,
    UnknownLink,
)
from .models import Scope, PatternName, ScalarType, BoolOp, Comparator, TermDefinition
from .schema import ScopeSchema, validate_schema
from .query import QueryCompiler, to_wire
from .relations import RelationResolver

# The bootstrap and template catalogue are imported on first use
_LAZY_ATTRS = {
    "QueryServices": "bootstrap",
    "build_services": "bootstrap",
    "TemplateLibrary": "templates",
    "get_template_library": "templates",
}


def __getattr__(name):
    module_name = _LAZY_ATTRS.get(name)
    if module_name is not None:
        from importlib import import_module
        return getattr(import_module(f".{module_name}", __name__), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "LuxQueryError",
    "SchemaError",
    "UnknownScope",
    "UnknownTerm",
    "InvalidValue",
    "TraversalBoundExceeded",
    "UnknownTemplate",
    "UnknownLink",
    "Scope",
    "PatternName",
    "ScalarType",
    "BoolOp",
    "Comparator",
    "TermDefinition",
    "ScopeSchema",
    "validate_schema",
    "QueryCompiler",
    "to_wire",
    "RelationResolver",
    "QueryServices",
    "build_services",
    "TemplateLibrary",
    "get_template_library",
]
