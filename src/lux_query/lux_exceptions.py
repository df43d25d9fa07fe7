"""
LUX Query Exception Hierarchy

Contains all exception classes raised by the search-term registry,
the query compiler and the template library.
"""

from typing import Any, Optional


class LuxQueryError(Exception):
    """
    Base exception for all query compilation operations.

    ::: This is-in-layer Utility-Layer.
    ::: This is a exception.
    ::: This is stateless.
    """
    pass


class SchemaError(LuxQueryError):
    """
    Raised when registry data is invalid: a malformed term definition,
    an unparseable predicate, or a scope reference that does not resolve
    to a declared term table.

    ::: This is-in-layer Utility-Layer.
    ::: This is a exception.
    ::: This is stateless.
    """

    def __init__(self, message: str, issues: Optional[list] = None):
        super().__init__(message)
        self.issues = list(issues or [])


class UnknownScope(LuxQueryError, LookupError):
    """
    Raised when a scope is not one of the declared entity scopes.

    ::: This is-in-layer Utility-Layer.
    ::: This is a exception.
    ::: This is stateless.
    """

    def __init__(self, scope: Any):
        super().__init__(f"Unknown search scope: {scope!r}")
        self.scope = scope


class UnknownTerm(LuxQueryError, LookupError):
    """
    Raised when a term name is absent from the scope's term table.

    ::: This is-in-layer Utility-Layer.
    ::: This is a exception.
    ::: This is stateless.
    """

    def __init__(self, scope: Any, term_name: str):
        scope_name = getattr(scope, "value", scope)
        super().__init__(f"Unknown search term {term_name!r} in scope {scope_name!r}")
        self.scope = scope
        self.term_name = term_name


class InvalidValue(LuxQueryError, ValueError):
    """
    Raised when a value's shape does not match what the term's pattern
    expects (e.g. a number given to a relation term).

    ::: This is-in-layer Utility-Layer.
    ::: This is a exception.
    ::: This is stateless.
    """

    def __init__(self, message: str, term_name: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.term_name = term_name
        self.value = value


class TraversalBoundExceeded(LuxQueryError):
    """
    Raised when a related-list expansion asks for more levels than the
    term declares and clamping has been disabled by the caller.

    ::: This is-in-layer Utility-Layer.
    ::: This is a exception.
    ::: This is stateless.
    """

    def __init__(self, term_name: str, requested: int, max_level: int):
        super().__init__(
            f"Related list {term_name!r} allows at most {max_level} level(s), "
            f"{requested} requested"
        )
        self.term_name = term_name
        self.requested = requested
        self.max_level = max_level


class UnknownTemplate(LuxQueryError, LookupError):
    """
    Raised when a named query template is not registered.

    ::: This is-in-layer Utility-Layer.
    ::: This is a exception.
    ::: This is stateless.
    """

    def __init__(self, name: str):
        super().__init__(f"Unknown query template: {name!r}")
        self.name = name


class UnknownLink(LuxQueryError, LookupError):
    """
    Raised when no related-link definition exists for a link relation
    (e.g. "lux:agentRelatedAgents").

    ::: This is-in-layer Utility-Layer.
    ::: This is a exception.
    ::: This is stateless.
    """

    def __init__(self, rel: str):
        super().__init__(f"Unknown link relation: {rel!r}")
        self.rel = rel


__all__ = [
    "LuxQueryError",
    "SchemaError",
    "UnknownScope",
    "UnknownTerm",
    "InvalidValue",
    "TraversalBoundExceeded",
    "UnknownTemplate",
    "UnknownLink",
]
