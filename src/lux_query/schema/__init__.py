"""
Search-term registry: declared terms per scope, the generated inverse
entries, and the consistency checks run over them.
"""

from .scope_schema import GENERATED_TERMS_PATH, ScopeSchema
from .search_terms import SEARCH_TERM_CONFIG
from .traversal import HopPath, enumerate_paths
from .validator import (
    Severity,
    ValidationIssue,
    ValidationResult,
    check_references,
    validate_schema,
)

__all__ = [
    "ScopeSchema",
    "SEARCH_TERM_CONFIG",
    "GENERATED_TERMS_PATH",
    "HopPath",
    "enumerate_paths",
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "check_references",
    "validate_schema",
]
