"""
Query trees and the compiler that builds them from registry terms.
"""

from .compiler import QueryCompiler, RelatedBranch
from .nodes import (
    BooleanNode,
    Hop,
    Identifier,
    Leaf,
    QueryNode,
    Target,
    all_of,
    any_of,
    by_id,
    check_scope_nesting,
    hop,
    iter_nodes,
    leaf,
    to_wire,
    with_scope,
)

__all__ = [
    "QueryCompiler",
    "RelatedBranch",
    "BooleanNode",
    "Hop",
    "Identifier",
    "Leaf",
    "QueryNode",
    "Target",
    "all_of",
    "any_of",
    "by_id",
    "check_scope_nesting",
    "hop",
    "iter_nodes",
    "leaf",
    "to_wire",
    "with_scope",
]
