"""
Relation labels: the curated table and the resolver with its fallback rule.
"""

from .relation_names import RELATION_NAMES
from .resolver import (
    RelationLabelTable,
    RelationResolver,
    camel_case_to_words,
    uppercase_first_character,
)

__all__ = [
    "RELATION_NAMES",
    "RelationLabelTable",
    "RelationResolver",
    "camel_case_to_words",
    "uppercase_first_character",
]
