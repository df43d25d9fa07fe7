"""
Data models for the LUX search-term registry.

Pydantic models and enums for scopes, term patterns and term definitions.
"""

from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from .lux_exceptions import SchemaError, UnknownScope
from .predicates import Predicate, parse_predicate


# ============================================================================
# Enums
# ============================================================================

class Scope(str, Enum):
    """Entity kind in the knowledge graph"""
    AGENT = "agent"
    CONCEPT = "concept"
    EVENT = "event"
    ITEM = "item"
    PLACE = "place"
    SET = "set"
    WORK = "work"
    REFERENCE = "reference"


# Root scope of a query whose OR branches each declare their own scope
MULTI_SCOPE = "multi"


class PatternName(str, Enum):
    """Traversal pattern a search term implements"""
    DOCUMENT_ID = "documentId"       # Match on the document identifier
    INDEXED_WORD = "indexedWord"     # Word-indexed field
    INDEXED_VALUE = "indexedValue"   # Exact-value indexed field
    TEXT = "text"                    # Full-text field
    HOP_WITH_FIELD = "hopWithField"  # Single relation hop
    RELATED_LIST = "relatedList"     # Bounded multi-hop traversal
    SIMILAR = "similar"              # Similarity marker


class ScalarType(str, Enum):
    """Value type of scalar-valued terms"""
    STRING = "string"
    NUMBER = "number"


class BoolOp(str, Enum):
    """Boolean combinator of a query node"""
    AND = "AND"
    OR = "OR"


class Comparator(str, Enum):
    """Comparison applied to numeric leaves (serialised as _comp)"""
    EQ = "="
    NE = "!="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="


def parse_scope(value: Any) -> Scope:
    """Return the Scope named by value, raising UnknownScope otherwise."""
    if isinstance(value, Scope):
        return value
    try:
        return Scope(value)
    except ValueError:
        raise UnknownScope(value) from None


def scope_name(scope: Any) -> Optional[str]:
    """Plain string form of a scope (Scope member or pseudo-scope string)."""
    if scope is None:
        return None
    return scope.value if isinstance(scope, Enum) else str(scope)


# ============================================================================
# Term definitions
# ============================================================================

_SCALAR_PATTERNS = (PatternName.INDEXED_WORD, PatternName.INDEXED_VALUE, PatternName.TEXT)


class TermDefinition(BaseModel):
    """Declaration of one named search term within a scope.

    Accepts the registry's camelCase keys (patternName, targetScope,
    hopInverseName, ...) as well as the snake_case field names.
    """
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str
    scope: Scope
    pattern: PatternName = Field(validation_alias=AliasChoices("patternName", "pattern"))
    predicates: Tuple[str, ...] = ()
    target_scope: Optional[Scope] = Field(
        None, validation_alias=AliasChoices("targetScope", "target_scope"))
    inverse_term_name: Optional[str] = Field(
        None, validation_alias=AliasChoices("hopInverseName", "inverseTermName", "inverse_term_name"))
    index_references: Tuple[str, ...] = Field(
        (), validation_alias=AliasChoices("indexReferences", "index_references"))
    id_index_references: Tuple[str, ...] = Field(
        (), validation_alias=AliasChoices("idIndexReferences", "id_index_references"))
    scalar_type: Optional[ScalarType] = Field(
        None, validation_alias=AliasChoices("scalarType", "scalar_type"))
    in_between_scopes: Tuple[Scope, ...] = Field(
        (), validation_alias=AliasChoices("inBetweenScopes", "in_between_scopes"))
    max_level: Optional[int] = Field(
        None, ge=1, validation_alias=AliasChoices("maxLevel", "max_level"))

    @field_validator("predicates")
    @classmethod
    def _predicates_parse(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        for expression in value:
            try:
                parse_predicate(expression)
            except SchemaError as e:
                raise ValueError(str(e)) from e
        return value

    @model_validator(mode="after")
    def _check_pattern_requirements(self) -> "TermDefinition":
        if self.pattern is PatternName.HOP_WITH_FIELD:
            if not self.predicates:
                raise ValueError(f"hopWithField term {self.name!r} declares no predicates")
            if self.target_scope is None:
                raise ValueError(f"hopWithField term {self.name!r} declares no targetScope")
        elif self.pattern is PatternName.RELATED_LIST:
            if self.target_scope is None:
                raise ValueError(f"relatedList term {self.name!r} declares no targetScope")
            if self.max_level is None:
                raise ValueError(f"relatedList term {self.name!r} declares no maxLevel")
        elif self.pattern in _SCALAR_PATTERNS and not self.index_references:
            raise ValueError(f"{self.pattern.value} term {self.name!r} declares no indexReferences")
        return self

    @property
    def parsed_predicates(self) -> Tuple[Predicate, ...]:
        return tuple(parse_predicate(p) for p in self.predicates)

    @property
    def is_hop(self) -> bool:
        return self.pattern is PatternName.HOP_WITH_FIELD

    @property
    def is_numeric(self) -> bool:
        return self.scalar_type is ScalarType.NUMBER
