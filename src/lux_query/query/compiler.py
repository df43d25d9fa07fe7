"""
Query Compiler - expands (scope, term, value) into a query tree.

Each registry pattern has one handler; hopWithField recurses into the
target scope and relatedList composes bounded hop chains found by
enumerate_paths. Errors propagate to the caller; no partial tree is
ever returned.
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from ..logging_config import configure_logger_for_debug_trace
from ..lux_exceptions import InvalidValue, TraversalBoundExceeded
from ..models import (
    MULTI_SCOPE,
    BoolOp,
    Comparator,
    PatternName,
    Scope,
    TermDefinition,
    parse_scope,
    scope_name,
)
from ..schema.scope_schema import ScopeSchema
from ..schema.traversal import HopPath, enumerate_paths
from .nodes import (
    COMPARATOR_KEY,
    SCOPE_KEY,
    BooleanNode,
    Hop,
    Identifier,
    Leaf,
    QueryNode,
    Target,
    node_scope,
    with_scope,
)

logger = configure_logger_for_debug_trace(__name__)

_BOOLEAN_KEYS = {op.value for op in BoolOp}


@dataclass(frozen=True)
class RelatedBranch:
    """One hop chain of a relatedList expansion."""
    relation_key: str
    terms: Tuple[str, ...]
    node: Hop

    @property
    def level(self) -> int:
        return len(self.terms)


class QueryCompiler:
    """
    Compiles search terms against a ScopeSchema.

    ::: This is-in-layer Domain-Layer.
    ::: This is a compiler.
    ::: This is stateless.

    Usage:
        compiler = QueryCompiler(ScopeSchema.load_default())
        node = compiler.compile("item", "classification", "concept:123")
        to_wire(node)   # {"_scope": "item", "classification": {"id": "concept:123"}}
    """

    def __init__(self, schema: ScopeSchema, clamp_levels: bool = True):
        """
        Args:
            schema: Registry to compile against
            clamp_levels: Default for requests above a relatedList's maxLevel;
                True clamps, False raises TraversalBoundExceeded
        """
        self._schema = schema
        self._clamp_levels = clamp_levels
        self._handlers: Dict[PatternName, Callable[..., QueryNode]] = {
            PatternName.DOCUMENT_ID: self._compile_document_id,
            PatternName.INDEXED_WORD: self._compile_indexed,
            PatternName.INDEXED_VALUE: self._compile_indexed,
            PatternName.TEXT: self._compile_text,
            PatternName.HOP_WITH_FIELD: self._compile_hop,
            PatternName.RELATED_LIST: self._compile_related,
            PatternName.SIMILAR: self._compile_similar,
        }

    @property
    def schema(self) -> ScopeSchema:
        return self._schema

    @property
    def handled_patterns(self) -> Tuple[PatternName, ...]:
        return tuple(self._handlers)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compile(
        self,
        scope: Union[Scope, str],
        term_name: str,
        value: Any,
        *,
        max_level: Optional[int] = None,
        comparator: Union[Comparator, str, None] = None,
        clamp: Optional[bool] = None,
    ) -> QueryNode:
        """
        Expand one term.

        Args:
            scope: Scope the term is looked up in
            term_name: Term name within scope
            value: Identifier, scalar, nested criteria mapping or query node
            max_level: relatedList only; levels to expand (default: declared maxLevel)
            comparator: Numeric terms only; serialised as _comp
            clamp: relatedList only; overrides the compiler's clamp_levels

        Raises:
            UnknownScope, UnknownTerm: from the schema
            InvalidValue: value does not fit the term's pattern, or a relatedList
                term reaches no target record within the level bound
            TraversalBoundExceeded: max_level above maxLevel with clamping off
        """
        term = self._schema.lookup(scope, term_name)

        if comparator is not None and term.pattern not in (
            PatternName.INDEXED_WORD, PatternName.INDEXED_VALUE
        ):
            raise InvalidValue(
                f"Comparators apply to numeric terms only; {term.scope.value}.{term.name} "
                f"is a {term.pattern.value} term",
                term_name=term.name, value=value,
            )
        if (max_level is not None or clamp is not None) and term.pattern is not PatternName.RELATED_LIST:
            raise InvalidValue(
                f"Level bounds apply to relatedList terms only; "
                f"{term.scope.value}.{term.name} is a {term.pattern.value} term",
                term_name=term.name, value=value,
            )

        if term.pattern is PatternName.RELATED_LIST:
            node = self._compile_related(term, value, max_level=max_level, clamp=clamp)
        elif term.pattern in (PatternName.INDEXED_WORD, PatternName.INDEXED_VALUE):
            node = self._compile_indexed(term, value, comparator=comparator)
        else:
            node = self._handlers[term.pattern](term, value)

        logger.debug("Compiled %s.%s (%s)", term.scope.value, term.name, term.pattern.value)
        return node

    def compile_criteria(
        self,
        criteria: Mapping[str, Any],
        scope: Union[Scope, str, None] = None,
    ) -> QueryNode:
        """
        Compile a query given in wire form.

        Several terms in one object form an implicit AND. "_scope" may be
        omitted when scope is given; "multi" at the root requires an OR
        of independently scoped branches.

        Raises:
            InvalidValue: malformed criteria
            UnknownScope, UnknownTerm, TraversalBoundExceeded: as for compile
        """
        if not isinstance(criteria, Mapping):
            raise InvalidValue(f"Criteria must be a mapping, got {type(criteria).__name__}", value=criteria)

        declared = criteria.get(SCOPE_KEY)
        expected = scope_name(scope)
        if declared is not None and expected is not None and declared != expected:
            raise InvalidValue(
                f"Criteria declare _scope {declared!r} where {expected!r} is required",
                value=criteria,
            )
        effective = declared if declared is not None else expected
        if effective is None:
            raise InvalidValue("Criteria do not declare a _scope", value=criteria)

        if effective == MULTI_SCOPE:
            return self._compile_multi(criteria)

        resolved = parse_scope(effective)
        return with_scope(self._compile_conditions(resolved, criteria), resolved)

    def related_branches(
        self,
        scope: Union[Scope, str],
        term_name: str,
        value: Any,
        max_level: Optional[int] = None,
        clamp: Optional[bool] = None,
    ) -> List[RelatedBranch]:
        """
        Hop chains a relatedList term expands to, shortest first.

        Raises:
            InvalidValue: the term is not a relatedList term, or value is not
                an identifier / sub-query
        """
        term = self._schema.lookup(scope, term_name)
        if term.pattern is not PatternName.RELATED_LIST:
            raise InvalidValue(
                f"{term.scope.value}.{term.name} is not a relatedList term",
                term_name=term.name, value=value,
            )
        level = self._resolve_level(term, max_level, clamp)
        terminal = self._target(term, term.target_scope, value)
        grouped = enumerate_paths(
            self._schema, term.scope, term.target_scope, term.in_between_scopes, level
        )
        return [self._branch(path, terminal) for paths in grouped for path in paths]

    # ------------------------------------------------------------------
    # Pattern handlers
    # ------------------------------------------------------------------

    def _compile_document_id(self, term: TermDefinition, value: Any) -> Leaf:
        identifier = self._identifier(term, value)
        return Leaf(term=term.name, value=identifier.id, scope=term.scope.value, field="id")

    def _compile_indexed(
        self,
        term: TermDefinition,
        value: Any,
        comparator: Union[Comparator, str, None] = None,
    ) -> Leaf:
        if comparator is not None:
            if not term.is_numeric:
                raise InvalidValue(
                    f"Comparator {comparator!r} given for string term "
                    f"{term.scope.value}.{term.name}",
                    term_name=term.name, value=value,
                )
            try:
                comparator = Comparator(comparator)
            except ValueError:
                raise InvalidValue(
                    f"Unknown comparator {comparator!r}; expected one of "
                    f"{', '.join(c.value for c in Comparator)}",
                    term_name=term.name, value=value,
                ) from None

        coerced = self._numeric(term, value) if term.is_numeric else self._string(term, value)
        return Leaf(
            term=term.name,
            value=coerced,
            scope=term.scope.value,
            field=term.index_references[0],
            comparator=comparator,
        )

    def _compile_text(self, term: TermDefinition, value: Any) -> Leaf:
        return Leaf(
            term=term.name,
            value=self._string(term, value),
            scope=term.scope.value,
            field=term.index_references[0],
            full_text=True,
        )

    def _compile_similar(self, term: TermDefinition, value: Any) -> Leaf:
        identifier = self._identifier(term, value)
        return Leaf(term=term.name, value=identifier.id, scope=term.scope.value, field="similar")

    def _compile_hop(self, term: TermDefinition, value: Any) -> Hop:
        return Hop(
            term=term.name,
            target=self._target(term, term.target_scope, value),
            scope=term.scope.value,
            field=term.parsed_predicates[0].curie,
            target_scope=term.target_scope.value,
        )

    def _compile_related(
        self,
        term: TermDefinition,
        value: Any,
        max_level: Optional[int] = None,
        clamp: Optional[bool] = None,
    ) -> BooleanNode:
        level = self._resolve_level(term, max_level, clamp)
        terminal = self._target(term, term.target_scope, value)
        grouped = enumerate_paths(
            self._schema, term.scope, term.target_scope, term.in_between_scopes, level
        )

        groups = []
        for paths in grouped:
            if not paths:
                continue
            groups.append(BooleanNode(
                BoolOp.OR,
                tuple(self._branch(path, terminal).node for path in paths),
                scope=term.scope.value,
            ))

        if not groups:
            logger.warning(
                "Related list %s.%s reaches no %r record within %d level(s)",
                term.scope.value, term.name, term.target_scope.value, level,
            )
            raise InvalidValue(
                f"{term.scope.value}.{term.name} reaches no {term.target_scope.value!r} "
                f"record within {level} level(s)",
                term_name=term.name, value=value,
            )
        return BooleanNode(BoolOp.OR, tuple(groups), scope=term.scope.value)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _resolve_level(self, term: TermDefinition, max_level: Optional[int], clamp: Optional[bool]) -> int:
        if max_level is None:
            return term.max_level
        if isinstance(max_level, bool) or not isinstance(max_level, int) or max_level < 1:
            raise InvalidValue(
                f"max_level must be a positive integer, got {max_level!r}",
                term_name=term.name, value=max_level,
            )
        if max_level <= term.max_level:
            return max_level

        should_clamp = self._clamp_levels if clamp is None else clamp
        if not should_clamp:
            raise TraversalBoundExceeded(term.name, max_level, term.max_level)
        logger.info(
            "Clamping %s.%s from %d to declared maxLevel %d",
            term.scope.value, term.name, max_level, term.max_level,
        )
        return term.max_level

    def _branch(self, path: HopPath, terminal: Target) -> RelatedBranch:
        node: Target = terminal
        for hop_term in reversed(path.terms):
            node = Hop(
                term=hop_term.name,
                target=node,
                scope=hop_term.scope.value,
                field=hop_term.parsed_predicates[0].curie,
                target_scope=hop_term.target_scope.value,
            )
        return RelatedBranch(
            relation_key=path.relation_key,
            terms=tuple(t.name for t in path.terms),
            node=node,
        )

    def _identifier(self, term: TermDefinition, value: Any) -> Identifier:
        if isinstance(value, Identifier):
            return value
        if isinstance(value, Mapping) and set(value) == {"id"}:
            value = value["id"]
        if isinstance(value, str) and value:
            return Identifier(value)
        raise InvalidValue(
            f"{term.scope.value}.{term.name} expects a record identifier, got {value!r}",
            term_name=term.name, value=value,
        )

    def _target(self, term: TermDefinition, target_scope: Scope, value: Any) -> Target:
        """Resolve the value a hop or related chain terminates at."""
        if isinstance(value, (str, Identifier)):
            return self._identifier(term, value)

        if isinstance(value, Mapping):
            if set(value) == {"id"}:
                return self._identifier(term, value)
            return self.compile_criteria(value, scope=target_scope)

        if isinstance(value, (Leaf, Hop, BooleanNode)):
            declared = node_scope(value)
            if declared is not None and declared != target_scope.value:
                raise InvalidValue(
                    f"{term.scope.value}.{term.name} leads to {target_scope.value!r}; "
                    f"nested query is scoped to {declared!r}",
                    term_name=term.name, value=value,
                )
            return value

        raise InvalidValue(
            f"{term.scope.value}.{term.name} expects an identifier or a "
            f"{target_scope.value!r} sub-query, got {value!r}",
            term_name=term.name, value=value,
        )

    def _numeric(self, term: TermDefinition, value: Any) -> Union[int, float]:
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, (int, float)):
            number = value
        elif isinstance(value, str):
            text = value.strip()
            try:
                number = int(text)
            except ValueError:
                try:
                    number = float(text)
                except ValueError:
                    number = None
        else:
            number = None

        if number is None or (isinstance(number, float) and not math.isfinite(number)):
            raise InvalidValue(
                f"{term.scope.value}.{term.name} expects a number, got {value!r}",
                term_name=term.name, value=value,
            )
        return number

    def _string(self, term: TermDefinition, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise InvalidValue(
                f"{term.scope.value}.{term.name} expects a non-empty string, got {value!r}",
                term_name=term.name, value=value,
            )
        return value

    def _compile_conditions(self, scope: Scope, criteria: Mapping[str, Any]) -> QueryNode:
        comparator = criteria.get(COMPARATOR_KEY)
        term_keys = [k for k in criteria if k not in (SCOPE_KEY, COMPARATOR_KEY)]

        if not term_keys:
            raise InvalidValue(f"Empty criteria in scope {scope.value!r}", value=criteria)
        unknown = [k for k in term_keys if k.startswith("_")]
        if unknown:
            raise InvalidValue(f"Unsupported criteria option(s): {', '.join(unknown)}", value=criteria)
        if comparator is not None and (len(term_keys) != 1 or term_keys[0] in _BOOLEAN_KEYS):
            raise InvalidValue("_comp must accompany exactly one term", value=criteria)

        parts: List[QueryNode] = []
        for key in term_keys:
            value = criteria[key]
            if key in _BOOLEAN_KEYS:
                if not isinstance(value, list) or not value:
                    raise InvalidValue(f"{key} must hold a non-empty list of conditions", value=value)
                children = tuple(self._compile_child(scope, child) for child in value)
                parts.append(BooleanNode(BoolOp(key), children, scope=scope.value))
            else:
                parts.append(self.compile(scope, key, value, comparator=comparator))

        if len(parts) == 1:
            return parts[0]
        return BooleanNode(BoolOp.AND, tuple(parts), scope=scope.value)

    def _compile_child(self, scope: Scope, child: Any) -> QueryNode:
        if not isinstance(child, Mapping):
            raise InvalidValue(f"Boolean children must be mappings, got {child!r}", value=child)
        declared = child.get(SCOPE_KEY)
        if declared is not None and declared != scope.value:
            raise InvalidValue(
                f"Nested condition declares _scope {declared!r} inside a {scope.value!r} query; "
                f"mixed scopes are only allowed under a top-level multi OR",
                value=child,
            )
        return self._compile_conditions(scope, child)

    def _compile_multi(self, criteria: Mapping[str, Any]) -> BooleanNode:
        keys = set(criteria) - {SCOPE_KEY}
        branches = criteria.get(BoolOp.OR.value)
        if keys != {BoolOp.OR.value} or not isinstance(branches, list) or not branches:
            raise InvalidValue("A multi-scope query must be a single non-empty OR", value=criteria)

        children = []
        for branch in branches:
            if not isinstance(branch, Mapping) or branch.get(SCOPE_KEY) in (None, MULTI_SCOPE):
                raise InvalidValue(
                    "Each branch of a multi-scope query must declare its own _scope",
                    value=branch,
                )
            children.append(self.compile_criteria(branch))
        return BooleanNode(BoolOp.OR, tuple(children), scope=MULTI_SCOPE)
