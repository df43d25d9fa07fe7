"""
Scope Schema - the search-term registry.

Declares, per entity scope, the named search terms and the traversal
pattern each implements. A schema is built once (see bootstrap) and is
read-only afterwards: term tables are exposed through MappingProxyType
and TermDefinition instances are frozen.
"""

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from ..logging_config import configure_logger_for_debug_trace
from ..lux_exceptions import SchemaError, UnknownScope, UnknownTerm
from ..models import Scope, TermDefinition, parse_scope
from .search_terms import SEARCH_TERM_CONFIG
from .validator import Severity, check_references

logger = configure_logger_for_debug_trace(__name__)

GENERATED_TERMS_PATH = Path(__file__).parent / "data" / "generated_terms.json"

TermTables = Mapping[Scope, Mapping[str, TermDefinition]]
RegistryConfig = Mapping[str, Mapping[str, Mapping[str, Any]]]


def _definitions_from_config(config: RegistryConfig) -> Dict[Scope, Dict[str, TermDefinition]]:
    """Validate raw registry entries (camelCase dicts) into TermDefinitions."""
    tables: Dict[Scope, Dict[str, TermDefinition]] = {}
    for scope_key, terms in config.items():
        try:
            scope = parse_scope(scope_key)
        except UnknownScope as e:
            raise SchemaError(f"Registry declares unknown scope {scope_key!r}") from e

        table = tables.setdefault(scope, {})
        for name, entry in terms.items():
            try:
                table[name] = TermDefinition.model_validate(
                    {**entry, "name": name, "scope": scope}
                )
            except ValidationError as e:
                raise SchemaError(f"Invalid term definition {scope.value}.{name}: {e}") from e
    return tables


def _read_registry_file(path: Union[str, Path]) -> Dict[str, Any]:
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise SchemaError(f"Cannot read registry entries from {path}: {e}") from e
    if not isinstance(data, dict):
        raise SchemaError(f"Registry file {path} must hold a JSON object keyed by scope")
    return data


class ScopeSchema:
    """
    Immutable registry of search terms per scope.

    ::: This is-in-layer Domain-Layer.
    ::: This is a registry.
    ::: This is stateless.

    Usage:
        schema = ScopeSchema.load_default()
        term = schema.lookup("item", "classification")
        term.target_scope   # Scope.CONCEPT
    """

    def __init__(self, tables: TermTables):
        issues = check_references(tables)
        if issues:
            raise SchemaError(
                "Registry references undeclared scopes: "
                + "; ".join(str(i) for i in issues if i.severity == Severity.ERROR),
                issues=issues,
            )
        self._tables: Mapping[Scope, Mapping[str, TermDefinition]] = MappingProxyType({
            scope: MappingProxyType(dict(tables[scope]))
            for scope in Scope
            if tables.get(scope)
        })
        self._hops: Dict[Scope, Tuple[TermDefinition, ...]] = {
            scope: tuple(t for t in table.values() if t.is_hop)
            for scope, table in self._tables.items()
        }

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_config(cls, config: RegistryConfig) -> "ScopeSchema":
        """Build a schema from registry entries keyed scope -> term -> definition."""
        return cls(_definitions_from_config(config))

    @classmethod
    def load_default(
        cls,
        include_generated: bool = True,
        extra_terms_path: Optional[Union[str, Path]] = None,
    ) -> "ScopeSchema":
        """
        Load the declared registry, optionally supplemented.

        Args:
            include_generated: Merge the packaged generated entries (inverse hops)
            extra_terms_path: JSON file of further entries to merge

        Raises:
            SchemaError: if any entry is invalid or leaves a dangling reference
        """
        tables = _definitions_from_config(SEARCH_TERM_CONFIG)
        if include_generated:
            tables = cls._merge_tables(tables, _read_registry_file(GENERATED_TERMS_PATH))
        if extra_terms_path is not None:
            tables = cls._merge_tables(tables, _read_registry_file(extra_terms_path))

        schema = cls(tables)
        logger.debug(
            "Loaded registry: %d scopes, %d terms",
            len(schema.scopes()),
            sum(len(schema.table(s)) for s in schema.scopes()),
        )
        return schema

    @staticmethod
    def _merge_tables(
        tables: TermTables, extra: RegistryConfig
    ) -> Dict[Scope, Dict[str, TermDefinition]]:
        merged: Dict[Scope, Dict[str, TermDefinition]] = {
            scope: dict(table) for scope, table in tables.items()
        }
        for scope, additions in _definitions_from_config(extra).items():
            table = merged.setdefault(scope, {})
            for name, term in additions.items():
                if name in table:
                    if table[name] != term:
                        logger.warning(
                            "Ignoring supplementary definition of %s.%s; declared entry wins",
                            scope.value, name,
                        )
                    continue
                table[name] = term
        return merged

    def merge(self, extra: Union[RegistryConfig, "ScopeSchema"]) -> "ScopeSchema":
        """
        Return a new schema with extra entries folded in.

        Entries already declared here win; conflicting extras are logged
        and dropped.
        """
        if isinstance(extra, ScopeSchema):
            extra = extra.to_config()
        return ScopeSchema(self._merge_tables(self._tables, extra))

    def to_config(self) -> Dict[str, Dict[str, Dict[str, Any]]]:
        """Registry entries in the camelCase form accepted by from_config."""
        return {
            scope.value: {
                name: _term_to_config(term) for name, term in table.items()
            }
            for scope, table in self._tables.items()
        }

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def scopes(self) -> Tuple[Scope, ...]:
        return tuple(self._tables)

    def table(self, scope: Union[Scope, str]) -> Mapping[str, TermDefinition]:
        """Read-only term table of a scope."""
        scope = parse_scope(scope)
        if scope not in self._tables:
            raise UnknownScope(scope.value)
        return self._tables[scope]

    def lookup(self, scope: Union[Scope, str], term_name: str) -> TermDefinition:
        """
        Look up a term definition.

        Raises:
            UnknownScope: scope is not one of the declared scopes
            UnknownTerm: term_name is absent from the scope's table
        """
        table = self.table(scope)
        try:
            return table[term_name]
        except KeyError:
            raise UnknownTerm(parse_scope(scope).value, term_name) from None

    def find(self, scope: Union[Scope, str], term_name: str) -> Optional[TermDefinition]:
        """Like lookup, but returns None for an unknown term."""
        return self.table(scope).get(term_name)

    def term_names(self, scope: Union[Scope, str]) -> Tuple[str, ...]:
        return tuple(self.table(scope))

    def terms(self, scope: Union[Scope, str]) -> Tuple[TermDefinition, ...]:
        return tuple(self.table(scope).values())

    def hops_from(self, scope: Union[Scope, str]) -> Tuple[TermDefinition, ...]:
        """hopWithField terms leaving scope, in declaration order."""
        return self._hops.get(parse_scope(scope), ())

    def inverse_of(self, term: TermDefinition) -> Optional[TermDefinition]:
        """The term traversing term's relation back, if declared."""
        if not term.is_hop or term.inverse_term_name is None:
            return None
        return self._tables.get(term.target_scope, {}).get(term.inverse_term_name)

    def iter_terms(self) -> Iterable[TermDefinition]:
        for table in self._tables.values():
            yield from table.values()

    def __contains__(self, scope: Any) -> bool:
        try:
            return parse_scope(scope) in self._tables
        except UnknownScope:
            return False

    def __repr__(self) -> str:
        return f"ScopeSchema(scopes={[s.value for s in self.scopes()]})"


def _term_to_config(term: TermDefinition) -> Dict[str, Any]:
    entry: Dict[str, Any] = {"patternName": term.pattern.value}
    if term.predicates:
        entry["predicates"] = list(term.predicates)
    if term.target_scope is not None:
        entry["targetScope"] = term.target_scope.value
    if term.inverse_term_name is not None:
        entry["hopInverseName"] = term.inverse_term_name
    if term.index_references:
        entry["indexReferences"] = list(term.index_references)
    if term.id_index_references:
        entry["idIndexReferences"] = list(term.id_index_references)
    if term.scalar_type is not None:
        entry["scalarType"] = term.scalar_type.value
    if term.in_between_scopes:
        entry["inBetweenScopes"] = [s.value for s in term.in_between_scopes]
    if term.max_level is not None:
        entry["maxLevel"] = term.max_level
    return entry
