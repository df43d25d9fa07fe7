"""
Unit tests for the search-term registry.

Tests cover:
- Lookup and read-only tables
- Generated entries and merging
- Reference checks and the validation report
- Bounded path enumeration
"""

import json

import pytest

from lux_query.lux_exceptions import SchemaError, UnknownScope, UnknownTerm
from lux_query.models import PatternName, Scope
from lux_query.schema import (
    SEARCH_TERM_CONFIG,
    ScopeSchema,
    Severity,
    enumerate_paths,
    validate_schema,
)


# =============================================================================
# Lookup
# =============================================================================

class TestLookup:
    def test_lookup_hop(self, schema):
        term = schema.lookup("item", "classification")
        assert term.pattern is PatternName.HOP_WITH_FIELD
        assert term.target_scope is Scope.CONCEPT
        assert term.inverse_term_name == "classificationOfItem"

    def test_lookup_accepts_scope_member(self, schema):
        assert schema.lookup(Scope.WORK, "createdBy").target_scope is Scope.AGENT

    def test_unknown_term(self, schema):
        with pytest.raises(UnknownTerm) as exc_info:
            schema.lookup("agent", "bogusTerm")
        assert exc_info.value.term_name == "bogusTerm"
        assert exc_info.value.scope == "agent"

    def test_unknown_scope(self, schema):
        with pytest.raises(UnknownScope):
            schema.lookup("painting", "name")

    def test_find_returns_none(self, schema):
        assert schema.find("agent", "bogusTerm") is None

    def test_all_scopes_declared(self, schema):
        assert set(schema.scopes()) == set(Scope)
        assert "reference" in schema
        assert "painting" not in schema

    def test_tables_are_read_only(self, schema):
        with pytest.raises(TypeError):
            schema.table("agent")["bogus"] = None

    def test_hops_from_in_declaration_order(self, schema):
        names = [t.name for t in schema.hops_from("agent")]
        assert names[:3] == ["activeAt", "classification", "endAt"]
        # generated entries follow the declared ones
        assert names.index("founded") > names.index("startAt")
        assert all(t.is_hop for t in schema.hops_from("agent"))

    def test_inverse_pairs(self, schema):
        produced_by = schema.lookup("item", "producedBy")
        produced = schema.inverse_of(produced_by)
        assert produced is schema.lookup("agent", "produced")
        assert produced.target_scope is Scope.ITEM
        assert schema.inverse_of(produced) is produced_by

    def test_carried_by_inverse(self, schema):
        carried_by = schema.lookup("work", "carriedBy")
        assert carried_by.target_scope is Scope.ITEM
        assert schema.inverse_of(carried_by) is schema.lookup("item", "carries")

    def test_one_directional_hop(self, schema):
        assert schema.inverse_of(schema.lookup("place", "partOf")) is None

    def test_work_part_of_is_word_indexed(self, schema):
        assert schema.lookup("work", "partOf").pattern is PatternName.INDEXED_WORD

    def test_work_related_lists(self, schema):
        related = schema.lookup("work", "relatedToEvent")
        assert related.max_level == 3
        assert related.in_between_scopes == (Scope.ITEM, Scope.WORK, Scope.SET)


# =============================================================================
# Loading and merging
# =============================================================================

class TestLoading:
    def test_generated_entries_optional(self, declared_schema):
        assert declared_schema.find("work", "carriedBy") is None
        assert declared_schema.find("set", "usedForEvent") is None

    def test_merge_adds_entries(self, declared_schema):
        merged = declared_schema.merge({
            "set": {
                "usedForEvent": {
                    "patternName": "hopWithField",
                    "predicates": ['crm("P16_used_specific_object")'],
                    "targetScope": "event",
                    "hopInverseName": "used",
                    "indexReferences": ["eventPrimaryName"],
                },
            },
        })
        assert merged.lookup("set", "usedForEvent").target_scope is Scope.EVENT
        # the original schema is untouched
        assert declared_schema.find("set", "usedForEvent") is None

    def test_declared_entry_wins(self, declared_schema, caplog):
        merged = declared_schema.merge({
            "agent": {
                "name": {
                    "patternName": "text",
                    "indexReferences": ["somethingElse"],
                },
            },
        })
        assert merged.lookup("agent", "name").pattern is PatternName.INDEXED_WORD
        assert "declared entry wins" in caplog.text

    def test_merge_schema_instance(self, declared_schema, schema):
        merged = declared_schema.merge(schema)
        assert merged.find("work", "carriedBy") is not None
        assert merged.term_names("agent")[:3] == declared_schema.term_names("agent")[:3]

    def test_to_config_round_trip(self, schema):
        rebuilt = ScopeSchema.from_config(schema.to_config())
        for scope in schema.scopes():
            assert rebuilt.table(scope) == schema.table(scope)

    def test_extra_terms_file(self, tmp_path):
        extra = tmp_path / "extra.json"
        extra.write_text(json.dumps({
            "agent": {
                "deceased": {
                    "patternName": "indexedValue",
                    "indexReferences": ["agentDeceasedBoolean"],
                    "scalarType": "number",
                },
            },
        }))
        loaded = ScopeSchema.load_default(extra_terms_path=extra)
        assert loaded.lookup("agent", "deceased").is_numeric

    def test_unreadable_extra_terms_file(self, tmp_path):
        extra = tmp_path / "extra.json"
        extra.write_text("{not json")
        with pytest.raises(SchemaError, match="Cannot read"):
            ScopeSchema.load_default(extra_terms_path=extra)

    def test_invalid_entry(self):
        with pytest.raises(SchemaError, match="agent.broken"):
            ScopeSchema.from_config({
                "agent": {"broken": {"patternName": "hopWithField"}},
            })

    def test_unknown_scope_key(self):
        with pytest.raises(SchemaError, match="painting"):
            ScopeSchema.from_config({"painting": {}})

    def test_dangling_target_scope(self):
        with pytest.raises(SchemaError) as exc_info:
            ScopeSchema.from_config({
                "item": {
                    "producedBy": {
                        "patternName": "hopWithField",
                        "predicates": ['lux("agentOfProduction")'],
                        "targetScope": "agent",
                    },
                },
            })
        issues = exc_info.value.issues
        assert len(issues) == 1
        assert issues[0].severity is Severity.ERROR
        assert issues[0].term == "producedBy"

    def test_dangling_in_between_scope(self):
        config = {
            "agent": SEARCH_TERM_CONFIG["agent"],
            "concept": SEARCH_TERM_CONFIG["concept"],
            "event": SEARCH_TERM_CONFIG["event"],
            "place": SEARCH_TERM_CONFIG["place"],
        }
        with pytest.raises(SchemaError, match="inBetweenScopes"):
            ScopeSchema.from_config(config)


# =============================================================================
# Validation report
# =============================================================================

class TestValidation:
    def test_default_registry_is_valid(self, schema):
        result = validate_schema(schema)
        assert result.valid
        assert result.error_count == 0

    def test_one_directional_hop_is_info(self, schema):
        result = validate_schema(schema)
        infos = [i for i in result.issues if i.severity is Severity.INFO]
        assert any(i.scope == "place" and i.term == "partOf" for i in infos)

    def test_missing_inverses_warn(self, declared_schema):
        result = validate_schema(declared_schema)
        assert result.valid
        missing = {(w.scope, w.term) for w in result.warnings}
        assert ("item", "producedBy") in missing
        assert ("item", "carries") in missing

    def test_unreachable_related_list_warns(self, declared_schema):
        result = validate_schema(declared_schema)
        assert any(
            w.scope == "work" and w.term == "relatedToEvent" for w in result.warnings
        )

    def test_strict_turns_warnings_into_failure(self, declared_schema):
        result = validate_schema(declared_schema, strict=True)
        assert not result
        assert result.warning_count > 0

    def test_issue_str(self, declared_schema):
        warning = validate_schema(declared_schema).warnings[0]
        assert str(warning).startswith(f"[WARNING] at {warning.scope}.{warning.term}")


# =============================================================================
# Path enumeration
# =============================================================================

class TestEnumeratePaths:
    def test_work_to_event(self, schema):
        grouped = enumerate_paths(
            schema, Scope.WORK, Scope.EVENT, (Scope.ITEM, Scope.WORK, Scope.SET), 3
        )
        assert len(grouped) == 3
        assert grouped[0] == [] and grouped[1] == []
        assert [p.relation_key for p in grouped[2]] == ["carriedBy-memberOf-usedForEvent"]
        assert grouped[2][0].scopes == (Scope.WORK, Scope.ITEM, Scope.SET, Scope.EVENT)

    def test_never_revisits_origin(self, schema):
        allowed = {Scope.ITEM, Scope.WORK, Scope.SET}
        grouped = enumerate_paths(schema, Scope.AGENT, Scope.EVENT, tuple(allowed), 3)
        paths = [p for group in grouped for p in group]
        assert paths
        for length, group in enumerate(grouped, start=1):
            for path in group:
                assert len(path) == length
                assert path.scopes[-1] is Scope.EVENT
                assert Scope.AGENT not in path.intermediate_scopes
                assert set(path.intermediate_scopes) <= allowed

    def test_direct_hops_in_declaration_order(self, schema):
        grouped = enumerate_paths(schema, Scope.AGENT, Scope.AGENT, (Scope.ITEM, Scope.WORK), 1)
        assert [p.relation_key for p in grouped[0]] == [
            "foundedBy", "memberOf", "founded", "memberOfInverse",
        ]

    def test_zero_levels(self, schema):
        assert enumerate_paths(schema, Scope.AGENT, Scope.AGENT, (), 0) == []

    def test_padded_to_max_level(self, schema):
        grouped = enumerate_paths(schema, Scope.PLACE, Scope.PLACE, (), 4)
        assert len(grouped) == 4
        assert [p.relation_key for p in grouped[0]] == ["partOf"]
        assert grouped[1:] == [[], [], []]
