"""
Unit tests for the template library and its catalogue.

Tests cover:
- Registry: registration, lookup, scope listing
- Decorator: root scope tagging and mismatches
- Catalogue: wire form of representative templates
"""

import pytest

from lux_query.lux_exceptions import InvalidValue, UnknownTemplate
from lux_query.models import MULTI_SCOPE, Scope
from lux_query.query import to_wire
from lux_query.query.nodes import any_of, by_id, check_scope_nesting, leaf, with_scope
from lux_query.templates import TemplateLibrary, TemplateSpec, template
from lux_query.templates.archives import ARCHIVE_CLASSIFICATION


ARCHIVE = {"classification": {"identifier": ARCHIVE_CLASSIFICATION}}


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def scratch_library():
    """An empty library so test templates stay out of the catalogue."""
    return TemplateLibrary()


# =============================================================================
# Registry
# =============================================================================

class TestTemplateLibrary:
    def test_register_and_build(self, scratch_library):
        @template("itemsMadeBy", Scope.ITEM, library=scratch_library)
        def items_made_by(agent_id):
            """Items made by the agent."""
            return by_id("producedBy", agent_id)

        spec = scratch_library.get("itemsMadeBy")
        assert isinstance(spec, TemplateSpec)
        assert spec.scope == "item"
        assert spec.description == "Items made by the agent."
        assert items_made_by.template_spec is spec
        assert to_wire(scratch_library.build("itemsMadeBy", "agent:1")) == {
            "_scope": "item", "producedBy": {"id": "agent:1"},
        }

    def test_explicit_description(self, scratch_library):
        @template("x", Scope.ITEM, description="Custom", library=scratch_library)
        def x(record_id):
            """Docstring."""
            return leaf("id", record_id)

        assert scratch_library.get("x").description == "Custom"

    def test_reregister_replaces(self, scratch_library):
        @template("dup", Scope.ITEM, library=scratch_library)
        def first(record_id):
            return leaf("id", record_id)

        @template("dup", Scope.WORK, library=scratch_library)
        def second(record_id):
            return leaf("id", record_id)

        assert len(scratch_library) == 1
        assert scratch_library.by_scope("item") == []
        assert [s.name for s in scratch_library.by_scope(Scope.WORK)] == ["dup"]

    def test_unknown_template(self, scratch_library):
        with pytest.raises(UnknownTemplate) as exc_info:
            scratch_library.get("nope")
        assert exc_info.value.name == "nope"
        assert isinstance(exc_info.value, LookupError)

    @pytest.mark.parametrize("identifier", ["", None, 7])
    def test_build_rejects_bad_identifier(self, library, identifier):
        with pytest.raises(InvalidValue):
            library.build("itemsProducedByAgent", identifier)

    def test_scope_mismatch(self, scratch_library):
        @template("wrong", Scope.ITEM, library=scratch_library)
        def wrong(record_id):
            return with_scope(leaf("id", record_id), Scope.WORK)

        with pytest.raises(InvalidValue, match="declared for 'item'"):
            scratch_library.build("wrong", "work:1")

    def test_nesting_checked_on_build(self, scratch_library):
        @template("badNesting", Scope.ITEM, library=scratch_library)
        def bad_nesting(record_id):
            return any_of(with_scope(leaf("id", record_id), Scope.SET))

        with pytest.raises(InvalidValue):
            scratch_library.build("badNesting", "item:1")

    def test_iteration(self, scratch_library):
        @template("a", Scope.ITEM, library=scratch_library)
        def a(record_id):
            return leaf("id", record_id)

        assert [s.name for s in scratch_library] == ["a"]
        assert "a" in scratch_library
        assert "b" not in scratch_library


# =============================================================================
# Catalogue
# =============================================================================

class TestCatalogue:
    def test_catalogue_is_loaded(self, library):
        for name in ("itemById", "workById", "worksInSet", "currentItemAndSiblings"):
            assert name in library
        assert library.names() == sorted(library.names())

    def test_every_template_is_well_scoped(self, library):
        for spec in library:
            node = library.build(spec.name, "record:1")
            check_scope_nesting(node)
            assert to_wire(node)["_scope"] == spec.scope

    def test_by_scope(self, library):
        scopes = {spec.scope for spec in library}
        assert scopes <= {s.value for s in Scope} | {MULTI_SCOPE}
        assert all(s.scope == "place" for s in library.by_scope("place"))
        assert "partsOfPlace" in [s.name for s in library.by_scope(Scope.PLACE)]

    def test_items_produced_encountered_by_agent(self, library):
        assert library.build_wire("itemsProducedEncounteredByAgent", "agent:9") == {
            "_scope": "item",
            "OR": [
                {"producedBy": {"id": "agent:9"}},
                {"encounteredBy": {"id": "agent:9"}},
            ],
        }

    def test_current_item_and_siblings(self, library):
        member_of = {"memberOf": {"AND": [ARCHIVE, {"containingItem": {"id": "item:42"}}]}}
        assert library.build_wire("currentItemAndSiblings", "item:42") == {
            "_scope": "multi",
            "OR": [
                {"_scope": "item", **member_of},
                {"_scope": "set", **member_of},
            ],
        }

    def test_current_set_and_siblings(self, library):
        wire = library.build_wire("currentSetAndSiblings", "set:3")
        assert wire["_scope"] == "multi"
        assert [b["_scope"] for b in wire["OR"]] == ["item", "set"]
        assert wire["OR"][1]["memberOf"]["AND"][1] == {"containingSet": {"id": "set:3"}}

    def test_item_by_id(self, library):
        assert library.build_wire("itemById", "item:1") == {"_scope": "item", "id": "item:1"}

    def test_works_in_set(self, library):
        assert library.build_wire("worksInSet", "set:1") == {
            "_scope": "work", "memberOf": {"id": "set:1"},
        }

    def test_archives_with_item(self, library):
        assert library.build_wire("archivesWithItem", "item:1") == {
            "_scope": "set",
            "AND": [ARCHIVE, {"containing": {"id": "item:1"}}],
        }

    def test_works_for_event(self, library):
        assert library.build_wire("worksForEvent", "event:1") == {
            "_scope": "work",
            "carriedBy": {"memberOf": {"usedForEvent": {"id": "event:1"}}},
        }

    def test_items_in_set_with_images_estimate(self, library):
        wire = library.build_wire("itemsInSetWithImagesEstimate", "set:1")
        membership, has_image = wire["AND"]
        assert has_image == {"hasDigitalImage": 1}
        archive = {"AND": [{"id": "set:1"}, ARCHIVE]}
        assert membership["OR"] == [
            {"memberOf": archive},
            {"memberOf": {"memberOf": archive}},
            {"memberOf": {"memberOf": {"memberOf": archive}}},
        ]

    def test_works_related_to_concept(self, library):
        wire = library.build_wire("worksRelatedToConcept", "concept:1")
        either = {"OR": [{"id": "concept:1"}, {"influencedByConcept": {"id": "concept:1"}}]}
        assert wire == {
            "_scope": "work",
            "OR": [
                {"classification": either},
                {"language": either},
                {"aboutConcept": either},
            ],
        }
